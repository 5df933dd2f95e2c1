"""
JSON record helpers.

Members are rendered with each nullable's own ``encode_json`` so the exact
text (float32 digits, RFC 3339 timestamps) survives, and decoded by
handing each member's raw JSON text to ``decode_json``.
"""

import json
from typing import Any, Dict, Mapping

from nulls.core.models import Nullable
from nulls.infra.exceptions import NullsError
from nulls.infra.logger import get_logger

log = get_logger("nulls.json")


def dumps_record(record: Mapping[str, Any]) -> str:
    members = []
    for name, field in record.items():
        if isinstance(field, Nullable):
            rendered = field.encode_json().decode("utf-8")
        else:
            rendered = json.dumps(field)
        members.append(f"{json.dumps(name)}:{rendered}")
    return "{" + ",".join(members) + "}"


def loads_record(text: str, fields: Mapping[str, Nullable]) -> Dict[str, Any]:
    """
    Decode a JSON object into ``fields`` in place.

    Members without a matching field are returned untouched; fields without
    a member are left as they are.
    """
    try:
        document = json.loads(text)
        raw_members = _load(text)
    except ValueError as e:
        log.debug("nulls.json.parse_failed", error=str(e))
        raise NullsError(f"malformed JSON document: {e}") from e
    if not isinstance(document, dict):
        raise NullsError("JSON document is not an object")

    rest: Dict[str, Any] = {}
    for name, member in document.items():
        field = fields.get(name)
        if field is None:
            rest[name] = member
            continue
        field.decode_json(_raw(raw_members[name]))
    return rest


class _RawNumber(str):
    """Number member kept as the exact text it was written with."""


def _load(text: str) -> Any:
    return json.loads(text, parse_int=_RawNumber, parse_float=_RawNumber)


def _raw(member: Any) -> str:
    if isinstance(member, _RawNumber):
        return str(member)
    return json.dumps(member, ensure_ascii=False)
