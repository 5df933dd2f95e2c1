"""
Nullable timestamp.

JSON carries a quoted RFC 3339 string and XML element text the same string
unquoted. XML attributes use ``str(datetime)``. Decoding accepts any
ISO 8601 text ``datetime.fromisoformat`` understands.

Driver scan never fails: anything that is not a ``datetime``, NULL
included, is read as absent.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import (
    ZERO_TIME,
    as_text,
    format_rfc3339,
    parse_timestamp,
    unquote_json_string,
)
from nulls.infra.exceptions import FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.timestamp")


@dataclass
class NullTime(Nullable[datetime]):
    value: datetime = ZERO_TIME
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "timestamp"
    python_types: ClassVar[Tuple[type, ...]] = (datetime,)

    def scan(self, raw: Any) -> None:
        if isinstance(raw, datetime):
            self.value, self.valid = raw, True
            return
        if raw is not None:
            log.debug("nulls.driver.scan_ignored", kind=self.kind, source=type(raw).__name__)
        self.value, self.valid = ZERO_TIME, False

    def _json_text(self) -> str:
        return f'"{format_rfc3339(self.value)}"'

    def _xml_text(self) -> str:
        return format_rfc3339(self.value)

    def _attr_text(self) -> str:
        return str(self.value)

    def decode_json(self, data: Union[bytes, str]) -> None:
        self.valid = False
        text = as_text(data)
        if text == NULL_LITERAL or text == "":
            return
        try:
            parsed = parse_timestamp(unquote_json_string(text, self.kind), self.kind)
        except FormatParseError as e:
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            raise
        self.value, self.valid = parsed, True

    def _parse_markup(self, text: str) -> datetime:
        if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
            text = text[1:-1]
        return parse_timestamp(text, self.kind)


def new_time(value: datetime) -> NullTime:
    return NullTime.of(value)
