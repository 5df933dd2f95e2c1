"""
Nullable string.

JSON decode never raises: a payload that is not a JSON string simply
leaves the value invalid.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import as_text
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.string")

# Characters escaped in JSON output so it can be embedded in HTML.
_HTML_SAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# Lone surrogates cannot be encoded as UTF-8.
_SURROGATE_RE = re.compile("[\ud800-\udfff]")


@dataclass
class NullString(Nullable[str]):
    value: str = ""
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "string"
    python_types: ClassVar[Tuple[type, ...]] = (str,)

    def scan(self, raw: Any) -> None:
        try:
            self.value, self.valid = get_driver_converter().to_string(raw)
        except DriverConversionError:
            self._reset()
            raise

    def _json_text(self) -> str:
        value = _SURROGATE_RE.sub("\ufffd", self.value)
        text = json.dumps(value, ensure_ascii=False)
        for char, escaped in _HTML_SAFE.items():
            text = text.replace(char, escaped)
        return text

    def _xml_text(self) -> str:
        return self.value

    def decode_json(self, data: Union[bytes, str]) -> None:
        self.valid = False
        text = as_text(data)
        if text == NULL_LITERAL:
            return
        try:
            decoded = json.loads(text)
        except ValueError as e:
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            return
        if not isinstance(decoded, str):
            log.debug("nulls.json.decode_failed", kind=self.kind, error="not a JSON string")
            return
        self.value, self.valid = decoded, True

    def _parse_markup(self, text: str) -> str:
        return text


def new_string(value: str) -> NullString:
    return NullString.of(value)
