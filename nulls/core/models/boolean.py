"""
Nullable boolean.

JSON decode is lenient: only the exact tokens ``true``/``t`` and
``false``/``f`` are recognised, and anything else quietly yields an invalid
value. The XML paths use the strict boolean grammar and raise on bad text.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import as_text, parse_bool
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.bool")

_JSON_TRUE = ("true", "t")
_JSON_FALSE = ("false", "f")


@dataclass
class NullBool(Nullable[bool]):
    value: bool = False
    valid: bool = False

    kind: ClassVar[str] = "bool"
    python_types: ClassVar[Tuple[type, ...]] = (bool,)

    @classmethod
    def _narrow(cls, value: Any) -> bool:
        return bool(value)

    def scan(self, raw: Any) -> None:
        try:
            self.value, self.valid = get_driver_converter().to_bool(raw)
        except DriverConversionError:
            self._reset()
            raise

    def _json_text(self) -> str:
        return "true" if self.value else "false"

    def _xml_text(self) -> str:
        return self._json_text()

    def decode_json(self, data: Union[bytes, str]) -> None:
        text = as_text(data)
        if text in _JSON_TRUE:
            self.value, self.valid = True, True
            return
        if text in _JSON_FALSE:
            self.value, self.valid = False, True
            return
        if text != NULL_LITERAL:
            log.debug("nulls.json.decode_failed", kind=self.kind, text=text[:32])
        self.value, self.valid = False, False

    def _parse_markup(self, text: str) -> bool:
        return parse_bool(text, self.kind)


def new_bool(value: bool) -> NullBool:
    return NullBool.of(value)
