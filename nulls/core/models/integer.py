"""
Nullable platform-width signed integer.

The width is the native pointer size of the running interpreter (64 bits on
every mainstream platform).
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import INT_SIZE, as_text, parse_int, wrap_signed
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.int")


@dataclass
class NullInt(Nullable[int]):
    value: int = 0
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "int"
    python_types: ClassVar[Tuple[type, ...]] = (int,)

    @classmethod
    def _narrow(cls, value: Any) -> int:
        return wrap_signed(value, INT_SIZE)

    def scan(self, raw: Any) -> None:
        try:
            value, self.valid = get_driver_converter().to_int64(raw)
        except DriverConversionError:
            self._reset()
            raise
        self.value = wrap_signed(value, INT_SIZE)

    def _json_text(self) -> str:
        return str(self.value)

    def _xml_text(self) -> str:
        return str(self.value)

    def decode_json(self, data: Union[bytes, str]) -> None:
        text = as_text(data)
        if text == NULL_LITERAL:
            self.valid = False
            return
        try:
            parsed = parse_int(text, INT_SIZE, self.kind)
        except FormatParseError as e:
            self.valid = False
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            raise
        self.value, self.valid = parsed, True

    def _parse_markup(self, text: str) -> int:
        return parse_int(text, INT_SIZE, self.kind)


def new_int(value: int) -> NullInt:
    return NullInt.of(value)
