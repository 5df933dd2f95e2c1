"""
Nullable 32-bit signed integer.

JSON/text decode is bounded to 32 bits; the XML paths accept anything that
fits the platform integer and truncate to 32 bits afterwards.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import INT_SIZE, as_text, parse_int, wrap_signed
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.int32")


@dataclass
class NullInt32(Nullable[int]):
    value: int = 0
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "int32"
    python_types: ClassVar[Tuple[type, ...]] = (int,)

    @classmethod
    def _narrow(cls, value: Any) -> int:
        return wrap_signed(value, 32)

    def scan(self, raw: Any) -> None:
        # Scanned at driver width, then truncated.
        try:
            value, self.valid = get_driver_converter().to_int64(raw)
        except DriverConversionError:
            self._reset()
            raise
        self.value = wrap_signed(value, 32)

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
            parsed = parse_int(text, 32, self.kind)
        except FormatParseError as e:
            self.valid = False
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            raise
        self.value, self.valid = wrap_signed(parsed, 32), True

    def _parse_markup(self, text: str) -> int:
        return wrap_signed(parse_int(text, INT_SIZE, self.kind), 32)


def new_int32(value: int) -> NullInt32:
    return NullInt32.of(value)
