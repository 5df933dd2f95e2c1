"""
Nullable 32-bit unsigned integer.

Text is parsed with a signed bound and then truncated, so JSON decode
rejects values above 2**31-1 while ``-1`` becomes ``4294967295``. The XML
paths use the platform integer bound instead.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import INT_SIZE, as_text, parse_int, wrap_unsigned
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.uint32")


@dataclass
class NullUInt32(Nullable[int]):
    value: int = 0
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "uint32"
    python_types: ClassVar[Tuple[type, ...]] = (int,)

    @classmethod
    def _narrow(cls, value: Any) -> int:
        return wrap_unsigned(value, 32)

    def scan(self, raw: Any) -> None:
        try:
            value, self.valid = get_driver_converter().to_int64(raw)
        except DriverConversionError:
            self._reset()
            raise
        self.value = wrap_unsigned(value, 32)

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
        self.value, self.valid = wrap_unsigned(parsed, 32), True

    def _parse_markup(self, text: str) -> int:
        return wrap_unsigned(parse_int(text, INT_SIZE, self.kind), 32)


def new_uint32(value: int) -> NullUInt32:
    return NullUInt32.of(value)
