"""Nullable 64-bit signed integer."""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import as_text, parse_int, wrap_signed
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.int64")


@dataclass
class NullInt64(Nullable[int]):
    value: int = 0
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "int64"
    python_types: ClassVar[Tuple[type, ...]] = (int,)

    @classmethod
    def _narrow(cls, value: Any) -> int:
        return wrap_signed(value, 64)

    def scan(self, raw: Any) -> None:
        try:
            self.value, self.valid = get_driver_converter().to_int64(raw)
        except DriverConversionError:
            self._reset()
            raise

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
            parsed = parse_int(text, 64, self.kind)
        except FormatParseError as e:
            self.valid = False
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            raise
        self.value, self.valid = parsed, True

    def _parse_markup(self, text: str) -> int:
        return parse_int(text, 64, self.kind)


def new_int64(value: int) -> NullInt64:
    return NullInt64.of(value)
