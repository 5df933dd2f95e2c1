"""
Nullable 32-bit float.

``value`` always holds a binary32-representable double. Text renderings
use the shortest digits that round-trip at 32-bit precision, but the
notation depends on the target: JSON switches to exponent form outside
[1e-6, 1e21), XML element text outside [1e-4, 1e6), and XML attribute text
never does.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Tuple, Union

from nulls.core.models.base import NULL_LITERAL, Nullable
from nulls.core.parsing import (
    as_text,
    format_float,
    format_json_float,
    parse_float,
    to_float32,
)
from nulls.core.ports.driver import get_driver_converter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.models.float32")


@dataclass
class NullFloat32(Nullable[float]):
    value: float = 0.0
    valid: bool = False  # True if value is not NULL

    kind: ClassVar[str] = "float32"
    python_types: ClassVar[Tuple[type, ...]] = (int, float)

    @classmethod
    def _narrow(cls, value: Any) -> float:
        return to_float32(float(value))

    def scan(self, raw: Any) -> None:
        try:
            value, self.valid = get_driver_converter().to_float64(raw)
        except DriverConversionError:
            self._reset()
            raise
        self.value = to_float32(value)

    def _to_driver(self) -> float:
        return float(self.value)

    def _json_text(self) -> str:
        return format_json_float(self.value, 32, self.kind)

    def _xml_text(self) -> str:
        return format_float(self.value, "g", 32)

    def _attr_text(self) -> str:
        return format_float(self.value, "f", 32)

    def decode_json(self, data: Union[bytes, str]) -> None:
        text = as_text(data)
        if text == NULL_LITERAL:
            self.valid = False
            return
        try:
            parsed = parse_float(text, 32, self.kind)
        except FormatParseError as e:
            self.valid = False
            log.debug("nulls.json.decode_failed", kind=self.kind, error=str(e))
            raise
        self.value, self.valid = parsed, True

    def _parse_markup(self, text: str) -> float:
        return parse_float(text, 32, self.kind)


def new_float32(value: float) -> NullFloat32:
    return NullFloat32.of(value)
