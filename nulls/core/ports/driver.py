"""
Relational driver value protocol.

Nullable types depend only on this interface. The conversion rules
themselves are supplied by the storage layer (see nulls.adapters.sql_driver).
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, Tuple, Union

# Values a driver accepts on the way out.
DriverValue = Optional[Union[bool, int, float, str, bytes, datetime]]


class Scanner(ABC):
    @abstractmethod
    def scan(self, raw: Any) -> None:
        """Read a raw driver value into this instance."""
        pass


class Valuer(ABC):
    @abstractmethod
    def driver_value(self) -> DriverValue:
        """Driver-compatible value, or None for NULL."""
        pass


class DriverConverter(ABC):
    """
    Null-aware assignment of raw driver values to the native kinds.

    Every method returns ``(value, valid)``. ``None`` yields the kind's zero
    value with ``valid=False``; unsupported input raises DriverConversionError.
    """

    @abstractmethod
    def to_bool(self, raw: Any) -> Tuple[bool, bool]:
        pass

    @abstractmethod
    def to_int64(self, raw: Any) -> Tuple[int, bool]:
        pass

    @abstractmethod
    def to_float64(self, raw: Any) -> Tuple[float, bool]:
        pass

    @abstractmethod
    def to_string(self, raw: Any) -> Tuple[str, bool]:
        pass


_converter: Optional[DriverConverter] = None


def set_driver_converter(converter: Optional[DriverConverter]) -> None:
    """Install the converter used by every scan. None restores the default."""
    global _converter
    _converter = converter


def get_driver_converter() -> DriverConverter:
    global _converter
    if _converter is None:
        from nulls.adapters.sql_driver import StandardDriverConverter

        _converter = StandardDriverConverter()
    return _converter
