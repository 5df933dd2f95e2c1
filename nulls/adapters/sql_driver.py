"""
Standard driver converter.

Implements the assignment rules a relational driver applies when a raw
column value is scanned into a native bool/int64/float64/string slot.
"""

from datetime import datetime
from typing import Any, Tuple

from nulls.core.parsing import (
    as_text,
    format_float,
    format_rfc3339,
    int_bounds,
    parse_bool,
    parse_float,
    parse_int,
)
from nulls.core.ports.driver import DriverConverter
from nulls.infra.exceptions import DriverConversionError, FormatParseError
from nulls.infra.logger import get_logger

log = get_logger("nulls.driver")


class StandardDriverConverter(DriverConverter):
    """Driver conversion rules for the base SQL null kinds."""

    def to_bool(self, raw: Any) -> Tuple[bool, bool]:
        if raw is None:
            return False, False
        if isinstance(raw, bool):
            return raw, True
        if isinstance(raw, int):
            if raw in (0, 1):
                return raw == 1, True
            raise self._fail(raw, "bool", f"value {raw} out of range for bool")
        if isinstance(raw, (str, bytes, bytearray)):
            try:
                return parse_bool(as_text(raw)), True
            except FormatParseError as e:
                raise self._fail(raw, "bool", e.reason) from e
        raise self._fail(raw, "bool")

    def to_int64(self, raw: Any) -> Tuple[int, bool]:
        if raw is None:
            return 0, False
        if isinstance(raw, bool) or isinstance(raw, datetime):
            raise self._fail(raw, "int64")
        if isinstance(raw, int):
            low, high = int_bounds(64)
            if raw < low or raw > high:
                raise self._fail(raw, "int64", "value out of range")
            return raw, True
        if isinstance(raw, float):
            text = format_float(raw, "g", 64)
        elif isinstance(raw, (str, bytes, bytearray)):
            text = as_text(raw)
        else:
            raise self._fail(raw, "int64")
        try:
            return parse_int(text, 64), True
        except FormatParseError as e:
            raise self._fail(raw, "int64", e.reason) from e

    def to_float64(self, raw: Any) -> Tuple[float, bool]:
        if raw is None:
            return 0.0, False
        if isinstance(raw, bool) or isinstance(raw, datetime):
            raise self._fail(raw, "float64")
        if isinstance(raw, (int, float)):
            return float(raw), True
        if isinstance(raw, (str, bytes, bytearray)):
            try:
                return parse_float(as_text(raw), 64), True
            except FormatParseError as e:
                raise self._fail(raw, "float64", e.reason) from e
        raise self._fail(raw, "float64")

    def to_string(self, raw: Any) -> Tuple[str, bool]:
        if raw is None:
            return "", False
        if isinstance(raw, str):
            return raw, True
        if isinstance(raw, (bytes, bytearray)):
            return bytes(raw).decode("utf-8", errors="replace"), True
        if isinstance(raw, datetime):
            return format_rfc3339(raw), True
        if isinstance(raw, bool):
            return ("true" if raw else "false"), True
        if isinstance(raw, int):
            return str(raw), True
        if isinstance(raw, float):
            return format_float(raw, "g", 64), True
        raise self._fail(raw, "string")

    @staticmethod
    def _fail(raw: Any, dest: str, reason: str = "unsupported type") -> DriverConversionError:
        error = DriverConversionError(raw, dest, reason)
        log.debug("nulls.driver.conversion_failed", dest=dest, error=str(error))
        return error
