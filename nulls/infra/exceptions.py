"""
Custom exceptions for conversion errors.
"""

from typing import Any


class NullsError(ValueError):
    """Base error for every nullable conversion failure."""
    pass


class FormatParseError(NullsError):
    """Malformed or out-of-range text for the target kind."""

    def __init__(self, kind: str, text: Any, reason: str) -> None:
        self.kind = kind
        self.text = text
        self.reason = reason
        super().__init__(f"parsing {text!r} as {kind}: {reason}")


class DriverConversionError(NullsError):
    """Driver value cannot be assigned to the destination kind."""

    def __init__(self, source: Any, dest: str, reason: str = "unsupported type") -> None:
        self.source_type = type(source).__name__
        self.dest = dest
        self.reason = reason
        super().__init__(
            f"converting driver value of type {self.source_type} to {dest}: {reason}"
        )
