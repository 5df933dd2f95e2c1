"""
Text parsing and formatting shared by the nullable types.

Integer, boolean and float text follows a strict grammar: no surrounding
whitespace, no digit separators. Floats may also be written in hexadecimal
(``0x1p-2``). Narrowing to a smaller width truncates the way a native cast
does.
"""

import math
import re
import struct
from datetime import datetime, timedelta, timezone
from typing import Tuple, Union

from nulls.infra.exceptions import FormatParseError

# Width of the platform's native signed integer.
INT_SIZE = struct.calcsize("P") * 8

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_INF_RE = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)

_TRUE_TEXT = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TEXT = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def as_text(data: Union[bytes, bytearray, str]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


# === Integers ===

def int_bounds(bits: int) -> Tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def parse_int(text: str, bits: int, kind: str = "int64") -> int:
    """Parse signed decimal text bounded to ``bits``."""
    if not _INT_RE.fullmatch(text):
        raise FormatParseError(kind, text, "invalid syntax")
    value = int(text)
    low, high = int_bounds(bits)
    if value < low or value > high:
        raise FormatParseError(kind, text, "value out of range")
    return value


def wrap_signed(value: int, bits: int) -> int:
    """Two's-complement truncation to a signed ``bits``-wide integer."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


# === Booleans ===

def parse_bool(text: str, kind: str = "bool") -> bool:
    if text in _TRUE_TEXT:
        return True
    if text in _FALSE_TEXT:
        return False
    raise FormatParseError(kind, text, "invalid syntax")


# === Floats ===

def to_float32(value: float) -> float:
    """Round a double to the nearest binary32, overflowing to infinity."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float(text: str, bits: int = 64, kind: str = "float64") -> float:
    if text.lower() == "nan":
        return math.nan
    if _INF_RE.fullmatch(text):
        return math.copysign(math.inf, -1.0 if text.startswith("-") else 1.0)
    if _HEX_FLOAT_RE.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError as e:
            raise FormatParseError(kind, text, "value out of range") from e
    elif _FLOAT_RE.fullmatch(text):
        value = float(text)
    else:
        raise FormatParseError(kind, text, "invalid syntax")
    if bits == 32:
        value = to_float32(value)
    if math.isinf(value):
        raise FormatParseError(kind, text, "value out of range")
    return value


def _shortest_digits(value: float, bits: int) -> Tuple[str, int]:
    """
    Shortest decimal digits that round-trip at ``bits`` precision.

    Returns ``(digits, dp)`` with ``value == 0.digits * 10**dp``.
    """
    if value == 0:
        return "", 0
    max_precision = 9 if bits == 32 else 17
    text = ""
    for precision in range(1, max_precision + 1):
        text = f"{value:.{precision - 1}e}"
        parsed = float(text)
        if bits == 32:
            parsed = to_float32(parsed)
        if parsed == value:
            break
    mantissa, exponent = text.split("e")
    digits = mantissa.replace(".", "").rstrip("0") or "0"
    return digits, int(exponent) + 1


def _fmt_fixed(digits: str, dp: int) -> str:
    if not digits:
        return "0"
    if dp <= 0:
        return "0." + "0" * -dp + digits
    if dp >= len(digits):
        return digits + "0" * (dp - len(digits))
    return digits[:dp] + "." + digits[dp:]


def _fmt_exp(digits: str, dp: int) -> str:
    if not digits:
        return "0e+00"
    exp = dp - 1
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    sign = "-" if exp < 0 else "+"
    return f"{mantissa}e{sign}{abs(exp):02d}"


def format_float(value: float, fmt: str = "g", bits: int = 64) -> str:
    """
    Shortest round-trip text in ``f`` (fixed), ``e`` (exponent) or ``g`` form.

    ``g`` switches to exponent form when the decimal exponent is below -4 or
    at least 6.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if bits == 32:
        value = to_float32(value)
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    digits, dp = _shortest_digits(abs(value), bits)
    if fmt == "f":
        return sign + _fmt_fixed(digits, dp)
    if fmt == "e":
        return sign + _fmt_exp(digits, dp)
    exp = dp - 1
    if digits and (exp < -4 or exp >= 6):
        return sign + _fmt_exp(digits, dp)
    return sign + _fmt_fixed(digits, dp)


def format_json_float(value: float, bits: int = 64, kind: str = "float64") -> str:
    if math.isnan(value) or math.isinf(value):
        raise FormatParseError(kind, value, "unsupported value in JSON")
    if bits == 32:
        value = to_float32(value)
        low, high = to_float32(1e-6), to_float32(1e21)
    else:
        low, high = 1e-6, 1e21
    magnitude = abs(value)
    fmt = "f"
    if magnitude != 0 and (magnitude < low or magnitude >= high):
        fmt = "e"
    text = format_float(value, fmt, bits)
    if fmt == "e":
        # e-09 -> e-9
        mantissa, exponent = text.split("e")
        if exponent.startswith("-0"):
            text = f"{mantissa}e-{exponent[2:]}"
    return text


# === Timestamps ===

def format_rfc3339(value: datetime) -> str:
    """RFC 3339 text, fractional seconds trimmed, ``Z`` for UTC."""
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if offset is None:
        return text
    if offset == timedelta(0):
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    return f"{text}{sign}{hours:02d}:{rest // 60:02d}"


def parse_timestamp(text: str, kind: str = "timestamp") -> datetime:
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise FormatParseError(kind, text, str(e)) from e


def unquote_json_string(text: str, kind: str = "timestamp") -> str:
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        raise FormatParseError(kind, text, "input is not a JSON string")
    return text[1:-1]
