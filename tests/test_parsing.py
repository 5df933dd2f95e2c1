"""
Tests for the shared text grammar and float formatting.
"""

import math
from datetime import datetime, timedelta, timezone

import pytest

from nulls.core.parsing import (
    format_float,
    format_json_float,
    format_rfc3339,
    parse_bool,
    parse_float,
    parse_int,
    parse_timestamp,
    to_float32,
    wrap_signed,
    wrap_unsigned,
)
from nulls.infra.exceptions import FormatParseError


@pytest.mark.parametrize("text,expected", [("0", 0), ("+42", 42), ("-17", -17), ("007", 7)])
def test_parse_int_accepts_decimal(text, expected):
    assert parse_int(text, 32) == expected


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "0x10", "1.0", "abc", "--1"])
def test_parse_int_rejects_bad_syntax(text):
    with pytest.raises(FormatParseError) as exc_info:
        parse_int(text, 64)
    assert exc_info.value.reason == "invalid syntax"


def test_parse_int_range_is_bit_bounded():
    assert parse_int("2147483647", 32) == 2147483647
    assert parse_int("-2147483648", 32) == -2147483648
    with pytest.raises(FormatParseError) as exc_info:
        parse_int("2147483648", 32, "int32")
    assert exc_info.value.reason == "value out of range"
    assert exc_info.value.kind == "int32"


def test_wrap_truncates_like_a_native_cast():
    assert wrap_signed(2 ** 31, 32) == -(2 ** 31)
    assert wrap_signed(2 ** 32 + 5, 32) == 5
    assert wrap_signed(-1, 32) == -1
    assert wrap_unsigned(-1, 32) == 4294967295
    assert wrap_unsigned(2 ** 32 + 1, 32) == 1


def test_parse_bool_strict_grammar():
    for text in ("1", "t", "T", "TRUE", "true", "True"):
        assert parse_bool(text) is True
    for text in ("0", "f", "F", "FALSE", "false", "False"):
        assert parse_bool(text) is False
    with pytest.raises(FormatParseError):
        parse_bool("yes")


def test_parse_float_special_values_and_range():
    assert math.isnan(parse_float("NaN"))
    assert parse_float("-Inf") == -math.inf
    assert parse_float("infinity") == math.inf
    assert parse_float("1e38", 32) == to_float32(1e38)
    with pytest.raises(FormatParseError):
        parse_float("1e39", 32)
    with pytest.raises(FormatParseError):
        parse_float("1,5")


def test_parse_float_accepts_hex_notation():
    assert parse_float("0x1p-2") == 0.25
    assert parse_float("-0X1.8P1", 32) == -3.0
    with pytest.raises(FormatParseError):
        parse_float("0x1p99999")
    with pytest.raises(FormatParseError):
        parse_float("0x1.8")


def test_to_float32_overflows_to_infinity():
    assert to_float32(3.4e39) == math.inf
    assert to_float32(-3.4e39) == -math.inf
    assert to_float32(0.5) == 0.5


@pytest.mark.parametrize(
    "value,fmt,bits,expected",
    [
        (3.22, "f", 32, "3.22"),
        (3.22, "g", 32, "3.22"),
        (1e-7, "f", 32, "0.0000001"),
        (1e-7, "g", 32, "1e-07"),
        (1234567.0, "g", 32, "1.234567e+06"),
        (100000.0, "g", 32, "100000"),
        (0.0001, "g", 64, "0.0001"),
        (0.00001, "g", 64, "1e-05"),
        (1e21, "f", 32, "1000000000000000000000"),
        (0.0, "g", 64, "0"),
        (-2.5, "f", 64, "-2.5"),
        (0.1, "g", 64, "0.1"),
    ],
)
def test_format_float_shortest(value, fmt, bits, expected):
    assert format_float(value, fmt, bits) == expected


def test_format_json_float_exponent_switch():
    assert format_json_float(123456789.0) == "123456789"
    assert format_json_float(1e-7) == "1e-7"
    assert format_json_float(1e21) == "1e+21"
    assert format_json_float(1e-7, 32) == "1e-7"
    assert format_json_float(3.22, 32) == "3.22"
    with pytest.raises(FormatParseError):
        format_json_float(math.nan)


def test_format_rfc3339():
    utc = datetime(2021, 3, 4, 5, 6, 7, 500000, tzinfo=timezone.utc)
    assert format_rfc3339(utc) == "2021-03-04T05:06:07.5Z"
    plus_two = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=2)))
    assert format_rfc3339(plus_two) == "2021-03-04T05:06:07+02:00"
    minus = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
    assert format_rfc3339(minus) == "2021-03-04T05:06:07-05:30"
    assert format_rfc3339(datetime(1, 1, 1)) == "0001-01-01T00:00:00"


def test_parse_timestamp_round_trips_rfc3339():
    value = datetime(2021, 3, 4, 5, 6, 7, 120000, tzinfo=timezone.utc)
    assert parse_timestamp(format_rfc3339(value)) == value
    with pytest.raises(FormatParseError):
        parse_timestamp("yesterday")
