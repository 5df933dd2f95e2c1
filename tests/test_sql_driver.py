"""
Tests for the standard driver converter and converter injection.
"""

from datetime import datetime

import pytest

from nulls import NullInt32, NullString, get_driver_converter, set_driver_converter
from nulls.adapters.sql_driver import StandardDriverConverter
from nulls.core.ports import DriverConverter
from nulls.infra.exceptions import DriverConversionError


@pytest.fixture
def converter():
    return StandardDriverConverter()


def test_null_yields_zero_and_invalid(converter):
    assert converter.to_bool(None) == (False, False)
    assert converter.to_int64(None) == (0, False)
    assert converter.to_float64(None) == (0.0, False)
    assert converter.to_string(None) == ("", False)


def test_to_bool(converter):
    assert converter.to_bool(b"true") == (True, True)
    assert converter.to_bool(1) == (True, True)
    for raw in ("maybe", 2, 1.0, datetime(2020, 1, 1)):
        with pytest.raises(DriverConversionError):
            converter.to_bool(raw)


def test_to_int64(converter):
    assert converter.to_int64(-5) == (-5, True)
    assert converter.to_int64("42") == (42, True)
    assert converter.to_int64(7.0) == (7, True)
    for raw in (" 5", 2 ** 63, 1e21, False, datetime(2020, 1, 1)):
        with pytest.raises(DriverConversionError):
            converter.to_int64(raw)


def test_to_float64(converter):
    assert converter.to_float64(3) == (3.0, True)
    assert converter.to_float64("1.5") == (1.5, True)
    with pytest.raises(DriverConversionError) as exc_info:
        converter.to_float64(True)
    assert exc_info.value.dest == "float64"
    assert exc_info.value.source_type == "bool"


def test_to_string(converter):
    assert converter.to_string(1e21) == ("1e+21", True)
    assert converter.to_string(bytearray(b"ab")) == ("ab", True)
    with pytest.raises(DriverConversionError):
        converter.to_string([1, 2])


def test_default_converter_is_standard():
    assert isinstance(get_driver_converter(), StandardDriverConverter)


class FixedConverter(DriverConverter):
    def to_bool(self, raw):
        return True, True

    def to_int64(self, raw):
        return 42, True

    def to_float64(self, raw):
        return 1.0, True

    def to_string(self, raw):
        return "fixed", raw is not None


def test_injected_converter_is_used():
    set_driver_converter(FixedConverter())

    value = NullInt32()
    value.scan("anything")
    assert value == NullInt32(42, True)

    text = NullString()
    text.scan(None)
    assert text == NullString("fixed", False)
