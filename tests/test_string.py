"""
Tests for NullString.
"""

from datetime import datetime, timezone

import pytest

from nulls import NullString, new_string
from nulls.adapters.xml_record import marshal_record, unmarshal_record
from nulls.infra.exceptions import DriverConversionError


def test_invalid_element_is_not_written():
    assert marshal_record("test", elements={"val": NullString("", False)}) == "<test></test>"


def test_empty_valid_string_keeps_its_element():
    body = marshal_record("test", elements={"val": new_string("")})
    assert body == "<test><val></val></test>"


def test_json_encode_escapes_html():
    assert new_string("a<b>&c").encode_json() == b'"a\\u003cb\\u003e\\u0026c"'
    assert new_string("héllo").encode_json() == '"héllo"'.encode("utf-8")


def test_json_encode_replaces_lone_surrogates():
    raw = b"a\x80b".decode("utf-8", errors="surrogateescape")
    assert new_string(raw).encode_json() == '"a\ufffdb"'.encode("utf-8")


def test_json_decode():
    value = NullString()
    value.decode_json(b'"hi \\"there\\""')
    assert value == NullString('hi "there"', True)


@pytest.mark.parametrize("text", [b"null", b"123", b"{bad", b"plain", b"[]"])
def test_json_decode_never_raises(text):
    value = new_string("keep")
    value.decode_json(text)
    assert value.valid is False


def test_decode_text_uses_json_rules():
    value = NullString()
    value.decode_text('"x"')
    assert value == NullString("x", True)
    value.decode_text("x")
    assert value.valid is False


def test_xml_element_and_attribute():
    value = NullString()
    unmarshal_record("<test><val>hello &amp; bye</val></test>", elements={"val": value})
    assert value == NullString("hello & bye", True)

    unmarshal_record("<test><val>null</val></test>", elements={"val": value})
    assert value.valid is False

    attr = NullString()
    unmarshal_record('<test val="x y"></test>', attributes={"val": attr})
    assert attr == NullString("x y", True)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("text", "text"),
        (b"bytes", "bytes"),
        (5, "5"),
        (2.5, "2.5"),
        (True, "true"),
        (datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc), "2020-01-02T03:04:05Z"),
    ],
)
def test_scan(raw, expected):
    value = NullString()
    value.scan(raw)
    assert value == NullString(expected, True)


def test_scan_unsupported():
    value = new_string("x")
    with pytest.raises(DriverConversionError):
        value.scan(object())
    assert value == NullString()
