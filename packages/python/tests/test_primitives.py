"""Tests for primitive checks and partial date/time values."""

from datetime import timezone
from decimal import Decimal

import pytest

from fhir_codec import FHIRDateTime, parse_datetime
from fhir_codec.primitives import (
    PrimitiveMismatch,
    coerce_primitive,
    is_primitive,
    json_type_name,
)


class TestLexicalPatterns:
    @pytest.mark.parametrize("type_name,value", [
        ("date", "2016"),
        ("date", "2016-02"),
        ("date", "2016-02-29"),
        ("dateTime", "2015-02-07T13:28:17-05:00"),
        ("dateTime", "2017-01-01T00:00:00.000Z"),
        ("instant", "2015-02-07T13:28:17.239+02:00"),
        ("time", "23:59:60"),
        ("id", "a-b.c"),
        ("oid", "urn:oid:1.2.3.4"),
        ("uuid", "urn:uuid:c757873d-ec9a-4326-a141-556f43239520"),
        ("code", "entered-in-error"),
        ("base64Binary", "aGVsbG8="),
    ])
    def test_accepts(self, type_name, value):
        assert coerce_primitive(type_name, value) == value

    @pytest.mark.parametrize("type_name,value", [
        ("date", "16-02-29"),
        ("date", "2016-13"),
        ("dateTime", "2015-02-07T13:28:17"),
        ("instant", "2015-02-07"),
        ("time", "24:00:00"),
        ("id", "has space"),
        ("id", "x" * 65),
        ("oid", "1.2.3"),
        ("uuid", "urn:uuid:C757873D-EC9A-4326-A141-556F43239520"),
        ("code", " leading"),
        ("code", "double  space"),
        ("base64Binary", "abc"),
    ])
    def test_rejects(self, type_name, value):
        with pytest.raises(PrimitiveMismatch) as exc_info:
            coerce_primitive(type_name, value)
        assert exc_info.value.expected == type_name

    def test_free_text_types_unchecked(self):
        assert coerce_primitive("string", "  anything  ") == "  anything  "
        assert coerce_primitive("markdown", "# title") == "# title"


class TestNumbers:
    def test_integer_bounds(self):
        assert coerce_primitive("integer", -2147483648) == -2147483648
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("integer", 2147483648)

    def test_unsigned_and_positive(self):
        assert coerce_primitive("unsignedInt", 0) == 0
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("unsignedInt", -1)
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("positiveInt", 0)

    def test_bool_is_not_integer(self):
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("integer", True)
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("decimal", False)

    def test_integral_decimal_literal_rejected_for_integer(self):
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("integer", Decimal("1.0"))

    def test_decimal_carrier(self):
        assert coerce_primitive("decimal", Decimal("1.50")) == Decimal("1.50")
        assert str(coerce_primitive("decimal", 1.5)) == "1.5"
        assert coerce_primitive("decimal", 2) == Decimal(2)

    def test_decimal_as_float(self):
        value = coerce_primitive("decimal", Decimal("1.50"), preserve_decimal=False)
        assert isinstance(value, float)

    def test_non_finite_rejected(self):
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("decimal", float("inf"))
        with pytest.raises(PrimitiveMismatch):
            coerce_primitive("decimal", Decimal("NaN"))

    def test_string_for_boolean(self):
        with pytest.raises(PrimitiveMismatch) as exc_info:
            coerce_primitive("boolean", "true")
        assert exc_info.value.actual == "string"


class TestHelpers:
    def test_is_primitive(self):
        assert is_primitive("positiveInt")
        assert is_primitive("xhtml")
        assert not is_primitive("HumanName")
        assert not is_primitive("Resource")

    @pytest.mark.parametrize("value,expected", [
        (None, "null"),
        (True, "boolean"),
        (3, "integer"),
        (1.5, "number"),
        (Decimal("1"), "number"),
        ("x", "string"),
        ([], "array"),
        ({}, "object"),
    ])
    def test_json_type_name(self, value, expected):
        assert json_type_name(value) == expected


class TestPartialDateTime:
    @pytest.mark.parametrize("text,precision", [
        ("2016", "year"),
        ("2016-02", "month"),
        ("2016-02-29", "day"),
        ("2016-02-29T10:30:00+01:00", "second"),
    ])
    def test_precision(self, text, precision):
        assert parse_datetime(text).precision == precision

    @pytest.mark.parametrize("text", [
        "2016",
        "2016-02",
        "2016-02-29",
        "2016-02-29T10:30:00+01:00",
        "2016-02-29T10:30:00Z",
    ])
    def test_isoformat_round_trip(self, text):
        assert parse_datetime(text).isoformat() == text

    def test_utc_zone(self):
        value = parse_datetime("2020-05-01T00:00:00Z").value
        assert value.utcoffset() == timezone.utc.utcoffset(None)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_datetime("yesterday")
        with pytest.raises(ValueError):
            parse_datetime("2016-02-30")

    def test_value_object(self):
        dt = parse_datetime("2016-02")
        assert isinstance(dt, FHIRDateTime)
        assert (dt.value.year, dt.value.month) == (2016, 2)
