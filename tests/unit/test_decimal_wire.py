"""Decimal wire representation"""

import pytest
from decimal import Decimal

from src.models.decimal_wire import decimal_to_wire, wire_to_decimal, decimal_to_json_number


@pytest.mark.unit
class TestDecimalWire:
    """Test decimal wire helpers"""

    def test_decimal_to_wire(self):
        assert decimal_to_wire(Decimal("123.45")) == "123.45"
        assert decimal_to_wire(Decimal("100.0000")) == "100"
        assert decimal_to_wire(Decimal("0.0000001")) == "0.0000001"
        assert decimal_to_wire(Decimal("-844.00")) == "-844"
        assert decimal_to_wire(Decimal("-0.000")) == "0"
        assert decimal_to_wire(None) is None

    def test_no_exponent(self):
        result = decimal_to_wire(Decimal("1E+10"))

        assert "E" not in result and "e" not in result
        assert result == "10000000000"

    def test_wire_to_decimal(self):
        assert wire_to_decimal("123.45") == Decimal("123.45")
        assert wire_to_decimal(0.2) == Decimal("0.2")
        assert wire_to_decimal(123) == Decimal("123")
        assert wire_to_decimal(Decimal("456.78")) == Decimal("456.78")
        assert wire_to_decimal(None) is None
        assert wire_to_decimal("") is None
        assert wire_to_decimal("abc") is None

    def test_wire_to_decimal_non_finite(self):
        assert wire_to_decimal("Infinity") is None
        assert wire_to_decimal(float("inf")) is None
        assert wire_to_decimal(Decimal("NaN")) is None

    def test_decimal_to_json_number(self):
        assert decimal_to_json_number(Decimal("100.0")) == 100
        assert isinstance(decimal_to_json_number(Decimal("100.0")), int)
        assert decimal_to_json_number(Decimal("-49")) == -49
        assert decimal_to_json_number(Decimal("0.25")) == 0.25
