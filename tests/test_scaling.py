"""Tests for amount scaling."""

from decimal import Decimal

import pytest

from step_staking import (
    AmountOverflowError,
    AmountUnderflowError,
    InvalidAmountError,
    to_base_units,
)
from step_staking.program import MAX_U64
from step_staking.shared import parse_amount


class TestToBaseUnits:
    def test_six_decimals(self):
        assert to_base_units("1.000000", 6) == 1_000_000

    def test_two_decimals(self):
        assert to_base_units("0.1", 2) == 10

    def test_zero_decimals_is_identity(self):
        assert to_base_units(1234, 0) == 1234
        assert to_base_units("1234", 0) == 1234

    def test_truncates_toward_zero(self):
        assert to_base_units("1.999", 2) == 199
        assert to_base_units("0.123456789123", 9) == 123456789

    def test_no_float_precision_loss(self):
        assert to_base_units("18446744073.709551615", 9) == MAX_U64
        assert to_base_units(0.1, 2) == 10
        assert to_base_units(Decimal("1.5"), 9) == 1_500_000_000

    def test_high_precision_input(self):
        assert to_base_units("18446744073.70955161599999999999999", 9) == MAX_U64

    def test_exponent_notation(self):
        assert to_base_units("1e3", 0) == 1000
        assert to_base_units("2.5E-3", 6) == 2500

    def test_overflow(self):
        with pytest.raises(AmountOverflowError):
            to_base_units("18446744073.709551616", 9)

    def test_overflow_huge_exponent(self):
        with pytest.raises(AmountOverflowError):
            to_base_units("1E+100000", 9)

    def test_overflow_zero_decimals(self):
        with pytest.raises(AmountOverflowError):
            to_base_units(MAX_U64 + 1, 0)

    def test_truncates_to_zero(self):
        with pytest.raises(AmountUnderflowError):
            to_base_units("0.001", 2)

    def test_zero(self):
        with pytest.raises(AmountUnderflowError):
            to_base_units("0", 9)

    @pytest.mark.parametrize("value", ["0E+999999999", "0.000", "-0", "0E-999999999"])
    def test_zero_with_any_exponent(self, value):
        with pytest.raises(AmountUnderflowError):
            to_base_units(value, 9)

    def test_huge_positive_exponent(self):
        with pytest.raises(AmountOverflowError):
            to_base_units("1E+999999999", 0)

    def test_huge_negative_exponent(self):
        with pytest.raises(AmountUnderflowError):
            to_base_units("1E-999999999", 9)

    def test_negative(self):
        with pytest.raises(AmountUnderflowError):
            to_base_units("-1", 6)

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", "1,5", None, True])
    def test_invalid(self, value):
        with pytest.raises(InvalidAmountError):
            to_base_units(value, 6)

    def test_decimals_out_of_range(self):
        with pytest.raises(ValueError):
            to_base_units("1", 256)


class TestParseAmount:
    def test_strips_whitespace(self):
        assert parse_amount(" 1.5 ") == Decimal("1.5")

    def test_float_uses_shortest_repr(self):
        assert parse_amount(1.1) == Decimal("1.1")
