"""Test the number formatting pipeline."""
from decimal import Decimal

import pytest
from numstr_format.errors import (
    InvalidFieldLength, InvalidGroupingPolicy, InvalidInput, MissingNegativeSign,
)
from numstr_format.international.locale_defaults import build_format_spec
from numstr_format.models.schema import (
    IntegerGroupingPolicy, NumberFieldSpec, NumberSignSymbolSpec, NumericSign, RoundingSpec, RoundingType,
)
from numstr_format.pipeline import NumberFormatter, format_number, split_decimal, to_decimal
from tests.factories import make_currency, make_format_spec, make_sign


class TestToDecimal:
    def test_int(self):
        assert to_decimal(42) == Decimal("42")

    def test_float_uses_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string_stripped(self):
        assert to_decimal(" -1234.50 ") == Decimal("-1234.50")

    def test_decimal_passthrough(self):
        value = Decimal("1.000")
        assert to_decimal(value) is value

    def test_bool_rejected(self):
        with pytest.raises(InvalidInput):
            to_decimal(True)

    def test_garbage_string_rejected(self):
        with pytest.raises(InvalidInput):
            to_decimal("1.234,50")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), "-Infinity", Decimal("NaN")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInput):
            to_decimal(value)

    def test_unsupported_type(self):
        with pytest.raises(InvalidInput):
            to_decimal([1, 2])


class TestSplitDecimal:
    def test_negative(self):
        assert split_decimal(Decimal("-123.45")) == (NumericSign.NEGATIVE, "123", "45")

    def test_leading_zeros_dropped(self):
        assert split_decimal(Decimal("000123")) == (NumericSign.POSITIVE, "123", "")

    def test_fraction_only(self):
        assert split_decimal(Decimal("0.50")) == (NumericSign.POSITIVE, "", "50")

    def test_negative_zero_is_zero(self):
        assert split_decimal(Decimal("-0.00")) == (NumericSign.ZERO, "", "00")

    def test_exponent_expanded(self):
        assert split_decimal(Decimal("1.5E+3")) == (NumericSign.POSITIVE, "1500", "")


class TestFormatNumber:
    def test_thousands(self):
        assert format_number(1234567.891, make_format_spec()) == "1,234,567.891"

    def test_negative_currency_in_field(self, us_currency_spec):
        assert format_number(Decimal("-123.45"), us_currency_spec) == " $ -123.45"

    def test_zero_with_currency(self, us_currency_spec):
        assert format_number(0, us_currency_spec) == "    $ 0.00"

    def test_rounded_to_negative_zero_has_no_sign(self):
        spec = make_format_spec(decimal_places=2)
        assert format_number("-0.004", spec) == "0.00"

    def test_fraction_only_gets_zero(self):
        assert format_number("-.5", make_format_spec()) == "-0.5"

    def test_positive_sign(self):
        spec = make_format_spec(positive=make_sign("+"))
        assert format_number(5, spec) == "+5"

    def test_zero_sign(self):
        spec = make_format_spec(zero=make_sign(" "))
        assert format_number(0, spec) == " 0"

    def test_sign_outside_field(self):
        spec = make_format_spec(negative=make_sign("-", position="outside_field"), field_length=8)
        assert format_number(-1.5, spec) == "-     1.5"

    def test_currency_outside_field_center(self):
        spec = make_format_spec(
            currency=make_currency("", " €", position="outside_field"),
            field_length=9,
            justification="center",
        )
        assert format_number(-12.5, spec) == "  -12.5   €"

    def test_india_grouping(self):
        spec = make_format_spec(grouping=IntegerGroupingPolicy.india())
        assert format_number(6789000000000000, spec) == "6,78,90,00,00,00,00,000"

    def test_no_decimal_separator_for_integers(self):
        spec = make_format_spec(decimal_separator="")
        assert format_number(1234, spec) == "1,234"

    def test_fraction_with_empty_separator_raises(self):
        spec = make_format_spec(decimal_separator="")
        with pytest.raises(InvalidInput):
            format_number("12.5", spec)

    def test_large_value_with_currency_rounding(self):
        spec = build_format_spec("US", variant="minus")
        assert format_number(10**27, spec) == "$ 1,000,000,000,000,000,000,000,000,000.00"

    def test_missing_negative_sign(self):
        spec = make_format_spec(negative=NumberSignSymbolSpec.nop())
        with pytest.raises(MissingNegativeSign):
            format_number(-1, spec)


class TestNumberFormatter:
    def test_format_many(self, fr_currency_spec):
        formatter = NumberFormatter(fr_currency_spec)
        assert formatter.format_many([-123.45, 1000]) == [" -123,45 €", "1 000,00 €"]

    def test_invalid_field_rejected_on_init(self):
        spec = make_format_spec().with_field(NumberFieldSpec(length=-2))
        with pytest.raises(InvalidFieldLength):
            NumberFormatter(spec)

    def test_invalid_grouping_rejected_on_init(self):
        spec = make_format_spec(grouping=IntegerGroupingPolicy.custom((2, 0)))
        with pytest.raises(InvalidGroupingPolicy):
            NumberFormatter(spec)

    def test_from_locale(self):
        formatter = NumberFormatter.from_locale("de", currency=True, field=NumberFieldSpec(length=12))
        assert formatter.format(-1234.5) == " 1.234,50- €"

    def test_from_locale_rounding_override(self):
        rounding = RoundingSpec(rounding_type=RoundingType.TRUNCATE, decimal_places=1)
        formatter = NumberFormatter.from_locale("US", rounding=rounding)
        assert formatter.format(1234.99) == "1,234.9"

    def test_from_settings(self, mock_settings):
        formatter = NumberFormatter.from_settings(mock_settings)
        assert formatter.format(-1234.5) == "-1,234.5"

    def test_format_reraises(self):
        formatter = NumberFormatter(make_format_spec())
        with pytest.raises(InvalidInput):
            formatter.format("twelve")
