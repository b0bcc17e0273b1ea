"""Test built-in country number formats."""
import pytest
from numstr_format.errors import UnknownLocale
from numstr_format.international.locale_defaults import (
    COUNTRY_CULTURES, CURRENCY_VARIANTS, available_locales, build_format_spec,
    currency_variants, get_country_culture,
)
from numstr_format.models.schema import (
    CurrencySymbolSpec, IntegerGroupingType, Justification, NumberFieldSpec, RoundingSpec, RoundingType,
)
from numstr_format.pipeline import format_number


class TestReferenceRenderings:
    def test_france(self, fr_currency_spec):
        assert format_number(-123.45, fr_currency_spec) == " -123,45 €"

    def test_germany(self, field_10):
        spec = build_format_spec("DE", currency=True, field=field_10)
        assert format_number(-123.45, spec) == " 123,45- €"

    def test_uk_minus_outside(self, field_10):
        spec = build_format_spec("GB", variant="minus_outside", field=field_10)
        assert format_number(-123.45, spec) == " £ -123.45"

    def test_uk_minus_inside(self, field_10):
        spec = build_format_spec("UK", variant="minus_inside", field=field_10)
        assert format_number(-123.45, spec) == " - £123.45"

    def test_us_parentheses(self, field_10):
        spec = build_format_spec("US", currency=True, field=field_10)
        assert format_number(-123.45, spec) == "$ (123.45)"

    def test_us_minus(self, us_currency_spec):
        assert format_number(-123.45, us_currency_spec) == " $ -123.45"

    def test_india_currency(self):
        spec = build_format_spec("IN", currency=True)
        assert format_number(-1234567.5, spec) == "-₹12,34,567.50"

    def test_china_currency(self):
        spec = build_format_spec("CN", currency=True)
        assert format_number(12345678, spec) == "¥1234,5678.00"

    def test_france_signed_grouping(self):
        assert format_number(-1234567.891, build_format_spec("FR")) == "-1 234 567,891"

    def test_germany_signed_grouping(self):
        assert format_number(-1234567.891, build_format_spec("DE")) == "1.234.567,891-"

    def test_every_variant_formats_negative_value(self, field_10):
        for tag, variants in CURRENCY_VARIANTS.items():
            for variant in variants:
                result = format_number(-123.45, build_format_spec(tag, variant=variant, field=field_10))
                assert len(result) >= 10


class TestLookup:
    def test_available_locales(self):
        assert available_locales() == ["CN", "DE", "FR", "GB", "IN", "US"]

    @pytest.mark.parametrize("tag", ["GB", "gb", "UK", "GBR", "en-GB", "en_gb", " uk "])
    def test_gb_aliases(self, tag):
        assert get_country_culture(tag).locale_tag == "GB"

    def test_unknown_locale(self):
        with pytest.raises(UnknownLocale):
            get_country_culture("XX")

    def test_unknown_locale_is_lookup_error(self):
        with pytest.raises(LookupError):
            build_format_spec("Atlantis")

    def test_unknown_variant(self):
        with pytest.raises(UnknownLocale):
            build_format_spec("US", variant="euro")

    def test_variant_names_default_first(self):
        assert currency_variants("US") == ["paren", "minus"]
        assert currency_variants("GB") == ["minus_outside", "minus_inside"]


class TestCountryCultures:
    def test_metadata(self):
        culture = get_country_culture("IN")
        assert culture.alpha3 == "IND"
        assert culture.numeric_code == "356"
        assert culture.currency_code == "INR"
        assert culture.signed_format.integer_grouping.grouping_type == IntegerGroupingType.INDIA

    def test_china_groups_of_four(self):
        grouping = get_country_culture("CN").signed_format.integer_grouping
        assert grouping.group_sizes == (4,)

    def test_signed_formats_have_no_currency(self):
        for culture in COUNTRY_CULTURES.values():
            assert culture.signed_format.currency.is_nop

    def test_currency_format_is_first_variant(self):
        for tag, culture in COUNTRY_CULTURES.items():
            assert culture.currency_format == next(iter(CURRENCY_VARIANTS[tag].values()))

    def test_currency_formats_round_to_two_places(self):
        for variants in CURRENCY_VARIANTS.values():
            for spec in variants.values():
                assert spec.rounding.decimal_places == 2


class TestBuildFormatSpec:
    def test_signed_by_default(self):
        spec = build_format_spec("US")
        assert spec.currency == CurrencySymbolSpec.nop()
        assert spec.negative_sign.leading_text == "-"

    def test_field_override_leaves_table_untouched(self):
        field = NumberFieldSpec(length=15, justification=Justification.LEFT)
        spec = build_format_spec("DE", field=field)
        assert spec.field == field
        assert get_country_culture("DE").signed_format.field.length == -1

    def test_rounding_override(self):
        rounding = RoundingSpec(rounding_type=RoundingType.TRUNCATE, decimal_places=1)
        spec = build_format_spec("US", currency=True, rounding=rounding)
        assert format_number(-9.99, spec) == "$ (9.9)"
