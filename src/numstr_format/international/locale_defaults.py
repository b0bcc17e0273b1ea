"""Built-in number formatting conventions per country/culture.

Each entry carries a signed-number format (no currency symbols) and one or
more currency formats. The currency formats are keyed by variant name; the
first variant listed for a country is its default.

Reference renderings of -123.45 in a right-justified field of length 10:

    FR  currency        " -123,45 €"
    DE  currency        " 123,45- €"
    GB  minus_outside   " £ -123.45"
    GB  minus_inside    " - £123.45"
    US  paren           "$ (123.45)"
    US  minus           " $ -123.45"
"""
from __future__ import annotations

from ..errors import UnknownLocale
from ..models.schema import (
    CountryCulture,
    CurrencySignRelativePosition,
    CurrencySymbolSpec,
    IntegerGroupingPolicy,
    NumberFieldSpec,
    NumberSignSymbolSpec,
    NumStrFormatSpec,
    RoundingSpec,
    RoundingType,
)

__all__ = [
    "COUNTRY_CULTURES",
    "CURRENCY_VARIANTS",
    "LOCALE_ALIASES",
    "available_locales",
    "build_format_spec",
    "currency_variants",
    "get_country_culture",
]

_OUTSIDE_SIGN = CurrencySignRelativePosition.OUTSIDE_NUMBER_SIGN
_INSIDE_SIGN = CurrencySignRelativePosition.INSIDE_NUMBER_SIGN

_MINUS = NumberSignSymbolSpec.leading("-")
_TRAILING_MINUS = NumberSignSymbolSpec.trailing("-")
_PARENS = NumberSignSymbolSpec.surrounding("(", ")")


def _signed(decimal_separator: str, grouping: IntegerGroupingPolicy, negative: NumberSignSymbolSpec) -> NumStrFormatSpec:
    return NumStrFormatSpec(
        decimal_separator=decimal_separator,
        integer_grouping=grouping,
        negative_sign=negative,
    )


def _currency(
    signed: NumStrFormatSpec,
    currency: CurrencySymbolSpec,
    negative: NumberSignSymbolSpec | None = None,
    decimal_places: int = 2,
) -> NumStrFormatSpec:
    update: dict = {
        "currency": currency,
        "rounding": RoundingSpec(
            rounding_type=RoundingType.HALF_AWAY_FROM_ZERO, decimal_places=decimal_places
        ),
    }
    if negative is not None:
        update["negative_sign"] = negative
    return signed.model_copy(update=update)


# ---------------------------------------------------------------------------
# Signed-number formats
# ---------------------------------------------------------------------------

_FR_SIGNED = _signed(",", IntegerGroupingPolicy.thousands(" "), _MINUS)
_DE_SIGNED = _signed(",", IntegerGroupingPolicy.thousands("."), _TRAILING_MINUS)
_GB_SIGNED = _signed(".", IntegerGroupingPolicy.thousands(","), _MINUS)
_US_SIGNED = _signed(".", IntegerGroupingPolicy.thousands(","), _MINUS)
_IN_SIGNED = _signed(".", IntegerGroupingPolicy.india(","), _MINUS)
_CN_SIGNED = _signed(".", IntegerGroupingPolicy.china(","), _MINUS)

# ---------------------------------------------------------------------------
# Currency formats, keyed by locale tag then variant
# ---------------------------------------------------------------------------

CURRENCY_VARIANTS: dict[str, dict[str, NumStrFormatSpec]] = {
    "FR": {
        "default": _currency(_FR_SIGNED, CurrencySymbolSpec(trailing_text=" €")),
    },
    "DE": {
        "default": _currency(
            _DE_SIGNED,
            CurrencySymbolSpec(trailing_text=" €", currency_sign_relative_position=_OUTSIDE_SIGN),
        ),
    },
    "GB": {
        "minus_outside": _currency(
            _GB_SIGNED,
            CurrencySymbolSpec(leading_text="£ ", currency_sign_relative_position=_OUTSIDE_SIGN),
        ),
        "minus_inside": _currency(
            _GB_SIGNED,
            CurrencySymbolSpec(leading_text="£", currency_sign_relative_position=_INSIDE_SIGN),
            negative=NumberSignSymbolSpec.leading("- "),
        ),
    },
    "US": {
        "paren": _currency(
            _US_SIGNED,
            CurrencySymbolSpec(leading_text="$ ", currency_sign_relative_position=_OUTSIDE_SIGN),
            negative=_PARENS,
        ),
        "minus": _currency(
            _US_SIGNED,
            CurrencySymbolSpec(leading_text="$ ", currency_sign_relative_position=_OUTSIDE_SIGN),
        ),
    },
    "IN": {
        "default": _currency(
            _IN_SIGNED,
            CurrencySymbolSpec(leading_text="₹", currency_sign_relative_position=_INSIDE_SIGN),
        ),
    },
    "CN": {
        "default": _currency(
            _CN_SIGNED,
            CurrencySymbolSpec(leading_text="¥", currency_sign_relative_position=_INSIDE_SIGN),
        ),
    },
}


def _culture(tag: str, signed: NumStrFormatSpec, **metadata) -> CountryCulture:
    default_variant = next(iter(CURRENCY_VARIANTS[tag].values()))
    return CountryCulture(
        locale_tag=tag,
        signed_format=signed,
        currency_format=default_variant,
        **metadata,
    )


COUNTRY_CULTURES: dict[str, CountryCulture] = {
    "FR": _culture(
        "FR", _FR_SIGNED,
        country_name="France",
        alternate_names=("French Republic", "The French Republic"),
        alpha2="FR", alpha3="FRA", numeric_code="250",
        currency_code="EUR", currency_name="Euro", currency_symbol="€",
        minor_currency_name="Cent",
    ),
    "DE": _culture(
        "DE", _DE_SIGNED,
        country_name="Germany",
        alternate_names=("Federal Republic of Germany", "The Federal Republic of Germany"),
        alpha2="DE", alpha3="DEU", numeric_code="276",
        currency_code="EUR", currency_name="Euro", currency_symbol="€",
        minor_currency_name="Cent",
    ),
    "GB": _culture(
        "GB", _GB_SIGNED,
        country_name="United Kingdom",
        alternate_names=(
            "United Kingdom of Great Britain and Northern Ireland",
            "England",
            "Great Britain",
        ),
        alpha2="GB", alpha3="GBR", numeric_code="826",
        currency_code="GBP", currency_name="Pound", currency_symbol="£",
        minor_currency_name="Pence",
    ),
    "US": _culture(
        "US", _US_SIGNED,
        country_name="United States",
        alternate_names=("The United States of America", "United States of America", "America"),
        alpha2="US", alpha3="USA", numeric_code="840",
        currency_code="USD", currency_name="Dollar", currency_symbol="$",
        minor_currency_name="Cent",
    ),
    "IN": _culture(
        "IN", _IN_SIGNED,
        country_name="India",
        alternate_names=("Republic of India", "Bharat"),
        alpha2="IN", alpha3="IND", numeric_code="356",
        currency_code="INR", currency_name="Rupee", currency_symbol="₹",
        minor_currency_name="Paisa",
    ),
    "CN": _culture(
        "CN", _CN_SIGNED,
        country_name="China",
        alternate_names=("People's Republic of China", "PRC"),
        alpha2="CN", alpha3="CHN", numeric_code="156",
        currency_code="CNY", currency_name="Yuan Renminbi", currency_symbol="¥",
        minor_currency_name="Fen",
    ),
}

LOCALE_ALIASES: dict[str, str] = {
    "UK": "GB",
    "USA": "US",
    "FRA": "FR",
    "DEU": "DE",
    "GBR": "GB",
    "IND": "IN",
    "CHN": "CN",
}


def available_locales() -> list[str]:
    """Locale tags with a built-in table."""
    return sorted(COUNTRY_CULTURES)


def _resolve_tag(tag: str) -> str:
    key = tag.strip().upper().replace("_", "-")
    # "fr-FR", "en-GB" style tags resolve on their region part
    if "-" in key:
        key = key.rsplit("-", 1)[1]
    key = LOCALE_ALIASES.get(key, key)
    if key not in COUNTRY_CULTURES:
        raise UnknownLocale(
            f"No built-in number format for locale {tag!r}; available: {', '.join(available_locales())}"
        )
    return key


def get_country_culture(tag: str) -> CountryCulture:
    """Look up a country/culture table by tag (case-insensitive; 'UK', 'en-GB' etc. accepted)."""
    return COUNTRY_CULTURES[_resolve_tag(tag)]


def currency_variants(tag: str) -> list[str]:
    """Names of the currency format variants for a locale, default first."""
    return list(CURRENCY_VARIANTS[_resolve_tag(tag)])


def build_format_spec(
    tag: str,
    *,
    currency: bool = False,
    variant: str | None = None,
    field: NumberFieldSpec | None = None,
    rounding: RoundingSpec | None = None,
) -> NumStrFormatSpec:
    """Build a NumStrFormatSpec from a locale's default table.

    ``variant`` selects a named currency format (e.g. ``"minus"`` for US) and
    implies ``currency=True``. ``field`` and ``rounding`` override the table's
    defaults.
    """
    key = _resolve_tag(tag)
    if variant is not None:
        variants = CURRENCY_VARIANTS[key]
        if variant not in variants:
            raise UnknownLocale(
                f"Locale {key!r} has no currency variant {variant!r}; available: {', '.join(variants)}"
            )
        spec = variants[variant]
    elif currency:
        spec = COUNTRY_CULTURES[key].currency_format
    else:
        spec = COUNTRY_CULTURES[key].signed_format

    update: dict = {}
    if field is not None:
        update["field"] = field
    if rounding is not None:
        update["rounding"] = rounding
    return spec.model_copy(update=update) if update else spec
