"""Placement of number sign and currency symbols around a formatted number.

Symbols are split into two regions. Inside-field symbols become part of the
text that is justified within the number field; outside-field symbols are
attached after justification and make the result longer than the field.

When the currency symbols and the sign symbols share a field position the
currency's relative position decides the nesting order::

    outside_number_sign   leading: [currency][sign]digits   trailing: digits[sign][currency]
    inside_number_sign    leading: [sign][currency]digits   trailing: digits[currency][sign]

When the field positions differ, each symbol set is placed in its own region
and the relative position is ignored.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidInput, MissingNegativeSign
from ..models.schema import (
    CurrencySignRelativePosition,
    CurrencySymbolSpec,
    FieldPosition,
    IntegerGroupingPolicy,
    NumberSignSymbolSpec,
    NumericSign,
)
from .integer_grouping import format_integer_group, is_digit_string

__all__ = ["PlacedNumber", "place_number_symbols", "assemble_signed_number", "compose_digits"]


@dataclass(frozen=True)
class PlacedNumber:
    """A number string with its symbols sorted into field regions."""

    outside_leading: str
    inside_text: str
    outside_trailing: str

    def __str__(self) -> str:
        return self.outside_leading + self.inside_text + self.outside_trailing


def compose_digits(
    integer_part: str,
    decimal_separator: str,
    fractional_part: str,
    grouping: IntegerGroupingPolicy | None = None,
) -> str:
    """Join integer and fractional digits, grouping the integer part when a policy is given.

    An empty integer part is rendered as ``"0"``. The decimal separator only
    appears when there are fractional digits.
    """
    if not is_digit_string(integer_part):
        raise InvalidInput(f"Integer part contains non-digit characters: {integer_part!r}")
    if not is_digit_string(fractional_part):
        raise InvalidInput(f"Fractional part contains non-digit characters: {fractional_part!r}")
    if fractional_part and not decimal_separator:
        raise InvalidInput(
            "Fractional digits are present but the decimal separator is empty"
        )

    if not integer_part:
        number = "0"
    elif grouping is not None:
        number = format_integer_group(integer_part, grouping)
    else:
        number = integer_part

    if fractional_part:
        number += decimal_separator + fractional_part
    return number


def place_number_symbols(
    sign: NumericSign,
    sign_spec: NumberSignSymbolSpec,
    currency_spec: CurrencySymbolSpec,
    number_text: str,
) -> PlacedNumber:
    """Sort sign and currency symbols into inside/outside regions around ``number_text``.

    ``number_text`` is the already composed digit run (grouped integer digits,
    decimal separator and fractional digits).
    """
    try:
        sign = NumericSign(sign)
    except ValueError as exc:
        raise InvalidInput(f"Unknown numeric sign: {sign!r}") from exc

    if sign == NumericSign.NEGATIVE and sign_spec.is_nop:
        raise MissingNegativeSign(
            "The numeric value is negative but no negative number sign symbols are configured"
        )

    # index 0 = inside field, index 1 = outside field
    leading = ["", ""]
    trailing = ["", ""]

    sign_region = _region(sign_spec.field_position)
    leading[sign_region] = sign_spec.leading_text
    trailing[sign_region] = sign_spec.trailing_text

    if not currency_spec.is_nop:
        currency_region = _region(currency_spec.field_position)
        if currency_region == sign_region:
            if (
                currency_spec.currency_sign_relative_position
                == CurrencySignRelativePosition.INSIDE_NUMBER_SIGN
            ):
                leading[currency_region] = leading[currency_region] + currency_spec.leading_text
                trailing[currency_region] = currency_spec.trailing_text + trailing[currency_region]
            else:
                leading[currency_region] = currency_spec.leading_text + leading[currency_region]
                trailing[currency_region] = trailing[currency_region] + currency_spec.trailing_text
        else:
            leading[currency_region] = currency_spec.leading_text
            trailing[currency_region] = currency_spec.trailing_text

    return PlacedNumber(
        outside_leading=leading[1],
        inside_text=leading[0] + number_text + trailing[0],
        outside_trailing=trailing[1],
    )


def assemble_signed_number(
    sign: NumericSign,
    sign_spec: NumberSignSymbolSpec,
    currency_spec: CurrencySymbolSpec,
    integer_part: str,
    decimal_separator: str,
    fractional_part: str,
    grouping: IntegerGroupingPolicy | None = None,
) -> str:
    """Compose leading symbols + integer digits + decimal separator + fraction + trailing symbols.

    The integer digits are grouped with ``grouping`` when one is supplied.
    Field justification is not applied here; outside-field symbols simply
    end up at the extreme edges of the result.
    """
    number_text = compose_digits(integer_part, decimal_separator, fractional_part, grouping)
    return str(place_number_symbols(sign, sign_spec, currency_spec, number_text))


def _region(position: FieldPosition) -> int:
    return 1 if position == FieldPosition.OUTSIDE_FIELD else 0
