"""Number formatting pipeline: value → round → sign/digits → symbols → field."""
from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

import structlog

from .config import Settings
from .errors import InvalidInput, NumStrFormatError
from .international.field_format import format_number_field, validate_field_spec
from .international.integer_grouping import validate_grouping_policy
from .international.locale_defaults import build_format_spec
from .international.number_symbols import compose_digits, place_number_symbols
from .international.rounding import round_decimal
from .models.schema import NumberFieldSpec, NumericSign, NumStrFormatSpec, RoundingSpec

logger = structlog.get_logger(__name__)

Number = int | float | Decimal | str


def to_decimal(value: Number) -> Decimal:
    """Convert an int, float, Decimal or numeric literal string to a finite Decimal.

    Strings must be plain numeric literals such as ``"-1234.5"``; locale
    formatted input ("1.234,50") is not parsed.
    """
    if isinstance(value, bool):
        raise InvalidInput(f"Boolean is not a numeric value: {value!r}")
    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(repr(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            raise InvalidInput(f"Unsupported numeric type {type(value).__name__}: {value!r}")
    except InvalidOperation as exc:
        raise InvalidInput(f"Not a numeric value: {value!r}") from exc

    if not result.is_finite():
        raise InvalidInput(f"Numeric value must be finite: {value!r}")
    return result


def split_decimal(value: Decimal) -> tuple[NumericSign, str, str]:
    """Split a Decimal into its sign, integer digits and fractional digits.

    Leading zeros are dropped from the integer digits (zero becomes ``""``);
    trailing fractional zeros are kept. Negative zero counts as zero.
    """
    if value.is_zero():
        sign = NumericSign.ZERO
    elif value.is_signed():
        sign = NumericSign.NEGATIVE
    else:
        sign = NumericSign.POSITIVE

    text = format(abs(value), "f")
    integer_digits, _, fractional_digits = text.partition(".")
    return sign, integer_digits.lstrip("0"), fractional_digits


def format_number(value: Number, spec: NumStrFormatSpec) -> str:
    """Format ``value`` according to ``spec``.

    Raises a :class:`~numstr_format.errors.NumStrFormatError` subclass when
    the value or the specification is unusable.
    """
    number = to_decimal(value)
    try:
        number = round_decimal(number, spec.rounding)
    except InvalidOperation as exc:
        raise InvalidInput(
            f"Cannot round {number} to {spec.rounding.decimal_places} decimal places"
        ) from exc

    sign, integer_digits, fractional_digits = split_decimal(number)
    number_text = compose_digits(
        integer_digits, spec.decimal_separator, fractional_digits, spec.integer_grouping
    )
    placed = place_number_symbols(sign, spec.sign_spec_for(sign), spec.currency, number_text)
    return format_number_field(placed, spec.field)


class NumberFormatter:
    """Formats numbers with one shared, immutable NumStrFormatSpec."""

    def __init__(self, spec: NumStrFormatSpec):
        validate_grouping_policy(spec.integer_grouping)
        validate_field_spec(spec.field)
        self.spec = spec

    @classmethod
    def from_locale(
        cls,
        tag: str,
        *,
        currency: bool = False,
        variant: str | None = None,
        field: NumberFieldSpec | None = None,
        rounding: RoundingSpec | None = None,
    ) -> NumberFormatter:
        return cls(
            build_format_spec(tag, currency=currency, variant=variant, field=field, rounding=rounding)
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> NumberFormatter:
        field = NumberFieldSpec(
            length=settings.default_field_length,
            justification=settings.default_justification,
        )
        logger.info(
            "formatter_init",
            locale=settings.default_locale,
            currency=settings.default_currency,
            variant=settings.default_currency_variant,
            field_length=field.length,
        )
        return cls.from_locale(
            settings.default_locale,
            currency=settings.default_currency,
            variant=settings.default_currency_variant,
            field=field,
        )

    def format(self, value: Number) -> str:
        try:
            result = format_number(value, self.spec)
        except NumStrFormatError as e:
            logger.warning("number_format_failed", value=str(value), error=str(e), error_type=type(e).__name__)
            raise
        logger.debug("number_formatted", value=str(value), result=result)
        return result

    def format_many(self, values: Iterable[Number]) -> list[str]:
        return [self.format(v) for v in values]
