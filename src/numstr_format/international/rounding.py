"""Rounding of numeric values to a fixed number of fractional digits."""
from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Decimal,
    localcontext,
)

from ..models.schema import RoundingSpec, RoundingType

# decimal's ROUND_HALF_UP rounds ties away from zero and ROUND_HALF_DOWN rounds
# them towards zero. The "with negative numbers" variants tie towards +inf / -inf.
DECIMAL_ROUNDING_MODES: dict[RoundingType, str] = {
    RoundingType.HALF_AWAY_FROM_ZERO: ROUND_HALF_UP,
    RoundingType.HALF_TOWARDS_ZERO: ROUND_HALF_DOWN,
    RoundingType.HALF_TO_EVEN: ROUND_HALF_EVEN,
    RoundingType.FLOOR: ROUND_FLOOR,
    RoundingType.CEILING: ROUND_CEILING,
    RoundingType.TRUNCATE: ROUND_DOWN,
}


def _decimal_mode(rounding_type: RoundingType, value: Decimal) -> str:
    if rounding_type == RoundingType.HALF_UP_WITH_NEG_NUMS:
        return ROUND_HALF_DOWN if value.is_signed() else ROUND_HALF_UP
    if rounding_type == RoundingType.HALF_DOWN_WITH_NEG_NUMS:
        return ROUND_HALF_UP if value.is_signed() else ROUND_HALF_DOWN
    return DECIMAL_ROUNDING_MODES[rounding_type]


def round_decimal(value: Decimal, spec: RoundingSpec) -> Decimal:
    """Round ``value`` to ``spec.decimal_places`` using ``spec.rounding_type``.

    ``no_rounding`` returns the value unchanged. Otherwise the result always
    carries exactly ``decimal_places`` fractional digits, so 7 rounded to two
    places is ``Decimal("7.00")``.

    >>> round_decimal(Decimal("2.5"), RoundingSpec(rounding_type=RoundingType.HALF_TO_EVEN))
    Decimal('2')
    >>> round_decimal(Decimal("-2.5"), RoundingSpec(rounding_type=RoundingType.HALF_UP_WITH_NEG_NUMS))
    Decimal('-2')
    """
    if spec.rounding_type == RoundingType.NO_ROUNDING:
        return value
    exponent = Decimal(1).scaleb(-spec.decimal_places)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the requested places
        ctx.prec = max(ctx.prec, value.adjusted() + 1 + spec.decimal_places)
        return value.quantize(exponent, rounding=_decimal_mode(spec.rounding_type, value))
