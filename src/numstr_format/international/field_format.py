"""Fixed-width number fields: padding and justification."""
from __future__ import annotations

from ..errors import InvalidFieldLength, InvalidJustification
from ..models.schema import Justification, NumberFieldSpec
from .number_symbols import PlacedNumber

__all__ = ["MAX_FIELD_LENGTH", "apply_field_format", "format_number_field", "validate_field_spec"]

MAX_FIELD_LENGTH = 1_000_000


def validate_field_spec(field: NumberFieldSpec) -> None:
    """Raise InvalidFieldLength when the length is outside -1..MAX_FIELD_LENGTH."""
    if field.length < -1 or field.length > MAX_FIELD_LENGTH:
        raise InvalidFieldLength(
            f"Number field length must be between -1 and {MAX_FIELD_LENGTH:,}, got {field.length}"
        )


def apply_field_format(composed: str, field: NumberFieldSpec) -> str:
    """Pad ``composed`` with spaces to ``field.length`` according to the justification.

    A length of -1, or one that does not exceed the text length, returns the
    text unchanged and the justification is not consulted. Center
    justification puts the odd extra space on the right.
    """
    validate_field_spec(field)

    if field.length == -1 or field.length <= len(composed):
        return composed

    pad_total = field.length - len(composed)
    if field.justification == Justification.RIGHT:
        left_pad, right_pad = pad_total, 0
    elif field.justification == Justification.LEFT:
        left_pad, right_pad = 0, pad_total
    elif field.justification == Justification.CENTER:
        left_pad = pad_total // 2
        right_pad = pad_total - left_pad
    else:
        raise InvalidJustification(
            f"Justification must be left, right or center when padding is required, "
            f"got {field.justification!r}"
        )

    return " " * left_pad + composed + " " * right_pad


def format_number_field(placed: PlacedNumber, field: NumberFieldSpec) -> str:
    """Justify the inside-field text, then attach the outside-field symbols.

    The result is longer than ``field.length`` by the width of the
    outside-field symbols.
    """
    justified = apply_field_format(placed.inside_text, field)
    return placed.outside_leading + justified + placed.outside_trailing
