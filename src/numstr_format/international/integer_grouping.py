"""Integer digit grouping (thousands, India, Chinese and custom sequences).

Examples:
>>> format_integer_group("1000000000", IntegerGroupingPolicy.thousands())
'1,000,000,000'
>>> format_integer_group("6789000000000000", IntegerGroupingPolicy.india())
'6,78,90,00,00,00,00,000'
>>> format_integer_group("12345678902345", IntegerGroupingPolicy.china())
'12,3456,7890,2345'
"""
from __future__ import annotations

from ..errors import InvalidGroupingPolicy, InvalidInput
from ..models.schema import IntegerGroupingPolicy, IntegerGroupingType

__all__ = ["format_integer_group", "validate_grouping_policy", "is_digit_string"]

_DIGITS = frozenset("0123456789")


def is_digit_string(text: str) -> bool:
    """True when every character is an ASCII digit ('0'-'9')."""
    return all(ch in _DIGITS for ch in text)


def validate_grouping_policy(policy: IntegerGroupingPolicy) -> None:
    """Raise InvalidGroupingPolicy unless every group size is a positive integer."""
    if policy.grouping_type == IntegerGroupingType.NONE:
        return
    if not policy.group_sizes:
        raise InvalidGroupingPolicy(
            f"Grouping policy '{policy.grouping_type}' has no group sizes"
        )
    bad = [size for size in policy.group_sizes if size <= 0]
    if bad:
        raise InvalidGroupingPolicy(
            f"Group sizes must be positive integers, got {list(policy.group_sizes)}"
        )


def format_integer_group(digits: str, policy: IntegerGroupingPolicy) -> str:
    """Insert group separators into a run of integer digits.

    Digits are consumed from the right. Group sizes are taken from
    ``policy.group_sizes`` in order; the last size repeats once the sequence
    is exhausted (or the sequence restarts when ``restart_sequence`` is set).
    A separator is written before every completed group that does not reach
    the start of the string.
    """
    if not digits:
        return ""

    if not is_digit_string(digits):
        raise InvalidInput(f"Integer digits contain non-digit characters: {digits!r}")

    if policy.grouping_type == IntegerGroupingType.NONE:
        return digits

    validate_grouping_policy(policy)

    sizes = policy.group_sizes
    last_idx = len(sizes) - 1
    size_idx = 0
    group_size = sizes[0]

    if len(digits) <= group_size:
        return digits

    groups: list[str] = []
    end = len(digits)
    while end > 0:
        start = max(0, end - group_size)
        groups.append(digits[start:end])
        end = start

        if size_idx < last_idx:
            size_idx += 1
        elif policy.restart_sequence:
            size_idx = 0
        group_size = sizes[size_idx]

    groups.reverse()
    return policy.separator.join(groups)
