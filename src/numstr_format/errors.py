"""Error kinds raised by the number string formatting functions.

Every error is a deterministic input-validation failure. They all derive from
``ValueError`` so callers that only care about "bad input" can catch that.
"""

from __future__ import annotations


class NumStrFormatError(ValueError):
    """Base class for all number string formatting errors."""


class InvalidGroupingPolicy(NumStrFormatError):
    """An integer grouping policy has no group sizes or a non-positive size."""


class InvalidInput(NumStrFormatError):
    """Non-digit characters where digits were expected, or an unusable value."""


class MissingNegativeSign(InvalidInput):
    """A negative value was formatted but no negative sign symbols are configured."""


class InvalidFieldLength(NumStrFormatError):
    """A number field length is outside the range -1..1,000,000."""


class InvalidJustification(NumStrFormatError):
    """Padding is required but the justification is not left, right or center."""


class UnknownLocale(NumStrFormatError, LookupError):
    """No built-in country/culture table exists for the requested locale tag."""
