"""Value models describing how a number string is formatted.

Every model is frozen: a format specification is built once, then shared and
read by the formatting functions without ever being mutated. Use
``model_copy(update=...)`` (or the ``with_*`` helpers) to derive a variant.

Range checks that the formatting functions report with their own error kinds
(group sizes, field length, justification) are deliberately not enforced at
construction time; see :mod:`numstr_format.errors`.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class IntegerGroupingType(StrEnum):
    NONE = "none"
    THOUSANDS = "thousands"
    INDIA = "india"
    CHINA = "china"
    CUSTOM = "custom"


class NumericSign(StrEnum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


class FieldPosition(StrEnum):
    INSIDE_FIELD = "inside_field"
    OUTSIDE_FIELD = "outside_field"


class CurrencySignRelativePosition(StrEnum):
    INSIDE_NUMBER_SIGN = "inside_number_sign"
    OUTSIDE_NUMBER_SIGN = "outside_number_sign"
    NONE = "none"


class Justification(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    NONE = "none"


class RoundingType(StrEnum):
    NO_ROUNDING = "no_rounding"
    HALF_UP_WITH_NEG_NUMS = "half_up_with_neg_nums"
    HALF_DOWN_WITH_NEG_NUMS = "half_down_with_neg_nums"
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_TOWARDS_ZERO = "half_towards_zero"
    HALF_TO_EVEN = "half_to_even"
    FLOOR = "floor"
    CEILING = "ceiling"
    TRUNCATE = "truncate"


# ---------------------------------------------------------------------------
# Integer grouping
# ---------------------------------------------------------------------------


class IntegerGroupingPolicy(BaseModel):
    """How integer digits are split into groups and which separator joins them.

    ``group_sizes`` is applied right-to-left. Once exhausted, the last size
    repeats indefinitely, unless ``restart_sequence`` is set, in which case
    the sequence starts over from its first element.
    """

    model_config = ConfigDict(frozen=True)

    grouping_type: IntegerGroupingType = IntegerGroupingType.NONE
    group_sizes: tuple[int, ...] = ()
    separator: str = ""
    restart_sequence: bool = False

    @classmethod
    def none(cls) -> IntegerGroupingPolicy:
        return cls()

    @classmethod
    def uniform(cls, group_size: int, separator: str = ",") -> IntegerGroupingPolicy:
        grouping_type = IntegerGroupingType.THOUSANDS if group_size == 3 else IntegerGroupingType.CUSTOM
        return cls(grouping_type=grouping_type, group_sizes=(group_size,), separator=separator)

    @classmethod
    def custom(
        cls,
        group_sizes: tuple[int, ...] | list[int],
        separator: str = ",",
        restart_sequence: bool = False,
    ) -> IntegerGroupingPolicy:
        return cls(
            grouping_type=IntegerGroupingType.CUSTOM,
            group_sizes=tuple(group_sizes),
            separator=separator,
            restart_sequence=restart_sequence,
        )

    @classmethod
    def thousands(cls, separator: str = ",") -> IntegerGroupingPolicy:
        return cls(grouping_type=IntegerGroupingType.THOUSANDS, group_sizes=(3,), separator=separator)

    @classmethod
    def india(cls, separator: str = ",") -> IntegerGroupingPolicy:
        """India numbering: a first group of three, then groups of two."""
        return cls(grouping_type=IntegerGroupingType.INDIA, group_sizes=(3, 2), separator=separator)

    @classmethod
    def china(cls, separator: str = ",") -> IntegerGroupingPolicy:
        """Chinese numbering: groups of four digits."""
        return cls(grouping_type=IntegerGroupingType.CHINA, group_sizes=(4,), separator=separator)


# ---------------------------------------------------------------------------
# Sign and currency symbols
# ---------------------------------------------------------------------------


class NumberSignSymbolSpec(BaseModel):
    """Leading/trailing symbols for one sign case (positive, negative or zero)."""

    model_config = ConfigDict(frozen=True)

    leading_text: str = ""
    trailing_text: str = ""
    field_position: FieldPosition = FieldPosition.INSIDE_FIELD

    @property
    def is_nop(self) -> bool:
        return not self.leading_text and not self.trailing_text

    @classmethod
    def nop(cls) -> NumberSignSymbolSpec:
        return cls()

    @classmethod
    def leading(
        cls, text: str, field_position: FieldPosition = FieldPosition.INSIDE_FIELD
    ) -> NumberSignSymbolSpec:
        return cls(leading_text=text, field_position=field_position)

    @classmethod
    def trailing(
        cls, text: str, field_position: FieldPosition = FieldPosition.INSIDE_FIELD
    ) -> NumberSignSymbolSpec:
        return cls(trailing_text=text, field_position=field_position)

    @classmethod
    def surrounding(
        cls,
        leading_text: str = "(",
        trailing_text: str = ")",
        field_position: FieldPosition = FieldPosition.INSIDE_FIELD,
    ) -> NumberSignSymbolSpec:
        return cls(leading_text=leading_text, trailing_text=trailing_text, field_position=field_position)


class CurrencySymbolSpec(BaseModel):
    """Leading/trailing currency symbols and their placement flags.

    ``currency_sign_relative_position`` only matters when ``field_position``
    matches the field position of the active number sign symbols.
    """

    model_config = ConfigDict(frozen=True)

    leading_text: str = ""
    trailing_text: str = ""
    field_position: FieldPosition = FieldPosition.INSIDE_FIELD
    currency_sign_relative_position: CurrencySignRelativePosition = (
        CurrencySignRelativePosition.OUTSIDE_NUMBER_SIGN
    )

    @property
    def is_nop(self) -> bool:
        return not self.leading_text and not self.trailing_text

    @classmethod
    def nop(cls) -> CurrencySymbolSpec:
        return cls(currency_sign_relative_position=CurrencySignRelativePosition.NONE)


# ---------------------------------------------------------------------------
# Field, rounding and the aggregate spec
# ---------------------------------------------------------------------------


class NumberFieldSpec(BaseModel):
    """Fixed-width text field. A length of -1 means "as long as the content"."""

    model_config = ConfigDict(frozen=True)

    length: int = -1
    justification: Justification = Justification.RIGHT

    @classmethod
    def nop(cls) -> NumberFieldSpec:
        return cls()


class RoundingSpec(BaseModel):
    """Rounding applied to the fractional digits before formatting."""

    model_config = ConfigDict(frozen=True)

    rounding_type: RoundingType = RoundingType.NO_ROUNDING
    decimal_places: int = Field(default=0, ge=0)


class NumStrFormatSpec(BaseModel):
    """Everything needed to turn a numeric value into a formatted number string."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = "."
    integer_grouping: IntegerGroupingPolicy = Field(default_factory=IntegerGroupingPolicy.none)
    positive_sign: NumberSignSymbolSpec = Field(default_factory=NumberSignSymbolSpec.nop)
    negative_sign: NumberSignSymbolSpec = Field(
        default_factory=lambda: NumberSignSymbolSpec.leading("-")
    )
    zero_sign: NumberSignSymbolSpec = Field(default_factory=NumberSignSymbolSpec.nop)
    currency: CurrencySymbolSpec = Field(default_factory=CurrencySymbolSpec.nop)
    field: NumberFieldSpec = Field(default_factory=NumberFieldSpec.nop)
    rounding: RoundingSpec = Field(default_factory=RoundingSpec)

    def sign_spec_for(self, sign: NumericSign) -> NumberSignSymbolSpec:
        if sign == NumericSign.NEGATIVE:
            return self.negative_sign
        if sign == NumericSign.POSITIVE:
            return self.positive_sign
        return self.zero_sign

    def with_field(self, field: NumberFieldSpec) -> NumStrFormatSpec:
        return self.model_copy(update={"field": field})

    def with_rounding(self, rounding: RoundingSpec) -> NumStrFormatSpec:
        return self.model_copy(update={"rounding": rounding})


class CountryCulture(BaseModel):
    """Built-in number formatting conventions and metadata for one country."""

    model_config = ConfigDict(frozen=True)

    locale_tag: str
    country_name: str
    alternate_names: tuple[str, ...] = ()
    alpha2: str
    alpha3: str
    numeric_code: str
    currency_code: str
    currency_name: str
    currency_symbol: str
    minor_currency_name: str = ""
    currency_decimal_digits: int = 2
    signed_format: NumStrFormatSpec
    currency_format: NumStrFormatSpec
