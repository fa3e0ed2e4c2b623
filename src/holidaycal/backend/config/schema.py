"""Pydantic models describing the holiday calendar configuration schema."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    computed_field,
    field_validator,
    model_validator,
)


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Weekday(str, Enum):
    """Days of the week, ordered to match :meth:`datetime.date.weekday`."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def number(self) -> int:
        return _WEEKDAY_ORDER.index(self)


_WEEKDAY_ORDER = tuple(Weekday)


class HolidayType(str, Enum):
    """Classifier attached to every emitted holiday."""

    OFFICIAL_HOLIDAY = "OFFICIAL_HOLIDAY"
    UNOFFICIAL_HOLIDAY = "UNOFFICIAL_HOLIDAY"


class When(str, Enum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"


class With(str, Enum):
    NEXT = "NEXT"
    PREVIOUS = "PREVIOUS"


class Which(str, Enum):
    FIRST = "FIRST"
    SECOND = "SECOND"
    THIRD = "THIRD"
    FOURTH = "FOURTH"
    LAST = "LAST"


class ChronologyType(str, Enum):
    """Calendar system used to compute Easter Sunday."""

    JULIAN = "JULIAN"
    GREGORIAN = "GREGORIAN"


class ChristianHolidayType(str, Enum):
    CLEAN_MONDAY = "CLEAN_MONDAY"
    SHROVE_MONDAY = "SHROVE_MONDAY"
    MARDI_GRAS = "MARDI_GRAS"
    CARNIVAL = "CARNIVAL"
    ASH_WEDNESDAY = "ASH_WEDNESDAY"
    MAUNDY_THURSDAY = "MAUNDY_THURSDAY"
    GOOD_FRIDAY = "GOOD_FRIDAY"
    EASTER_SATURDAY = "EASTER_SATURDAY"
    EASTER = "EASTER"
    EASTER_MONDAY = "EASTER_MONDAY"
    EASTER_TUESDAY = "EASTER_TUESDAY"
    GENERAL_PRAYER_DAY = "GENERAL_PRAYER_DAY"
    ASCENSION_DAY = "ASCENSION_DAY"
    PENTECOST = "PENTECOST"
    WHIT_SUNDAY = "WHIT_SUNDAY"
    WHIT_MONDAY = "WHIT_MONDAY"
    PENTECOST_MONDAY = "PENTECOST_MONDAY"
    CORPUS_CHRISTI = "CORPUS_CHRISTI"
    SACRED_HEART = "SACRED_HEART"


class IslamicHolidayType(str, Enum):
    NEWYEAR = "NEWYEAR"
    ASCHURA = "ASCHURA"
    MAWLID_AN_NABI = "MAWLID_AN_NABI"
    LAILAT_AL_MIRAJ = "LAILAT_AL_MIRAJ"
    LAILAT_AL_BARAT = "LAILAT_AL_BARAT"
    RAMADAN = "RAMADAN"
    LAILAT_AL_QADR = "LAILAT_AL_QADR"
    ID_AL_FITR = "ID_AL_FITR"
    ID_AL_FITR_2 = "ID_AL_FITR_2"
    ID_UL_ADHA = "ID_UL_ADHA"
    ID_UL_ADHA_2 = "ID_UL_ADHA_2"
    ID_UL_ADHA_3 = "ID_UL_ADHA_3"


class HinduHolidayType(str, Enum):
    HOLI = "HOLI"
    DIWALI = "DIWALI"


class EthiopianOrthodoxHolidayType(str, Enum):
    ENKUTATASH = "ENKUTATASH"
    MESKEL = "MESKEL"
    TIMKAT = "TIMKAT"


EVERY_YEAR = "EVERY_YEAR"
ODD_YEARS = "ODD_YEARS"
EVEN_YEARS = "EVEN_YEARS"
YEAR_CYCLES = {
    "2_YEARS": 2,
    "3_YEARS": 3,
    "4_YEARS": 4,
    "5_YEARS": 5,
    "6_YEARS": 6,
}

_MONTH_NAMES = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)

# Longest possible month lengths; February allows the leap day.
_MAX_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _coerce_month(value: Any) -> Any:
    if isinstance(value, str):
        token = value.strip().upper()
        if token in _MONTH_NAMES:
            return _MONTH_NAMES.index(token) + 1
        if token.isdigit():
            return int(token)
        raise ConfigurationError(f"Unknown month '{value}'")
    return value


def _check_day_of_month(month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise ConfigurationError(f"Month {month} must be between 1 and 12")
    if not 1 <= day <= _MAX_DAYS_IN_MONTH[month - 1]:
        raise ConfigurationError(
            f"Day {day} does not exist in {_MONTH_NAMES[month - 1].title()}"
        )


class FixedDate(ImmutableModel):
    """A month/day pair resolved against the requested year."""

    month: int
    day: int

    @field_validator("month", mode="before")
    @classmethod
    def _coerce_month_name(cls, value: Any) -> Any:
        return _coerce_month(value)

    @model_validator(mode="after")
    def _validate_day(self) -> FixedDate:
        _check_day_of_month(self.month, self.day)
        return self


class MovingCondition(ImmutableModel):
    """Move a date falling on ``substitute`` to the ``with_`` ``weekday``."""

    substitute: Weekday
    with_: With = Field(alias="with")
    weekday: Weekday


class HolidayRule(ImmutableModel):
    """Attributes shared by every holiday definition."""

    description_key: str = Field(default="", alias="descriptionPropertiesKey")
    holiday_type: HolidayType = Field(
        default=HolidayType.OFFICIAL_HOLIDAY, alias="localizedType"
    )
    valid_from: int | None = Field(default=None, alias="validFrom")
    valid_to: int | None = Field(default=None, alias="validTo")
    every: str | None = None


class MoveableRule(HolidayRule):
    """Holiday definitions that honour moving conditions."""

    moving_conditions: tuple[MovingCondition, ...] = Field(
        default_factory=tuple, alias="movingCondition"
    )


class FixedRule(MoveableRule):
    month: int
    day: int

    @field_validator("month", mode="before")
    @classmethod
    def _coerce_month_name(cls, value: Any) -> Any:
        return _coerce_month(value)

    @model_validator(mode="after")
    def _validate_day(self) -> FixedRule:
        _check_day_of_month(self.month, self.day)
        return self


class RelativeToFixedRule(HolidayRule):
    """A weekday or day count before/after a fixed date."""

    date: FixedDate
    when: When = When.AFTER
    weekday: Weekday | None = None
    days: int | None = Field(default=None, ge=0)


class RelativeToEasterSundayRule(HolidayRule):
    chronology: ChronologyType | None = None
    days: int = 0


class ChristianHolidayRule(MoveableRule):
    kind: ChristianHolidayType = Field(alias="type")
    chronology: ChronologyType | None = None


class FixedWeekdayInMonthRule(HolidayRule):
    which: Which
    weekday: Weekday
    month: int

    @field_validator("month", mode="before")
    @classmethod
    def _coerce_month_name(cls, value: Any) -> Any:
        return _coerce_month(value)

    @field_validator("month")
    @classmethod
    def _validate_month(cls, value: int) -> int:
        if not 1 <= value <= 12:
            raise ConfigurationError(f"Month {value} must be between 1 and 12")
        return value


class RelativeToWeekdayInMonthRule(HolidayRule):
    weekday: Weekday
    when: When
    fixed_weekday: FixedWeekdayInMonthRule = Field(alias="fixedWeekday")


class FixedWeekdayBetweenFixedRule(HolidayRule):
    weekday: Weekday
    from_: FixedDate = Field(alias="from")
    to: FixedDate


class FixedWeekdayRelativeToFixedRule(HolidayRule):
    which: Which = Which.FIRST
    weekday: Weekday
    when: When
    day: FixedDate


class IslamicHolidayRule(HolidayRule):
    kind: IslamicHolidayType = Field(alias="type")


class HinduHolidayRule(HolidayRule):
    kind: HinduHolidayType = Field(alias="type")


class EthiopianOrthodoxHolidayRule(HolidayRule):
    kind: EthiopianOrthodoxHolidayType = Field(alias="type")


class RuleSet(ImmutableModel):
    """Holiday definitions owned directly by one hierarchy level."""

    fixed: tuple[FixedRule, ...] = Field(default_factory=tuple)
    relative_to_fixed: tuple[RelativeToFixedRule, ...] = Field(
        default_factory=tuple, alias="relativeToFixed"
    )
    relative_to_easter_sunday: tuple[RelativeToEasterSundayRule, ...] = Field(
        default_factory=tuple, alias="relativeToEasterSunday"
    )
    christian_holidays: tuple[ChristianHolidayRule, ...] = Field(
        default_factory=tuple, alias="christianHoliday"
    )
    fixed_weekday_in_month: tuple[FixedWeekdayInMonthRule, ...] = Field(
        default_factory=tuple, alias="fixedWeekday"
    )
    relative_to_weekday_in_month: tuple[RelativeToWeekdayInMonthRule, ...] = Field(
        default_factory=tuple, alias="relativeToWeekdayInMonth"
    )
    fixed_weekday_between_fixed: tuple[FixedWeekdayBetweenFixedRule, ...] = Field(
        default_factory=tuple, alias="fixedWeekdayBetweenFixed"
    )
    fixed_weekday_relative_to_fixed: tuple[FixedWeekdayRelativeToFixedRule, ...] = Field(
        default_factory=tuple, alias="fixedWeekdayRelativeToFixed"
    )
    islamic_holidays: tuple[IslamicHolidayRule, ...] = Field(
        default_factory=tuple, alias="islamicHoliday"
    )
    hindu_holidays: tuple[HinduHolidayRule, ...] = Field(
        default_factory=tuple, alias="hinduHoliday"
    )
    ethiopian_orthodox_holidays: tuple[EthiopianOrthodoxHolidayRule, ...] = Field(
        default_factory=tuple, alias="ethiopianOrthodoxHoliday"
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_sections(cls, data: Any) -> Any:
        # YAML renders an empty section as ``None``
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        if data is None:
            return {}
        return data

    def all_rules(self) -> tuple[HolidayRule, ...]:
        rules: list[HolidayRule] = []
        for name in type(self).model_fields:
            rules.extend(getattr(self, name))
        return tuple(rules)


class ConfigurationNode(ImmutableModel):
    """One level of the calendar hierarchy (country, state, city, ...)."""

    hierarchy: str = Field(min_length=1)
    description: str = ""
    holidays: RuleSet = Field(default_factory=RuleSet)
    sub_configurations: tuple[ConfigurationNode, ...] = Field(
        default_factory=tuple, alias="subConfigurations"
    )

    @field_validator("holidays", mode="before")
    @classmethod
    def _default_holidays(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("sub_configurations", mode="before")
    @classmethod
    def _default_children(cls, value: Any) -> Any:
        return () if value is None else value


ConfigurationNode.model_rebuild()


class CalendarManifestEntry(ImmutableModel):
    """Entry describing a shipped calendar in the manifest."""

    id: str
    filename: str | None = None
    description: str | None = None

    @computed_field
    @property
    def resolved_filename(self) -> str:
        return self.filename or f"{self.id}.yaml"


class CalendarManifest(ImmutableModel):
    """Manifest describing the available calendar configuration files."""

    calendars: tuple[CalendarManifestEntry, ...]

    @model_validator(mode="after")
    def _validate_calendars(self) -> CalendarManifest:
        seen: set[str] = set()
        for entry in self.calendars:
            key = entry.id.casefold()
            if key in seen:
                raise ConfigurationError(
                    f"Duplicate calendar '{entry.id}' declared in the configuration manifest"
                )
            seen.add(key)
        return self

    def get_entry(self, calendar_id: str) -> CalendarManifestEntry:
        for entry in self.calendars:
            if entry.id.casefold() == calendar_id.casefold():
                return entry
        raise KeyError(calendar_id)

    @computed_field
    @property
    def supported_calendars(self) -> tuple[str, ...]:
        return tuple(entry.id for entry in self.calendars)


__all__ = [
    "EVEN_YEARS",
    "EVERY_YEAR",
    "ODD_YEARS",
    "YEAR_CYCLES",
    "CalendarManifest",
    "CalendarManifestEntry",
    "ChristianHolidayRule",
    "ChristianHolidayType",
    "ChronologyType",
    "ConfigurationError",
    "ConfigurationNode",
    "EthiopianOrthodoxHolidayRule",
    "EthiopianOrthodoxHolidayType",
    "FixedDate",
    "FixedRule",
    "FixedWeekdayBetweenFixedRule",
    "FixedWeekdayInMonthRule",
    "FixedWeekdayRelativeToFixedRule",
    "HinduHolidayRule",
    "HinduHolidayType",
    "HolidayRule",
    "HolidayType",
    "ImmutableModel",
    "IslamicHolidayRule",
    "IslamicHolidayType",
    "MoveableRule",
    "MovingCondition",
    "RelativeToEasterSundayRule",
    "RelativeToFixedRule",
    "RelativeToWeekdayInMonthRule",
    "RuleSet",
    "ValidationError",
    "Weekday",
    "When",
    "Which",
    "With",
]
