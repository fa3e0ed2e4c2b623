"""Evaluator for holidays of the tabular Islamic calendar.

Dates follow the arithmetical (civil) Islamic calendar: alternating 30 and 29
day months with leap years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26 and 29 of every
30-year cycle. Observed dates may differ by a day from sighting-based
calendars.
"""

from __future__ import annotations

from datetime import date

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import IslamicHolidayType, RuleSet

from .utils import date_from_ordinal, ordinal_bounds
from .validity import is_active

ISLAMIC_KEY_PREFIX = "islamic."

# Ordinal of 16 July 622 (Julian), day 1 of month 1 of year 1 AH.
ISLAMIC_EPOCH = 227015

ISLAMIC_DATES: dict[IslamicHolidayType, tuple[int, int]] = {
    IslamicHolidayType.NEWYEAR: (1, 1),
    IslamicHolidayType.ASCHURA: (1, 10),
    IslamicHolidayType.MAWLID_AN_NABI: (3, 12),
    IslamicHolidayType.LAILAT_AL_MIRAJ: (7, 27),
    IslamicHolidayType.LAILAT_AL_BARAT: (8, 15),
    IslamicHolidayType.RAMADAN: (9, 1),
    IslamicHolidayType.LAILAT_AL_QADR: (9, 27),
    IslamicHolidayType.ID_AL_FITR: (10, 1),
    IslamicHolidayType.ID_AL_FITR_2: (10, 2),
    IslamicHolidayType.ID_UL_ADHA: (12, 10),
    IslamicHolidayType.ID_UL_ADHA_2: (12, 11),
    IslamicHolidayType.ID_UL_ADHA_3: (12, 12),
}


def ordinal_from_islamic(year: int, month: int, day: int) -> int:
    return (
        ISLAMIC_EPOCH
        - 1
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + 29 * (month - 1)
        + month // 2
        + day
    )


def islamic_year_from_ordinal(ordinal: int) -> int:
    return (30 * (ordinal - ISLAMIC_EPOCH) + 10646) // 10631


def islamic_dates_in_gregorian_year(year: int, month: int, day: int) -> list[date]:
    """Return every Gregorian date in ``year`` matching Islamic ``month``/``day``."""

    first, last = ordinal_bounds(year)
    dates: list[date] = []
    for islamic_year in range(
        max(1, islamic_year_from_ordinal(first)), islamic_year_from_ordinal(last) + 1
    ):
        converted = date_from_ordinal(ordinal_from_islamic(islamic_year, month, day))
        if converted is not None and converted.year == year:
            dates.append(converted)
    return dates


def evaluate_islamic_holidays(year: int, rule_set: RuleSet) -> list[Holiday]:
    """Islamic holidays; a Gregorian year may hold zero, one or two occurrences."""

    holidays: list[Holiday] = []
    for rule in rule_set.islamic_holidays:
        if not is_active(rule, year):
            continue
        month, day = ISLAMIC_DATES[rule.kind]
        for converted in islamic_dates_in_gregorian_year(year, month, day):
            holidays.append(
                Holiday(converted, ISLAMIC_KEY_PREFIX + rule.kind.value, rule.holiday_type)
            )
    return holidays


__all__ = [
    "ISLAMIC_DATES",
    "ISLAMIC_EPOCH",
    "ISLAMIC_KEY_PREFIX",
    "evaluate_islamic_holidays",
    "islamic_dates_in_gregorian_year",
    "islamic_year_from_ordinal",
    "ordinal_from_islamic",
]
