"""Evaluator for Ethiopian Orthodox holidays (Coptic/Ethiopian arithmetic)."""

from __future__ import annotations

from datetime import date

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import EthiopianOrthodoxHolidayType, RuleSet

from .utils import date_from_ordinal, ordinal_bounds
from .validity import is_active

ETHIOPIAN_ORTHODOX_KEY_PREFIX = "ethiopian.orthodox."

# Ordinal of 29 August 284 (Julian), the first day of the Coptic era.
COPTIC_EPOCH = 103605

ETHIOPIAN_ORTHODOX_DATES: dict[EthiopianOrthodoxHolidayType, tuple[int, int]] = {
    EthiopianOrthodoxHolidayType.ENKUTATASH: (1, 1),
    EthiopianOrthodoxHolidayType.MESKEL: (1, 17),
    EthiopianOrthodoxHolidayType.TIMKAT: (5, 11),
}


def ordinal_from_coptic(year: int, month: int, day: int) -> int:
    return COPTIC_EPOCH - 1 + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day


def coptic_year_from_ordinal(ordinal: int) -> int:
    return (4 * (ordinal - COPTIC_EPOCH) + 1463) // 1461


def coptic_dates_in_gregorian_year(year: int, month: int, day: int) -> list[date]:
    """Return every Gregorian date in ``year`` matching Coptic ``month``/``day``."""

    first, last = ordinal_bounds(year)
    dates: list[date] = []
    for coptic_year in range(
        max(1, coptic_year_from_ordinal(first)), coptic_year_from_ordinal(last) + 1
    ):
        converted = date_from_ordinal(ordinal_from_coptic(coptic_year, month, day))
        if converted is not None and converted.year == year:
            dates.append(converted)
    return dates


def evaluate_ethiopian_orthodox_holidays(year: int, rule_set: RuleSet) -> list[Holiday]:
    holidays: list[Holiday] = []
    for rule in rule_set.ethiopian_orthodox_holidays:
        if not is_active(rule, year):
            continue
        month, day = ETHIOPIAN_ORTHODOX_DATES[rule.kind]
        for converted in coptic_dates_in_gregorian_year(year, month, day):
            holidays.append(
                Holiday(
                    converted,
                    ETHIOPIAN_ORTHODOX_KEY_PREFIX + rule.kind.value,
                    rule.holiday_type,
                )
            )
    return holidays


__all__ = [
    "COPTIC_EPOCH",
    "ETHIOPIAN_ORTHODOX_DATES",
    "ETHIOPIAN_ORTHODOX_KEY_PREFIX",
    "coptic_dates_in_gregorian_year",
    "coptic_year_from_ordinal",
    "evaluate_ethiopian_orthodox_holidays",
    "ordinal_from_coptic",
]
