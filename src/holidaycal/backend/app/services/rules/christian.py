"""Evaluators for holidays relative to Easter Sunday."""

from __future__ import annotations

from datetime import timedelta

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import ChristianHolidayType, RuleSet

from .easter import easter_sunday
from .moving import apply_move_if_needed
from .validity import is_active

CHRISTIAN_KEY_PREFIX = "christian."

EASTER_OFFSETS: dict[ChristianHolidayType, int] = {
    ChristianHolidayType.CLEAN_MONDAY: -48,
    ChristianHolidayType.SHROVE_MONDAY: -48,
    ChristianHolidayType.MARDI_GRAS: -47,
    ChristianHolidayType.CARNIVAL: -47,
    ChristianHolidayType.ASH_WEDNESDAY: -46,
    ChristianHolidayType.MAUNDY_THURSDAY: -3,
    ChristianHolidayType.GOOD_FRIDAY: -2,
    ChristianHolidayType.EASTER_SATURDAY: -1,
    ChristianHolidayType.EASTER: 0,
    ChristianHolidayType.EASTER_MONDAY: 1,
    ChristianHolidayType.EASTER_TUESDAY: 2,
    ChristianHolidayType.GENERAL_PRAYER_DAY: 26,
    ChristianHolidayType.ASCENSION_DAY: 39,
    ChristianHolidayType.PENTECOST: 49,
    ChristianHolidayType.WHIT_SUNDAY: 49,
    ChristianHolidayType.WHIT_MONDAY: 50,
    ChristianHolidayType.PENTECOST_MONDAY: 50,
    ChristianHolidayType.CORPUS_CHRISTI: 60,
    ChristianHolidayType.SACRED_HEART: 68,
}


def evaluate_relative_to_easter_sunday(year: int, rule_set: RuleSet) -> list[Holiday]:
    """Holidays a signed number of days away from Easter Sunday."""

    holidays: list[Holiday] = []
    for rule in rule_set.relative_to_easter_sunday:
        if not is_active(rule, year):
            continue
        day = easter_sunday(year, rule.chronology) + timedelta(days=rule.days)
        holidays.append(
            Holiday(day, CHRISTIAN_KEY_PREFIX + rule.description_key, rule.holiday_type)
        )
    return holidays


def evaluate_christian_holidays(year: int, rule_set: RuleSet) -> list[Holiday]:
    """Named Easter-relative feasts such as Good Friday or Ascension Day."""

    holidays: list[Holiday] = []
    for rule in rule_set.christian_holidays:
        if not is_active(rule, year):
            continue
        day = easter_sunday(year, rule.chronology) + timedelta(
            days=EASTER_OFFSETS[rule.kind]
        )
        holidays.append(
            Holiday(
                apply_move_if_needed(rule, day),
                CHRISTIAN_KEY_PREFIX + rule.kind.value,
                rule.holiday_type,
            )
        )
    return holidays


__all__ = [
    "CHRISTIAN_KEY_PREFIX",
    "EASTER_OFFSETS",
    "evaluate_christian_holidays",
    "evaluate_relative_to_easter_sunday",
]
