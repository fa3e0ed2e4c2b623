"""Evaluators for holidays pinned to a weekday."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import FixedWeekdayInMonthRule, RuleSet, Which

from .utils import (
    direction_of,
    resolve_fixed_date,
    step_past_to_weekday,
    step_to_weekday,
    week_offset,
)
from .validity import is_active


def weekday_in_month(year: int, rule: FixedWeekdayInMonthRule) -> date:
    """Return the ``rule.which`` occurrence of ``rule.weekday`` in ``rule.month``."""

    if rule.which is Which.LAST:
        last_day = calendar.monthrange(year, rule.month)[1]
        return step_to_weekday(date(year, rule.month, last_day), rule.weekday, -1)

    first = step_to_weekday(date(year, rule.month, 1), rule.weekday, 1)
    return first + timedelta(days=week_offset(rule.which))


def evaluate_fixed_weekday_in_month(year: int, rule_set: RuleSet) -> list[Holiday]:
    holidays: list[Holiday] = []
    for rule in rule_set.fixed_weekday_in_month:
        if not is_active(rule, year):
            continue
        holidays.append(
            Holiday(weekday_in_month(year, rule), rule.description_key, rule.holiday_type)
        )
    return holidays


def evaluate_relative_to_weekday_in_month(year: int, rule_set: RuleSet) -> list[Holiday]:
    """A weekday strictly before/after a weekday-in-month date."""

    holidays: list[Holiday] = []
    for rule in rule_set.relative_to_weekday_in_month:
        if not is_active(rule, year):
            continue
        anchor = weekday_in_month(year, rule.fixed_weekday)
        day = step_past_to_weekday(anchor, rule.weekday, direction_of(rule.when))
        holidays.append(Holiday(day, rule.description_key, rule.holiday_type))
    return holidays


def evaluate_fixed_weekday_between_fixed(year: int, rule_set: RuleSet) -> list[Holiday]:
    """The first matching weekday within an inclusive range of two fixed dates."""

    holidays: list[Holiday] = []
    for rule in rule_set.fixed_weekday_between_fixed:
        if not is_active(rule, year):
            continue
        start = resolve_fixed_date(year, rule.from_)
        end = resolve_fixed_date(year, rule.to)
        if start is None or end is None:
            continue

        day = start
        while day <= end:
            if day.weekday() == rule.weekday.number:
                holidays.append(Holiday(day, rule.description_key, rule.holiday_type))
                break
            day += timedelta(days=1)
    return holidays


def evaluate_fixed_weekday_relative_to_fixed(year: int, rule_set: RuleSet) -> list[Holiday]:
    """The ``which`` weekday strictly before/after a fixed date."""

    holidays: list[Holiday] = []
    for rule in rule_set.fixed_weekday_relative_to_fixed:
        if not is_active(rule, year):
            continue
        anchor = resolve_fixed_date(year, rule.day)
        if anchor is None:
            continue

        step = direction_of(rule.when)
        day = step_past_to_weekday(anchor, rule.weekday, step)
        day += timedelta(days=step * week_offset(rule.which))
        holidays.append(Holiday(day, rule.description_key, rule.holiday_type))
    return holidays


__all__ = [
    "evaluate_fixed_weekday_between_fixed",
    "evaluate_fixed_weekday_in_month",
    "evaluate_fixed_weekday_relative_to_fixed",
    "evaluate_relative_to_weekday_in_month",
    "weekday_in_month",
]
