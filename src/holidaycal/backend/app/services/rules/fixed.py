"""Evaluators for fixed dates and dates relative to a fixed date."""

from __future__ import annotations

from datetime import timedelta

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import RuleSet

from .moving import apply_move_if_needed
from .utils import direction_of, resolve_fixed, resolve_fixed_date, step_past_to_weekday
from .validity import is_active


def evaluate_fixed(year: int, rule_set: RuleSet) -> list[Holiday]:
    """Holidays on a fixed month/day, moved when a moving condition matches."""

    holidays: list[Holiday] = []
    for rule in rule_set.fixed:
        if not is_active(rule, year):
            continue
        day = resolve_fixed(year, rule.month, rule.day)
        if day is None:
            continue
        holidays.append(
            Holiday(apply_move_if_needed(rule, day), rule.description_key, rule.holiday_type)
        )
    return holidays


def evaluate_relative_to_fixed(year: int, rule_set: RuleSet) -> list[Holiday]:
    """Holidays a weekday or a number of days before/after a fixed date."""

    holidays: list[Holiday] = []
    for rule in rule_set.relative_to_fixed:
        if not is_active(rule, year):
            continue
        day = resolve_fixed_date(year, rule.date)
        if day is None:
            continue

        step = direction_of(rule.when)
        if rule.weekday is not None:
            day = step_past_to_weekday(day, rule.weekday, step)
        elif rule.days is not None:
            day += timedelta(days=step * rule.days)

        holidays.append(Holiday(day, rule.description_key, rule.holiday_type))
    return holidays


__all__ = ["evaluate_fixed", "evaluate_relative_to_fixed"]
