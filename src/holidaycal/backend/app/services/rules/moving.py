"""Substitute dates that fall on a disallowed weekday."""

from __future__ import annotations

from datetime import date

from holidaycal.backend.config.schema import MoveableRule, With

from .utils import step_to_weekday


def apply_move_if_needed(rule: MoveableRule, day: date) -> date:
    """Apply the first moving condition whose trigger weekday matches ``day``.

    Conditions are evaluated in declaration order and are not cumulative.
    """

    for condition in rule.moving_conditions:
        if day.weekday() == condition.substitute.number:
            step = 1 if condition.with_ is With.NEXT else -1
            return step_to_weekday(day, condition.weekday, step)
    return day


__all__ = ["apply_move_if_needed"]
