"""Utility helpers for rule evaluators."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from holidaycal.backend.config.schema import FixedDate, When, Which, Weekday

_WEEK_OFFSETS = {
    Which.FIRST: 0,
    Which.SECOND: 7,
    Which.THIRD: 14,
    Which.FOURTH: 21,
    Which.LAST: 0,
}


def direction_of(when: When) -> int:
    """Return ``-1`` for ``BEFORE`` and ``1`` for ``AFTER``."""

    return -1 if when is When.BEFORE else 1


def week_offset(which: Which) -> int:
    """Return the number of days separating the first and ``which`` occurrence."""

    return _WEEK_OFFSETS[which]


def step_to_weekday(day: date, weekday: Weekday, step: int) -> date:
    """Walk from ``day`` one day at a time in ``step`` direction until ``weekday``.

    ``day`` itself is returned when it already falls on ``weekday``.
    """

    delta = timedelta(days=step)
    while day.weekday() != weekday.number:
        day += delta
    return day


def step_past_to_weekday(day: date, weekday: Weekday, step: int) -> date:
    """Like :func:`step_to_weekday` but never returns ``day`` itself."""

    return step_to_weekday(day + timedelta(days=step), weekday, step)


def resolve_fixed(year: int, month: int, day: int) -> date | None:
    """Return ``date(year, month, day)`` or ``None`` for Feb 29 outside leap years."""

    if month == 2 and day == 29 and not calendar.isleap(year):
        return None
    return date(year, month, day)


def resolve_fixed_date(year: int, fixed: FixedDate) -> date | None:
    return resolve_fixed(year, fixed.month, fixed.day)


def date_from_ordinal(ordinal: int) -> date | None:
    """Return the proleptic Gregorian date for ``ordinal`` when representable."""

    if not date.min.toordinal() <= ordinal <= date.max.toordinal():
        return None
    return date.fromordinal(ordinal)


def ordinal_bounds(year: int) -> tuple[int, int]:
    """Return the ordinals of the first and last day of ``year``."""

    return date(year, 1, 1).toordinal(), date(year, 12, 31).toordinal()
