"""Decide whether a holiday definition applies to a given year."""

from __future__ import annotations

from holidaycal.backend.config.schema import (
    EVEN_YEARS,
    EVERY_YEAR,
    ODD_YEARS,
    YEAR_CYCLES,
    ConfigurationError,
    HolidayRule,
)


def is_within_bounds(rule: HolidayRule, year: int) -> bool:
    """Return ``True`` when ``year`` lies inside the inclusive validity range."""

    return (rule.valid_from is None or rule.valid_from <= year) and (
        rule.valid_to is None or rule.valid_to >= year
    )


def is_in_cycle(rule: HolidayRule, year: int) -> bool:
    """Return ``True`` when the rule's recurrence cycle hits ``year``.

    Raises :class:`ConfigurationError` for unknown cycle descriptors and for
    multi-year cycles lacking a ``valid_from`` anchor.
    """

    if rule.every is None:
        return True

    token = rule.every.strip().upper()
    if token == EVERY_YEAR:
        return True
    if token == ODD_YEARS:
        return year % 2 != 0
    if token == EVEN_YEARS:
        return year % 2 == 0

    cycle_years = YEAR_CYCLES.get(token)
    if cycle_years is None:
        raise ConfigurationError(
            f"Cannot handle unknown cycle type '{rule.every}' "
            f"for holiday '{rule.description_key}'"
        )
    if rule.valid_from is None:
        raise ConfigurationError(
            f"Cycle '{rule.every}' of holiday '{rule.description_key}' "
            "requires a valid_from anchor year"
        )
    return (year - rule.valid_from) % cycle_years == 0


def is_active(rule: HolidayRule, year: int) -> bool:
    """Return ``True`` when ``rule`` yields a holiday in ``year``."""

    return is_within_bounds(rule, year) and is_in_cycle(rule, year)


__all__ = ["is_active", "is_in_cycle", "is_within_bounds"]
