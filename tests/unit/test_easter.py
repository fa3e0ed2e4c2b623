"""Unit tests for the Easter Sunday computations."""

from __future__ import annotations

from datetime import date

import pytest

from holidaycal.backend.app.services.rules import (
    easter_sunday,
    gregorian_easter_sunday,
    julian_easter_sunday,
)
from holidaycal.backend.config.schema import ChronologyType


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2023, date(2023, 4, 9)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2000, date(2000, 4, 23)),
        (1818, date(1818, 3, 22)),
    ],
)
def test_gregorian_easter(year: int, expected: date) -> None:
    assert gregorian_easter_sunday(year) == expected


@pytest.mark.parametrize(
    ("year", "expected"),
    [
        (2023, date(2023, 4, 16)),
        (2024, date(2024, 5, 5)),
        (2025, date(2025, 4, 20)),
    ],
)
def test_julian_easter_in_gregorian_dates(year: int, expected: date) -> None:
    assert julian_easter_sunday(year) == expected


def test_default_chronology_switches_after_1583() -> None:
    assert easter_sunday(1583) == julian_easter_sunday(1583)
    assert easter_sunday(1584) == gregorian_easter_sunday(1584)


def test_explicit_chronology_overrides_the_default() -> None:
    assert easter_sunday(2024, ChronologyType.JULIAN) == date(2024, 5, 5)
    assert easter_sunday(1500, ChronologyType.GREGORIAN) == gregorian_easter_sunday(1500)


def test_easter_is_always_a_sunday() -> None:
    for year in range(1900, 2101):
        assert gregorian_easter_sunday(year).weekday() == 6
        assert julian_easter_sunday(year).weekday() == 6
