"""Unit tests for holiday value objects and query models."""

from __future__ import annotations

from datetime import date
from types import MappingProxyType

import pytest
from pydantic import ValidationError

from holidaycal.backend.app.models import (
    CalendarHierarchy,
    Holiday,
    HolidayIntervalQuery,
    HolidayYearQuery,
    Interval,
    format_validation_error,
)
from holidaycal.backend.config.schema import HolidayType


def test_holidays_compare_by_value() -> None:
    first = Holiday(date(2024, 12, 25), "CHRISTMAS")
    second = Holiday(date(2024, 12, 25), "CHRISTMAS", HolidayType.OFFICIAL_HOLIDAY)
    unofficial = Holiday(date(2024, 12, 25), "CHRISTMAS", HolidayType.UNOFFICIAL_HOLIDAY)

    assert first == second
    assert len({first, second, unofficial}) == 2


def test_holiday_as_dict() -> None:
    holiday = Holiday(date(2024, 6, 21), "MIDSUMMER_EVE", HolidayType.UNOFFICIAL_HOLIDAY)

    assert holiday.as_dict() == {
        "date": "2024-06-21",
        "description_key": "MIDSUMMER_EVE",
        "type": "UNOFFICIAL_HOLIDAY",
    }


def test_interval_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError, match="precedes start"):
        Interval(date(2024, 2, 1), date(2024, 1, 1))


def test_interval_membership_and_years() -> None:
    interval = Interval(date(2023, 12, 30), date(2025, 1, 2))

    assert date(2023, 12, 30) in interval
    assert date(2025, 1, 2) in interval
    assert date(2025, 1, 3) not in interval
    assert "2024-01-01" not in interval
    assert list(interval.years) == [2023, 2024, 2025]
    assert Interval.for_year(2024) == Interval(date(2024, 1, 1), date(2024, 12, 31))


def test_calendar_hierarchy_as_dict_sorts_children() -> None:
    hierarchy = CalendarHierarchy(
        "de",
        "Germany",
        MappingProxyType(
            {
                "sn": CalendarHierarchy("sn", "Saxony"),
                "by": CalendarHierarchy("by", "Bavaria"),
            }
        ),
    )

    assert hierarchy.as_dict() == {
        "id": "de",
        "description": "Germany",
        "children": [
            {"id": "by", "description": "Bavaria", "children": []},
            {"id": "sn", "description": "Saxony", "children": []},
        ],
    }


def test_year_query_splits_delimited_paths() -> None:
    query = HolidayYearQuery.model_validate(
        {"calendar": "us", "year": 2024, "path": ["ny/nyc", " ", "x,y"]}
    )

    assert query.path == ("ny", "nyc", "x", "y")


def test_year_query_rejects_out_of_range_years() -> None:
    with pytest.raises(ValidationError):
        HolidayYearQuery.model_validate({"calendar": "us", "year": 0})


def test_interval_query_rejects_inverted_range() -> None:
    with pytest.raises(ValidationError) as excinfo:
        HolidayIntervalQuery.model_validate(
            {"calendar": "us", "start": "2024-02-01", "end": "2024-01-01"}
        )

    message = format_validation_error(excinfo.value)
    assert message.startswith("Invalid holiday query: ")
    assert "end must not precede start" in message


def test_interval_query_parses_iso_dates() -> None:
    query = HolidayIntervalQuery.model_validate(
        {"calendar": "se", "start": "2024-06-01", "end": "2024-06-30", "path": "x"}
    )

    assert (query.start, query.end, query.path) == (date(2024, 6, 1), date(2024, 6, 30), ("x",))
