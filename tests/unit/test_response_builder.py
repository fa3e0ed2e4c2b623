"""Unit tests for response formatting helpers."""

from __future__ import annotations

from datetime import date

from flask import Flask

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.services.response_builder import (
    build_holiday_response,
    serialise_holidays,
)


def test_serialise_holidays_orders_by_date() -> None:
    holidays = {
        Holiday(date(2024, 12, 25), "CHRISTMAS"),
        Holiday(date(2024, 1, 1), "NEW_YEAR"),
    }

    assert [entry["description_key"] for entry in serialise_holidays(holidays)] == [
        "NEW_YEAR",
        "CHRISTMAS",
    ]


def test_build_holiday_response_returns_json(app: Flask) -> None:
    with app.app_context():
        response, status = build_holiday_response(
            "se",
            ("x",),
            [Holiday(date(2024, 6, 6), "NATIONAL_DAY")],
            start=date(2024, 6, 1),
            end=date(2024, 6, 30),
        )

    assert status == 200
    assert response.get_json() == {
        "calendar": "se",
        "path": ["x"],
        "start": "2024-06-01",
        "end": "2024-06-30",
        "holidays": [
            {"date": "2024-06-06", "description_key": "NATIONAL_DAY", "type": "OFFICIAL_HOLIDAY"}
        ],
    }
