"""REST endpoints answering holiday queries."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from holidaycal.backend.app.models import Interval
from holidaycal.backend.app.services import get_holiday_manager
from holidaycal.backend.services import (
    build_holiday_response,
    parse_day,
    parse_interval_query,
    parse_year_query,
)

blueprint = Blueprint("holidays", __name__, url_prefix="/api/v1/holidays")


@blueprint.get("/<calendar_id>/<int:year>")
def list_holidays_for_year(calendar_id: str, year: int) -> tuple[Any, int]:
    """Return the holidays of ``year`` along the requested hierarchy path."""

    query = parse_year_query(request, calendar_id, year)
    manager = get_holiday_manager(query.calendar)
    holidays = manager.get_holidays(query.year, query.path)

    return build_holiday_response(query.calendar, query.path, holidays, year=query.year)


@blueprint.get("/<calendar_id>")
def list_holidays_in_interval(calendar_id: str) -> tuple[Any, int]:
    """Return the holidays between the ``start`` and ``end`` query parameters."""

    query = parse_interval_query(request, calendar_id)
    manager = get_holiday_manager(query.calendar)
    holidays = manager.get_holidays_in_interval(Interval(query.start, query.end), query.path)

    return build_holiday_response(
        query.calendar, query.path, holidays, start=query.start, end=query.end
    )


@blueprint.get("/<calendar_id>/dates/<day>")
def check_date(calendar_id: str, day: str) -> tuple[Any, int]:
    """Report whether ``day`` is a holiday and which holidays fall on it."""

    target = parse_day(day)
    query = parse_year_query(request, calendar_id, target.year)
    manager = get_holiday_manager(query.calendar)
    matches = manager.get_holidays_on(target, query.path)

    payload = {
        "calendar": query.calendar,
        "path": list(query.path),
        "date": target.isoformat(),
        "is_holiday": bool(matches),
        "holidays": [holiday.as_dict() for holiday in matches],
    }
    return jsonify(payload), 200
