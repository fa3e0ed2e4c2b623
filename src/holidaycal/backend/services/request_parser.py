"""Helpers for normalising incoming holiday queries."""

from __future__ import annotations

from datetime import date
from typing import Any

from flask import Request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from holidaycal.backend.app.models import (
    HolidayIntervalQuery,
    HolidayYearQuery,
    format_validation_error,
)


def _path_segments(req: Request) -> list[str]:
    """Collect hierarchy path hints from repeated or delimited ``path`` parameters."""

    return [value for value in req.args.getlist("path") if value.strip()]


def _validate(model: type[Any], payload: dict[str, Any]) -> Any:
    try:
        return model.model_validate(payload)
    except ValidationError as error:
        raise BadRequest(format_validation_error(error)) from error


def parse_year_query(req: Request, calendar: str, year: int) -> HolidayYearQuery:
    """Build a validated year query for ``calendar`` from ``req``."""

    return _validate(
        HolidayYearQuery,
        {"calendar": calendar, "year": year, "path": _path_segments(req)},
    )


def parse_interval_query(req: Request, calendar: str) -> HolidayIntervalQuery:
    """Build a validated interval query from the ``start`` and ``end`` parameters."""

    start = req.args.get("start")
    end = req.args.get("end")
    if not start or not end:
        raise BadRequest("Both 'start' and 'end' query parameters are required")

    return _validate(
        HolidayIntervalQuery,
        {
            "calendar": calendar,
            "start": start,
            "end": end,
            "path": _path_segments(req),
        },
    )


def parse_day(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` route segment."""

    try:
        return date.fromisoformat(value)
    except ValueError as error:
        raise BadRequest(f"Invalid date '{value}': expected YYYY-MM-DD") from error
