"""Unit tests for holiday query parsing helpers."""

from __future__ import annotations

from datetime import date

import pytest
from flask import Flask, request
from werkzeug.exceptions import BadRequest

from holidaycal.backend.services.request_parser import (
    parse_day,
    parse_interval_query,
    parse_year_query,
)


def test_year_query_collects_repeated_path_parameters(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us/2024?path=ny&path=nyc"):
        query = parse_year_query(request, "us", 2024)

    assert query.path == ("ny", "nyc")
    assert query.year == 2024


def test_year_query_accepts_slash_delimited_path(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us/2024?path=ny/nyc"):
        query = parse_year_query(request, "us", 2024)

    assert query.path == ("ny", "nyc")


def test_year_query_without_path(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us/2024"):
        query = parse_year_query(request, "us", 2024)

    assert query.path == ()


def test_year_query_rejects_year_zero(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us/0"):
        with pytest.raises(BadRequest) as excinfo:
            parse_year_query(request, "us", 0)

    assert "Invalid holiday query" in excinfo.value.description


def test_interval_query_requires_both_bounds(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us?start=2024-01-01"):
        with pytest.raises(BadRequest, match="start"):
            parse_interval_query(request, "us")


def test_interval_query_rejects_malformed_dates(app: Flask) -> None:
    with app.test_request_context("/api/v1/holidays/us?start=2024-13-01&end=2024-12-31"):
        with pytest.raises(BadRequest) as excinfo:
            parse_interval_query(request, "us")

    assert "start" in excinfo.value.description


def test_interval_query_parses_bounds(app: Flask) -> None:
    with app.test_request_context(
        "/api/v1/holidays/de?start=2024-05-01&end=2024-05-31&path=by"
    ):
        query = parse_interval_query(request, "de")

    assert (query.start, query.end, query.path) == (date(2024, 5, 1), date(2024, 5, 31), ("by",))


def test_parse_day() -> None:
    assert parse_day("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(BadRequest, match="YYYY-MM-DD"):
        parse_day("2023-02-29")
