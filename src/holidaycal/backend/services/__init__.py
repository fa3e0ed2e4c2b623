"""Request and response helpers for the holiday endpoints."""

from .request_parser import parse_day, parse_interval_query, parse_year_query
from .response_builder import build_holiday_response, serialise_holidays

__all__ = [
    "build_holiday_response",
    "parse_day",
    "parse_interval_query",
    "parse_year_query",
    "serialise_holidays",
]
