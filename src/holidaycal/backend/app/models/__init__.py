"""Value objects produced by holiday evaluation.

Evaluation results are plain frozen dataclasses so they hash cheaply and
collapse naturally inside sets: two rules yielding the same date, key and
type produce a single :class:`Holiday`. Request validation for the HTTP layer
lives in :mod:`.api` as Pydantic models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any

from holidaycal.backend.config.schema import HolidayType

from .api import (
    HolidayIntervalQuery,
    HolidayYearQuery,
    format_validation_error,
)

__all__ = [
    "CalendarHierarchy",
    "Holiday",
    "HolidayIntervalQuery",
    "HolidayYearQuery",
    "Interval",
    "format_validation_error",
]


@dataclass(frozen=True, order=True, slots=True)
class Holiday:
    """A concrete holiday produced for one year."""

    date: date
    description_key: str
    holiday_type: HolidayType = HolidayType.OFFICIAL_HOLIDAY

    def as_dict(self) -> dict[str, str]:
        return {
            "date": self.date.isoformat(),
            "description_key": self.description_key,
            "type": self.holiday_type.value,
        }


@dataclass(frozen=True, slots=True)
class Interval:
    """Closed range of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Interval end {self.end.isoformat()} precedes start {self.start.isoformat()}"
            )

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.start <= day <= self.end

    @property
    def years(self) -> range:
        return range(self.start.year, self.end.year + 1)

    @classmethod
    def for_year(cls, year: int) -> Interval:
        return cls(date(year, 1, 1), date(year, 12, 31))


@dataclass(frozen=True)
class CalendarHierarchy:
    """Read-only mirror of a configuration tree."""

    id: str
    fallback_description: str = ""
    children: Mapping[str, CalendarHierarchy] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def description(self) -> str:
        return self.fallback_description

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.fallback_description,
            "children": [
                self.children[key].as_dict() for key in sorted(self.children)
            ],
        }
