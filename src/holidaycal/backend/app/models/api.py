"""Pydantic models describing the public API surface."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

__all__ = [
    "HolidayIntervalQuery",
    "HolidayYearQuery",
    "format_validation_error",
]


def _normalise_path(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ValueError("path must be a list of hierarchy ids")

    segments: list[str] = []
    for entry in value:
        for part in str(entry).replace(",", "/").split("/"):
            part = part.strip()
            if part:
                segments.append(part)
    return tuple(segments)


class _HolidayQuery(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    calendar: str = Field(min_length=1)
    path: tuple[str, ...] = ()

    @field_validator("path", mode="before")
    @classmethod
    def _split_path(cls, value: Any) -> tuple[str, ...]:
        return _normalise_path(value)


class HolidayYearQuery(_HolidayQuery):
    """Holidays of one calendar year along a hierarchy path."""

    year: int = Field(ge=1, le=9999)


class HolidayIntervalQuery(_HolidayQuery):
    """Holidays within an inclusive date range along a hierarchy path."""

    start: date
    end: date

    @model_validator(mode="after")
    def _validate_range(self) -> HolidayIntervalQuery:
        if self.end < self.start:
            raise ValueError("end must not precede start")
        return self


def format_validation_error(error: ValidationError) -> str:
    """Return a concise human-readable description of validation issues."""

    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        if location:
            messages.append(f"{location}: {message}")
        else:
            messages.append(message)

    details = "; ".join(messages) if messages else str(error)
    return f"Invalid holiday query: {details}"
