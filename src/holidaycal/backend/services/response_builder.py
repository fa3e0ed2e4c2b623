"""Utilities for serialising holiday responses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Tuple

from flask import jsonify

from holidaycal.backend.app.models import Holiday

ResponseTuple = Tuple[Any, int]


def serialise_holidays(holidays: Iterable[Holiday]) -> list[dict[str, str]]:
    """Return ``holidays`` as JSON-ready mappings ordered by date then key."""

    return [holiday.as_dict() for holiday in sorted(holidays)]


def build_holiday_response(
    calendar: str,
    path: Sequence[str],
    holidays: Iterable[Holiday],
    **extra: Any,
) -> ResponseTuple:
    """Return a Flask JSON response listing ``holidays`` for ``calendar``."""

    payload: dict[str, Any] = {"calendar": calendar, "path": list(path)}
    payload.update(_stringify(extra))
    payload["holidays"] = serialise_holidays(holidays)
    return jsonify(payload), 200


def _stringify(values: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: value.isoformat() if hasattr(value, "isoformat") else value
        for key, value in values.items()
    }
