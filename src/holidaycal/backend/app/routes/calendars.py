"""Expose the shipped calendars and their hierarchy trees.

Clients use these endpoints to discover which calendar ids exist and which
hierarchy paths (such as ``us/ny/nyc``) can be passed to the holiday queries.
"""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify

from holidaycal.backend.app.services import get_holiday_manager
from holidaycal.backend.config.calendar_config import load_manifest
from holidaycal.backend.version import get_project_version

blueprint = Blueprint("calendars", __name__, url_prefix="/api/v1/calendars")


def get_calendar_metadata() -> dict[str, Any]:
    """Expose runtime metadata derived from the calendar manifest."""

    manifest = load_manifest()
    return {
        "version": get_project_version(),
        "supported_calendars": list(manifest.supported_calendars),
    }


@blueprint.get("")
def list_calendars() -> tuple[Any, int]:
    """Return every calendar declared in the manifest."""

    manifest = load_manifest()
    calendars = [
        {"id": entry.id, "description": entry.description}
        for entry in manifest.calendars
    ]
    return jsonify({"calendars": calendars}), 200


@blueprint.get("/<calendar_id>/hierarchy")
def get_hierarchy(calendar_id: str) -> tuple[Any, int]:
    """Return the hierarchy tree of ``calendar_id``."""

    hierarchy = get_holiday_manager(calendar_id).get_calendar_hierarchy()
    return jsonify(hierarchy.as_dict()), 200
