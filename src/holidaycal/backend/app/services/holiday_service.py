"""Answer holiday queries against a calendar configuration hierarchy.

The manager walks a configuration tree from its root, evaluating each visited
node's rule set and descending along a caller-supplied hierarchy path (for
example ``("us", "ny")``). A path segment without a matching child simply ends
the descent; the holidays collected so far are returned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from datetime import date
from functools import lru_cache
from types import MappingProxyType

from holidaycal.backend.app.models import CalendarHierarchy, Holiday, Interval
from holidaycal.backend.config.calendar_config import load_calendar_configuration
from holidaycal.backend.config.schema import ConfigurationNode

from .evaluation import HolidayEvaluationDispatcher

_LOGGER = logging.getLogger(__name__)

_WORKERS_ENV = "HOLIDAYCAL_EVALUATION_WORKERS"
_PROFILE_ENV = "HOLIDAYCAL_PROFILE_EVALUATION"


def _profiling_enabled() -> bool:
    """Return ``True`` when evaluation profiling should be captured."""

    flag = os.getenv(_PROFILE_ENV, "")
    return flag.strip().lower() in {"1", "true", "yes", "on"}


def _parse_positive_int(value: str | None, *, env: str) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = int(value)
    except ValueError:
        _LOGGER.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        _LOGGER.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


def create_dispatcher() -> HolidayEvaluationDispatcher:
    """Build a dispatcher honouring the evaluation environment settings."""

    workers = _parse_positive_int(os.getenv(_WORKERS_ENV), env=_WORKERS_ENV)
    return HolidayEvaluationDispatcher(max_workers=workers, profile=_profiling_enabled())


def _normalise_path(path: Sequence[str] | str | None) -> tuple[str, ...]:
    if path is None:
        return ()
    if isinstance(path, str):
        return (path,)
    return tuple(path)


def _find_child(node: ConfigurationNode, hierarchy: str) -> ConfigurationNode | None:
    wanted = hierarchy.casefold()
    for child in node.sub_configurations:
        if child.hierarchy.casefold() == wanted:
            return child
    return None


def _build_hierarchy(node: ConfigurationNode) -> CalendarHierarchy:
    children = {}
    for child in node.sub_configurations:
        child_hierarchy = _build_hierarchy(child)
        children[child_hierarchy.id] = child_hierarchy
    return CalendarHierarchy(
        id=node.hierarchy,
        fallback_description=node.description,
        children=MappingProxyType(children),
    )


class HolidayManager:
    """Query entry point for one configuration tree.

    Trees are expected to come from
    :func:`~holidaycal.backend.config.calendar_config.parse_configuration` or
    :func:`~holidaycal.backend.config.calendar_config.load_calendar_configuration`,
    which validate the hierarchy once at load time.
    """

    def __init__(
        self,
        configuration: ConfigurationNode,
        dispatcher: HolidayEvaluationDispatcher | None = None,
    ) -> None:
        self._configuration = configuration
        self._dispatcher = dispatcher if dispatcher is not None else create_dispatcher()

    @property
    def configuration(self) -> ConfigurationNode:
        return self._configuration

    def get_holidays(
        self, year: int, path: Sequence[str] | str | None = ()
    ) -> set[Holiday]:
        """Return the holidays of ``year`` for the root and each node along ``path``."""

        remaining = list(_normalise_path(path))
        holidays: set[Holiday] = set()
        node: ConfigurationNode | None = self._configuration

        while node is not None:
            _LOGGER.debug("Adding holidays for %s", node.description or node.hierarchy)
            holidays.update(self._dispatcher.evaluate(year, node.holidays))
            if not remaining:
                break
            node = _find_child(node, remaining.pop(0))

        return holidays

    def get_holidays_in_interval(
        self, interval: Interval | None, path: Sequence[str] | str | None = ()
    ) -> set[Holiday]:
        """Return the holidays along ``path`` whose date lies inside ``interval``."""

        if interval is None:
            raise ValueError("Interval is required")

        holidays: set[Holiday] = set()
        for year in interval.years:
            holidays.update(
                holiday
                for holiday in self.get_holidays(year, path)
                if holiday.date in interval
            )
        return holidays

    def get_holidays_on(
        self, day: date, path: Sequence[str] | str | None = ()
    ) -> list[Holiday]:
        """Return the holidays along ``path`` falling on ``day``, sorted."""

        return sorted(
            holiday for holiday in self.get_holidays(day.year, path) if holiday.date == day
        )

    def is_holiday(self, day: date, path: Sequence[str] | str | None = ()) -> bool:
        """Return ``True`` when any holiday along ``path`` falls on ``day``."""

        return bool(self.get_holidays_on(day, path))

    def get_calendar_hierarchy(self) -> CalendarHierarchy:
        """Return a fresh read-only mirror of the configuration tree."""

        return _build_hierarchy(self._configuration)


@lru_cache(maxsize=16)
def get_holiday_manager(calendar_id: str) -> HolidayManager:
    """Return a cached manager for a calendar declared in the manifest."""

    return HolidayManager(load_calendar_configuration(calendar_id))


__all__ = [
    "HolidayManager",
    "create_dispatcher",
    "get_holiday_manager",
]
