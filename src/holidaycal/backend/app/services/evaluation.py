"""Dispatch one rule set through every registered rule evaluator.

Each evaluator is a pure function of ``(year, rule_set)`` returning its own
holidays; the dispatcher merges the results into a single set so duplicates
from different evaluators collapse. Evaluators may run on a thread pool, in
which case the merge still happens once, after every evaluator returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from time import perf_counter
from types import MappingProxyType

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import RuleSet

from .rules import (
    evaluate_christian_holidays,
    evaluate_ethiopian_orthodox_holidays,
    evaluate_fixed,
    evaluate_fixed_weekday_between_fixed,
    evaluate_fixed_weekday_in_month,
    evaluate_fixed_weekday_relative_to_fixed,
    evaluate_hindu_holidays,
    evaluate_islamic_holidays,
    evaluate_relative_to_easter_sunday,
    evaluate_relative_to_fixed,
    evaluate_relative_to_weekday_in_month,
)

_LOGGER = logging.getLogger(__name__)

RuleEvaluatorFn = Callable[[int, RuleSet], Sequence[Holiday]]


class RuleKind(str, Enum):
    """Configuration names of the supported holiday definition kinds."""

    FIXED = "fixed"
    RELATIVE_TO_FIXED = "relative_to_fixed"
    RELATIVE_TO_EASTER_SUNDAY = "relative_to_easter_sunday"
    CHRISTIAN_HOLIDAY = "christian_holidays"
    FIXED_WEEKDAY_IN_MONTH = "fixed_weekday_in_month"
    RELATIVE_TO_WEEKDAY_IN_MONTH = "relative_to_weekday_in_month"
    FIXED_WEEKDAY_BETWEEN_FIXED = "fixed_weekday_between_fixed"
    FIXED_WEEKDAY_RELATIVE_TO_FIXED = "fixed_weekday_relative_to_fixed"
    ISLAMIC_HOLIDAY = "islamic_holidays"
    HINDU_HOLIDAY = "hindu_holidays"
    ETHIOPIAN_ORTHODOX_HOLIDAY = "ethiopian_orthodox_holidays"


DEFAULT_EVALUATORS: Mapping[RuleKind, RuleEvaluatorFn] = MappingProxyType(
    {
        RuleKind.FIXED: evaluate_fixed,
        RuleKind.RELATIVE_TO_FIXED: evaluate_relative_to_fixed,
        RuleKind.RELATIVE_TO_EASTER_SUNDAY: evaluate_relative_to_easter_sunday,
        RuleKind.CHRISTIAN_HOLIDAY: evaluate_christian_holidays,
        RuleKind.FIXED_WEEKDAY_IN_MONTH: evaluate_fixed_weekday_in_month,
        RuleKind.RELATIVE_TO_WEEKDAY_IN_MONTH: evaluate_relative_to_weekday_in_month,
        RuleKind.FIXED_WEEKDAY_BETWEEN_FIXED: evaluate_fixed_weekday_between_fixed,
        RuleKind.FIXED_WEEKDAY_RELATIVE_TO_FIXED: evaluate_fixed_weekday_relative_to_fixed,
        RuleKind.ISLAMIC_HOLIDAY: evaluate_islamic_holidays,
        RuleKind.HINDU_HOLIDAY: evaluate_hindu_holidays,
        RuleKind.ETHIOPIAN_ORTHODOX_HOLIDAY: evaluate_ethiopian_orthodox_holidays,
    }
)


@dataclass(frozen=True)
class RuleEvaluator:
    """A named evaluator for one kind of holiday definition."""

    name: str
    evaluate: RuleEvaluatorFn


def build_evaluators(
    overrides: Mapping[str | RuleKind, RuleEvaluatorFn] | None = None,
) -> tuple[RuleEvaluator, ...]:
    """Return the registered evaluators with ``overrides`` replacing or extending them."""

    registry: dict[str, RuleEvaluatorFn] = {
        kind.value: function for kind, function in DEFAULT_EVALUATORS.items()
    }
    for name, function in (overrides or {}).items():
        key = name.value if isinstance(name, RuleKind) else str(name)
        registry[key] = function
    return tuple(RuleEvaluator(name, function) for name, function in registry.items())


@contextmanager
def _profile_section(name: str, store: dict[str, float] | None):
    """Capture the duration of a named section when profiling is enabled."""

    if store is None:
        yield
        return

    start = perf_counter()
    try:
        yield
    finally:
        store[name] = perf_counter() - start


class HolidayEvaluationDispatcher:
    """Run a fixed list of evaluators and union their holidays."""

    def __init__(
        self,
        evaluators: Iterable[RuleEvaluator] | None = None,
        *,
        max_workers: int | None = None,
        profile: bool = False,
    ) -> None:
        self._evaluators = tuple(evaluators) if evaluators is not None else build_evaluators()
        self._max_workers = max_workers
        self._profile = profile

    @property
    def evaluators(self) -> tuple[RuleEvaluator, ...]:
        return self._evaluators

    def evaluate(self, year: int, rule_set: RuleSet) -> set[Holiday]:
        """Return the holidays every evaluator yields for ``rule_set`` in ``year``."""

        timings: dict[str, float] | None = {} if self._profile else None

        def run(evaluator: RuleEvaluator) -> Sequence[Holiday]:
            with _profile_section(evaluator.name, timings):
                return evaluator.evaluate(year, rule_set)

        if self._max_workers is not None and self._max_workers > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                results = list(pool.map(run, self._evaluators))
        else:
            results = [run(evaluator) for evaluator in self._evaluators]

        holidays: set[Holiday] = set()
        for result in results:
            holidays.update(result)

        if timings is not None:
            _LOGGER.debug(
                "Evaluated %d holidays for %d: %s",
                len(holidays),
                year,
                ", ".join(f"{name}={duration:.6f}s" for name, duration in timings.items()),
            )

        return holidays


__all__ = [
    "DEFAULT_EVALUATORS",
    "HolidayEvaluationDispatcher",
    "RuleEvaluator",
    "RuleEvaluatorFn",
    "RuleKind",
    "build_evaluators",
]
