"""Unit tests for the rule evaluation dispatcher."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.app.services.evaluation import (
    DEFAULT_EVALUATORS,
    HolidayEvaluationDispatcher,
    RuleEvaluator,
    RuleKind,
    build_evaluators,
)
from holidaycal.backend.config.schema import ConfigurationError, RuleSet

SWEDEN_LIKE = RuleSet.model_validate(
    {
        "fixed": [
            {"description_key": "CHRISTMAS", "month": 12, "day": 25},
            {"description_key": "NEW_YEAR", "month": 1, "day": 1},
        ],
        "christian_holidays": [{"type": "EASTER"}, {"type": "GOOD_FRIDAY"}],
        "relative_to_easter_sunday": [{"description_key": "EASTER"}],
        "fixed_weekday_between_fixed": [
            {
                "description_key": "MIDSUMMER",
                "weekday": "SATURDAY",
                "from": {"month": 6, "day": 20},
                "to": {"month": 6, "day": 26},
            }
        ],
        "islamic_holidays": [{"type": "ID_AL_FITR"}],
    }
)


def test_every_rule_kind_has_a_default_evaluator() -> None:
    assert set(DEFAULT_EVALUATORS) == set(RuleKind)
    assert {kind.value for kind in RuleKind} == set(RuleSet.model_fields)


def test_dispatcher_unions_all_evaluators(dispatcher: HolidayEvaluationDispatcher) -> None:
    holidays = dispatcher.evaluate(2024, SWEDEN_LIKE)

    # Easter from both definition kinds collapses into one holiday.
    assert sorted(holidays) == [
        Holiday(date(2024, 1, 1), "NEW_YEAR"),
        Holiday(date(2024, 3, 29), "christian.GOOD_FRIDAY"),
        Holiday(date(2024, 3, 31), "christian.EASTER"),
        Holiday(date(2024, 4, 10), "islamic.ID_AL_FITR"),
        Holiday(date(2024, 6, 22), "MIDSUMMER"),
        Holiday(date(2024, 12, 25), "CHRISTMAS"),
    ]


def test_empty_rule_set_yields_nothing(dispatcher: HolidayEvaluationDispatcher) -> None:
    assert dispatcher.evaluate(2024, RuleSet()) == set()


def test_threaded_dispatch_matches_sequential_dispatch() -> None:
    sequential = HolidayEvaluationDispatcher().evaluate(2024, SWEDEN_LIKE)
    threaded = HolidayEvaluationDispatcher(max_workers=4).evaluate(2024, SWEDEN_LIKE)

    assert threaded == sequential


def test_custom_evaluators_can_be_injected() -> None:
    calls: list[int] = []

    def bridge_day(year: int, rule_set: RuleSet) -> list[Holiday]:
        calls.append(year)
        return [Holiday(date(year, 5, 10), "BRIDGE_DAY")]

    dispatcher = HolidayEvaluationDispatcher([RuleEvaluator("bridge", bridge_day)])

    assert dispatcher.evaluate(2024, SWEDEN_LIKE) == {Holiday(date(2024, 5, 10), "BRIDGE_DAY")}
    assert calls == [2024]


def test_build_evaluators_applies_overrides() -> None:
    def nothing(year: int, rule_set: RuleSet) -> list[Holiday]:
        return []

    evaluators = build_evaluators({RuleKind.FIXED: nothing, "extra": nothing})
    by_name = {evaluator.name: evaluator.evaluate for evaluator in evaluators}

    assert by_name["fixed"] is nothing
    assert by_name["extra"] is nothing
    assert len(evaluators) == len(RuleKind) + 1

    holidays = HolidayEvaluationDispatcher(evaluators).evaluate(2024, SWEDEN_LIKE)
    assert Holiday(date(2024, 12, 25), "CHRISTMAS") not in holidays


@pytest.mark.parametrize("max_workers", [None, 3])
def test_evaluator_errors_abort_the_whole_evaluation(max_workers: int | None) -> None:
    rules = RuleSet.model_validate(
        {
            "fixed": [{"description_key": "BROKEN", "month": 1, "day": 1, "every": "SOMETIMES"}],
            "christian_holidays": [{"type": "EASTER"}],
        }
    )

    with pytest.raises(ConfigurationError):
        HolidayEvaluationDispatcher(max_workers=max_workers).evaluate(2024, rules)


def test_profiling_logs_section_timings(caplog: pytest.LogCaptureFixture) -> None:
    dispatcher = HolidayEvaluationDispatcher(profile=True)

    with caplog.at_level(logging.DEBUG, logger="holidaycal.backend.app.services.evaluation"):
        dispatcher.evaluate(2024, SWEDEN_LIKE)

    assert "fixed=" in caplog.text
    assert "islamic_holidays=" in caplog.text
