"""Holiday evaluation services."""

from .evaluation import (
    DEFAULT_EVALUATORS,
    HolidayEvaluationDispatcher,
    RuleEvaluator,
    RuleKind,
    build_evaluators,
)
from .holiday_service import HolidayManager, create_dispatcher, get_holiday_manager

__all__ = [
    "DEFAULT_EVALUATORS",
    "HolidayEvaluationDispatcher",
    "HolidayManager",
    "RuleEvaluator",
    "RuleKind",
    "build_evaluators",
    "create_dispatcher",
    "get_holiday_manager",
]
