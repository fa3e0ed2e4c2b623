"""Date-computation rules, one evaluator per holiday definition kind."""

from .christian import evaluate_christian_holidays, evaluate_relative_to_easter_sunday
from .easter import easter_sunday, gregorian_easter_sunday, julian_easter_sunday
from .ethiopian import evaluate_ethiopian_orthodox_holidays
from .fixed import evaluate_fixed, evaluate_relative_to_fixed
from .hindu import evaluate_hindu_holidays
from .islamic import evaluate_islamic_holidays
from .moving import apply_move_if_needed
from .validity import is_active
from .weekday import (
    evaluate_fixed_weekday_between_fixed,
    evaluate_fixed_weekday_in_month,
    evaluate_fixed_weekday_relative_to_fixed,
    evaluate_relative_to_weekday_in_month,
)

__all__ = [
    "apply_move_if_needed",
    "easter_sunday",
    "evaluate_christian_holidays",
    "evaluate_ethiopian_orthodox_holidays",
    "evaluate_fixed",
    "evaluate_fixed_weekday_between_fixed",
    "evaluate_fixed_weekday_in_month",
    "evaluate_fixed_weekday_relative_to_fixed",
    "evaluate_hindu_holidays",
    "evaluate_islamic_holidays",
    "evaluate_relative_to_easter_sunday",
    "evaluate_relative_to_fixed",
    "evaluate_relative_to_weekday_in_month",
    "gregorian_easter_sunday",
    "is_active",
    "julian_easter_sunday",
]
