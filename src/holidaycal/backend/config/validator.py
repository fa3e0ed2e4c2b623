"""Utilities for validating calendar configuration data and surfacing issues."""

from __future__ import annotations

import argparse
from typing import Sequence

from .calendar_config import available_calendars, load_calendar_configuration
from .hierarchy import validate_configuration_hierarchy
from .schema import (
    EVEN_YEARS,
    EVERY_YEAR,
    ODD_YEARS,
    YEAR_CYCLES,
    ConfigurationError,
    ConfigurationNode,
    FixedRule,
    FixedWeekdayBetweenFixedRule,
    HolidayRule,
    RelativeToFixedRule,
    RuleSet,
)

_SIMPLE_CYCLES = {EVERY_YEAR, ODD_YEARS, EVEN_YEARS}


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_bounds(scope: str, rule: HolidayRule) -> list[str]:
    if rule.valid_from is not None and rule.valid_to is not None:
        if rule.valid_from > rule.valid_to:
            return [
                _format_scope(
                    scope,
                    f"valid_from {rule.valid_from} is after valid_to {rule.valid_to}",
                )
            ]
    return []


def _validate_cycle(scope: str, rule: HolidayRule) -> list[str]:
    if rule.every is None:
        return []

    token = rule.every.strip().upper()
    if token in _SIMPLE_CYCLES:
        return []
    if token not in YEAR_CYCLES:
        return [_format_scope(scope, f"cycle '{rule.every}' is not recognised")]
    if rule.valid_from is None:
        return [
            _format_scope(scope, f"cycle '{rule.every}' requires a valid_from anchor year")
        ]
    return []


def _validate_relative_to_fixed(scope: str, rule: RelativeToFixedRule) -> list[str]:
    if rule.weekday is not None and rule.days is not None:
        return [_format_scope(scope, "days are ignored when a weekday is configured")]
    return []


def _validate_leap_day(scope: str, rule: FixedRule) -> list[str]:
    if (rule.month, rule.day) == (2, 29):
        return [_format_scope(scope, "February 29 only yields a holiday in leap years")]
    return []


def _validate_weekday_between(scope: str, rule: FixedWeekdayBetweenFixedRule) -> list[str]:
    if (rule.from_.month, rule.from_.day) > (rule.to.month, rule.to.day):
        return [_format_scope(scope, "range start lies after the range end")]
    return []


def _validate_rule_set(scope: str, rule_set: RuleSet) -> list[str]:
    errors: list[str] = []

    for section in type(rule_set).model_fields:
        for index, rule in enumerate(getattr(rule_set, section)):
            rule_scope = f"{scope}.{section}[{index}]"
            if rule.description_key:
                rule_scope = f"{rule_scope}({rule.description_key})"

            # named kinds derive their key from the type
            if not rule.description_key and getattr(rule, "kind", None) is None:
                errors.append(_format_scope(rule_scope, "description key is empty"))
            errors.extend(_validate_bounds(rule_scope, rule))
            errors.extend(_validate_cycle(rule_scope, rule))
            if isinstance(rule, FixedRule):
                errors.extend(_validate_leap_day(rule_scope, rule))
            if isinstance(rule, RelativeToFixedRule):
                errors.extend(_validate_relative_to_fixed(rule_scope, rule))
            if isinstance(rule, FixedWeekdayBetweenFixedRule):
                errors.extend(_validate_weekday_between(rule_scope, rule))

    return errors


def lint_configuration(node: ConfigurationNode, parent_scope: str | None = None) -> list[str]:
    """Return a list of content issues for ``node`` and its descendants."""

    scope = node.hierarchy if parent_scope is None else f"{parent_scope}/{node.hierarchy}"
    errors = _validate_rule_set(scope, node.holidays)

    for child in node.sub_configurations:
        errors.extend(lint_configuration(child, scope))

    return errors


def validate_all_calendars(calendars: Sequence[str] | None = None) -> dict[str, list[str]]:
    """Validate all configured calendars and return issues keyed by calendar id."""

    targets = calendars or available_calendars()
    results: dict[str, list[str]] = {}

    for calendar_id in targets:
        config = load_calendar_configuration(calendar_id)
        results[calendar_id] = lint_configuration(config)

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Validate configured holiday calendars and report issues helpful to contributors."
        )
    )
    parser.add_argument(
        "calendars",
        nargs="*",
        help="Specific calendar ids to validate (defaults to all configured calendars)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    calendars = args.calendars or available_calendars()

    if not calendars:
        parser.print_help()
        return 1

    exit_code = 0

    for calendar_id in calendars:
        try:
            config = load_calendar_configuration(calendar_id)
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{calendar_id}] failed to load configuration: {error}")
            exit_code = 1
            continue

        issues = lint_configuration(config)
        if issues:
            exit_code = 1
            print(f"[{calendar_id}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{calendar_id}] OK")

    return exit_code


__all__ = [
    "lint_configuration",
    "main",
    "validate_all_calendars",
    "validate_configuration_hierarchy",
]


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
