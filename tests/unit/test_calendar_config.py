"""Unit coverage for calendar manifest discovery and configuration loading."""

from __future__ import annotations

from pathlib import Path
from shutil import copy2

import pytest
import yaml

from holidaycal.backend.config import calendar_config
from holidaycal.backend.config.schema import (
    ChristianHolidayType,
    ConfigurationError,
    HolidayType,
    Weekday,
    With,
)


@pytest.fixture()
def isolated_config_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a temporary configuration directory patched into ``calendar_config``."""

    original_directory = calendar_config.CONFIG_DIRECTORY
    for filename in ("manifest.yaml", "us.yaml", "se.yaml"):
        copy2(original_directory / filename, tmp_path / filename)

    monkeypatch.setattr(calendar_config, "CONFIG_DIRECTORY", tmp_path)
    monkeypatch.setattr(calendar_config, "MANIFEST_FILE", tmp_path / "manifest.yaml")
    calendar_config.load_calendar_configuration.cache_clear()
    calendar_config.load_manifest.cache_clear()

    yield tmp_path

    calendar_config.load_calendar_configuration.cache_clear()
    calendar_config.load_manifest.cache_clear()


def _write_manifest(directory: Path, calendars: list[dict]) -> None:
    (directory / "manifest.yaml").write_text(
        yaml.safe_dump({"calendars": calendars}, sort_keys=False)
    )
    calendar_config.load_manifest.cache_clear()


def test_available_calendars_follow_manifest_order() -> None:
    assert tuple(calendar_config.available_calendars()) == ("us", "de", "se", "et", "in")


def test_available_calendars_keep_declaration_order(isolated_config_directory: Path) -> None:
    _write_manifest(isolated_config_directory, [{"id": "se"}, {"id": "us"}])

    assert tuple(calendar_config.available_calendars()) == ("se", "us")


def test_us_configuration_parses_moving_conditions() -> None:
    config = calendar_config.load_calendar_configuration("us")

    new_year = config.holidays.fixed[0]
    assert new_year.description_key == "NEW_YEAR"
    assert (new_year.month, new_year.day) == (1, 1)
    assert [
        (condition.substitute, condition.with_, condition.weekday)
        for condition in new_year.moving_conditions
    ] == [
        (Weekday.SATURDAY, With.PREVIOUS, Weekday.FRIDAY),
        (Weekday.SUNDAY, With.NEXT, Weekday.MONDAY),
    ]
    assert [child.hierarchy for child in config.sub_configurations] == ["ak", "dc", "de", "ny"]


def test_nested_children_and_named_kinds_are_loaded() -> None:
    config = calendar_config.load_calendar_configuration("us")

    delaware = config.sub_configurations[2]
    assert delaware.holidays.christian_holidays[0].kind is ChristianHolidayType.GOOD_FRIDAY

    nyc = config.sub_configurations[3].sub_configurations[0]
    assert nyc.hierarchy == "nyc"
    assert nyc.holidays.fixed[0].holiday_type is HolidayType.UNOFFICIAL_HOLIDAY


def test_calendar_lookup_is_case_insensitive() -> None:
    assert calendar_config.load_calendar_configuration("SE").hierarchy == "se"


def test_unknown_calendar_raises_file_not_found() -> None:
    with pytest.raises(FileNotFoundError, match="not declared"):
        calendar_config.load_calendar_configuration("atlantis")


def test_missing_configuration_file_is_reported(isolated_config_directory: Path) -> None:
    _write_manifest(isolated_config_directory, [{"id": "us"}, {"id": "fr"}])

    with pytest.raises(FileNotFoundError, match="fr.yaml"):
        calendar_config.load_calendar_configuration("fr")


def test_duplicate_manifest_entries_are_rejected(isolated_config_directory: Path) -> None:
    _write_manifest(isolated_config_directory, [{"id": "us"}, {"id": "US"}])

    with pytest.raises(ConfigurationError, match="Manifest validation failed"):
        calendar_config.load_manifest()


def test_hierarchy_defaults_to_manifest_id(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "xx.yaml").write_text(
        "holidays:\n  fixed:\n    - description_key: FOUNDING\n      month: MARCH\n      day: 3\n"
    )
    _write_manifest(isolated_config_directory, [{"id": "xx", "description": "Nowhere"}])

    config = calendar_config.load_calendar_configuration("xx")

    assert config.hierarchy == "xx"
    assert config.description == "Nowhere"
    assert config.holidays.fixed[0].month == 3


def test_mismatched_hierarchy_is_rejected(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "xx.yaml").write_text("hierarchy: yy\n")
    _write_manifest(isolated_config_directory, [{"id": "xx"}])

    with pytest.raises(ConfigurationError, match="hierarchy mismatch"):
        calendar_config.load_calendar_configuration("xx")


def test_schema_errors_name_the_calendar(isolated_config_directory: Path) -> None:
    (isolated_config_directory / "xx.yaml").write_text(
        "holidays:\n  fixed:\n    - description_key: NOPE\n      month: SMARCH\n      day: 1\n"
    )
    _write_manifest(isolated_config_directory, [{"id": "xx"}])

    with pytest.raises(ConfigurationError, match=r"^\[xx\]"):
        calendar_config.load_calendar_configuration("xx")


def test_empty_sections_are_tolerated() -> None:
    config = calendar_config.parse_configuration(
        {"hierarchy": "xx", "holidays": {"fixed": None}, "sub_configurations": None}
    )

    assert config.holidays.fixed == ()
    assert config.sub_configurations == ()
