"""Configuration loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError

from .hierarchy import log_hierarchy, validate_configuration_hierarchy
from .schema import (
    CalendarManifest,
    CalendarManifestEntry,
    ConfigurationError,
    ConfigurationNode,
    RuleSet,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
MANIFEST_FILE = CONFIG_DIRECTORY / "manifest.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


@lru_cache(maxsize=1)
def load_manifest() -> CalendarManifest:
    """Load and cache the calendar manifest."""

    if not MANIFEST_FILE.exists():
        raise FileNotFoundError("Configuration manifest not found")

    raw_manifest = _load_yaml(MANIFEST_FILE)

    try:
        return CalendarManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise ConfigurationError(f"Manifest validation failed: {error}") from error


def manifest_entries() -> Sequence[CalendarManifestEntry]:
    """Expose the configured manifest entries."""

    return load_manifest().calendars


def parse_configuration(raw_config: dict[str, Any]) -> ConfigurationNode:
    """Validate a raw mapping into a configuration tree and check its hierarchy."""

    try:
        configuration = ConfigurationNode.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Configuration validation failed: {error}") from error

    validate_configuration_hierarchy(configuration)
    return configuration


@lru_cache(maxsize=16)
def load_calendar_configuration(calendar_id: str) -> ConfigurationNode:
    """Load the configuration tree for ``calendar_id`` from disk."""

    try:
        manifest_entry = load_manifest().get_entry(calendar_id)
    except KeyError as exc:
        raise FileNotFoundError(
            f"Calendar '{calendar_id}' not declared in manifest"
        ) from exc

    config_file = CONFIG_DIRECTORY / manifest_entry.resolved_filename
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file for calendar '{calendar_id}' missing: {config_file.name}"
        )

    raw_config = _load_yaml(config_file)
    raw_config.setdefault("hierarchy", manifest_entry.id)
    if manifest_entry.description:
        raw_config.setdefault("description", manifest_entry.description)

    try:
        configuration = parse_configuration(raw_config)
    except ConfigurationError as error:
        raise ConfigurationError(f"[{manifest_entry.id}] {error}") from error

    if configuration.hierarchy.casefold() != manifest_entry.id.casefold():
        raise ConfigurationError(
            "Configuration hierarchy mismatch: expected "
            f"{manifest_entry.id}, found {configuration.hierarchy}"
        )

    log_hierarchy(configuration)
    return configuration


def available_calendars() -> Sequence[str]:
    """Return the calendar ids declared in the manifest."""

    return load_manifest().supported_calendars


__all__ = [
    "CONFIG_DIRECTORY",
    "CalendarManifest",
    "CalendarManifestEntry",
    "ConfigurationError",
    "ConfigurationNode",
    "MANIFEST_FILE",
    "RuleSet",
    "available_calendars",
    "load_calendar_configuration",
    "load_manifest",
    "manifest_entries",
    "parse_configuration",
]
