"""Structural checks and diagnostics for configuration hierarchies."""

from __future__ import annotations

import logging
from collections import Counter

from .schema import ConfigurationError, ConfigurationNode

_LOGGER = logging.getLogger(__name__)


def validate_configuration_hierarchy(node: ConfigurationNode) -> None:
    """Reject sibling configurations sharing a hierarchy id, recursively.

    Hierarchy ids are matched case-insensitively during queries, so ids that
    differ only by case count as duplicates too.
    """

    counts: Counter[str] = Counter()
    spellings: dict[str, str] = {}
    for child in node.sub_configurations:
        key = child.hierarchy.casefold()
        counts[key] += 1
        spellings.setdefault(key, child.hierarchy)

    duplicates = [key for key, count in counts.items() if count > 1]
    if duplicates:
        details = " ".join(f"{spellings[key]} {counts[key]} times" for key in duplicates)
        raise ConfigurationError(
            f"Configuration for {node.hierarchy} contains multiple sub configurations "
            f"with the same hierarchy id. {details}"
        )

    for child in node.sub_configurations:
        validate_configuration_hierarchy(child)


def log_hierarchy(node: ConfigurationNode, level: int = 0) -> None:
    """Emit the hierarchy tree at DEBUG level, one dash per nesting level."""

    if not _LOGGER.isEnabledFor(logging.DEBUG):
        return

    _LOGGER.debug("%s %s(%s).", "-" * level, node.description, node.hierarchy)
    for child in node.sub_configurations:
        log_hierarchy(child, level + 1)


__all__ = ["log_hierarchy", "validate_configuration_hierarchy"]
