"""Expose the installed project version."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "holidaycal"
PYPROJECT_FILE: Final = Path(__file__).resolve().parents[3] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the packaged version, falling back to ``pyproject.toml`` for source checkouts."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return _read_version_from_pyproject(PYPROJECT_FILE)


def _read_version_from_pyproject(pyproject_path: Path) -> str:
    if not pyproject_path.exists():
        raise RuntimeError(f"Unable to locate project metadata at {pyproject_path}")

    in_project = False
    for raw_line in pyproject_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            in_project = line == "[project]"
            continue
        if in_project and line.startswith("version"):
            _, _, value = line.partition("=")
            version = value.strip().strip('"').strip("'")
            if version:
                return version
            break

    raise RuntimeError(f"Unable to determine project version from {pyproject_path.name}")


__all__ = ["PACKAGE_NAME", "get_project_version"]
