# clopts — MIT Licensed
"""
Version providers backed by package metadata.

`ClOpts` never reads package metadata itself: callers resolve a version with one
of these helpers, or any zero-argument callable, and pass it in.

Example:
    ClOpts(declarations, version=lambda: read_pyproject_version("pyproject.toml"))
"""
from __future__ import annotations

from importlib import metadata
from pathlib import Path

import toml

from clopts.logger import logger


def read_pyproject_version(path: Path | str = "pyproject.toml") -> str | None:
    """Return `[project].version` or `[tool.poetry].version` from a pyproject file."""
    pyproject_path = Path(path)
    if not pyproject_path.is_file():
        return None
    try:
        data = toml.load(pyproject_path)
    except toml.TomlDecodeError as error:
        logger.warning("Cannot read version from '%s': %s", pyproject_path, error)
        return None

    version = data.get("project", {}).get("version")
    if version is None:
        version = data.get("tool", {}).get("poetry", {}).get("version")
    return str(version) if version is not None else None


def distribution_version(name: str) -> str | None:
    """Return the version of an installed distribution, or None."""
    try:
        return metadata.version(name)
    except metadata.PackageNotFoundError:
        return None
