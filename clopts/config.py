# clopts — MIT Licensed
"""config.py
Loads option values from JSON, YAML or TOML configuration files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import toml
import yaml

from clopts.exceptions import ConfigFileError
from clopts.logger import logger

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml", ".toml")


def load_config_file(file_path: Path | str) -> dict[str, Any] | None:
    """
    Load a flat option-name to value mapping from a configuration file.

    Relative paths are resolved against the current working directory.

    Args:
        file_path (Path | str): Path to a `.json`, `.yaml`, `.yml` or `.toml` file.

    Returns:
        dict[str, Any] | None: The mapping, or None if the file does not exist.

    Raises:
        ConfigFileError: If the format is unsupported or the file does not hold
            a mapping.
    """
    if isinstance(file_path, (str, Path)):
        path = Path.cwd() / Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        logger.debug("Config file '%s' not found, skipping.", path)
        return None

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ConfigFileError(f"Unsupported config format '{suffix}' for '{file_path}'.")

    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix == ".json":
                raw_config = json.load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raw_config = yaml.safe_load(config_file)
        except (json.JSONDecodeError, toml.TomlDecodeError, yaml.YAMLError) as error:
            raise ConfigFileError(f"Cannot parse '{file_path}': {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigFileError(
            f"The '{file_path}' file must contain a mapping of option names to values."
        )

    logger.debug("Loaded %d option(s) from '%s'.", len(raw_config), path)
    return raw_config
