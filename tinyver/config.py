"""Configuration loading for tinyver.

Settings live in a ``[tinyver]`` table of ``tinyver.toml``, or in the
``[tool.tinyver]`` table of ``pyproject.toml``::

    [tinyver]
    validate_names = true
    output_format = "json"

An explicit path (``--config`` or ``TINYVER_CONFIG``) wins over discovery.
Otherwise ``tinyver.toml`` in the current directory is preferred over a
``pyproject.toml`` that declares a ``[tool.tinyver]`` table. Command-line
flags override whatever the file sets.
"""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import tomli

from tinyver.exceptions import ConfigError
from tinyver.utils.logger import get_logger
from tinyver.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VALIDATE_NAMES,
    OUTPUT_FORMATS,
)

logger = get_logger("config")

PYPROJECT_FILE_NAME = "pyproject.toml"

#: Option name -> (expected type, name used in error messages).
_OPTION_TYPES: Dict[str, Tuple[type, str]] = {
    "validate_names": (bool, "boolean"),
    "output_format": (str, "string"),
}


@dataclass(frozen=True)
class TinyVerConfig:
    """Settings read from a config file, with defaults for anything unset.

    Attributes:
        validate_names: ``tinyver name`` rejects base names that are not
            lowercase words joined by ``_``.
        output_format: Default ``--format`` of ``tinyver check``.
        source_path: File the settings came from, ``None`` for defaults.
    """

    validate_names: bool = DEFAULT_VALIDATE_NAMES
    output_format: str = DEFAULT_OUTPUT_FORMAT
    source_path: Optional[Path] = None

    def options(self) -> Dict[str, Any]:
        """Return the user-facing settings without ``source_path``."""
        return {name: getattr(self, name) for name in _OPTION_TYPES}


def load_config(config_path: Optional[Path] = None) -> TinyVerConfig:
    """Load settings from ``config_path``, or from the discovered file.

    Raises:
        ConfigError: The file is missing, unreadable or not TOML, or its
            table holds unknown keys or invalid values.
    """
    path = discover_config_file(config_path)
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return TinyVerConfig()

    logger.info("Loading configuration from %s", path)
    table = _tinyver_table(_read_toml(path), path)
    config = TinyVerConfig(source_path=path, **_validate(table, path))

    logger.debug("Configuration: %s", config.options())
    return config


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Return the configuration file to load, or ``None``.

    Raises:
        ConfigError: ``explicit_path`` is given but is not a file.
    """
    if explicit_path is not None:
        if not explicit_path.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        return explicit_path.resolve()

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        return dedicated

    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and _declares_tinyver(pyproject):
        return pyproject

    return None


def _declares_tinyver(pyproject: Path) -> bool:
    # Unreadable pyproject files are skipped during discovery
    try:
        data = _read_toml(pyproject)
    except ConfigError as exc:
        logger.debug("Skipping %s: %s", pyproject, exc)
        return False

    tool = data.get("tool")
    return isinstance(tool, dict) and "tinyver" in tool


def _tinyver_table(data: Dict[str, Any], path: Path) -> Dict[str, Any]:
    """Pick the tinyver table out of a parsed file (empty if absent)."""
    if path.name == PYPROJECT_FILE_NAME:
        tool = data.get("tool")
        data = tool if isinstance(tool, dict) else {}

    table = data.get("tinyver", {})
    if not isinstance(table, dict):
        raise ConfigError(
            "tinyver settings must be a TOML table",
            config_path=str(path),
        )
    return table


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _validate(table: Dict[str, Any], path: Path) -> Dict[str, Any]:
    """Check a tinyver table and return its values as config fields."""
    unknown = sorted(set(table) - set(_OPTION_TYPES))
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_path=str(path),
        )

    values: Dict[str, Any] = {}
    for option, value in table.items():
        expected, type_name = _OPTION_TYPES[option]
        if not isinstance(value, expected):
            raise ConfigError(
                f"{option} must be a {type_name}, got {type(value).__name__}",
                config_path=str(path),
                option=option,
            )
        values[option] = value

    if "output_format" in values:
        output_format = values["output_format"].lower()
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {values['output_format']!r}",
                config_path=str(path),
                option="output_format",
            )
        values["output_format"] = output_format

    return values
