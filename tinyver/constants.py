"""
Centralized constants for tinyver.

This module defines immutable values used across tinyver, including the
version grammar separators, configuration defaults, CLI output formats,
and logging formats. All values are intended to be treated as read-only.
"""

from typing import Final, FrozenSet, Sequence

# ---------------------------------------------------------------------------
# Version grammar
# ---------------------------------------------------------------------------

#: Separator between the core triple and the pre-release section.
PRERELEASE_SEPARATOR: Final[str] = "-"

#: Separator between core fields and between pre-release identifiers.
COMPONENT_SEPARATOR: Final[str] = "."

#: Separator between a base name and its version in a versioned name.
NAME_SEPARATOR: Final[str] = "-"

#: Names of the three core fields, in textual order.
CORE_FIELDS: Final[Sequence[str]] = ("major", "minor", "patch")

#: ASCII digits accepted in numeric fields and identifiers.
ASCII_DIGITS: Final[FrozenSet[str]] = frozenset("0123456789")

#: Characters accepted in pre-release identifiers.
PRERELEASE_CHARACTERS: Final[FrozenSet[str]] = frozenset(
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "-"
)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

#: Dedicated configuration file name.
CONFIG_FILE_NAME: Final[str] = "tinyver.toml"

#: Environment variable holding an explicit configuration path.
CONFIG_ENV_VAR: Final[str] = "TINYVER_CONFIG"

#: Validate base names passed to ``tinyver name`` by default.
DEFAULT_VALIDATE_NAMES: Final[bool] = True

#: Output formats supported by ``tinyver check``.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "simple", "json")

#: Default output format for ``tinyver check``.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130
