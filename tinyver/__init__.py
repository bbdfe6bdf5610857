"""
tinyver: strict MAJOR.MINOR.PATCH[-PRERELEASE] version parsing

tinyver parses version strings into immutable structured values, rejects
malformed input with a precise error for every failure kind, and builds
versioned names such as ``app-1.2.3-rc.1``.

Example:
    >>> from tinyver import parse_version, format_name
    >>> version = parse_version("1.2.3-rc.1")
    >>> format_name("app", version)
    'app-1.2.3-rc.1'
"""

from __future__ import annotations

from tinyver.__version__ import __version__
from tinyver.models import (
    AlphanumericIdentifier,
    NumericIdentifier,
    PreReleaseIdentifier,
    Version,
)
from tinyver.core import (
    VersionParser,
    format_name,
    is_valid_name,
    is_valid_version,
    parse_version,
    split_versioned_name,
    validate_name,
)
from tinyver.exceptions import (
    ConfigError,
    EmptyPreReleaseIdentifierError,
    InvalidNameError,
    InvalidNumericFieldError,
    InvalidPreReleaseCharacterError,
    LeadingZeroInNumericIdentifierError,
    MalformedCoreError,
    MissingSeparatorError,
    TinyVerError,
    VersionParseError,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "tinyver Contributors"
__license__ = "MIT"
__description__ = "Strict MAJOR.MINOR.PATCH[-PRERELEASE] version parsing."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Models
    "Version",
    "PreReleaseIdentifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
    # Parsing and naming
    "VersionParser",
    "parse_version",
    "is_valid_version",
    "format_name",
    "is_valid_name",
    "validate_name",
    "split_versioned_name",
    # Errors
    "TinyVerError",
    "VersionParseError",
    "MalformedCoreError",
    "InvalidNumericFieldError",
    "EmptyPreReleaseIdentifierError",
    "InvalidPreReleaseCharacterError",
    "LeadingZeroInNumericIdentifierError",
    "InvalidNameError",
    "MissingSeparatorError",
    "ConfigError",
]
