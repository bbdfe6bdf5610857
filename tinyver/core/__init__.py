"""
Core functionality exports for tinyver.

This module provides convenient access to the parser and the versioned
name helpers. Importing from here keeps user-facing imports clean and
stable:

    from tinyver.core import parse_version, format_name
"""

from __future__ import annotations

from tinyver.core.parser import VersionParser, is_valid_version, parse_version
from tinyver.core.naming import (
    format_name,
    is_valid_name,
    split_versioned_name,
    validate_name,
)

__all__ = [
    "VersionParser",
    "parse_version",
    "is_valid_version",
    "format_name",
    "is_valid_name",
    "validate_name",
    "split_versioned_name",
]
