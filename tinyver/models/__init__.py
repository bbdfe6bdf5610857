"""
Unified data model exports for tinyver.

This module re-exports the core data models to provide a stable and
convenient public API. Users can import models directly from
``tinyver.models`` instead of individual submodules.

Example:
    >>> from tinyver.models import Version, NumericIdentifier
"""

from __future__ import annotations

from tinyver.models.version import (
    AlphanumericIdentifier,
    NumericIdentifier,
    PreReleaseIdentifier,
    Version,
)

__all__ = [
    "Version",
    "PreReleaseIdentifier",
    "NumericIdentifier",
    "AlphanumericIdentifier",
]
