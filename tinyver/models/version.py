"""
Version data model for tinyver.

This module defines the immutable structured representation of a parsed
``MAJOR.MINOR.PATCH[-PRERELEASE]`` string. Instances are produced by
:func:`tinyver.core.parser.parse_version`; constructing them by hand skips
validation and is intended for tests and trusted callers only.

Pre-release identifiers are a tagged variant: every identifier is either a
:class:`NumericIdentifier` or an :class:`AlphanumericIdentifier`, decided
once at parse time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tinyver.constants import COMPONENT_SEPARATOR, PRERELEASE_SEPARATOR


@dataclass(frozen=True)
class PreReleaseIdentifier:
    """
    A single dot-separated token of a pre-release section.

    Attributes:
        text: The identifier exactly as written in the version string.
    """

    text: str

    @property
    def is_numeric(self) -> bool:
        """Return True for :class:`NumericIdentifier` instances."""
        return False

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class NumericIdentifier(PreReleaseIdentifier):
    """Identifier made only of ASCII digits, without a leading zero unless
    it is exactly ``"0"``."""

    @property
    def is_numeric(self) -> bool:
        return True

    @property
    def value(self) -> int:
        """Return the identifier as an integer."""
        return int(self.text)


@dataclass(frozen=True)
class AlphanumericIdentifier(PreReleaseIdentifier):
    """Identifier holding at least one ASCII letter or hyphen."""


@dataclass(frozen=True)
class Version:
    """
    Parsed ``MAJOR.MINOR.PATCH[-PRERELEASE]`` version.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Ordered pre-release identifiers; empty when the version
            has no pre-release section.

    Example:
        >>> version = Version.parse("1.2.3-rc.1")
        >>> version.major, version.prerelease_text
        (1, 'rc.1')
        >>> str(version)
        '1.2.3-rc.1'
    """

    major: int
    minor: int
    patch: int
    prerelease: Tuple[PreReleaseIdentifier, ...] = ()

    def __post_init__(self) -> None:
        # Keep the value hashable when callers pass a list
        object.__setattr__(self, "prerelease", tuple(self.prerelease))

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse ``text`` into a :class:`Version`.

        Shortcut for :func:`tinyver.core.parser.parse_version`.
        """
        # Imported lazily; the parser module depends on this one
        from tinyver.core.parser import parse_version

        return parse_version(text)

    @property
    def core(self) -> str:
        """Return the ``MAJOR.MINOR.PATCH`` part."""
        return COMPONENT_SEPARATOR.join(
            str(part) for part in (self.major, self.minor, self.patch)
        )

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries pre-release identifiers."""
        return bool(self.prerelease)

    @property
    def prerelease_text(self) -> Optional[str]:
        """Return the pre-release section as written, or ``None``."""
        if not self.prerelease:
            return None
        return COMPONENT_SEPARATOR.join(str(ident) for ident in self.prerelease)

    def __str__(self) -> str:
        """Return the canonical textual form."""
        if self.prerelease:
            return f"{self.core}{PRERELEASE_SEPARATOR}{self.prerelease_text}"
        return self.core
