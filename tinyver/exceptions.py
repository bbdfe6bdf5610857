"""
Custom exception hierarchy for tinyver.

This module defines structured exception types used across tinyver.
All exceptions inherit from :class:`TinyVerError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Version parsing failures derive from :class:`VersionParseError`. Each
rejection path has its own subclass, identified by the class-level
``kind`` string, so callers can tell them apart without inspecting
messages::

    try:
        parse_version("1.2.3-01")
    except LeadingZeroInNumericIdentifierError as exc:
        print(exc.identifier)  # "01"
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class TinyVerError(Exception):
    """Base exception for all tinyver errors.

    All tinyver-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


# ---------------------------------------------------------------------------
# Version parsing
# ---------------------------------------------------------------------------


class VersionParseError(TinyVerError):
    """Raised when a version string cannot be parsed.

    Args:
        message: Error description.
        text: The full input that was being parsed.
        details: Additional metadata specific to the failure.
    """

    __slots__ = ("text",)

    #: Stable identifier of the failure, overridden by each subclass.
    kind: str = "VersionParseError"

    def __init__(
        self,
        message: str,
        *,
        text: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        merged: MutableMapping[str, Any] = {}
        if text is not None:
            merged["version"] = _truncate(text)
        if details:
            merged.update(details)

        super().__init__(message, merged)

        self.text = text


class MalformedCoreError(VersionParseError):
    """Raised when the core section does not have exactly three components."""

    __slots__ = ("components",)

    kind = "MalformedCore"

    def __init__(self, components: int, *, text: Optional[str] = None) -> None:
        super().__init__(
            "Version core must have exactly 3 dot-separated components, "
            f"got {components}",
            text=text,
        )
        self.components = components


class InvalidNumericFieldError(VersionParseError):
    """Raised when a core component is empty or contains a non-digit."""

    __slots__ = ("field", "component")

    kind = "InvalidNumericField"

    def __init__(
        self,
        field: str,
        component: str,
        *,
        text: Optional[str] = None,
    ) -> None:
        if component:
            message = f"Invalid {field} field {component!r}: expected ASCII digits only"
        else:
            message = f"Empty {field} field"
        super().__init__(message, text=text)
        self.field = field
        self.component = component


class EmptyPreReleaseIdentifierError(VersionParseError):
    """Raised when a pre-release identifier between dots is empty."""

    __slots__ = ("position",)

    kind = "EmptyPreReleaseIdentifier"

    def __init__(self, position: int, *, text: Optional[str] = None) -> None:
        super().__init__(
            f"Empty pre-release identifier at position {position}",
            text=text,
        )
        self.position = position


class InvalidPreReleaseCharacterError(VersionParseError):
    """Raised when a pre-release identifier holds a character outside
    ``[0-9A-Za-z-]``."""

    __slots__ = ("identifier", "character")

    kind = "InvalidPreReleaseCharacter"

    def __init__(
        self,
        identifier: str,
        character: str,
        *,
        text: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"Invalid character {character!r} in pre-release identifier "
            f"{identifier!r}",
            text=text,
        )
        self.identifier = identifier
        self.character = character


class LeadingZeroInNumericIdentifierError(VersionParseError):
    """Raised when a numeric pre-release identifier has a leading zero."""

    __slots__ = ("identifier",)

    kind = "LeadingZeroInNumericIdentifier"

    def __init__(self, identifier: str, *, text: Optional[str] = None) -> None:
        super().__init__(
            f"Numeric pre-release identifier {identifier!r} must not have "
            "leading zeros",
            text=text,
        )
        self.identifier = identifier


# ---------------------------------------------------------------------------
# Versioned names
# ---------------------------------------------------------------------------


class InvalidNameError(TinyVerError):
    """Raised when a package name fails validation.

    Args:
        name: The rejected name.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid package name {name!r}: use lowercase letters with "
            "optional '_' separators, starting and ending with a letter",
        )
        self.name = name


class MissingSeparatorError(TinyVerError):
    """Raised when a versioned name has no ``-`` between name and version.

    Args:
        full_name: The versioned name that could not be split.
    """

    __slots__ = ("full_name",)

    def __init__(self, full_name: str) -> None:
        super().__init__(
            f"Versioned name {full_name!r} has no '-' separating name and version",
        )
        self.full_name = full_name


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(TinyVerError):
    """Raised when a configuration file is missing or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
