"""Strict parser for ``MAJOR.MINOR.PATCH[-PRERELEASE]`` version strings.

Accepted grammar::

    version        = core [ "-" prerelease ]
    core           = digits "." digits "." digits
    digits         = 1*DIGIT
    prerelease     = identifier *( "." identifier )
    identifier     = 1*( ALPHA / DIGIT / "-" )

Fully numeric pre-release identifiers must not carry a leading zero unless
they are exactly ``"0"``. Build metadata (``+...``) is not part of the
grammar.

The input is scanned once, left to right, and the first violation is raised
as a distinct :class:`~tinyver.exceptions.VersionParseError` subclass. No
partially built :class:`~tinyver.models.Version` ever escapes.

Typical usage::

    from tinyver.core import parse_version

    version = parse_version("1.2.3-rc.1")
    version.major                        # 1
    [str(i) for i in version.prerelease] # ["rc", "1"]

    is_valid_version("1.2")              # False
"""

from __future__ import annotations

from typing import List, Tuple

from tinyver.utils import get_logger
from tinyver.models.version import (
    AlphanumericIdentifier,
    NumericIdentifier,
    PreReleaseIdentifier,
    Version,
)
from tinyver.exceptions import (
    EmptyPreReleaseIdentifierError,
    InvalidNumericFieldError,
    InvalidPreReleaseCharacterError,
    LeadingZeroInNumericIdentifierError,
    MalformedCoreError,
    VersionParseError,
)
from tinyver.constants import (
    ASCII_DIGITS,
    COMPONENT_SEPARATOR,
    CORE_FIELDS,
    PRERELEASE_CHARACTERS,
    PRERELEASE_SEPARATOR,
)


class VersionParser:
    """Stateless parser turning version strings into :class:`Version` values.

    The parser keeps no state between calls, so a single instance can be
    shared freely across threads. Module-level :func:`parse_version` and
    :func:`is_valid_version` use a shared default instance.

    Example::

        >>> parser = VersionParser()
        >>> parser.parse("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=())
    """

    def __init__(self) -> None:
        self.logger = get_logger("parser")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Version:
        """Parse ``text`` into a :class:`Version`.

        Args:
            text: Version string such as ``"1.2.3"`` or ``"1.2.3-rc.1"``.

        Returns:
            The parsed version.

        Raises:
            TypeError: ``text`` is not a string.
            MalformedCoreError: Core does not have exactly three components.
            InvalidNumericFieldError: A core component is empty or not digits.
            EmptyPreReleaseIdentifierError: A pre-release identifier is empty.
            InvalidPreReleaseCharacterError: An identifier holds a character
                outside ``[0-9A-Za-z-]``.
            LeadingZeroInNumericIdentifierError: A numeric identifier has a
                leading zero.
        """
        if not isinstance(text, str):
            raise TypeError(
                f"version must be a string, not {type(text).__name__}"
            )

        try:
            version = self._parse(text)
        except VersionParseError as exc:
            self.logger.debug("Rejected version %r: %s", text, exc.kind)
            raise

        self.logger.debug("Parsed version %r -> %r", text, version)
        return version

    def is_valid(self, text: str) -> bool:
        """Return True if ``text`` parses as a version."""
        try:
            self.parse(text)
        except VersionParseError:
            return False
        return True

    # ------------------------------------------------------------------
    # Parsing steps
    # ------------------------------------------------------------------

    def _parse(self, text: str) -> Version:
        core, separator, prerelease_raw = text.partition(PRERELEASE_SEPARATOR)

        major, minor, patch = self._parse_core(core, text)

        if not separator:
            return Version(major, minor, patch)

        prerelease = self._parse_prerelease(prerelease_raw, text)
        return Version(major, minor, patch, prerelease)

    def _parse_core(self, core: str, text: str) -> Tuple[int, int, int]:
        """Parse the dot-separated ``MAJOR.MINOR.PATCH`` triple."""
        components = core.split(COMPONENT_SEPARATOR)
        if len(components) != len(CORE_FIELDS):
            raise MalformedCoreError(len(components), text=text)

        values: List[int] = []
        for field, component in zip(CORE_FIELDS, components):
            if not component or not _is_digits(component):
                raise InvalidNumericFieldError(field, component, text=text)
            values.append(int(component))

        major, minor, patch = values
        return major, minor, patch

    def _parse_prerelease(
        self,
        raw: str,
        text: str,
    ) -> Tuple[PreReleaseIdentifier, ...]:
        """Split and classify the pre-release section, preserving order."""
        identifiers: List[PreReleaseIdentifier] = []

        for position, identifier in enumerate(raw.split(COMPONENT_SEPARATOR)):
            if not identifier:
                raise EmptyPreReleaseIdentifierError(position, text=text)

            for character in identifier:
                if character not in PRERELEASE_CHARACTERS:
                    raise InvalidPreReleaseCharacterError(
                        identifier, character, text=text
                    )

            if _is_digits(identifier):
                if len(identifier) > 1 and identifier.startswith("0"):
                    raise LeadingZeroInNumericIdentifierError(identifier, text=text)
                identifiers.append(NumericIdentifier(identifier))
            else:
                identifiers.append(AlphanumericIdentifier(identifier))

        return tuple(identifiers)


def _is_digits(value: str) -> bool:
    """Return True if ``value`` consists only of ASCII digits.

    ``str.isdigit`` is not used since it accepts non-ASCII digits such as
    ``"²"`` or ``"٣"``.
    """
    return all(character in ASCII_DIGITS for character in value)


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------

_default_parser = VersionParser()


def parse_version(text: str) -> Version:
    """Parse ``text`` with the shared :class:`VersionParser`.

    See :meth:`VersionParser.parse` for the raised errors.
    """
    return _default_parser.parse(text)


def is_valid_version(text: str) -> bool:
    """Return True if ``text`` is a valid version string."""
    return _default_parser.is_valid(text)
