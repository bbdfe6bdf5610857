"""Versioned name helpers.

A versioned name joins a base name and a version with ``-``::

    >>> format_name("app", parse_version("1.2.3-rc.1"))
    'app-1.2.3-rc.1'
    >>> split_versioned_name("app-1.2.3-rc.1")
    ('app', Version(major=1, minor=2, patch=3, prerelease=(...)))

:func:`format_name` accepts any base verbatim. Package names meant to be
split back with :func:`split_versioned_name` should pass
:func:`is_valid_name`, which rules out the ``-`` separator.
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import Tuple

from tinyver.models.version import Version
from tinyver.core.parser import parse_version
from tinyver.exceptions import InvalidNameError, MissingSeparatorError
from tinyver.constants import NAME_SEPARATOR


def format_name(base: str, version: Version) -> str:
    """Return ``"<base>-<version>"``.

    The pre-release suffix is omitted when ``version`` has none. ``base``
    is not validated.

    Args:
        base: Base identifier, used as-is.
        version: Version to append.

    Returns:
        The versioned name.
    """
    return f"{base}{NAME_SEPARATOR}{version}"


def is_valid_name(name: str) -> bool:
    """Check whether ``name`` is a valid package name.

    The name must:

    - be non-empty;
    - consist solely of lowercase ASCII letters, with ``_`` as an optional
      separator;
    - start and end with a letter.
    """
    if not name or name[0] == "_" or name[-1] == "_":
        return False
    return all(c in ascii_lowercase or c == "_" for c in name)


def validate_name(name: str) -> str:
    """Return ``name`` unchanged if valid.

    Raises:
        InvalidNameError: ``name`` fails :func:`is_valid_name`.
    """
    if not is_valid_name(name):
        raise InvalidNameError(name)
    return name


def split_versioned_name(full_name: str) -> Tuple[str, Version]:
    """Split a versioned name into its base name and parsed version.

    The split happens at the first ``-``; everything after it must be a
    valid version string.

    Args:
        full_name: A string as produced by :func:`format_name`, e.g.
            ``"mypackage-1.2.3"`` or ``"mypackage-1.2.3-beta"``.

    Returns:
        Tuple of base name and :class:`Version`.

    Raises:
        MissingSeparatorError: ``full_name`` contains no ``-``.
        VersionParseError: The part after the first ``-`` is not a valid
            version (the specific subclass is propagated).
    """
    name, separator, version_text = full_name.partition(NAME_SEPARATOR)
    if not separator:
        raise MissingSeparatorError(full_name)

    return name, parse_version(version_text)
