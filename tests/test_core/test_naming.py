from __future__ import annotations

import pytest

from tinyver.core.naming import (
    format_name,
    is_valid_name,
    split_versioned_name,
    validate_name,
)
from tinyver.core.parser import parse_version
from tinyver.exceptions import (
    EmptyPreReleaseIdentifierError,
    InvalidNameError,
    MalformedCoreError,
    MissingSeparatorError,
)
from tinyver.models import AlphanumericIdentifier, NumericIdentifier, Version


@pytest.mark.unit
class TestFormatName:
    """Tests for format_name."""

    def test_without_prerelease(self) -> None:
        """Test the pre-release suffix is omitted when empty."""
        assert format_name("app", parse_version("1.2.3")) == "app-1.2.3"

    def test_with_prerelease(self) -> None:
        """Test identifiers are joined with dots after the core."""
        assert format_name("app", parse_version("1.2.3-rc.1")) == "app-1.2.3-rc.1"

    def test_alpha_prerelease(self) -> None:
        """Test a multi-identifier pre-release keeps its order."""
        version = parse_version("1.2.3-alpha.1")

        assert format_name("myapp", version) == "myapp-1.2.3-alpha.1"

    @pytest.mark.parametrize(
        "base",
        ["", "My App", "lib-core", "Ünïcode", "v2"],
        ids=["empty", "spaces", "hyphen", "unicode", "digit"],
    )
    def test_base_used_verbatim(self, base: str) -> None:
        """Test any base string is accepted without validation."""
        assert format_name(base, Version(0, 1, 0)) == f"{base}-0.1.0"

    def test_hand_built_version(self) -> None:
        """Test formatting works for any Version value."""
        version = Version(
            3,
            0,
            7,
            (AlphanumericIdentifier("beta"), NumericIdentifier("2")),
        )

        assert format_name("lib", version) == "lib-3.0.7-beta.2"


@pytest.mark.unit
class TestIsValidName:
    """Tests for package name validation."""

    @pytest.mark.parametrize("name", ["foo", "foo_bar", "foobar", "tiny_ver", "a", "a__b"])
    def test_valid_names(self, name: str) -> None:
        """Test lowercase names with inner underscores are valid."""
        assert is_valid_name(name) is True

    def test_empty_name(self) -> None:
        """Test the empty string is rejected."""
        assert is_valid_name("") is False

    @pytest.mark.parametrize("name", ["_foo", "foo_", "_"])
    def test_underscore_at_edges(self, name: str) -> None:
        """Test names cannot start or end with an underscore."""
        assert is_valid_name(name) is False

    @pytest.mark.parametrize("name", ["Foo", "fooBar", "FOOBAR"])
    def test_uppercase_letters(self, name: str) -> None:
        """Test uppercase letters are rejected."""
        assert is_valid_name(name) is False

    @pytest.mark.parametrize("name", ["foo-bar", "foo1bar", "foo!bar", "foo bar", "fé"])
    def test_invalid_characters(self, name: str) -> None:
        """Test anything other than a-z and '_' is rejected."""
        assert is_valid_name(name) is False

    def test_validate_name_returns_name(self) -> None:
        """Test validate_name passes valid names through."""
        assert validate_name("tiny_ver") == "tiny_ver"

    def test_validate_name_raises(self) -> None:
        """Test validate_name raises InvalidNameError for bad names."""
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name("Bad-Name")

        assert exc_info.value.name == "Bad-Name"
        assert "Bad-Name" in str(exc_info.value)


@pytest.mark.unit
class TestSplitVersionedName:
    """Tests for split_versioned_name."""

    def test_split_plain(self) -> None:
        """Test splitting a name without pre-release."""
        name, version = split_versioned_name("mypackage-1.2.3")

        assert name == "mypackage"
        assert version == Version(1, 2, 3)

    def test_split_with_prerelease(self) -> None:
        """Test only the first hyphen separates name and version."""
        name, version = split_versioned_name("mypackage-1.2.3-beta")

        assert name == "mypackage"
        assert version.prerelease == (AlphanumericIdentifier("beta"),)

    def test_missing_separator(self) -> None:
        """Test a name without '-' raises MissingSeparatorError."""
        with pytest.raises(MissingSeparatorError) as exc_info:
            split_versioned_name("mypackage")

        assert exc_info.value.full_name == "mypackage"

    def test_version_errors_propagate(self) -> None:
        """Test parse failures surface as their specific error."""
        with pytest.raises(MalformedCoreError):
            split_versioned_name("mypackage-1.2")

        with pytest.raises(EmptyPreReleaseIdentifierError):
            split_versioned_name("mypackage-1.2.3-")

    def test_name_with_hyphen_does_not_split_cleanly(self) -> None:
        """Test names containing '-' cannot be recovered."""
        with pytest.raises(MalformedCoreError):
            split_versioned_name("my-package-1.2.3")

    @pytest.mark.parametrize("text", ["1.2.3", "0.0.1-rc.1", "2.10.0-x-y.0"])
    def test_format_then_split(self, text: str) -> None:
        """Test split_versioned_name reverses format_name for valid names."""
        version = parse_version(text)

        assert split_versioned_name(format_name("tiny_ver", version)) == (
            "tiny_ver",
            version,
        )
