from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from tinyver.cli import cli
from tinyver.commands.check import _check_one
from tinyver.core import VersionParser


@pytest.mark.unit
class TestCheckOne:
    """Tests for the per-version result builder."""

    def test_valid_version(self) -> None:
        """Test a valid version is described field by field."""
        result = _check_one(VersionParser(), "1.2.3-rc.1")

        assert result == {
            "input": "1.2.3-rc.1",
            "valid": True,
            "major": 1,
            "minor": 2,
            "patch": 3,
            "prerelease": [
                {"identifier": "rc", "type": "alphanumeric"},
                {"identifier": "1", "type": "numeric"},
            ],
        }

    def test_invalid_version(self) -> None:
        """Test an invalid version reports the error kind."""
        result = _check_one(VersionParser(), "1.2.3-01")

        assert result["valid"] is False
        assert result["error"] == "LeadingZeroInNumericIdentifier"
        assert "'01'" in result["message"]


@pytest.mark.integration
class TestCheckCommand:
    """Tests for ``tinyver check``."""

    def test_json_output_all_valid(self, runner: CliRunner, cli_env: Path) -> None:
        """Test JSON output for valid versions exits with 0."""
        result = runner.invoke(cli, ["check", "--format", "json", "1.2.3", "0.0.0-0"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [item["input"] for item in data] == ["1.2.3", "0.0.0-0"]
        assert all(item["valid"] for item in data)
        assert data[1]["prerelease"] == [{"identifier": "0", "type": "numeric"}]

    def test_json_output_with_invalid(self, runner: CliRunner, cli_env: Path) -> None:
        """Test any invalid version makes the command exit with 1."""
        result = runner.invoke(cli, ["check", "-f", "json", "1.2.3", "1.2"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data[0]["valid"] is True
        assert data[1]["valid"] is False
        assert data[1]["error"] == "MalformedCore"

    @pytest.mark.parametrize("versions", [["1.2.3"], ["1.2.3", "1.2"]])
    def test_json_output_stays_parseable_when_verbose(
        self, runner: CliRunner, cli_env: Path, versions: list
    ) -> None:
        """Test -v adds no summary line after the JSON document."""
        result = runner.invoke(cli, ["-v", "check", "--format", "json", *versions])

        data = json.loads(result.stdout)
        assert [item["input"] for item in data] == versions
        assert "Checking" in result.stderr

    def test_simple_output_summary_when_verbose(
        self, runner: CliRunner, cli_env: Path
    ) -> None:
        result = runner.invoke(cli, ["-v", "check", "--format", "simple", "1.2.3"])

        assert result.exit_code == 0
        assert result.stdout == "[VALID] 1.2.3\n[OK] All 1 version(s) are valid\n"

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("1.2.x", "InvalidNumericField"),
            ("1.2.3-", "EmptyPreReleaseIdentifier"),
            ("1.2.3-a..b", "EmptyPreReleaseIdentifier"),
            ("1.2.3-a_b", "InvalidPreReleaseCharacter"),
            ("1.2.3-01", "LeadingZeroInNumericIdentifier"),
            ("1.2.3.4", "MalformedCore"),
        ],
    )
    def test_simple_output_reports_kind(
        self, runner: CliRunner, cli_env: Path, text: str, kind: str
    ) -> None:
        """Test simple output names the violation kind."""
        result = runner.invoke(cli, ["check", "--format", "simple", text])

        assert result.exit_code == 1
        assert f"[INVALID] {text} {kind}" in result.output

    def test_simple_output_valid(self, runner: CliRunner, cli_env: Path) -> None:
        """Test simple output marks valid versions."""
        result = runner.invoke(cli, ["check", "--format", "simple", "1.2.3-rc.1"])

        assert result.exit_code == 0
        assert "[VALID] 1.2.3-rc.1" in result.output

    def test_table_output(self, runner: CliRunner, cli_env: Path) -> None:
        """Test the default table output includes a summary."""
        result = runner.invoke(cli, ["check", "1.2.3", "1.2"])

        assert result.exit_code == 1
        assert "Version Check" in result.output
        assert "MalformedCore" in result.output
        assert "1 of 2 version(s) are invalid" in result.output

    def test_table_output_all_valid(self, runner: CliRunner, cli_env: Path) -> None:
        """Test the success summary when every version is valid."""
        result = runner.invoke(cli, ["check", "1.2.3"])

        assert result.exit_code == 0
        assert "All 1 version(s) are valid" in result.output

    def test_format_from_config(self, runner: CliRunner, cli_env: Path) -> None:
        """Test the configured output_format is used by default."""
        (cli_env / "tinyver.toml").write_text(
            '[tinyver]\noutput_format = "json"\n', encoding="utf-8"
        )

        result = runner.invoke(cli, ["check", "1.2.3"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["major"] == 1

    def test_flag_overrides_config(self, runner: CliRunner, cli_env: Path) -> None:
        """Test --format wins over the configured default."""
        (cli_env / "tinyver.toml").write_text(
            '[tinyver]\noutput_format = "json"\n', encoding="utf-8"
        )

        result = runner.invoke(cli, ["check", "--format", "simple", "1.2.3"])

        assert "[VALID] 1.2.3" in result.output

    def test_requires_an_argument(self, runner: CliRunner, cli_env: Path) -> None:
        """Test check without versions is a usage error."""
        result = runner.invoke(cli, ["check"])

        assert result.exit_code == 2
