from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

from tinyver.utils.console import reconfigure_console
from tinyver.utils.logger import ROOT_LOGGER_NAME


def reset_tinyver_logger() -> None:
    """Put the tinyver logger back in its import-time state."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers[:] = [logging.NullHandler()]
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def cli_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run CLI invocations in an empty directory with predictable output.

    - Changes into ``tmp_path`` so no project configuration is discovered
    - Disables colors and widens the Rich console to avoid wrapping
    - Resets logging and the console singleton afterwards

    Yields:
        The temporary working directory.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.delenv("TINYVER_CONFIG", raising=False)
    monkeypatch.delenv("TINYVER_COLOR", raising=False)
    reconfigure_console()

    yield tmp_path

    reset_tinyver_logger()
    reconfigure_console()


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click test runner."""
    return CliRunner()
