"""
Rich console output for the tinyver CLI.

Everything a command shows the user goes through here. Diagnostics go
through :mod:`tinyver.utils.logger` instead.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from typing import IO, Any, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console

TINYVER_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "valid": "green",
        "invalid": "red",
    }
)


def color_supported(stream: IO[str]) -> bool:
    """Return True when ANSI colors may be written to ``stream``.

    ``NO_COLOR`` and ``CI`` switch colors off; otherwise ``stream`` must be
    a terminal.
    """
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@lru_cache(maxsize=None)
def get_console() -> Console:
    """Return the shared console, built on first use."""
    use_color = color_supported(sys.stdout)
    return Console(theme=TINYVER_THEME, no_color=not use_color, highlight=use_color)


def reconfigure_console() -> None:
    """Drop the shared console so the next one sees the current environment."""
    get_console.cache_clear()


def _print_status(message: str, prefix: str, style: str) -> None:
    # User input may contain square brackets
    get_console().print(f"{prefix} {message}", style=style, markup=False, highlight=False)


def print_success(message: str, *, prefix: str = "[OK]") -> None:
    _print_status(message, prefix, "success")


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _print_status(message, prefix, "error")


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _print_status(message, prefix, "warning")


def print_table(rows: List[Dict[str, Any]], *, title: Optional[str] = None) -> None:
    """Render ``rows`` as a table.

    Columns are the keys of the first row and cells are Rich markup, so
    callers escape untrusted text themselves.
    """
    if not rows:
        return

    columns = list(rows[0])
    table = Table(title=title, header_style="bold")
    for column in columns:
        table.add_column(column, overflow="fold")
    for row in rows:
        table.add_row(*(str(row.get(column, "")) for column in columns))

    get_console().print(table)


def status_markup(valid: bool) -> str:
    """Return ``valid`` or ``invalid`` wrapped in its theme style."""
    label = "valid" if valid else "invalid"
    return f"[{label}]{label}[/{label}]"
