"""Console and logging helpers shared by the tinyver commands."""

from __future__ import annotations

from tinyver.utils.logger import get_logger, setup_logging
from tinyver.utils.console import (
    get_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
    status_markup,
)

__all__ = [
    "get_console",
    "get_logger",
    "print_error",
    "print_success",
    "print_table",
    "print_warning",
    "reconfigure_console",
    "setup_logging",
    "status_markup",
]
