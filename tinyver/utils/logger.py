"""
Logging for tinyver.

All loggers live under the ``tinyver`` namespace. The namespace root
carries a ``NullHandler`` until :func:`setup_logging` installs a stream
handler, so importing the library never prints anything.
"""

from __future__ import annotations

import sys
import logging
import threading
from typing import IO, Optional

from tinyver.utils.console import color_supported
from tinyver.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "tinyver"

_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"

_setup_lock = threading.Lock()

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of standard levels."""

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if color is None:
            return super().format(record)

        # Other handlers receive the same record, so color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(colored)


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Send tinyver records at ``level`` and above to ``stream``.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Minimum level to emit.
        verbose: Use the format with timestamps and logger names.
        stream: Destination; defaults to ``sys.stderr``.
    """
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ColoredFormatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            use_color=color_supported(stream),
        )
    )

    with _setup_lock:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.handlers[:] = [handler]
        root.setLevel(level)
        root.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``tinyver.<name>``, or the namespace root when ``name`` is empty."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
