"""
Shared context object for tinyver CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from tinyver.config import TinyVerConfig


class TinyVerContext:
    """Global context object for tinyver CLI commands.

    An instance of this class is created once per CLI invocation and
    passed to commands using Click's context mechanism.

    Attributes:
        config_path: Path to the tinyver configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before loading.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[TinyVerConfig] = None

    def get_config(self) -> TinyVerConfig:
        """Return the loaded configuration, or defaults if none was loaded."""
        return self.config if self.config is not None else TinyVerConfig()


#: Click decorator for injecting :class:`TinyVerContext` into commands.
pass_context = click.make_pass_decorator(TinyVerContext, ensure=True)
