"""
Command-line interface for tinyver.

The ``tinyver`` group owns the global options. It loads the configuration
once and hands it to the subcommands through :class:`TinyVerContext`.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Sequence

import click

from tinyver.config import load_config
from tinyver.__version__ import __version__
from tinyver.context import TinyVerContext
from tinyver.commands.check import check
from tinyver.commands.name import name, split
from tinyver.exceptions import ConfigError, TinyVerError
from tinyver.utils.logger import get_logger, setup_logging
from tinyver.utils.console import print_error, print_warning, reconfigure_console
from tinyver.constants import (
    CONFIG_ENV_VAR,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
)

logger = get_logger("cli")

#: Log level per ``-v`` count; anything past the end means DEBUG.
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    help="Path to a tinyver.toml or pyproject.toml file.",
)
@click.option("--verbose", "-v", count=True, help="Log more (-v info, -vv debug).")
@click.option(
    "--color/--no-color",
    default=True,
    envvar="TINYVER_COLOR",
    help="Enable or disable colored output.",
)
@click.version_option(__version__, prog_name="tinyver", message="%(prog)s %(version)s")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int, color: bool) -> None:
    """Validate MAJOR.MINOR.PATCH[-PRERELEASE] versions and versioned names.

    \b
    Examples:
      tinyver check 1.2.3-rc.1 1.2
      tinyver name myapp 1.2.3
      tinyver -v split myapp-1.2.3-beta
    """
    _configure_logging(verbose)
    _apply_color(color)

    try:
        loaded = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(EXIT_FAILURE) from exc

    tinyver_ctx = ctx.ensure_object(TinyVerContext)
    tinyver_ctx.config_path = config or loaded.source_path
    tinyver_ctx.verbose = verbose
    tinyver_ctx.color = color
    tinyver_ctx.config = loaded

    logger.debug("tinyver %s, config %s", __version__, tinyver_ctx.config_path)


for _command in (check, name, split):
    cli.add_command(_command)


def _configure_logging(verbose: int) -> None:
    level = _VERBOSITY_LEVELS[min(max(verbose, 0), len(_VERBOSITY_LEVELS) - 1)]
    setup_logging(level=level, verbose=level == logging.DEBUG)


def _apply_color(color: bool) -> None:
    # NO_COLOR is read by Rich and by the log formatter
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code.

    0 on success, 1 when a command fails, 2 for usage errors reported by
    Click and 130 when interrupted.
    """
    try:
        cli(args=argv, prog_name="tinyver", standalone_mode=False)
    except (click.Abort, KeyboardInterrupt):
        print_warning("Interrupted", prefix="[ABORTED]")
        return EXIT_INTERRUPTED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        if exc.code is None:
            return EXIT_OK
        return exc.code if isinstance(exc.code, int) else EXIT_FAILURE
    except TinyVerError as exc:
        print_error(str(exc))
        return EXIT_FAILURE
    except Exception as exc:
        logger.debug("Unhandled exception", exc_info=True)
        print_error(f"Unexpected error: {exc}")
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
