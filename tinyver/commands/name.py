"""Versioned name commands for tinyver.

``tinyver name`` joins a base name and a version into ``<base>-<version>``;
``tinyver split`` reverses it.

Typical usage::

    $ tinyver name myapp 1.2.3-alpha.1
    myapp-1.2.3-alpha.1

    # Accept any base name, e.g. with uppercase letters or digits
    $ tinyver name --no-validate MyApp2 1.0.0
    MyApp2-1.0.0

    $ tinyver split myapp-1.2.3-alpha.1
    name:       myapp
    version:    1.2.3-alpha.1
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from tinyver.constants import EXIT_FAILURE
from tinyver.exceptions import TinyVerError
from tinyver.context import pass_context, TinyVerContext
from tinyver.core import (
    format_name,
    parse_version,
    split_versioned_name,
    validate_name,
)
from tinyver.utils import get_logger, print_error

logger = get_logger("commands.name")


@click.command()
@click.argument("base")
@click.argument("version")
@click.option(
    "--validate/--no-validate",
    default=None,
    help="Require BASE to be lowercase letters with '_' separators "
    "(defaults to the configured validate_names).",
)
@pass_context
def name(
    ctx: TinyVerContext,
    base: str,
    version: str,
    validate: Optional[bool],
) -> None:
    """Print BASE joined with VERSION as BASE-VERSION."""
    if validate is None:
        validate = ctx.get_config().validate_names

    try:
        if validate:
            validate_name(base)
        parsed = parse_version(version)
    except TinyVerError as e:
        print_error(f"{e}")
        sys.exit(EXIT_FAILURE)

    logger.debug("Formatting name %r with version %s", base, parsed)
    click.echo(format_name(base, parsed))


@click.command()
@click.argument("full_name")
@pass_context
def split(ctx: TinyVerContext, full_name: str) -> None:
    """Split FULL_NAME (NAME-VERSION) into its name and version."""
    try:
        base, version = split_versioned_name(full_name)
    except TinyVerError as e:
        print_error(f"{e}")
        sys.exit(EXIT_FAILURE)

    logger.debug("Split %r into %r and %s", full_name, base, version)
    click.echo(f"name:       {base}")
    click.echo(f"version:    {version}")
    if ctx.verbose > 0:
        click.echo(f"core:       {version.core}")
        click.echo(f"prerelease: {version.prerelease_text or '-'}")
