"""Check command implementation for tinyver.

Validates one or more version strings and reports, for each, either its
parsed fields or the kind of violation that rejected it.

Typical usage::

    # Validate a few versions, rendered as a table
    $ tinyver check 1.2.3 1.2.3-rc.1 1.2

    # One line per version, suitable for grep
    $ tinyver check --format simple 1.2.3-01

    # Machine-readable JSON output
    $ tinyver check --format json 1.2.3 > report.json

The command exits with status 1 when at least one input is invalid.
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List, Optional, Sequence

import click
from rich.markup import escape

from tinyver.constants import EXIT_FAILURE, EXIT_OK, OUTPUT_FORMATS
from tinyver.core import VersionParser
from tinyver.exceptions import VersionParseError
from tinyver.context import pass_context, TinyVerContext
from tinyver.utils import (
    get_logger,
    print_success,
    print_table,
    print_warning,
    get_console,
    status_markup,
)

logger = get_logger("commands.check")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def check(
    ctx: TinyVerContext,
    versions: Sequence[str],
    output_format: Optional[str],
) -> None:
    """Validate VERSIONS and show their parsed components.

    Each VERSION must follow MAJOR.MINOR.PATCH[-PRERELEASE].

    Exits:
        0 if every version is valid, 1 otherwise.
    """
    output_format = (output_format or ctx.get_config().output_format).lower()

    logger.info("Checking %d version(s)", len(versions))

    parser = VersionParser()
    results = [_check_one(parser, text) for text in versions]
    invalid_count = sum(1 for result in results if not result["valid"])

    if output_format == "table":
        _display_table(results)
    elif output_format == "simple":
        _display_simple(results)
    else:  # json
        _display_json(results)

    # JSON output must stay parseable
    if output_format == "table" or (output_format == "simple" and ctx.verbose > 0):
        if invalid_count:
            print_warning(f"{invalid_count} of {len(results)} version(s) are invalid")
        else:
            print_success(f"All {len(results)} version(s) are valid")

    sys.exit(EXIT_FAILURE if invalid_count else EXIT_OK)


def _check_one(parser: VersionParser, text: str) -> Dict[str, Any]:
    """Parse ``text`` and describe the outcome as a plain dictionary."""
    try:
        version = parser.parse(text)
    except VersionParseError as exc:
        return {
            "input": text,
            "valid": False,
            "error": exc.kind,
            "message": exc.message,
        }

    return {
        "input": text,
        "valid": True,
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": [
            {
                "identifier": str(identifier),
                "type": "numeric" if identifier.is_numeric else "alphanumeric",
            }
            for identifier in version.prerelease
        ],
    }


def _display_table(results: List[Dict[str, Any]]) -> None:
    """Render check results as a Rich table."""
    rows = []
    for result in results:
        if result["valid"]:
            details = ".".join(
                str(result[part]) for part in ("major", "minor", "patch")
            )
            prerelease = ".".join(p["identifier"] for p in result["prerelease"])
            if prerelease:
                details = f"{details} / {prerelease}"
        else:
            details = f"{result['error']}: {result['message']}"

        rows.append(
            {
                "Version": escape(result["input"]),
                "Status": status_markup(result["valid"]),
                "Details": escape(details),
            }
        )

    print_table(rows, title="Version Check")


def _display_simple(results: List[Dict[str, Any]]) -> None:
    """Render check results one line per input.

    Example::

        [VALID] 1.2.3
        [INVALID] 1.2.3-01 LeadingZeroInNumericIdentifier
    """
    console = get_console()

    for result in results:
        if result["valid"]:
            line = f"[VALID] {result['input']}"
        else:
            line = f"[INVALID] {result['input']} {result['error']}"
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def _display_json(results: List[Dict[str, Any]]) -> None:
    """Render check results as formatted JSON for machine consumption."""
    print(json.dumps(results, indent=2))
