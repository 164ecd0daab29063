# topmark:header:start
#
#   project      : Goat
#   file         : version.py
#   file_relpath : src/goat/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat `version` command.

Prints the current Goat version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from goat.cli.cli_types import EnumChoiceParam
from goat.cli.cmd_common import get_console, get_effective_verbosity
from goat.cli.utils import OutputFormat
from goat.constants import GOAT_VERSION


@click.command(
    name="version",
    help="Show the current version of Goat.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Goat."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": GOAT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Goat Version\n")
        console.print(f"**Goat version: {GOAT_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("Goat version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(GOAT_VERSION, bold=True)}")
    else:
        console.print(console.styled(GOAT_VERSION, bold=True))
