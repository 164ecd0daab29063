# topmark:header:start
#
#   project      : Goat
#   file         : formats.py
#   file_relpath : src/goat/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat `formats` command.

Lists the input formats known to the parser registry (built-ins and plugins), with
their aliases and descriptions.
"""

from __future__ import annotations

import json

import click

from goat.cli.cli_types import EnumChoiceParam
from goat.cli.cmd_common import get_console, get_effective_verbosity
from goat.cli.utils import OutputFormat, render_markdown_table
from goat.constants import GOAT_VERSION
from goat.registry.parsers import ParserMeta, ParserRegistry


@click.command(
    name="formats",
    help="List the supported input formats.",
    epilog="""
Every identifier listed can be passed to --informat or used as an input file extension.
""",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show aliases and descriptions.",
)
def formats_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List supported input formats."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    metas: list[ParserMeta] = list(ParserRegistry.iter_meta())
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([m.to_dict() for m in metas], indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for m in metas:
            console.print(json.dumps(m.to_dict()))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported Input Formats\n")
        console.print(f"Goat version **{GOAT_VERSION}** supports the following input formats:\n")
        rows: list[list[str]] = [
            [f"`{m.name}`", ", ".join(f"`{a}`" for a in m.aliases), m.description] for m in metas
        ]
        console.print(render_markdown_table(["Format", "Aliases", "Description"], rows))
        return

    if vlevel > 0:
        console.print(console.styled("Supported input formats:\n", bold=True, underline=True))
    width: int = max((len(m.name) for m in metas), default=1)
    for idx, m in enumerate(metas, start=1):
        if not show_details:
            console.print(f"{idx:>2}. {m.name}")
            continue
        aliases = f" (aliases: {', '.join(m.aliases)})" if m.aliases else ""
        descr = console.styled(m.description, dim=True)
        console.print(f"{idx:>2}. {m.name:<{width}} {descr}{aliases}")
