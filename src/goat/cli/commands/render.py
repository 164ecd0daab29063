# topmark:header:start
#
#   project      : Goat
#   file         : render.py
#   file_relpath : src/goat/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat `render` command.

Reads one structured input document, renders it through a template and writes one
output document:

    goat render -t report.html.j2 -i data.csv -m html -o report.html
    cat data.json | goat render -t summary.txt.j2 -f json

Steps, in order: build the configuration; require a template; resolve the input format
(an unnamed STDIN input without ``-f`` fails here, before anything is read); read the
template; read the input; render; write the output once.
"""

from __future__ import annotations

import click

from goat.cli.cmd_common import build_config, get_console, get_effective_verbosity
from goat.cli.errors import GoatUsageError, from_core_error
from goat.cli.io import read_document, read_stdin, write_output
from goat.cli.options import common_config_options
from goat.cli.utils import emit_config_diagnostics, emit_effective_config
from goat.config.keys import ArgKey
from goat.config.logging import GoatLogger, get_logger
from goat.core.errors import FormatRequiredError, GoatError
from goat.pipeline.engine import render
from goat.pipeline.resolver import resolve_format

logger: GoatLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a structured input document through a template.",
    epilog="""
The input format is taken from --informat, else from the input file extension.
Input read from STDIN requires --informat. Use '-' for STDIN/STDOUT explicitly.
""",
)
@click.option(
    "-t",
    "--template",
    "template",
    metavar="FILE",
    default=None,
    help="Template file (Jinja2 syntax). Required unless set in the configuration.",
)
@click.option(
    "-i",
    "--in",
    "input_path",
    metavar="FILE",
    default=None,
    help="Input file (default: STDIN).",
)
@click.option(
    "-f",
    "--informat",
    "informat",
    metavar="FORMAT",
    default=None,
    help="Input format (e.g. csv, json, yaml); overrides the file extension.",
)
@click.option(
    "-o",
    "--out",
    "output_path",
    metavar="FILE",
    default=None,
    help="Output file (default: STDOUT).",
)
@click.option(
    "-m",
    "--outformat",
    "outformat",
    metavar="[text|html]",
    default=None,
    help="Output format: 'text' (no escaping, default) or 'html' (HTML-escaped).",
)
@common_config_options
def render_command(
    *,
    template: str | None,
    input_path: str | None,
    informat: str | None,
    output_path: str | None,
    outformat: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render an input document through a template."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config = build_config(
        args={
            ArgKey.TEMPLATE: template,
            ArgKey.INPUT: input_path,
            ArgKey.INFORMAT: informat,
            ArgKey.OUTPUT: output_path,
            ArgKey.OUTFORMAT: outformat,
        },
        config_paths=config_paths,
        no_config=no_config,
    )
    emit_config_diagnostics(console, config, verbosity=vlevel)
    if vlevel > 0:
        emit_effective_config(console, config)

    if config.template_path is None:
        raise GoatUsageError(
            "a template is required (use -t/--template or set 'template' in goat.toml)"
        )

    try:
        format_id: str = resolve_format(config.input_format, config.source_name)
    except FormatRequiredError as exc:
        raise GoatUsageError(
            f"{exc}: specify the input format with -f/--informat when reading STDIN"
        ) from exc

    template_body: str = read_document(config.template_path, what="template")
    if config.input_path is None:
        raw_input: str = read_stdin()
    else:
        raw_input = read_document(config.input_path, what="input")

    try:
        output: str = render(format_id, raw_input, template_body, config.render_mode)
    except GoatError as exc:
        raise from_core_error(exc, source=config.source_name or "<stdin>") from exc

    write_output(config.output_path, output)
    if vlevel > 0:
        console.info(
            f"Rendered {len(output)} characters from {format_id} input "
            f"({config.render_mode.value}) to {config.output_path or '<stdout>'}"
        )
