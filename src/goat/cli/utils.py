# topmark:header:start
#
#   project      : Goat
#   file         : utils.py
#   file_relpath : src/goat/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output helpers shared by CLI commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from goat.cli.console_api import ConsoleLike
    from goat.config.model import Config


class OutputFormat(str, Enum):
    """Output format of informational commands (``formats``, ``version``).

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (machine-readable).
      MARKDOWN: A Markdown document.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Rows, each as long as ``headers``.
        align (Mapping[int, str] | None): Optional column index -> ``"left"`` (default),
            ``"right"`` or ``"center"``.

    Returns:
        str: The Markdown table (ending with a newline), or ``""`` without headers.

    Raises:
        ValueError: If any row length differs from the number of headers.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    if any(len(r) != ncols for r in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    def _sep_for(i: int) -> str:
        style: str = (align or {}).get(i, "left").lower()
        w: int = max(3, widths[i])
        if style == "right":
            return "-" * (w - 1) + ":"
        if style == "center":
            return ":" + "-" * (w - 2) + ":"
        return "-" * w

    lines: list[str] = [_line(headers), "| " + " | ".join(_sep_for(i) for i in range(ncols)) + " |"]
    lines.extend(_line(r) for r in rows)
    return "\n".join(lines) + "\n"


def emit_config_diagnostics(console: ConsoleLike, config: Config, *, verbosity: int) -> None:
    """Report configuration diagnostics on stderr (suppressed with ``-q``)."""
    if verbosity < 0:
        return
    for diag in config.diagnostics:
        console.info(diag.level.color(f"[{diag.level.value}] {diag.message}"))


def emit_effective_config(console: ConsoleLike, config: Config) -> None:
    """Report the effective settings on stderr (``-v``)."""
    sources = ", ".join(str(p) for p in config.config_files) or "<defaults>"
    console.info(console.styled("Effective settings:", bold=True))
    console.info(f"  config sources : {sources}")
    console.info(f"  template       : {config.template_path or '<none>'}")
    console.info(f"  input          : {config.input_path or '<stdin>'}")
    console.info(f"  input format   : {config.input_format or '<from extension>'}")
    console.info(f"  output         : {config.output_path or '<stdout>'}")
    console.info(f"  output format  : {config.render_mode.value}")
