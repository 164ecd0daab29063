# topmark:header:start
#
#   project      : Goat
#   file         : __main__.py
#   file_relpath : src/goat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Goat via ``python -m goat``.

It delegates directly to [`goat.cli.main.cli`][goat.cli.main.cli], so there is a single,
authoritative CLI entry point regardless of how Goat is launched.

Examples:
    Render a CSV file through a template::

        python -m goat render --template report.tpl --in data.csv
"""

from __future__ import annotations

from goat.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
