# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for Goat.

The CLI owns everything the core does not: file and stream acquisition, configuration
discovery, console output and the mapping of failures to exit codes
(see [`goat.cli.exit_codes.ExitCode`][]).
"""
