# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat CLI subcommands."""
