# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/parsers/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in input format parsers, grouped by topic.

Each module exports a ``PARSERS`` list of
[`FormatParser`][goat.parsers.base.FormatParser] objects; the registry imports them
lazily (see [`goat.parsers.instances`][]).
"""
