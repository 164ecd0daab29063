# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat package.

Goat renders a structured input document (CSV, JSON, YAML, TOML, XML, ...) through a
user-supplied Jinja2 template, producing plain text or HTML-escaped output. It exposes
both a CLI and a small typed API (`goat.api`).
"""

from __future__ import annotations
