# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template execution for Goat (Jinja2 backend)."""

from __future__ import annotations

from goat.rendering.engine import JinjaTemplateEngine, TemplateEngine

__all__ = ["JinjaTemplateEngine", "TemplateEngine"]
