# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-free core definitions (error taxonomy, render modes)."""

from __future__ import annotations

from goat.core.errors import (
    ErrorKind,
    FormatRequiredError,
    GoatError,
    InvalidRenderModeError,
    MalformedInputError,
    TemplateExecutionError,
    TemplateSyntaxError,
    UnknownFormatError,
)
from goat.core.modes import DEFAULT_RENDER_MODE, RenderMode

__all__ = [
    "DEFAULT_RENDER_MODE",
    "ErrorKind",
    "FormatRequiredError",
    "GoatError",
    "InvalidRenderModeError",
    "MalformedInputError",
    "RenderMode",
    "TemplateExecutionError",
    "TemplateSyntaxError",
    "UnknownFormatError",
]
