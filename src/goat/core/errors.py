# topmark:header:start
#
#   project      : Goat
#   file         : errors.py
#   file_relpath : src/goat/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy of the Goat core.

Every failure of the format resolver or the render pipeline is raised as a subclass of
[`GoatError`][goat.core.errors.GoatError] tagged with an
[`ErrorKind`][goat.core.errors.ErrorKind]. The core never recovers, retries, logs-and-swallows
or terminates the process: it raises, and the caller (CLI or API user) decides how to
report the failure.

This module is framework-free; the Click-aware counterparts live in `goat.cli.errors`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping


class ErrorKind(str, Enum):
    """Stable, machine-readable error kinds.

    Attributes:
        FORMAT_REQUIRED: No input format could be determined for unnamed (STDIN) input.
        UNKNOWN_FORMAT: No parser is registered for the resolved format identifier.
        MALFORMED_INPUT: The raw input is not valid for the claimed format.
        INVALID_RENDER_MODE: The render mode is neither ``text`` nor ``html``.
        TEMPLATE_SYNTAX: The template does not compile.
        TEMPLATE_EXECUTION: The template failed while executing against the data.
    """

    FORMAT_REQUIRED = "format_required_for_unnamed_input"
    UNKNOWN_FORMAT = "unknown_format"
    MALFORMED_INPUT = "malformed_input"
    INVALID_RENDER_MODE = "invalid_render_mode"
    TEMPLATE_SYNTAX = "template_syntax_error"
    TEMPLATE_EXECUTION = "template_execution_error"


class GoatError(Exception):
    """Base class for all core errors.

    Args:
        message (str): Human-readable message.
        context (Mapping[str, Any] | None): Optional structured, log-safe context.

    Attributes:
        kind (ErrorKind): The error kind (set per subclass).
        message (str): Human-readable message.
        context (dict[str, Any]): Structured context (e.g. the offending identifier).
    """

    kind: ErrorKind

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = dict(context or {})

    def __str__(self) -> str:
        """Return the plain error message."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the error."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "context": self.context,
        }


class FormatRequiredError(GoatError):
    """Raised when input comes from an unnamed stream and no format was given."""

    kind = ErrorKind.FORMAT_REQUIRED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "an input format is required when input comes from an unnamed stream"
        )


class UnknownFormatError(GoatError):
    """Raised when no parser is registered for a format identifier."""

    kind = ErrorKind.UNKNOWN_FORMAT

    def __init__(self, format_id: str) -> None:
        if format_id:
            message = f"unknown input format: '{format_id}'"
        else:
            message = "unknown input format: the input has no extension and no format was given"
        super().__init__(message, context={"format": format_id})
        self.format_id = format_id


class MalformedInputError(GoatError):
    """Raised when the raw input is not valid for the claimed format.

    The parser's own diagnostic is kept unchanged in ``diagnostic``.
    """

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, diagnostic: str, *, format_id: str | None = None) -> None:
        super().__init__(diagnostic, context={"format": format_id} if format_id else None)
        self.diagnostic = diagnostic
        self.format_id = format_id


class InvalidRenderModeError(GoatError):
    """Raised for a render mode other than ``text`` or ``html``."""

    kind = ErrorKind.INVALID_RENDER_MODE

    def __init__(self, mode: object) -> None:
        super().__init__(
            f"invalid output format '{mode}', must be 'text' or 'html'",
            context={"mode": str(mode)},
        )
        self.mode = mode


class TemplateSyntaxError(GoatError):
    """Raised when the template does not compile under the selected discipline."""

    kind = ErrorKind.TEMPLATE_SYNTAX

    def __init__(self, diagnostic: str, *, lineno: int | None = None) -> None:
        where = f" (line {lineno})" if lineno else ""
        message = f"template syntax error{where}: {diagnostic}"
        super().__init__(message, context={"line": lineno, "diagnostic": diagnostic})
        self.diagnostic = diagnostic
        self.lineno = lineno


class TemplateExecutionError(GoatError):
    """Raised when template execution fails (missing field, type mismatch, ...)."""

    kind = ErrorKind.TEMPLATE_EXECUTION

    def __init__(self, diagnostic: str) -> None:
        super().__init__(
            f"template execution error: {diagnostic}", context={"diagnostic": diagnostic}
        )
        self.diagnostic = diagnostic
