# topmark:header:start
#
#   project      : Goat
#   file         : errors.py
#   file_relpath : src/goat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Goat CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized messages
    and exit codes. Core failures ([`GoatError`][goat.core.errors.GoatError]) are
    converted with [`from_core_error`][goat.cli.errors.from_core_error].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from goat.cli.exit_codes import ExitCode
from goat.core.errors import ErrorKind, GoatError


class GoatCliError(click.ClickException):
    """Base class for all Goat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text, prefixed with the program name."""
        return f"goat: {self.message}"

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class GoatUsageError(GoatCliError):
    """Invalid invocation (no template, unnamed input without format, bad mode)."""

    exit_code = ExitCode.USAGE_ERROR


class GoatDataError(GoatCliError):
    """The input is malformed for its format or cannot be decoded."""

    exit_code = ExitCode.DATA_ERROR


class GoatFileNotFoundError(GoatCliError):
    """A template or input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class GoatUnsupportedFormatError(GoatCliError):
    """No parser is registered for the input format."""

    exit_code = ExitCode.UNSUPPORTED_FORMAT


class GoatTemplateError(GoatCliError):
    """The template failed to compile or execute."""

    exit_code = ExitCode.TEMPLATE_ERROR


class GoatIOError(GoatCliError):
    """I/O error while reading or writing a file."""

    exit_code = ExitCode.IO_ERROR


class GoatConfigError(GoatCliError):
    """An explicit configuration file is missing or invalid."""

    exit_code = ExitCode.CONFIG_ERROR


_KIND_TO_ERROR: dict[ErrorKind, type[GoatCliError]] = {
    ErrorKind.FORMAT_REQUIRED: GoatUsageError,
    ErrorKind.INVALID_RENDER_MODE: GoatUsageError,
    ErrorKind.UNKNOWN_FORMAT: GoatUnsupportedFormatError,
    ErrorKind.MALFORMED_INPUT: GoatDataError,
    ErrorKind.TEMPLATE_SYNTAX: GoatTemplateError,
    ErrorKind.TEMPLATE_EXECUTION: GoatTemplateError,
}


def from_core_error(err: GoatError, *, source: str | None = None) -> GoatCliError:
    """Return the CLI error for a core error.

    Args:
        err (GoatError): The core error.
        source (str | None): Optional input name, prefixed to malformed-input messages.

    Returns:
        GoatCliError: An exception carrying the exit code for ``err.kind``.
    """
    message: str = str(err)
    if err.kind is ErrorKind.MALFORMED_INPUT and source:
        message = f"{source}: {message}"
    return _KIND_TO_ERROR.get(err.kind, GoatCliError)(message)
