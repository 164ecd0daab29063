# topmark:header:start
#
#   project      : Goat
#   file         : io.py
#   file_relpath : src/goat/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document acquisition and output for the ``render`` command.

Reading and writing happen outside the core: the render pipeline only sees complete
strings. Every OS-level failure is converted to a CLI error with a specific exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goat.cli.errors import GoatDataError, GoatFileNotFoundError, GoatIOError
from goat.config.logging import GoatLogger, get_logger
from goat.utils.file import atomic_write_text, read_text_verbatim

if TYPE_CHECKING:
    from pathlib import Path

logger: GoatLogger = get_logger(__name__)


def read_document(path: Path, *, what: str) -> str:
    """Read a whole UTF-8 document from ``path``.

    Args:
        path (Path): File to read.
        what (str): Role of the file in messages (``"template"``, ``"input"``).

    Returns:
        str: The file content, newlines untranslated.

    Raises:
        GoatFileNotFoundError: If the file does not exist.
        GoatDataError: If the file is not valid UTF-8.
        GoatIOError: On any other OS error (directory, permissions, ...).
    """
    logger.debug("Reading %s from %s", what, path)
    try:
        return read_text_verbatim(path)
    except FileNotFoundError as exc:
        raise GoatFileNotFoundError(f"{what} file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise GoatDataError(f"{what} file is not valid UTF-8: {path}: {exc}") from exc
    except OSError as exc:
        raise GoatIOError(f"cannot read {what} file {path}: {exc.strerror or exc}") from exc


def read_stdin() -> str:
    """Read the whole of STDIN as text.

    Raises:
        GoatDataError: If STDIN is not valid UTF-8.
    """
    logger.debug("Reading input from STDIN")
    data: bytes = click.get_text_stream("stdin").buffer.read()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GoatDataError(f"input on STDIN is not valid UTF-8: {exc}") from exc


def write_output(path: Path | None, text: str) -> None:
    """Write the rendered document once, verbatim.

    A file is replaced atomically; ``None`` writes to STDOUT.

    Raises:
        GoatDataError: If the rendered text cannot be encoded as UTF-8 (lone surrogates
            decoded from the input).
        GoatIOError: If the output file cannot be written.
    """
    try:
        data: bytes = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise GoatDataError(f"rendered output is not encodable as UTF-8: {exc}") from exc
    if path is None:
        stream = click.get_text_stream("stdout")
        stream.flush()
        stream.buffer.write(data)
        stream.buffer.flush()
        return
    try:
        atomic_write_text(path, text)
    except OSError as exc:
        raise GoatIOError(f"cannot write output file {path}: {exc.strerror or exc}") from exc
