# topmark:header:start
#
#   project      : Goat
#   file         : file.py
#   file_relpath : src/goat/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File helpers for Goat."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from goat.config.logging import GoatLogger, get_logger

logger: GoatLogger = get_logger(__name__)

NEW_FILE_MODE = 0o644


def read_text_verbatim(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file without newline translation."""
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def atomic_write_text(path: Path, text: str, encoding: str = "utf-8") -> int:
    """Write ``text`` to ``path`` atomically.

    The content is written to a temporary file in the target directory, flushed, and
    moved over ``path`` with ``os.replace``. Readers see either the previous file or the
    complete new content, never a partial write. Newlines are written verbatim.

    Args:
        path (Path): Destination file.
        text (str): Complete content to write.
        encoding (str): Text encoding.

    Returns:
        int: The number of bytes written.

    Raises:
        OSError: If the temporary file cannot be created, written or moved.
    """
    data: bytes = text.encode(encoding)
    directory: Path = path.parent
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        # mkstemp creates 0600 files; keep the mode of an existing target
        mode: int = path.stat().st_mode & 0o7777 if path.exists() else NEW_FILE_MODE
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
