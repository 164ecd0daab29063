# topmark:header:start
#
#   project      : Goat
#   file         : resolver.py
#   file_relpath : src/goat/pipeline/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input format resolution.

Determines the format identifier that selects the parser for an invocation:

1. a non-empty explicit override wins (lowercased);
2. otherwise the extension of the source name is used: the part of the final path
   segment after its last ``.``, lowercased, without the dot (``""`` if there is none);
3. otherwise (unnamed input such as STDIN) resolution fails with
   [`FormatRequiredError`][goat.core.errors.FormatRequiredError].

An empty identifier for a named source is returned as is; it surfaces as
[`UnknownFormatError`][goat.core.errors.UnknownFormatError] at parse time.
"""

from __future__ import annotations

import os
from typing import Union

from goat.core.errors import FormatRequiredError

SourceName = Union[str, "os.PathLike[str]"]


def extension_of(source_name: SourceName) -> str:
    """Return the lowercased extension of the final path segment (no leading dot).

    Examples:
        ``"data/report.CSV"`` -> ``"csv"``; ``"archive.tar.gz"`` -> ``"gz"``;
        ``"README"`` -> ``""``; ``".env"`` -> ``"env"``.
    """
    name = os.path.basename(os.fspath(source_name))
    _, dot, ext = name.rpartition(".")
    return ext.lower() if dot else ""


def resolve_format(explicit_override: str | None, source_name: SourceName | None) -> str:
    """Return the format identifier for an invocation.

    Args:
        explicit_override (str | None): User-supplied format; ``None`` or ``""`` means
            not supplied.
        source_name (SourceName | None): Path of the input, or ``None`` for an unnamed
            stream.

    Returns:
        str: The lowercase format identifier (possibly empty for a named source without
            extension).

    Raises:
        FormatRequiredError: If there is neither an override nor a source name.
    """
    if explicit_override:
        return explicit_override.lower()
    if source_name is None:
        raise FormatRequiredError()
    return extension_of(source_name)
