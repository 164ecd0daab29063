# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/parsers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser capability: turn raw input text into a generic data value.

[`parse`][goat.parsers.parse] is the single entry point used by the render pipeline. It
looks the format identifier up in the composed parser registry and normalizes failures
into the core error taxonomy:

- no parser for the identifier (including the empty identifier) raises
  [`UnknownFormatError`][goat.core.errors.UnknownFormatError];
- invalid input raises [`MalformedInputError`][goat.core.errors.MalformedInputError]
  carrying the library's diagnostic unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from goat.config.logging import GoatLogger, get_logger
from goat.core.errors import MalformedInputError, UnknownFormatError
from goat.parsers.base import FormatParser

if TYPE_CHECKING:
    from goat.registry.parsers import ParserRegistry

logger: GoatLogger = get_logger(__name__)

__all__ = ["FormatParser", "parse"]


def parse(
    format_id: str,
    raw: str,
    *,
    registry: type[ParserRegistry] | Mapping[str, FormatParser] | None = None,
) -> Any:
    """Parse ``raw`` as ``format_id`` into a generic data value.

    Args:
        format_id (str): Lowercase format identifier (e.g. ``"csv"``).
        raw (str): The complete raw input document.
        registry (type[ParserRegistry] | Mapping[str, FormatParser] | None): Parser lookup
            to use; defaults to the composed
            [`ParserRegistry`][goat.registry.parsers.ParserRegistry].

    Returns:
        Any: A tree of scalars, lists and string-keyed dicts.

    Raises:
        UnknownFormatError: If no parser is registered for ``format_id``.
        MalformedInputError: If ``raw`` is not valid for the format.
    """
    if registry is None:
        from goat.registry.parsers import ParserRegistry

        registry = ParserRegistry

    parser: FormatParser | None = registry.get(format_id) if format_id else None
    if parser is None:
        raise UnknownFormatError(format_id)

    logger.debug("Parsing %d characters as %s", len(raw), parser.name)
    try:
        return parser.parse(raw)
    except MalformedInputError:
        raise
    except parser.errors as exc:
        logger.debug("Parser %s rejected input: %s", parser.name, exc)
        raise MalformedInputError(str(exc), format_id=format_id) from exc
