# topmark:header:start
#
#   project      : Goat
#   file         : base.py
#   file_relpath : src/goat/parsers/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser definition for Goat input formats.

A [`FormatParser`][goat.parsers.base.FormatParser] binds a lowercase format identifier
(plus optional aliases) to a function turning raw input text into a generic data value:
a tree of scalars, lists and string-keyed dicts. The core never inspects that value; it
passes it opaquely to the template engine.

Parsers signal invalid input by raising
[`MalformedInputError`][goat.core.errors.MalformedInputError] directly, or by raising one
of the library exception types listed in ``errors``; the registry translates the latter
into `MalformedInputError` with the library diagnostic unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from goat.config.logging import GoatLogger, get_logger

logger: GoatLogger = get_logger(__name__)

# Signature of a parse function: raw text in, generic data value out.
ParseFunc = Callable[[str], Any]


@dataclass(frozen=True)
class FormatParser:
    """Represents a registered input format.

    Attributes:
        name (str): Canonical lowercase identifier (e.g. ``"yaml"``).
        description (str): Human-readable description (shown by ``goat formats``).
        parse (ParseFunc): Function converting raw text into a generic data value.
        aliases (tuple[str, ...]): Additional lowercase identifiers (e.g. ``("yml",)``).
        errors (tuple[type[Exception], ...]): Library exception types raised by ``parse``
            for invalid input.
    """

    name: str
    description: str
    parse: ParseFunc
    aliases: tuple[str, ...] = ()
    errors: tuple[type[Exception], ...] = ()

    def __post_init__(self) -> None:
        for ident in self.identifiers:
            if not ident or ident != ident.lower():
                raise ValueError(f"Format identifiers must be non-empty and lowercase: {ident!r}")

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return the canonical name followed by all aliases."""
        return (self.name, *self.aliases)
