# topmark:header:start
#
#   project      : Goat
#   file         : parsers.py
#   file_relpath : src/goat/registry/parsers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public parser registry (advanced).

Exposes read-only views and optional mutation helpers for registered input format
parsers. This module is intended for plugins, tests and the ``goat formats`` command.

Notes:
    * All public views (`as_mapping()`, `names()`, etc.) are derived from a **composed**
      registry (base built-ins + entry points + local overlays - removals) and are
      returned as `MappingProxyType` to prevent accidental mutation.
    * `register()` / `unregister()` perform **overlay-only** changes. They do not mutate
      the base registry built by [`goat.parsers.instances`][]. Overlays are
      process-local and guarded by an `RLock`.
    * Keys are format identifiers: a parser with aliases appears under each of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from goat.parsers.base import FormatParser


@dataclass(frozen=True)
class ParserMeta:
    """Stable, serializable metadata about a registered parser."""

    name: str
    description: str = ""
    aliases: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "name": self.name,
            "description": self.description,
            "aliases": list(self.aliases),
        }


class ParserRegistry:
    """Identifier-keyed view of the parsers with optional mutation hooks."""

    _lock = RLock()

    # Local overlays; applied on top of the base (built-ins + plugins).
    _overrides: dict[str, FormatParser] = {}
    _removals: set[str] = set()

    @classmethod
    def _compose(cls) -> dict[str, FormatParser]:
        """Compose base registry with local overlays/removals."""
        from goat.parsers.instances import get_base_parser_registry

        base: dict[str, FormatParser] = dict(get_base_parser_registry())
        base.update(cls._overrides)
        for ident in cls._removals:
            base.pop(ident, None)
        return base

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered format identifiers (sorted), aliases included."""
        with cls._lock:
            return tuple(sorted(cls._compose().keys()))

    @classmethod
    def get(cls, identifier: str) -> FormatParser | None:
        """Return the parser registered for ``identifier``, or None."""
        with cls._lock:
            return cls._compose().get(identifier)

    @classmethod
    def as_mapping(cls) -> Mapping[str, FormatParser]:
        """Return a read-only identifier -> parser mapping.

        Notes:
            The returned mapping is a `MappingProxyType` and must not be mutated.
        """
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def iter_meta(cls) -> Iterator[ParserMeta]:
        """Iterate over metadata for each distinct parser, ordered by canonical name.

        Yields:
            ParserMeta: Serializable metadata about each parser.
        """
        with cls._lock:
            composed = cls._compose()
        by_name: dict[str, FormatParser] = {}
        for parser in composed.values():
            by_name.setdefault(parser.name, parser)
        for name in sorted(by_name):
            parser = by_name[name]
            yield ParserMeta(
                name=name,
                description=parser.description,
                aliases=tuple(a for a in parser.aliases if composed.get(a) is parser),
            )

    @classmethod
    def register(cls, parser: FormatParser) -> None:
        """Register a parser under its name and aliases.

        Args:
            parser (FormatParser): The parser to add.

        Raises:
            ValueError: If one of its identifiers is already registered.

        Notes:
            - This mutates process-global registry state. Prefer temporary usage in tests
              with try/finally (or [`reset`][goat.registry.parsers.ParserRegistry.reset]).
        """
        with cls._lock:
            composed = cls._compose()
            for ident in parser.identifiers:
                if ident in composed:
                    raise ValueError(f"Duplicate format identifier: {ident}")
            for ident in parser.identifiers:
                cls._overrides[ident] = parser
                cls._removals.discard(ident)

    @classmethod
    def unregister(cls, identifier: str) -> bool:
        """Hide the parser registered under ``identifier`` (with all its identifiers).

        Args:
            identifier (str): Any identifier of the parser.

        Returns:
            bool: `True` if a parser was registered and has been removed, else `False`.
        """
        with cls._lock:
            parser = cls._compose().get(identifier)
            if parser is None:
                return False
            for ident in parser.identifiers:
                cls._overrides.pop(ident, None)
                cls._removals.add(ident)
            return True

    @classmethod
    def reset(cls) -> None:
        """Drop all overlays and removals (restores the base registry)."""
        with cls._lock:
            cls._overrides.clear()
            cls._removals.clear()
