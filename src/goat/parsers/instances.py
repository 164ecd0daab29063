# topmark:header:start
#
#   project      : Goat
#   file         : instances.py
#   file_relpath : src/goat/parsers/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser instances and base registry for Goat.

Builds the runtime registry of [`FormatParser`][goat.parsers.base.FormatParser] objects
from built-in groups and optionally from plugin entry points. The registry is
constructed lazily on first access and cached thereafter.

Notes:
    * Built-ins are imported lazily from topical modules.
    * Plugins are discovered via the ``goat.parsers`` entry point group. An entry point
      may resolve to an iterable of parsers or to a callable returning one.
    * The registry maps every identifier (canonical name and aliases) to its parser.
      The returned mapping is a plain ``dict`` but should be treated as immutable by
      callers. Overlay mutations must go through
      [`ParserRegistry`][goat.registry.parsers.ParserRegistry].
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from goat.config.logging import GoatLogger, get_logger
from goat.parsers.base import FormatParser

if TYPE_CHECKING:
    from types import ModuleType

logger: GoatLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "goat.parsers.builtins.data",
    "goat.parsers.builtins.tabular",
    "goat.parsers.builtins.markup",
)

ENTRYPOINT_GROUP: Final[str] = "goat.parsers"


def _iter_builtin_parsers() -> Iterable[FormatParser]:
    """Yield built-in parsers from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        parsers: Any = getattr(mod, "PARSERS", None)
        if not isinstance(parsers, list):
            logger.warning("Module %s has no PARSERS list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", parsers):
            if isinstance(obj, FormatParser):
                yield obj
            else:
                logger.warning("Non-FormatParser entry in %s.PARSERS: %r", modname, obj)


def _iter_plugin_parsers() -> Iterable[FormatParser]:
    """Yield parsers provided by external plugins (entry points).

    A plugin that fails to load is logged and skipped: a broken third-party package must
    not make the built-in formats unavailable.
    """
    candidates: EntryPoints = entry_points().select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading parsers from entry point %s", ep.name)
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of FormatParser objects: %r",
                ep.name,
                provided,
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, FormatParser):
                yield obj
            else:
                logger.warning("Entry point %s provided non-FormatParser: %r", ep.name, obj)


def _generate_registry(parsers: Iterable[FormatParser]) -> dict[str, FormatParser]:
    """Map every identifier to its parser, keeping the first registration on conflict."""
    registry: dict[str, FormatParser] = {}
    for parser in parsers:
        for ident in parser.identifiers:
            if ident in registry:
                logger.warning(
                    "Duplicate format identifier detected: %s (keeping %s)",
                    ident,
                    registry[ident].name,
                )
                continue
            registry[ident] = parser
    return registry


@lru_cache(maxsize=1)
def get_base_parser_registry() -> dict[str, FormatParser]:
    """Return (and cache) the base parser registry (built-ins + plugins)."""
    ordered: list[FormatParser] = list(_iter_builtin_parsers())
    ordered.extend(_iter_plugin_parsers())
    registry: dict[str, FormatParser] = _generate_registry(ordered)
    logger.debug("Loaded %d format identifiers", len(registry))
    return registry
