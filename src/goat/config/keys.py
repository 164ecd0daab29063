# topmark:header:start
#
#   project      : Goat
#   file         : keys.py
#   file_relpath : src/goat/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical configuration key names.

Two namespaces are kept separate:

- [`Toml`][goat.config.keys.Toml]: keys as they appear in ``goat.toml`` and in the
  ``[tool.goat]`` table of ``pyproject.toml`` (external configuration API; renaming a
  key is a breaking change);
- [`ArgKey`][goat.config.keys.ArgKey]: keys of the argument mapping passed to
  [`MutableConfig.apply_args`][goat.config.model.MutableConfig.apply_args] by the CLI or
  API callers.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Goat configuration files."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_GOAT: Final[str] = "goat"

    KEY_INFORMAT: Final[str] = "informat"
    KEY_OUTFORMAT: Final[str] = "outformat"
    KEY_TEMPLATE: Final[str] = "template"

    ALL_KEYS: Final[frozenset[str]] = frozenset({KEY_INFORMAT, KEY_OUTFORMAT, KEY_TEMPLATE})


class ArgKey:
    """Keys of the argument mapping applied on top of file configuration."""

    INFORMAT: Final[str] = "informat"
    OUTFORMAT: Final[str] = "outformat"
    TEMPLATE: Final[str] = "template"
    INPUT: Final[str] = "input"
    OUTPUT: Final[str] = "output"
