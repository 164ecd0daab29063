# topmark:header:start
#
#   project      : Goat
#   file         : data.py
#   file_relpath : src/goat/parsers/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree-shaped data formats.

Exports:
    PARSERS: Parsers for JSON, YAML (``yaml``/``yml``) and TOML.

Notes:
    - YAML is loaded with ``yaml.safe_load``: no arbitrary object construction. A stream
      holding more than one document is rejected by the loader itself.
    - TOML is parsed with tomlkit and unwrapped into plain ``dict``/``list`` values so that
      templates never see tomlkit container types.
    - Date and time scalars (YAML timestamps, TOML datetimes) are passed through as
      ``datetime`` objects; templates render them with their ``str()`` form.
"""

from __future__ import annotations

import json
from typing import Any

import tomlkit
import yaml
from tomlkit.exceptions import TOMLKitError

from goat.parsers.base import FormatParser


def parse_json(raw: str) -> Any:
    """Decode a JSON document."""
    return json.loads(raw)


def parse_yaml(raw: str) -> Any:
    """Decode a single YAML document (an empty document yields ``None``)."""
    return yaml.safe_load(raw)


def parse_toml(raw: str) -> dict[str, Any]:
    """Decode a TOML document into plain Python containers."""
    return tomlkit.parse(raw).unwrap()


PARSERS: list[FormatParser] = [
    FormatParser(
        name="json",
        description="JSON document",
        parse=parse_json,
        errors=(ValueError, RecursionError),
    ),
    FormatParser(
        name="toml",
        description="TOML document (decoded to a table)",
        parse=parse_toml,
        errors=(TOMLKitError, ValueError, RecursionError),
    ),
    FormatParser(
        name="yaml",
        description="YAML document (single document, safe loader)",
        parse=parse_yaml,
        aliases=("yml",),
        errors=(yaml.YAMLError, ValueError, RecursionError),
    ),
]
