# topmark:header:start
#
#   project      : Goat
#   file         : loaders.py
#   file_relpath : src/goat/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML configuration loading and discovery.

Two loading disciplines are provided:

- [`load_toml_dict`][goat.config.loaders.load_toml_dict] is lenient: errors are logged
  and an empty table is returned. It is used for *discovered* files, which the user did
  not name explicitly.
- [`read_toml_dict`][goat.config.loaders.read_toml_dict] is strict: it raises
  [`ConfigFileError`][goat.config.loaders.ConfigFileError]. It is used for files named
  with ``--config``.

Discovery looks in a single directory (normally the working directory): ``goat.toml``
is preferred; otherwise ``pyproject.toml`` is used if it contains a ``[tool.goat]``
table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from goat.config.keys import Toml
from goat.config.logging import GoatLogger, get_logger
from goat.constants import GOAT_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

logger: GoatLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigFileError(Exception):
    """Raised when an explicitly requested configuration file cannot be used.

    Attributes:
        path (Path): The offending file.
        reason (str): Human-readable cause.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def read_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file, raising on failure.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python containers.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigFileError(path, f"not valid UTF-8: {exc}") from exc
    try:
        data_any: Any = tomlkit.parse(text).unwrap()
    except TOMLKitError as exc:
        raise ConfigFileError(path, f"invalid TOML: {exc}") from exc
    return cast("TomlTable", data_any)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file, logging errors and returning ``{}`` on failure."""
    try:
        return read_toml_dict(path)
    except ConfigFileError as exc:
        logger.error("Error loading TOML from %s: %s", exc.path, exc.reason)
        return {}


def extract_goat_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Goat table of a loaded configuration document.

    ``pyproject.toml`` files contribute their ``[tool.goat]`` table (None when absent);
    any other file is a Goat configuration file in its entirety.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_GOAT) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def discover_config_file(directory: Path) -> Path | None:
    """Return the configuration file to use in ``directory``, if any."""
    candidate: Path = directory / GOAT_TOML_NAME
    if candidate.is_file():
        logger.debug("Discovered config file: %s", candidate)
        return candidate

    pyproject: Path = directory / PYPROJECT_TOML_NAME
    if pyproject.is_file() and extract_goat_table(pyproject, load_toml_dict(pyproject)):
        logger.debug("Discovered [tool.goat] in %s", pyproject)
        return pyproject

    logger.trace("No config file found in %s", directory)
    return None
