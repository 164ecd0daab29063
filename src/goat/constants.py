# topmark:header:start
#
#   project      : Goat
#   file         : constants.py
#   file_relpath : src/goat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Goat Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version


def _installed_version() -> str:
    try:
        return get_version("goat")
    except PackageNotFoundError:
        # Running from a source checkout without an installed distribution
        return "0.0.0"


GOAT_VERSION: str = _installed_version()

# Environment variable consulted for the internal log level (e.g. "DEBUG", "TRACE", "10")
LOG_LEVEL_ENV_VAR: str = "GOAT_LOG_LEVEL"

# Config discovery (in the invocation working directory)
GOAT_TOML_NAME: str = "goat.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Sentinel used on the command line for STDIN/STDOUT
STDIO_SENTINEL: str = "-"
