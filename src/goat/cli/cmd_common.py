# topmark:header:start
#
#   project      : Goat
#   file         : cmd_common.py
#   file_relpath : src/goat/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers used by multiple commands. They only encapsulate plumbing (context state,
config building); messages and exit codes are decided by the errors they raise.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Mapping

import click

from goat.cli.errors import GoatConfigError, from_core_error
from goat.config.loaders import ConfigFileError
from goat.config.logging import GoatLogger, get_logger
from goat.config.model import MutableConfig
from goat.core.errors import GoatError

if TYPE_CHECKING:
    from goat.cli.console_api import ConsoleLike
    from goat.config.model import Config

logger: GoatLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj: Any = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the ``goat`` group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def build_config(
    *,
    args: Mapping[str, Any],
    config_paths: Iterable[str],
    no_config: bool,
    directory: Path | None = None,
) -> Config:
    """Merge defaults, config files and arguments into a frozen `Config`.

    Args:
        args (Mapping[str, Any]): Argument mapping keyed by
            [`ArgKey`][goat.config.keys.ArgKey] names.
        config_paths (Iterable[str]): Explicit ``--config`` files, in order.
        no_config (bool): Skip config discovery.
        directory (Path | None): Discovery directory (default: CWD).

    Returns:
        Config: The immutable configuration for this invocation.

    Raises:
        GoatConfigError: If an explicit config file is missing or invalid.
        GoatUsageError: If the effective output format is not a render mode.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            directory=directory,
            extra_files=[Path(p) for p in config_paths],
            discover=not no_config,
        )
    except ConfigFileError as exc:
        raise GoatConfigError(f"invalid config file {exc}") from exc

    try:
        return draft.apply_args(args).freeze()
    except GoatError as exc:
        raise from_core_error(exc) from exc
