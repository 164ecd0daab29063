# topmark:header:start
#
#   project      : Goat
#   file         : diagnostics.py
#   file_relpath : src/goat/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured, non-fatal diagnostics.

Diagnostics report conditions that do not abort an invocation, such as an unknown key in
a configuration file. Fatal conditions are raised as
[`GoatError`][goat.core.errors.GoatError] instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered INFO < WARNING < ERROR."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this level (human output only)."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic message with a severity level."""

    level: DiagnosticLevel
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {"level": self.level.value, "message": self.message}
