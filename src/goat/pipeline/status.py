# topmark:header:start
#
#   project      : Goat
#   file         : status.py
#   file_relpath : src/goat/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render pipeline states.

An invocation moves strictly forward through
``IDLE -> PARSING -> PARSED -> RENDERING -> RENDERED``. Any stage may end in ``FAILED``,
which is terminal; there is no retry state.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class PipelineState(str, Enum):
    """Lifecycle state of a single render invocation."""

    IDLE = "idle"
    PARSING = "parsing"
    PARSED = "parsed"
    RENDERING = "rendering"
    RENDERED = "rendered"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Return True for ``RENDERED`` and ``FAILED``."""
        return self in (PipelineState.RENDERED, PipelineState.FAILED)


# Allowed forward transitions (FAILED is reachable from every non-terminal state).
TRANSITIONS: Final[dict[PipelineState, PipelineState]] = {
    PipelineState.IDLE: PipelineState.PARSING,
    PipelineState.PARSING: PipelineState.PARSED,
    PipelineState.PARSED: PipelineState.RENDERING,
    PipelineState.RENDERING: PipelineState.RENDERED,
}
