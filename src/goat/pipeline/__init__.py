# topmark:header:start
#
#   project      : Goat
#   file         : __init__.py
#   file_relpath : src/goat/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format resolution and the render pipeline."""

from __future__ import annotations

from goat.pipeline.engine import RenderOutcome, render, run_render
from goat.pipeline.resolver import extension_of, resolve_format
from goat.pipeline.status import PipelineState

__all__ = [
    "PipelineState",
    "RenderOutcome",
    "extension_of",
    "render",
    "resolve_format",
    "run_render",
]
