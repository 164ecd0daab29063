# topmark:header:start
#
#   project      : Goat
#   file         : api.py
#   file_relpath : src/goat/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Goat API (stable surface).

A small, typed API for integrations that render documents without going through the
CLI. Functions here are thin wrappers around the internal pipeline; they never read or
write files, print, or exit. Failures are raised as
[`GoatError`][goat.core.errors.GoatError] subclasses.

```python
from goat import api

fmt = api.resolve_format(None, "people.csv")  # "csv"
template = "{% for r in data %}{{ r.name }}{% endfor %}"
html = api.render(fmt, "name\\n<b>Ann</b>\\n", template, "html")
# "&lt;b&gt;Ann&lt;/b&gt;"
```

Versioning policy:
    Removing or renaming anything listed in ``__all__`` is a breaking change.
"""

from __future__ import annotations

from goat.core.errors import (
    ErrorKind,
    FormatRequiredError,
    GoatError,
    InvalidRenderModeError,
    MalformedInputError,
    TemplateExecutionError,
    TemplateSyntaxError,
    UnknownFormatError,
)
from goat.core.modes import RenderMode
from goat.pipeline.engine import RenderOutcome, render, run_render
from goat.pipeline.resolver import resolve_format
from goat.registry.parsers import ParserMeta, ParserRegistry

__all__ = [
    "ErrorKind",
    "FormatRequiredError",
    "GoatError",
    "InvalidRenderModeError",
    "MalformedInputError",
    "ParserMeta",
    "RenderMode",
    "RenderOutcome",
    "TemplateExecutionError",
    "TemplateSyntaxError",
    "UnknownFormatError",
    "list_formats",
    "render",
    "resolve_format",
    "run_render",
]


def list_formats() -> tuple[ParserMeta, ...]:
    """Return metadata for every registered input format, ordered by name."""
    return tuple(ParserRegistry.iter_meta())
