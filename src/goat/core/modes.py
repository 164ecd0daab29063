# topmark:header:start
#
#   project      : Goat
#   file         : modes.py
#   file_relpath : src/goat/core/modes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render mode definitions.

The render mode selects the escaping discipline applied while a template is executed.
It is a closed, two-member enumeration; anything else is rejected with
[`InvalidRenderModeError`][goat.core.errors.InvalidRenderModeError].
"""

from __future__ import annotations

from enum import Enum

from goat.core.errors import InvalidRenderModeError


class RenderMode(str, Enum):
    """Escaping discipline for template execution.

    Attributes:
        TEXT: Substitutions are inserted verbatim (default).
        HTML: Substitutions are HTML-escaped unless marked ``|safe`` in the template.
    """

    TEXT = "text"
    HTML = "html"

    @classmethod
    def parse(cls, value: RenderMode | str | None) -> RenderMode:
        """Return the render mode for ``value``.

        ``None`` and the empty string select the default (``TEXT``). Matching is exact:
        render modes are not case-folded.

        Args:
            value (RenderMode | str | None): A member, its string value, or None.

        Returns:
            RenderMode: The matching member.

        Raises:
            InvalidRenderModeError: If ``value`` names no render mode.
        """
        if isinstance(value, RenderMode):
            return value
        if value is None or value == "":
            return cls.TEXT
        for member in cls:
            if member.value == value:
                return member
        raise InvalidRenderModeError(value)


DEFAULT_RENDER_MODE: RenderMode = RenderMode.TEXT
