# topmark:header:start
#
#   project      : Goat
#   file         : engine.py
#   file_relpath : src/goat/rendering/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template execution capability.

The render pipeline depends on the [`TemplateEngine`][goat.rendering.engine.TemplateEngine]
protocol only; [`JinjaTemplateEngine`][goat.rendering.engine.JinjaTemplateEngine] is the
default implementation, backed by Jinja2.

Binding of the generic data value:

- a mapping exposes its (string) top-level keys as template variables;
- the whole value is always available as ``data`` (for lists and scalars this is the
  only binding). A top-level key named ``data`` is shadowed by the whole value and is
  reached as ``data.data``.

Escaping disciplines:

- text: no escaping; substitutions are inserted verbatim.
- html: every substitution is HTML-escaped (``<``, ``>``, ``&``, ``"``, ``'``) unless the
  template marks it as pre-escaped with the ``|safe`` filter.

Undefined variables, attributes and indexes are errors (``StrictUndefined``), never
silently rendered as empty strings.

Templates run in a Jinja2 sandbox: access to private and internal attributes (such as
``__globals__`` or ``__subclasses__``) is refused with a ``SecurityError``, reported as a
TemplateExecutionError.
"""

from __future__ import annotations

from typing import Any, Final, Mapping, Protocol

import jinja2
from jinja2.sandbox import SandboxedEnvironment

from goat.config.logging import GoatLogger, get_logger
from goat.core.errors import TemplateExecutionError, TemplateSyntaxError

logger: GoatLogger = get_logger(__name__)

DATA_VARIABLE: Final[str] = "data"

# Runtime failures raised while executing a compiled template.
_EXECUTION_ERRORS: Final[tuple[type[Exception], ...]] = (
    jinja2.TemplateRuntimeError,
    TypeError,
    ValueError,
    KeyError,
    IndexError,
    AttributeError,
    ArithmeticError,
    RecursionError,
)


class TemplateEngine(Protocol):
    """Protocol for template execution backends."""

    def compile_and_run_text(self, template: str, data: Any) -> str:
        """Compile ``template`` and execute it against ``data`` without escaping."""
        ...

    def compile_and_run_html(self, template: str, data: Any) -> str:
        """Compile ``template`` and execute it against ``data`` with HTML escaping."""
        ...


def build_context(data: Any) -> dict[str, Any]:
    """Return the template variables for a generic data value."""
    context: dict[str, Any] = {}
    if isinstance(data, Mapping):
        for key, value in data.items():
            if isinstance(key, str):
                context[key] = value
    context[DATA_VARIABLE] = data
    return context


class JinjaTemplateEngine:
    """Jinja2-backed [`TemplateEngine`][goat.rendering.engine.TemplateEngine].

    Each instance owns two environments, one per escaping discipline. Templates are
    compiled per call and never cached, so an instance can be shared between concurrent
    invocations with distinct inputs.
    """

    def __init__(self) -> None:
        self._text_env = self._make_environment(autoescape=False)
        self._html_env = self._make_environment(autoescape=True)

    @staticmethod
    def _make_environment(*, autoescape: bool) -> jinja2.Environment:
        return SandboxedEnvironment(
            autoescape=autoescape,
            undefined=jinja2.StrictUndefined,
            keep_trailing_newline=True,
        )

    def compile_and_run_text(self, template: str, data: Any) -> str:
        """Render ``template`` against ``data`` with no escaping."""
        return self._run(self._text_env, template, data)

    def compile_and_run_html(self, template: str, data: Any) -> str:
        """Render ``template`` against ``data`` with HTML escaping."""
        return self._run(self._html_env, template, data)

    def _run(self, env: jinja2.Environment, template: str, data: Any) -> str:
        """Compile and execute a template, translating Jinja2 failures.

        Raises:
            TemplateSyntaxError: If the template does not compile.
            TemplateExecutionError: If execution fails (undefined reference, type
                mismatch, ...).
        """
        try:
            compiled: jinja2.Template = env.from_string(template)
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(exc.message or str(exc), lineno=exc.lineno) from exc

        logger.trace("Executing template (autoescape=%s)", env.autoescape)
        try:
            return str(compiled.render(build_context(data)))
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(exc.message or str(exc), lineno=exc.lineno) from exc
        except _EXECUTION_ERRORS as exc:
            raise TemplateExecutionError(_describe(exc)) from exc


def _describe(exc: Exception) -> str:
    """Return a diagnostic for a runtime failure."""
    if isinstance(exc, (jinja2.TemplateError, TypeError, ValueError, AttributeError)):
        return str(exc)
    # KeyError, IndexError and arithmetic errors carry terse messages; name the type.
    return f"{type(exc).__name__}: {exc}"
