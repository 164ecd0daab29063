# topmark:header:start
#
#   project      : Goat
#   file         : engine.py
#   file_relpath : src/goat/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render pipeline: parse raw input, then execute a template against it.

This module is CLI-free: it never prints, never exits and never touches files. Errors are
raised as [`GoatError`][goat.core.errors.GoatError] subclasses; presentation is the
caller's job.

Typical usage:

    outcome = run_render("csv", raw, template, RenderMode.HTML)
    if outcome.error is not None:
        ...  # outcome.state is PipelineState.FAILED, outcome.output is None

or, raising on failure:

    text = render("csv", raw, template, "html")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

from goat.config.logging import GoatLogger, get_logger
from goat.core.errors import ErrorKind, GoatError
from goat.core.modes import RenderMode
from goat.parsers import parse
from goat.pipeline.status import TRANSITIONS, PipelineState
from goat.rendering.engine import JinjaTemplateEngine

if TYPE_CHECKING:
    from goat.parsers.base import FormatParser
    from goat.registry.parsers import ParserRegistry
    from goat.rendering.engine import TemplateEngine

logger: GoatLogger = get_logger(__name__)


@dataclass
class RenderOutcome:
    """Result of one render invocation.

    Attributes:
        format_id (str): The format identifier the input was parsed as.
        mode (RenderMode | None): The validated render mode (None if validation failed).
        state (PipelineState): Final state, ``RENDERED`` or ``FAILED``.
        history (list[PipelineState]): Every state visited, in order.
        output (str | None): The complete rendered text on success, else None.
        error (GoatError | None): The failure on error, else None.
    """

    format_id: str
    mode: RenderMode | None = None
    state: PipelineState = PipelineState.IDLE
    history: list[PipelineState] = field(default_factory=lambda: [PipelineState.IDLE])
    output: str | None = None
    error: GoatError | None = None

    @property
    def failure_kind(self) -> ErrorKind | None:
        """Return the kind of the failure, if any."""
        return self.error.kind if self.error is not None else None

    def advance(self, state: PipelineState) -> None:
        """Move to the next state.

        Raises:
            RuntimeError: If ``state`` is not the successor of the current state.
        """
        if TRANSITIONS.get(self.state) is not state:
            raise RuntimeError(f"Illegal pipeline transition: {self.state} -> {state}")
        logger.trace("Pipeline %s -> %s", self.state.value, state.value)
        self.state = state
        self.history.append(state)

    def fail(self, error: GoatError) -> None:
        """Record ``error`` and move to the terminal ``FAILED`` state."""
        logger.debug("Pipeline failed in state %s: %s", self.state.value, error)
        self.error = error
        self.output = None
        self.state = PipelineState.FAILED
        self.history.append(PipelineState.FAILED)


def _execute(
    template_engine: TemplateEngine, mode: RenderMode, template_body: str, data: Any
) -> str:
    if mode is RenderMode.HTML:
        return template_engine.compile_and_run_html(template_body, data)
    return template_engine.compile_and_run_text(template_body, data)


def run_render(
    format_id: str,
    raw_input: str,
    template_body: str,
    mode: RenderMode | str | None,
    *,
    parsers: type[ParserRegistry] | Mapping[str, FormatParser] | None = None,
    engine: TemplateEngine | None = None,
) -> RenderOutcome:
    """Run the render pipeline and report the outcome without raising core errors.

    The render mode is validated before the parser is invoked. Output is buffered in full
    and only published on success.

    Args:
        format_id (str): Format identifier selecting the parser.
        raw_input (str): The complete raw input document.
        template_body (str): The template source.
        mode (RenderMode | str | None): ``text`` (default when None/empty) or ``html``.
        parsers (type[ParserRegistry] | Mapping[str, FormatParser] | None): Parser lookup;
            defaults to the composed parser registry.
        engine (TemplateEngine | None): Template backend; defaults to a new
            [`JinjaTemplateEngine`][goat.rendering.engine.JinjaTemplateEngine].

    Returns:
        RenderOutcome: The final state with either ``output`` or ``error`` set.
    """
    outcome = RenderOutcome(format_id=format_id)
    try:
        render_mode: RenderMode = RenderMode.parse(mode)
        outcome.mode = render_mode

        outcome.advance(PipelineState.PARSING)
        data: Any = parse(format_id, raw_input, registry=parsers)
        outcome.advance(PipelineState.PARSED)

        outcome.advance(PipelineState.RENDERING)
        template_engine: TemplateEngine = engine if engine is not None else JinjaTemplateEngine()
        rendered: str = _execute(template_engine, render_mode, template_body, data)
    except GoatError as exc:
        outcome.fail(exc)
        return outcome

    outcome.output = rendered
    outcome.advance(PipelineState.RENDERED)
    logger.debug(
        "Rendered %d characters (%s, %s)", len(rendered), format_id, render_mode.value
    )
    return outcome


def render(
    format_id: str,
    raw_input: str,
    template_body: str,
    mode: RenderMode | str | None = RenderMode.TEXT,
    *,
    parsers: type[ParserRegistry] | Mapping[str, FormatParser] | None = None,
    engine: TemplateEngine | None = None,
) -> str:
    """Parse ``raw_input`` as ``format_id`` and render it through ``template_body``.

    Args:
        format_id (str): Format identifier selecting the parser.
        raw_input (str): The complete raw input document.
        template_body (str): The template source.
        mode (RenderMode | str | None): ``text`` (default) or ``html``.
        parsers (type[ParserRegistry] | Mapping[str, FormatParser] | None): Parser lookup.
        engine (TemplateEngine | None): Template backend.

    Returns:
        str: The complete rendered output.

    Raises:
        InvalidRenderModeError: If ``mode`` is neither ``text`` nor ``html``.
        UnknownFormatError: If no parser is registered for ``format_id``.
        MalformedInputError: If the input is invalid for the format.
        TemplateSyntaxError: If the template does not compile.
        TemplateExecutionError: If the template fails against the data.
    """
    outcome = run_render(
        format_id, raw_input, template_body, mode, parsers=parsers, engine=engine
    )
    if outcome.error is not None:
        raise outcome.error
    assert outcome.output is not None
    return outcome.output
