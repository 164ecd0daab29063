# topmark:header:start
#
#   project      : Goat
#   file         : model.py
#   file_relpath : src/goat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot governing exactly one invocation.
    - `MutableConfig`: a mutable builder used while merging layers; it can be frozen
      into `Config` and thawed back for edits.

Precedence (lowest to highest):
    defaults < discovered config file < explicit ``--config`` files (in order) < arguments.

Path semantics:
    - A ``template`` path declared in a config file is resolved against that file's
      directory.
    - Paths given as arguments are kept as given (relative to the invocation CWD).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from goat.config.keys import ArgKey, Toml
from goat.config.loaders import (
    ConfigFileError,
    discover_config_file,
    extract_goat_table,
    load_toml_dict,
    read_toml_dict,
)
from goat.config.logging import GoatLogger, get_logger
from goat.constants import STDIO_SENTINEL
from goat.core.diagnostics import Diagnostic, DiagnosticLevel
from goat.core.modes import RenderMode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from goat.config.loaders import TomlTable

logger: GoatLogger = get_logger(__name__)

# Marker recorded in ``config_files`` when arguments were applied
ARGS_OVERRIDE_MARKER = "<arguments>"


@dataclass(frozen=True)
class Config:
    """Immutable configuration of a single invocation.

    Attributes:
        input_format (str | None): Explicit input format override (None when not given).
        render_mode (RenderMode): Escaping discipline for template execution.
        template_path (Path | None): Template file (None when not configured).
        input_path (Path | None): Input file; None reads STDIN.
        output_path (Path | None): Output file; None writes STDOUT.
        config_files (tuple[Path | str, ...]): Provenance of the merged layers.
        diagnostics (tuple[Diagnostic, ...]): Non-fatal findings collected while merging.
    """

    input_format: str | None = None
    render_mode: RenderMode = RenderMode.TEXT
    template_path: Path | None = None
    input_path: Path | None = None
    output_path: Path | None = None
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def source_name(self) -> str | None:
        """Return the input's name for format resolution (None for STDIN)."""
        return str(self.input_path) if self.input_path is not None else None

    def thaw(self) -> MutableConfig:
        """Return a mutable builder initialized from this snapshot."""
        return MutableConfig(
            input_format=self.input_format,
            render_mode=self.render_mode.value,
            template_path=self.template_path,
            input_path=self.input_path,
            output_path=self.output_path,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "input_format": self.input_format,
            "render_mode": self.render_mode.value,
            "template_path": str(self.template_path) if self.template_path else None,
            "input_path": str(self.input_path) if self.input_path else None,
            "output_path": str(self.output_path) if self.output_path else None,
            "config_files": [str(p) for p in self.config_files],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``render_mode`` is kept as the raw string until
    [`freeze`][goat.config.model.MutableConfig.freeze] validates it.
    """

    input_format: str | None = None
    render_mode: str | None = None
    template_path: Path | None = None
    input_path: Path | None = None
    output_path: Path | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(render_mode=RenderMode.TEXT.value)

    def add_diagnostic(self, level: DiagnosticLevel, message: str) -> None:
        """Record a non-fatal diagnostic (and log it)."""
        logger.debug("Config diagnostic (%s): %s", level.value, message)
        self.diagnostics.append(Diagnostic(level=level, message=message))

    def merge_toml(self, table: TomlTable, source: Path | None = None) -> MutableConfig:
        """Merge a Goat configuration table on top of this builder.

        Unknown keys and values of the wrong type are reported as warnings and ignored.

        Args:
            table (TomlTable): Top-level Goat keys (``informat``, ``outformat``,
                ``template``).
            source (Path | None): The declaring file; relative ``template`` paths are
                resolved against its directory.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        origin: str = str(source) if source is not None else "<table>"
        for key, value in table.items():
            if key not in Toml.ALL_KEYS:
                self.add_diagnostic(
                    DiagnosticLevel.WARNING, f"{origin}: unknown configuration key '{key}'"
                )
                continue
            if not isinstance(value, str):
                self.add_diagnostic(
                    DiagnosticLevel.WARNING,
                    f"{origin}: '{key}' must be a string (got {type(value).__name__})",
                )
                continue
            if key == Toml.KEY_INFORMAT:
                self.input_format = value or None
            elif key == Toml.KEY_OUTFORMAT:
                self.render_mode = value
            elif key == Toml.KEY_TEMPLATE:
                path = Path(value)
                if source is not None and not path.is_absolute():
                    path = source.parent / path
                self.template_path = path

        if source is not None:
            self.config_files.append(source)
        return self

    def merge_file(self, path: Path, *, strict: bool) -> MutableConfig:
        """Load ``path`` and merge its Goat table.

        Args:
            path (Path): A ``goat.toml``-style file or a ``pyproject.toml``.
            strict (bool): If True, unreadable or invalid files raise; otherwise they are
                logged and skipped.

        Returns:
            MutableConfig: ``self``, for chaining.

        Raises:
            ConfigFileError: In strict mode, if the file is missing, unreadable, invalid
                TOML, or a ``pyproject.toml`` without a ``[tool.goat]`` table.
        """
        logger.debug("Merging config file: %s", path)
        data: TomlTable = read_toml_dict(path) if strict else load_toml_dict(path)
        table: TomlTable | None = extract_goat_table(path, data)
        if table is None:
            if strict:
                raise ConfigFileError(path, "no [tool.goat] table")
            return self
        return self.merge_toml(table, source=path)

    def apply_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply an argument mapping (CLI or API) on top of file configuration.

        Keys are [`ArgKey`][goat.config.keys.ArgKey] names. A missing key, ``None`` or
        an empty string leaves the current value unchanged. The ``-`` sentinel selects
        STDIN/STDOUT for ``input``/``output``.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        logger.debug("Applying arguments to MutableConfig: %s", dict(args))
        applied = False

        def given(key: str) -> Any:
            value: Any = args.get(key)
            return None if value is None or value == "" else value

        informat = given(ArgKey.INFORMAT)
        if informat is not None:
            self.input_format = str(informat)
            applied = True
        outformat = given(ArgKey.OUTFORMAT)
        if outformat is not None:
            self.render_mode = str(outformat)
            applied = True
        template = given(ArgKey.TEMPLATE)
        if template is not None:
            self.template_path = Path(template)
            applied = True
        for key, attr in ((ArgKey.INPUT, "input_path"), (ArgKey.OUTPUT, "output_path")):
            value = given(key)
            if value is None:
                continue
            setattr(self, attr, None if str(value) == STDIO_SENTINEL else Path(value))
            applied = True

        if applied:
            self.config_files.append(ARGS_OVERRIDE_MARKER)
        return self

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            InvalidRenderModeError: If the merged ``outformat`` is not a render mode.
        """
        return Config(
            input_format=self.input_format or None,
            render_mode=RenderMode.parse(self.render_mode),
            template_path=self.template_path,
            input_path=self.input_path,
            output_path=self.output_path,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        directory: Path | None = None,
        extra_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Build a builder from defaults and configuration files.

        Args:
            directory (Path | None): Directory searched for a config file (default: CWD).
            extra_files (Iterable[Path]): Explicit config files, merged in order (strict).
            discover (bool): If False, skip discovery (``--no-config``).

        Returns:
            MutableConfig: The merged builder (arguments not yet applied).

        Raises:
            ConfigFileError: If an explicit config file cannot be used.
        """
        draft: MutableConfig = cls.from_defaults()
        if discover:
            found: Path | None = discover_config_file(directory or Path.cwd())
            if found is not None:
                draft.merge_file(found, strict=False)
        for path in extra_files:
            draft.merge_file(path, strict=True)
        return draft
