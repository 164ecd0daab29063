# topmark:header:start
#
#   project      : Goat
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for configuration loading, discovery and merge precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from goat.config import Config, ConfigFileError, MutableConfig
from goat.config.keys import ArgKey
from goat.config.loaders import discover_config_file, load_toml_dict, read_toml_dict
from goat.config.model import ARGS_OVERRIDE_MARKER
from goat.core.diagnostics import DiagnosticLevel
from goat.core.errors import InvalidRenderModeError
from goat.core.modes import RenderMode


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.render_mode is RenderMode.TEXT
    assert cfg.template_path is None
    assert cfg.input_path is None
    assert cfg.source_name is None
    assert cfg.config_files == ()


def test_goat_toml_is_discovered(tmp_path: Path) -> None:
    """``goat.toml`` in the directory is merged; its template resolves next to it."""
    _write(tmp_path / "goat.toml", 'informat = "csv"\noutformat = "html"\ntemplate = "t.j2"\n')

    cfg = MutableConfig.load_merged(directory=tmp_path).freeze()

    assert cfg.input_format == "csv"
    assert cfg.render_mode is RenderMode.HTML
    assert cfg.template_path == tmp_path / "t.j2"
    assert cfg.config_files == (tmp_path / "goat.toml",)


def test_pyproject_tool_goat_table(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n\n[tool.goat]\ninformat = "yaml"\n')
    assert discover_config_file(tmp_path) == tmp_path / "pyproject.toml"
    assert MutableConfig.load_merged(directory=tmp_path).freeze().input_format == "yaml"


def test_pyproject_without_goat_table_is_ignored(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert discover_config_file(tmp_path) is None


def test_goat_toml_preferred_over_pyproject(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[tool.goat]\ninformat = "yaml"\n')
    _write(tmp_path / "goat.toml", 'informat = "json"\n')
    assert discover_config_file(tmp_path) == tmp_path / "goat.toml"


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "goat.toml", 'informat = "csv"\n')
    cfg = MutableConfig.load_merged(directory=tmp_path, discover=False).freeze()
    assert cfg.input_format is None


def test_precedence_discovered_then_explicit_then_args(tmp_path: Path) -> None:
    """Later layers override earlier ones key by key."""
    _write(tmp_path / "goat.toml", 'informat = "csv"\noutformat = "html"\ntemplate = "a.j2"\n')
    extra_dir = tmp_path / "extra"
    extra_dir.mkdir()
    extra = _write(extra_dir / "team.toml", 'informat = "tsv"\ntemplate = "b.j2"\n')

    draft = MutableConfig.load_merged(directory=tmp_path, extra_files=[extra])
    draft.apply_args({ArgKey.INFORMAT: "json", ArgKey.TEMPLATE: None, ArgKey.OUTFORMAT: ""})
    cfg = draft.freeze()

    assert cfg.input_format == "json"
    assert cfg.render_mode is RenderMode.HTML
    assert cfg.template_path == extra_dir / "b.j2"
    assert cfg.config_files == (tmp_path / "goat.toml", extra, ARGS_OVERRIDE_MARKER)


def test_stdio_sentinel_selects_streams() -> None:
    draft = MutableConfig.from_defaults()
    draft.apply_args({ArgKey.INPUT: "-", ArgKey.OUTPUT: "-"})
    cfg = draft.freeze()
    assert cfg.input_path is None
    assert cfg.output_path is None


def test_argument_paths_are_kept_relative() -> None:
    draft = MutableConfig.from_defaults()
    draft.apply_args({ArgKey.INPUT: "data/in.csv", ArgKey.TEMPLATE: "t.j2"})
    cfg = draft.freeze()
    assert cfg.input_path == Path("data/in.csv")
    assert cfg.source_name == str(Path("data/in.csv"))
    assert cfg.template_path == Path("t.j2")


def test_unknown_and_mistyped_keys_are_warnings(tmp_path: Path) -> None:
    path = _write(tmp_path / "goat.toml", 'informat = 3\ncolour = "blue"\noutformat = "html"\n')
    cfg = MutableConfig.load_merged(directory=tmp_path).freeze()

    assert cfg.input_format is None
    assert cfg.render_mode is RenderMode.HTML
    messages = [d.message for d in cfg.diagnostics]
    assert all(d.level is DiagnosticLevel.WARNING for d in cfg.diagnostics)
    assert any("unknown configuration key 'colour'" in m for m in messages)
    assert any("'informat' must be a string" in m for m in messages)
    assert all(m.startswith(str(path)) for m in messages)


def test_invalid_outformat_fails_at_freeze(tmp_path: Path) -> None:
    _write(tmp_path / "goat.toml", 'outformat = "pdf"\n')
    draft = MutableConfig.load_merged(directory=tmp_path)
    with pytest.raises(InvalidRenderModeError):
        draft.freeze()


def test_explicit_config_errors_are_strict(tmp_path: Path) -> None:
    """Explicit files must exist, parse, and (for pyproject) carry a goat table."""
    with pytest.raises(ConfigFileError):
        MutableConfig.load_merged(directory=tmp_path, extra_files=[tmp_path / "missing.toml"])

    broken = _write(tmp_path / "broken.toml", "informat = \n")
    with pytest.raises(ConfigFileError, match="invalid TOML"):
        MutableConfig.load_merged(directory=tmp_path, extra_files=[broken])

    sub = tmp_path / "sub"
    sub.mkdir()
    pyproject = _write(sub / "pyproject.toml", '[project]\nname = "x"\n')
    with pytest.raises(ConfigFileError, match=r"no \[tool.goat\] table"):
        MutableConfig.load_merged(directory=tmp_path, extra_files=[pyproject])


def test_broken_discovered_file_is_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "goat.toml", "informat = \n")
    assert load_toml_dict(tmp_path / "goat.toml") == {}
    cfg = MutableConfig.load_merged(directory=tmp_path).freeze()
    assert cfg.input_format is None


def test_read_toml_dict_returns_plain_dict(tmp_path: Path) -> None:
    path = _write(tmp_path / "goat.toml", '[tool.goat]\ntemplate = "x"\n')
    data = read_toml_dict(path)
    assert type(data) is dict
    assert data == {"tool": {"goat": {"template": "x"}}}


def test_thaw_freeze_roundtrip() -> None:
    """Thawing a frozen config and freezing it again yields an equal snapshot."""
    draft = MutableConfig.from_defaults()
    draft.apply_args({ArgKey.OUTFORMAT: "html", ArgKey.INPUT: "in.json"})
    cfg = draft.freeze()

    again = cfg.thaw().freeze()
    assert again == cfg

    edited = cfg.thaw()
    edited.render_mode = "text"
    assert edited.freeze().render_mode is RenderMode.TEXT
    assert cfg.render_mode is RenderMode.HTML


def test_to_dict_is_json_friendly() -> None:
    draft = MutableConfig.from_defaults()
    draft.apply_args({ArgKey.TEMPLATE: "t.j2"})
    data = draft.freeze().to_dict()
    assert data["render_mode"] == "text"
    assert data["template_path"] == "t.j2"
    assert data["config_files"] == [ARGS_OVERRIDE_MARKER]
