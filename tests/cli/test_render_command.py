# topmark:header:start
#
#   project      : Goat
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `render` command (happy paths and exit codes)."""

from __future__ import annotations

import os
import warnings
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_IO_ERROR,
    assert_SUCCESS,
    assert_TEMPLATE_ERROR,
    assert_UNSUPPORTED_FORMAT,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

ROWS_TEMPLATE = "{% for r in data %}<li>{{ r.name }}</li>\n{% endfor %}"


def _setup(tmp_path: Path, *, template: str = ROWS_TEMPLATE) -> None:
    (tmp_path / "people.csv").write_text("name\n<b>Ann</b>\nBob\n", encoding="utf-8")
    (tmp_path / "list.j2").write_text(template, encoding="utf-8")


@mark_cli
def test_render_file_to_stdout(tmp_path: Path) -> None:
    """It should render a CSV file through a template in text mode by default."""
    _setup(tmp_path)
    result: Result = run_cli_in(tmp_path, ["render", "-t", "list.j2", "-i", "people.csv"])

    assert_SUCCESS(result)
    assert result.output == "<li><b>Ann</b></li>\n<li>Bob</li>\n"


@mark_cli
def test_render_html_mode_escapes(tmp_path: Path) -> None:
    _setup(tmp_path)
    result = run_cli_in(tmp_path, ["render", "-t", "list.j2", "-i", "people.csv", "-m", "html"])

    assert_SUCCESS(result)
    assert result.output == "<li>&lt;b&gt;Ann&lt;/b&gt;</li>\n<li>Bob</li>\n"


@mark_cli
def test_render_from_stdin_with_format(tmp_path: Path) -> None:
    (tmp_path / "t.j2").write_text("{{ title }}|{{ items | length }}", encoding="utf-8")
    result = run_cli_in(
        tmp_path,
        ["render", "-t", "t.j2", "-f", "json"],
        input_text='{"title": "T", "items": [1, 2, 3]}',
    )

    assert_SUCCESS(result)
    assert result.output == "T|3"


@mark_cli
def test_render_explicit_dash_reads_stdin(tmp_path: Path) -> None:
    (tmp_path / "t.j2").write_text("{{ a }}", encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["render", "-t", "t.j2", "-i", "-", "-f", "yml"], input_text="a: ok\n"
    )
    assert_SUCCESS(result)
    assert result.output == "ok"


@mark_cli
def test_informat_overrides_extension(tmp_path: Path) -> None:
    (tmp_path / "data.txt").write_text("k = 1\n", encoding="utf-8")
    (tmp_path / "t.j2").write_text("{{ k }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2", "-i", "data.txt", "-f", "TOML"])
    assert_SUCCESS(result)
    assert result.output == "1"


@mark_cli
def test_render_to_output_file(tmp_path: Path) -> None:
    """It should write the output file and keep STDOUT free of rendered text."""
    _setup(tmp_path)
    result = run_cli_in(
        tmp_path, ["render", "-t", "list.j2", "-i", "people.csv", "-o", "list.txt"]
    )

    assert_SUCCESS(result)
    assert (tmp_path / "list.txt").read_text(encoding="utf-8") == (
        "<li><b>Ann</b></li>\n<li>Bob</li>\n"
    )
    assert "<li>" not in result.output


@mark_cli
def test_output_file_untouched_on_failure(tmp_path: Path) -> None:
    """A failed render must not create or truncate the output file."""
    _setup(tmp_path, template="{{ data[0].missing }}")
    (tmp_path / "out.txt").write_text("previous\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["render", "-t", "list.j2", "-i", "people.csv", "-o", "out.txt"]
    )

    assert_TEMPLATE_ERROR(result)
    assert (tmp_path / "out.txt").read_text(encoding="utf-8") == "previous\n"


@mark_cli
def test_stdin_without_format_is_usage_error(tmp_path: Path) -> None:
    (tmp_path / "t.j2").write_text("{{ data }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2"], input_text="a,b\n1,2\n")

    assert_USAGE_ERROR(result)
    assert "-f/--informat" in result.output


@mark_cli
def test_missing_template_option_is_usage_error(tmp_path: Path) -> None:
    _setup(tmp_path)
    result = run_cli_in(tmp_path, ["render", "-i", "people.csv"])

    assert_USAGE_ERROR(result)
    assert "a template is required" in result.output


@mark_cli
@parametrize("mode", ["markdown", "HTML"])
def test_invalid_outformat_is_usage_error(tmp_path: Path, mode: str) -> None:
    _setup(tmp_path)
    result = run_cli_in(tmp_path, ["render", "-t", "list.j2", "-i", "people.csv", "-m", mode])

    assert_USAGE_ERROR(result)
    assert f"invalid output format '{mode}'" in result.output


@mark_cli
@parametrize(
    "argv",
    [
        ["render", "-t", "missing.j2", "-i", "people.csv"],
        ["render", "-t", "list.j2", "-i", "missing.csv"],
    ],
)
def test_missing_files_are_reported(tmp_path: Path, argv: list[str]) -> None:
    _setup(tmp_path)
    result = run_cli_in(tmp_path, argv)

    assert_FILE_NOT_FOUND(result)
    assert "not found" in result.output


@mark_cli
def test_malformed_input_is_data_error(tmp_path: Path) -> None:
    """The message names the input and keeps the parser's diagnostic."""
    (tmp_path / "broken.json").write_text('{"a": ', encoding="utf-8")
    (tmp_path / "t.j2").write_text("{{ a }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2", "-i", "broken.json"])

    assert_DATA_ERROR(result)
    assert "broken.json" in result.output
    assert "Expecting value" in result.output


@mark_cli
def test_non_utf8_input_is_data_error(tmp_path: Path) -> None:
    (tmp_path / "latin.csv").write_bytes(b"name\ncaf\xe9\n")
    (tmp_path / "t.j2").write_text("{{ data }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2", "-i", "latin.csv"])
    assert_DATA_ERROR(result)


@mark_cli
@parametrize(("filename", "expected"), [("notes.md", "'md'"), ("Makefile", "no extension")])
def test_unknown_format_is_unsupported(tmp_path: Path, filename: str, expected: str) -> None:
    (tmp_path / filename).write_text("x\n", encoding="utf-8")
    (tmp_path / "t.j2").write_text("{{ data }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2", "-i", filename])

    assert_UNSUPPORTED_FORMAT(result)
    assert expected in result.output


@mark_cli
@parametrize("template", ["{% for r in data %}", "{{ nothing_here }}"])
def test_template_failures_are_template_errors(tmp_path: Path, template: str) -> None:
    _setup(tmp_path, template=template)
    result = run_cli_in(tmp_path, ["render", "-t", "list.j2", "-i", "people.csv"])

    assert_TEMPLATE_ERROR(result)
    assert "template" in result.output


@mark_cli
def test_settings_from_goat_toml(tmp_path: Path) -> None:
    """A discovered goat.toml supplies template and output format."""
    _setup(tmp_path)
    (tmp_path / "goat.toml").write_text(
        'template = "list.j2"\noutformat = "html"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["render", "-i", "people.csv"])

    assert_SUCCESS(result)
    assert "&lt;b&gt;Ann&lt;/b&gt;" in result.output


@mark_cli
def test_no_config_ignores_goat_toml(tmp_path: Path) -> None:
    _setup(tmp_path)
    (tmp_path / "goat.toml").write_text('template = "list.j2"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "--no-config", "-i", "people.csv"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_missing_explicit_config_is_config_error(tmp_path: Path) -> None:
    _setup(tmp_path)
    result = run_cli_in(
        tmp_path,
        ["render", "--config", "nope.toml", "-t", "list.j2", "-i", "people.csv"],
    )

    assert_CONFIG_ERROR(result)
    assert "nope.toml" in result.output


@mark_cli
def test_verbose_reports_effective_settings(tmp_path: Path) -> None:
    _setup(tmp_path)
    result = run_cli_in(tmp_path, ["-v", "render", "-t", "list.j2", "-i", "people.csv"])

    assert_SUCCESS(result)
    assert "Effective settings:" in result.output
    assert "<li>Bob</li>" in result.output


@mark_cli
def test_unwritable_output_is_io_error(tmp_path: Path) -> None:
    """Output directories are not created; a missing one is an I/O error."""
    _setup(tmp_path)
    result = run_cli_in(
        tmp_path, ["render", "-t", "list.j2", "-i", "people.csv", "-o", "missing/out.txt"]
    )

    assert_IO_ERROR(result)
    assert not (tmp_path / "missing").exists()


@mark_cli
@parametrize("extra", [[], ["-o", "out.txt"]])
def test_unencodable_output_is_data_error(tmp_path: Path, extra: list[str]) -> None:
    """A lone surrogate decoded from the input cannot be written as UTF-8."""
    (tmp_path / "s.json").write_text(r'{"s": "\ud800"}', encoding="utf-8")
    (tmp_path / "t.j2").write_text("{{ s }}", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "-t", "t.j2", "-i", "s.json", *extra])

    assert_DATA_ERROR(result)
    assert "UTF-8" in result.output
    assert not (tmp_path / "out.txt").exists()


@mark_cli
def test_stdio_round_trip_raises_no_deprecation_warnings(tmp_path: Path) -> None:
    (tmp_path / "t.j2").write_text("{{ name }}", encoding="utf-8")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = run_cli_in(
            tmp_path, ["render", "-t", "t.j2", "-f", "json"], input_text='{"name": "café"}'
        )

    assert_SUCCESS(result)
    assert result.output == "café"
    own: list[warnings.WarningMessage] = [
        w
        for w in caught
        if issubclass(w.category, DeprecationWarning)
        and f"{os.sep}goat{os.sep}" in w.filename
    ]
    assert own == []
