# topmark:header:start
#
#   project      : Goat
#   file         : test_format_resolver.py
#   file_relpath : tests/pipeline/test_format_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for input format resolution (explicit override vs. file extension)."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from goat.core.errors import ErrorKind, FormatRequiredError
from goat.pipeline.resolver import extension_of, resolve_format
from tests.conftest import parametrize


@parametrize(
    ("source", "expected"),
    [
        ("data.csv", "csv"),
        ("dir/report.CSV", "csv"),
        ("archive.tar.gz", "gz"),
        ("README", ""),
        (".env", "env"),
        ("trailing.", ""),
        ("some.dir/noext", ""),
    ],
)
def test_extension_of(source: str, expected: str) -> None:
    """It should use the final path segment's text after its last dot, lowercased."""
    assert extension_of(source) == expected


def test_extension_of_accepts_paths() -> None:
    assert extension_of(Path("in") / "people.Yml") == "yml"


def test_override_wins_over_extension() -> None:
    """A non-empty override is used even when the file has an extension."""
    assert resolve_format("JSON", "data.csv") == "json"


@parametrize("override", [None, ""])
def test_empty_override_means_not_supplied(override: str | None) -> None:
    assert resolve_format(override, "data.yaml") == "yaml"


def test_named_source_without_extension_resolves_to_empty() -> None:
    """The empty identifier is returned; parsing later reports an unknown format."""
    assert resolve_format(None, "Makefile") == ""


@parametrize("override", [None, ""])
def test_unnamed_source_requires_format(override: str | None) -> None:
    """Input from an unnamed stream without an override cannot be resolved."""
    with pytest.raises(FormatRequiredError) as excinfo:
        resolve_format(override, None)
    assert excinfo.value.kind is ErrorKind.FORMAT_REQUIRED


def test_unnamed_source_with_override() -> None:
    assert resolve_format("csv", None) == "csv"


@given(
    override=st.text(min_size=1),
    source=st.one_of(st.none(), st.text()),
)
def test_non_empty_override_always_wins(override: str, source: str | None) -> None:
    """Whatever the source, a non-empty override resolves to its lowercase form."""
    assert resolve_format(override, source) == override.lower()


@given(stem=st.text(alphabet="abcdefghij_-", min_size=1), ext=st.sampled_from(["csv", "JSON"]))
def test_extension_is_lowercased(stem: str, ext: str) -> None:
    assert resolve_format(None, f"{stem}.{ext}") == ext.lower()
