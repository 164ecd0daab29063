# topmark:header:start
#
#   project      : Goat
#   file         : tabular.py
#   file_relpath : src/goat/parsers/builtins/tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimiter-separated tabular formats.

The first record is the header row. Every following record becomes a ``dict`` keyed by
the header names, so a template iterates rows and addresses cells by column name:

```jinja
{% for row in data %}{{ row.name }}: {{ row.qty }}
{% endfor %}
```

Exports:
    PARSERS: Parsers for CSV and TSV.

Notes:
    - Empty input yields an empty list.
    - Blank lines are skipped.
    - A record whose field count differs from the header's, or a header with duplicate
      column names, is malformed input.
    - Cell values are kept as strings; no type inference is attempted.
"""

from __future__ import annotations

import csv
import io

from goat.core.errors import MalformedInputError
from goat.parsers.base import FormatParser


def _parse_delimited(raw: str, *, delimiter: str, format_id: str) -> list[dict[str, str]]:
    """Parse delimited text into a list of row mappings.

    Args:
        raw (str): The raw document text.
        delimiter (str): Single-character field delimiter.
        format_id (str): Format identifier (used in error context).

    Returns:
        list[dict[str, str]]: One mapping per data record, keyed by header name.

    Raises:
        MalformedInputError: On duplicate header names or a field count mismatch.
    """
    stream = io.StringIO(raw.lstrip("\ufeff"), newline="")
    reader = csv.reader(stream, delimiter=delimiter, strict=True)

    header: list[str] | None = None
    rows: list[dict[str, str]] = []
    for record in reader:
        if not record:
            continue
        if header is None:
            seen: set[str] = set()
            for column in record:
                if column in seen:
                    raise MalformedInputError(
                        f"header on line {reader.line_num}: duplicate column {column!r}",
                        format_id=format_id,
                    )
                seen.add(column)
            header = record
            continue
        if len(record) != len(header):
            raise MalformedInputError(
                f"record on line {reader.line_num}: wrong number of fields "
                f"(expected {len(header)}, got {len(record)})",
                format_id=format_id,
            )
        rows.append(dict(zip(header, record)))
    return rows


def parse_csv(raw: str) -> list[dict[str, str]]:
    """Parse comma-separated values."""
    return _parse_delimited(raw, delimiter=",", format_id="csv")


def parse_tsv(raw: str) -> list[dict[str, str]]:
    """Parse tab-separated values."""
    return _parse_delimited(raw, delimiter="\t", format_id="tsv")


PARSERS: list[FormatParser] = [
    FormatParser(
        name="csv",
        description="Comma-separated values (rows keyed by header)",
        parse=parse_csv,
        errors=(csv.Error,),
    ),
    FormatParser(
        name="tsv",
        description="Tab-separated values (rows keyed by header)",
        parse=parse_tsv,
        errors=(csv.Error,),
    ),
]
