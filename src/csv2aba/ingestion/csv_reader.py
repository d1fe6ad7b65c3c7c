"""CSV ingestion: header row as field names, required-column check."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from csv2aba.core.exceptions import MissingColumnsError
from csv2aba.models.outputs import CSV_ENCODING
from csv2aba.models.payment import REQUIRED_COLUMNS


def check_columns(fieldnames: Iterable[str] | None) -> None:
    """Raise MissingColumnsError unless every required column is present."""
    present = set(fieldnames or ())
    missing = REQUIRED_COLUMNS - present
    if missing:
        raise MissingColumnsError(list(missing))


def read_rows(text: str) -> list[dict[str, str]]:
    """Parse CSV text into rows keyed by the (trimmed) header names.

    Cells are trimmed and short rows padded with ``""``. Fully blank rows
    such as ``,,,,`` are kept; the detail encoder skips them.
    """
    reader = csv.DictReader(io.StringIO(text), skipinitialspace=True)
    if reader.fieldnames is not None:
        reader.fieldnames = [name.strip() for name in reader.fieldnames]
    check_columns(reader.fieldnames)
    rows: list[dict[str, str]] = []
    for raw in reader:
        rows.append({
            key: (value or "").strip()
            for key, value in raw.items()
            if key is not None
        })
    return rows


def decode(data: bytes, encoding: str = CSV_ENCODING) -> str:
    """Decode uploaded bytes, dropping a spreadsheet BOM if present."""
    return data.decode(encoding)
