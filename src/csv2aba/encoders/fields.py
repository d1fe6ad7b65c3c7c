"""Fixed-width rendering of a record layout."""

from __future__ import annotations

from collections.abc import Mapping

from csv2aba.core.exceptions import RecordLayoutError
from csv2aba.models.records import Align, Column, EncodedRecord, RecordType


def render_column(column: Column, value: str | int | None) -> str:
    """Justify and pad one value into its column. Never truncates."""
    if column.fixed is not None:
        return column.fixed
    if value is None:
        raise RecordLayoutError(f"No value supplied for field {column.name!r}")
    text = str(value)
    if not (text.isascii() and text.isprintable()):
        raise RecordLayoutError(
            f"Field {column.name!r} has characters outside printable ASCII: {text!r}"
        )
    if column.numeric and not text.isdigit():
        raise RecordLayoutError(f"Field {column.name!r} must be unsigned numeric, got {text!r}")
    if len(text) > column.width:
        raise RecordLayoutError(
            f"Field {column.name!r} is {len(text)} chars, wider than its {column.width}-char box"
        )
    if column.exact and len(text) != column.width:
        raise RecordLayoutError(
            f"Field {column.name!r} must be exactly {column.width} chars, got {text!r}"
        )
    if column.align is Align.RIGHT:
        return text.rjust(column.width, column.fill)
    return text.ljust(column.width, column.fill)


def render(kind: RecordType, values: Mapping[str, str | int]) -> EncodedRecord:
    """Assemble a full record of ``kind`` from named field values.

    Raises:
        RecordLayoutError: a value overflows its field or the assembled
            line is not exactly 120 characters.
    """
    text = "".join(render_column(column, values.get(column.name)) for column in kind.layout)
    return EncodedRecord(kind=kind, text=text)
