"""csv2aba exception hierarchy."""

from __future__ import annotations


class Csv2AbaError(Exception):
    """Base exception for all csv2aba errors."""


class RecordLayoutError(Csv2AbaError):
    """A fixed-width record broke its layout (field overflow or wrong length).

    There is no safe partial output once this is raised; the whole
    conversion is aborted.
    """


class AmountParseError(Csv2AbaError):
    """An Amount cell could not be turned into a non-negative cent value."""

    def __init__(self, raw: str, row_number: int | None = None, reason: str = "not a number") -> None:
        self.raw = raw
        self.row_number = row_number
        self.reason = reason
        where = f"row {row_number}" if row_number is not None else "amount"
        super().__init__(f"Invalid amount in {where}: {raw!r} ({reason})")


class MissingColumnsError(Csv2AbaError):
    """Input table does not carry every required column."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = sorted(missing)
        super().__init__(f"Missing required CSV columns: {', '.join(self.missing)}")


class FileStoreError(Csv2AbaError):
    """File store operation failed."""
