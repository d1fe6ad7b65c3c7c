"""Output models: assembled ABA document and conversion results."""

from __future__ import annotations

from pydantic import BaseModel

from csv2aba.models.records import Batch, EncodedRecord

ABA_ENCODING = "ascii"
ABA_CONTENT_TYPE = "text/plain; charset=us-ascii"
CSV_ENCODING = "utf-8-sig"  # tolerate a spreadsheet BOM


class AbaDocument(BaseModel):
    """Header, accepted details and trailer of one conversion, in file order."""

    model_config = {"frozen": True}

    header: EncodedRecord
    batch: Batch
    trailer: EncodedRecord

    @property
    def records(self) -> list[EncodedRecord]:
        return [self.header, *self.batch.records, self.trailer]

    @property
    def text(self) -> str:
        """Newline-separated lines with one trailing newline."""
        return "\n".join(record.text for record in self.records) + "\n"

    def encode(self) -> bytes:
        return self.text.encode(ABA_ENCODING)


class ConversionResult(BaseModel):
    """Metadata for a written ABA file."""

    filename: str
    path: str = ""
    record_count: int = 0
    skipped_count: int = 0
    total_cents: int = 0
    source_path: str = ""
