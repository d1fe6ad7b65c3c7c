"""Document assembler: header, accepted details, trailer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from csv2aba.core.types import ProcessingDate, Row
from csv2aba.encoders.detail import DEFAULT_SENDER, accept_row
from csv2aba.encoders.header import encode_header_for
from csv2aba.encoders.trailer import encode_trailer
from csv2aba.models.outputs import AbaDocument
from csv2aba.models.records import Batch
from csv2aba.models.sender import SenderProfile

logger = logging.getLogger(__name__)


def build_batch(rows: Iterable[Row], sender: SenderProfile = DEFAULT_SENDER) -> Batch:
    """Fold the detail encoder over ``rows`` in input order. Row numbers are 1-based."""
    batch = Batch()
    for row_number, row in enumerate(rows, start=1):
        batch = accept_row(batch, row, sender, row_number)
    return batch


def encode_document(
    rows: Iterable[Row],
    processing_date: ProcessingDate | None = None,
    sender: SenderProfile = DEFAULT_SENDER,
) -> AbaDocument:
    """Encode a whole table. An empty table gives a header and a zero trailer."""
    if processing_date is None:
        processing_date = date.today()
    header = encode_header_for(sender, processing_date)
    batch = build_batch(rows, sender)
    trailer = encode_trailer(batch.count, batch.total_cents)
    logger.info(
        "Encoded ABA batch: %d records, %d skipped, total %d cents",
        batch.count, batch.skipped, batch.total_cents,
    )
    return AbaDocument(header=header, batch=batch, trailer=trailer)


def convert(
    rows: Iterable[Row],
    processing_date: ProcessingDate | None = None,
    sender: SenderProfile = DEFAULT_SENDER,
) -> str:
    """Convert payment rows to ABA file text."""
    return encode_document(rows, processing_date, sender).text
