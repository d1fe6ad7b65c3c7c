"""Trailer encoder: the type 7 file total record."""

from __future__ import annotations

from csv2aba.core.types import Cents
from csv2aba.encoders.fields import render
from csv2aba.models.records import EncodedRecord, RecordType


def encode_trailer(detail_record_count: int, total_cents: Cents) -> EncodedRecord:
    """Encode the file total record.

    Credit-only profile: the debit total is always zero, so the net total
    equals the credit total.
    """
    return render(
        RecordType.FILE_TOTAL,
        {
            "net_total": total_cents,
            "credit_total": total_cents,
            "record_count": detail_record_count,
        },
    )
