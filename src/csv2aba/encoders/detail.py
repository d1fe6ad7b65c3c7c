"""Detail encoder: one type 1 record per accepted payment row.

Rows with any blank required cell are skipped rather than rejected;
spreadsheet exports routinely end in empty rows.
"""

from __future__ import annotations

import logging
from typing import Optional

from csv2aba.core.types import Cents, Row
from csv2aba.encoders.fields import render
from csv2aba.encoders.money import parse_amount_cents
from csv2aba.models.payment import PaymentInstruction
from csv2aba.models.records import Batch, EncodedRecord, RecordType
from csv2aba.models.sender import SenderProfile

logger = logging.getLogger(__name__)

DEFAULT_SENDER = SenderProfile()


def encode_detail(
    row: Row,
    sender: SenderProfile = DEFAULT_SENDER,
    row_number: int | None = None,
) -> tuple[Optional[EncodedRecord], Optional[Cents]]:
    """Encode one row as a detail record.

    Returns ``(record, cents)`` for a complete row and ``(None, None)`` for
    a row missing any of BSB, Reference, Name, Account or Amount. The
    returned cents always equal the record's amount field.

    Raises:
        AmountParseError: Amount is present but not a non-negative number.
        RecordLayoutError: a value does not fit its field.
    """
    payment = PaymentInstruction.from_row(row)
    if payment is None:
        return None, None

    cents = parse_amount_cents(payment.amount, row_number)
    record = render(
        RecordType.DETAIL,
        {
            "bsb": payment.bsb,
            "account": payment.account,
            "amount": cents,
            "title": payment.name,
            "reference": payment.reference,
            # Trace fields mirror the payee's own BSB and account.
            "trace_bsb": payment.bsb,
            "trace_account": payment.account,
            "remitter_name": sender.remitter_name,
        },
    )
    return record, cents


def accept_row(
    batch: Batch,
    row: Row,
    sender: SenderProfile = DEFAULT_SENDER,
    row_number: int | None = None,
) -> Batch:
    """Fold step: return ``batch`` extended by ``row``, or marked as having skipped it."""
    record, cents = encode_detail(row, sender, row_number)
    if record is None or cents is None:
        logger.debug("Skipping incomplete row %s", row_number)
        return batch.skip()
    return batch.accept(record, cents)
