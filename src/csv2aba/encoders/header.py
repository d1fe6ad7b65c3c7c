"""Header encoder: the type 0 descriptive record."""

from __future__ import annotations

from csv2aba.core.types import ProcessingDate
from csv2aba.encoders.fields import render
from csv2aba.models.records import EncodedRecord, RecordType
from csv2aba.models.sender import SenderProfile

DATE_FORMAT = "%d%m%y"


def encode_header(
    processing_date: ProcessingDate,
    sender_name: str,
    sender_user_id: int,
    institution_code: str,
    description: str,
    reel_sequence: int = 1,
) -> EncodedRecord:
    """Encode the descriptive record that opens every ABA file."""
    return render(
        RecordType.DESCRIPTIVE,
        {
            "reel_sequence": reel_sequence,
            "institution_code": institution_code,
            "sender_name": sender_name,
            "sender_user_id": sender_user_id,
            "description": description,
            "processing_date": processing_date.strftime(DATE_FORMAT),
        },
    )


def encode_header_for(sender: SenderProfile, processing_date: ProcessingDate) -> EncodedRecord:
    return encode_header(
        processing_date,
        sender_name=sender.name,
        sender_user_id=sender.user_id,
        institution_code=sender.institution_code,
        description=sender.description,
        reel_sequence=sender.reel_sequence,
    )
