"""ABA record encoders: header, detail, trailer and document assembly."""

from __future__ import annotations

from csv2aba.encoders.detail import accept_row, encode_detail
from csv2aba.encoders.document import convert, encode_document
from csv2aba.encoders.header import encode_header
from csv2aba.encoders.money import parse_amount_cents
from csv2aba.encoders.trailer import encode_trailer

__all__ = [
    "accept_row",
    "convert",
    "encode_detail",
    "encode_document",
    "encode_header",
    "encode_trailer",
    "parse_amount_cents",
]
