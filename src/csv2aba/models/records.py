"""ABA record types, their fixed-width layouts, and the batch accumulator.

Layouts follow the CEMTEX ABA file format. Every record is exactly
``LINE_LENGTH`` characters; positions below are 1-based as in the format
documentation.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, model_validator

from csv2aba.core.exceptions import RecordLayoutError

LINE_LENGTH = 120
SPACE = " "
ZERO = "0"


class Align(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class Column(BaseModel):
    """One fixed-width field of a record layout."""

    model_config = {"frozen": True}

    name: str
    width: int
    align: Align = Align.LEFT
    fill: str = SPACE
    fixed: str | None = None  # constant content, no value supplied
    exact: bool = False  # value must already fill the whole width

    @property
    def numeric(self) -> bool:
        return self.fill == ZERO


def _blank(name: str, width: int) -> Column:
    return Column(name=name, width=width, fixed=SPACE * width)


def _zeros(name: str, width: int) -> Column:
    return Column(name=name, width=width, align=Align.RIGHT, fill=ZERO)


class RecordType(StrEnum):
    DESCRIPTIVE = "0"
    DETAIL = "1"
    FILE_TOTAL = "7"

    @property
    def layout(self) -> tuple[Column, ...]:
        return _LAYOUTS[self]


_LAYOUTS: dict[RecordType, tuple[Column, ...]] = {
    # Type 0 descriptive record (header)
    RecordType.DESCRIPTIVE: (
        Column(name="record_type", width=1, fixed=RecordType.DESCRIPTIVE.value),  # 1
        _blank("blank_1", 17),                                                   # 2-18
        _zeros("reel_sequence", 2),                                              # 19-20
        Column(name="institution_code", width=3, exact=True),                    # 21-23
        _blank("blank_2", 7),                                                    # 24-30
        Column(name="sender_name", width=26),                                    # 31-56
        _zeros("sender_user_id", 6),                                             # 57-62
        Column(name="description", width=12),                                    # 63-74
        Column(name="processing_date", width=6, exact=True),                     # 75-80 DDMMYY
        _blank("blank_3", 40),                                                   # 81-120
    ),
    # Type 1 detail record
    RecordType.DETAIL: (
        Column(name="record_type", width=1, fixed=RecordType.DETAIL.value),      # 1
        Column(name="bsb", width=7, exact=True),                                 # 2-8
        Column(name="account", width=9, align=Align.RIGHT),                      # 9-17
        Column(name="indicator", width=1, fixed=SPACE),                          # 18
        Column(name="transaction_code", width=2, fixed="53"),                    # 19-20 credit
        _zeros("amount", 10),                                                    # 21-30
        Column(name="title", width=32),                                          # 31-62
        Column(name="reference", width=18),                                      # 63-80
        Column(name="trace_bsb", width=7, exact=True),                           # 81-87
        Column(name="trace_account", width=9, align=Align.RIGHT),                # 88-96
        Column(name="remitter_name", width=16),                                  # 97-112
        Column(name="withholding_tax", width=8, fixed=ZERO * 8),                 # 113-120
    ),
    # Type 7 file total record (trailer)
    RecordType.FILE_TOTAL: (
        Column(name="record_type", width=1, fixed=RecordType.FILE_TOTAL.value),  # 1
        Column(name="bsb_filler", width=7, fixed="999-999"),                     # 2-8
        _blank("blank_1", 12),                                                   # 9-20
        _zeros("net_total", 10),                                                 # 21-30
        _zeros("credit_total", 10),                                              # 31-40
        Column(name="debit_total", width=10, fixed=ZERO * 10),                   # 41-50
        _blank("blank_2", 24),                                                   # 51-74
        _zeros("record_count", 6),                                               # 75-80
        _blank("blank_3", 40),                                                   # 81-120
    ),
}


class EncodedRecord(BaseModel):
    """An immutable 120-character ABA line tagged with its record type."""

    model_config = {"frozen": True}

    kind: RecordType
    text: str

    @model_validator(mode="after")
    def _check_length(self) -> EncodedRecord:
        if len(self.text) != LINE_LENGTH:
            raise RecordLayoutError(
                f"{self.kind.name} record length is {len(self.text)}, expected {LINE_LENGTH}"
            )
        if self.text[0] != self.kind.value:
            raise RecordLayoutError(
                f"{self.kind.name} record starts with {self.text[0]!r}, expected {self.kind.value!r}"
            )
        return self

    def field(self, name: str) -> str:
        """Slice a named column back out of the line."""
        start = 0
        for column in self.kind.layout:
            if column.name == name:
                return self.text[start:start + column.width]
            start += column.width
        raise KeyError(name)

    def __str__(self) -> str:
        return self.text


class Batch(BaseModel):
    """Accepted detail records and their running total for one conversion.

    Immutable; :meth:`accept` and :meth:`skip` return a new batch so the
    encoder can be folded over the input rows.
    """

    model_config = {"frozen": True}

    records: tuple[EncodedRecord, ...] = ()
    total_cents: int = 0
    skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.records)

    def accept(self, record: EncodedRecord, cents: int) -> Batch:
        if record.kind is not RecordType.DETAIL:
            raise RecordLayoutError(f"Batch only holds DETAIL records, got {record.kind.name}")
        return self.model_copy(
            update={"records": (*self.records, record), "total_cents": self.total_cents + cents}
        )

    def skip(self) -> Batch:
        return self.model_copy(update={"skipped": self.skipped + 1})
