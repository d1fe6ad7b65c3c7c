"""PaymentInstruction: one row of the input payment table."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from csv2aba.core.types import Row

REQUIRED_COLUMNS: frozenset[str] = frozenset({"BSB", "Reference", "Name", "Account", "Amount"})


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


class PaymentInstruction(BaseModel):
    """Single credit instruction as read from the source table.

    ``amount`` stays raw text here; it is turned into cents by
    :func:`csv2aba.encoders.money.parse_amount_cents`.
    """

    model_config = {"frozen": True, "populate_by_name": True, "str_strip_whitespace": True}

    bsb: str = Field(alias="BSB")  # NNN-NNN
    account: str = Field(alias="Account")
    name: str = Field(alias="Name")
    reference: str = Field(alias="Reference")
    amount: str = Field(alias="Amount")  # e.g. "$1,234.56"

    @classmethod
    def from_row(cls, row: Row) -> Optional[PaymentInstruction]:
        """Build an instruction from a named row, or None if any required cell is blank."""
        if any(_is_blank(row.get(column)) for column in REQUIRED_COLUMNS):
            return None
        return cls.model_validate({column: str(row[column]) for column in REQUIRED_COLUMNS})
