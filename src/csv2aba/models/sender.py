"""Sender identity written into descriptive and detail records."""

from __future__ import annotations

from pydantic import BaseModel


class SenderProfile(BaseModel):
    """The single institution profile this tool encodes for.

    Fixed institution abbreviation, credit-only transactions, no withholding
    tax and no balancing debit record.
    """

    model_config = {"frozen": True}

    institution_code: str = "CBA"
    name: str = "Meya"
    user_id: int = 0
    description: str = "PAYROLL"
    remitter_name: str = "Meya"
    reel_sequence: int = 1
