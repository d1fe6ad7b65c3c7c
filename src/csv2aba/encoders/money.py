"""Currency-string parsing: the one place amounts enter as text.

Amounts are carried as integer cents everywhere else. Parsing goes
through :class:`~decimal.Decimal` so no binary float is involved, and
half-cents round away from zero (ROUND_HALF_UP).
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext

from csv2aba.core.exceptions import AmountParseError
from csv2aba.core.types import Cents

CURRENCY_SYMBOL = "$"
THOUSANDS_SEPARATOR = ","
MAX_CENTS = 9_999_999_999  # 10-digit amount field
_CENT = Decimal("1")
# ASCII digits with an optional fraction; no exponent, sign or underscores.
_AMOUNT = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def parse_amount_cents(raw: str, row_number: int | None = None) -> Cents:
    """Convert text such as ``"$1,234.56"`` to ``123456``.

    Raises:
        AmountParseError: the text is not a plain decimal number, is
            negative, or does not fit the 10-digit amount field.
    """
    text = raw.strip()
    if text.startswith(CURRENCY_SYMBOL):
        text = text[len(CURRENCY_SYMBOL):]
    text = text.replace(THOUSANDS_SEPARATOR, "").strip()
    if text.startswith("-") and _AMOUNT.fullmatch(text[1:].lstrip(CURRENCY_SYMBOL)):
        raise AmountParseError(raw, row_number, reason="negative amounts are not supported")
    if not _AMOUNT.fullmatch(text):
        raise AmountParseError(raw, row_number)
    try:
        with localcontext() as ctx:
            ctx.prec = len(text) + 3
            cents = (Decimal(text) * 100).quantize(_CENT, rounding=ROUND_HALF_UP)
    except DecimalException as exc:
        raise AmountParseError(raw, row_number, reason="out of range") from exc
    if cents > MAX_CENTS:
        raise AmountParseError(raw, row_number, reason="out of range")
    return int(cents)
