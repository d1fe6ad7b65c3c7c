"""Tests for PaymentInstruction row handling."""

from __future__ import annotations

from csv2aba.models.payment import REQUIRED_COLUMNS, PaymentInstruction


def test_required_columns():
    assert REQUIRED_COLUMNS == {"BSB", "Reference", "Name", "Account", "Amount"}


def test_from_row_strips_whitespace(smith_row):
    smith_row["Reference"] = " TEST "
    payment = PaymentInstruction.from_row(smith_row)
    assert payment is not None
    assert payment.reference == "TEST"
    assert payment.amount == "$12.00"


def test_from_row_ignores_extra_columns(smith_row):
    smith_row["Notes"] = "anything"
    assert PaymentInstruction.from_row(smith_row) is not None


def test_from_row_none_values_are_blank(smith_row):
    smith_row["Amount"] = None
    assert PaymentInstruction.from_row(smith_row) is None


def test_populate_by_field_name():
    payment = PaymentInstruction(bsb="062-000", account="1", name="A", reference="R", amount="1")
    assert payment.bsb == "062-000"
