"""Tests for the detail (type 1) record encoder."""

from __future__ import annotations

import pytest

from csv2aba.core.exceptions import AmountParseError, RecordLayoutError
from csv2aba.encoders.detail import accept_row, encode_detail
from csv2aba.models.records import Batch, RecordType
from csv2aba.models.sender import SenderProfile

REQUIRED = ["BSB", "Reference", "Name", "Account", "Amount"]


def test_detail_layout(smith_row):
    record, cents = encode_detail(smith_row)
    expected = (
        "1" + "000-000" + "157108231" + " " + "53" + "0000001200"
        + "R SMITH".ljust(32) + "TEST".ljust(18)
        + "000-000" + "157108231" + "Meya".ljust(16) + "00000000"
    )
    assert record is not None
    assert record.kind is RecordType.DETAIL
    assert record.text == expected
    assert cents == 1200


def test_amount_field_matches_returned_cents(smith_row):
    smith_row["Amount"] = "$1,234.56"
    record, cents = encode_detail(smith_row)
    assert cents == 123456
    assert record.field("amount") == "0000123456"


def test_short_account_is_right_justified_blank_filled(smith_row):
    smith_row["Account"] = "00-1234"
    record, _ = encode_detail(smith_row)
    assert record.field("account") == "  00-1234"
    assert record.field("trace_account") == "  00-1234"


def test_trace_fields_mirror_primary(smith_row):
    smith_row["BSB"] = "062-000"
    record, _ = encode_detail(smith_row)
    assert record.field("trace_bsb") == "062-000"
    assert record.field("trace_account") == record.field("account")


def test_cells_are_trimmed(smith_row):
    smith_row["Name"] = "  R SMITH  "
    smith_row["BSB"] = " 000-000 "
    record, _ = encode_detail(smith_row)
    assert record.field("title") == "R SMITH".ljust(32)
    assert record.field("bsb") == "000-000"


def test_remitter_comes_from_sender(smith_row):
    record, _ = encode_detail(smith_row, SenderProfile(remitter_name="ACME PAYROLL"))
    assert record.field("remitter_name") == "ACME PAYROLL    "


@pytest.mark.parametrize("column", REQUIRED)
def test_blank_field_skips_row(smith_row, column):
    smith_row[column] = "   "
    assert encode_detail(smith_row) == (None, None)


@pytest.mark.parametrize("column", REQUIRED)
def test_missing_field_skips_row(smith_row, column):
    del smith_row[column]
    assert encode_detail(smith_row) == (None, None)


def test_all_blank_row_skips(blank_row):
    assert encode_detail(blank_row) == (None, None)


def test_non_numeric_amount_is_an_error(smith_row):
    smith_row["Amount"] = "twelve"
    with pytest.raises(AmountParseError):
        encode_detail(smith_row, row_number=7)


def test_payee_name_too_long_is_fatal(smith_row):
    smith_row["Name"] = "A" * 33
    with pytest.raises(RecordLayoutError):
        encode_detail(smith_row)


def test_malformed_bsb_is_fatal(smith_row):
    smith_row["BSB"] = "000000"
    with pytest.raises(RecordLayoutError):
        encode_detail(smith_row)


def test_amount_wider_than_ten_digits_is_fatal(smith_row):
    smith_row["Amount"] = "100000000.00"
    with pytest.raises(AmountParseError, match="out of range"):
        encode_detail(smith_row)


class TestAcceptRow:
    def test_accept_adds_record_and_amount(self, smith_row):
        batch = accept_row(Batch(), smith_row)
        batch = accept_row(batch, smith_row)
        assert batch.count == 2
        assert batch.total_cents == 2400
        assert batch.skipped == 0

    def test_skip_leaves_total_and_count(self, smith_row, blank_row):
        batch = accept_row(Batch(), smith_row)
        after = accept_row(batch, blank_row)
        assert after.count == 1
        assert after.total_cents == 1200
        assert after.skipped == 1

    def test_input_batch_is_not_mutated(self, smith_row):
        empty = Batch()
        accept_row(empty, smith_row)
        assert empty.count == 0
        assert empty.total_cents == 0


@pytest.mark.parametrize("column", ["Name", "Reference", "Account"])
def test_embedded_line_break_is_fatal(smith_row, column):
    smith_row[column] = "R\nSMITH"
    with pytest.raises(RecordLayoutError, match="printable ASCII"):
        encode_detail(smith_row)


def test_non_ascii_payee_is_fatal(smith_row):
    smith_row["Name"] = "José Smith"
    with pytest.raises(RecordLayoutError, match="printable ASCII"):
        encode_detail(smith_row)
