"""Shared fixtures: a fixed processing date and sample payment rows."""

from __future__ import annotations

from datetime import date

import pytest

PROCESSING_DATE = date(2025, 4, 23)


@pytest.fixture
def processing_date() -> date:
    return PROCESSING_DATE


@pytest.fixture
def smith_row() -> dict[str, str]:
    return {
        "BSB": "000-000",
        "Reference": "TEST",
        "Name": "R SMITH",
        "Account": "157108231",
        "Amount": "$12.00",
    }


@pytest.fixture
def blank_row() -> dict[str, str]:
    return {"BSB": "", "Reference": "", "Name": "", "Account": "", "Amount": ""}
