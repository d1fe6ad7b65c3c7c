"""Type aliases used across csv2aba."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date

Cents = int
Row = Mapping[str, str | None]
ProcessingDate = date
