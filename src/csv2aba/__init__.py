"""csv2aba: convert tabular payment instructions into CEMTEX ABA files."""

from __future__ import annotations

__version__ = "0.1.0"
