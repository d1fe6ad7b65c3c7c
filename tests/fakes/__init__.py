"""Shared test doubles — re-export the memory file store."""

from __future__ import annotations

from csv2aba.persistence.memory_backend import MemoryFileStore

__all__ = ["MemoryFileStore"]
