"""Protocol interfaces for csv2aba abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from csv2aba.models.outputs import AbaDocument


# ---------------------------------------------------------------------------
# Persistence: payment file store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """Where payment CSVs are dropped and ABA files are written."""

    def read_csv(self, path: str) -> str: ...

    def write_aba(self, path: str, document: AbaDocument) -> str: ...

    def move(self, src: str, dst: str) -> None: ...

    def list_csv(self, prefix: str) -> list[str]: ...
