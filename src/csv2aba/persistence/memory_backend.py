"""In-memory payment file store for unit tests and local runs."""

from __future__ import annotations

from csv2aba.core.exceptions import FileStoreError
from csv2aba.models.outputs import CSV_ENCODING, AbaDocument
from csv2aba.persistence.paths import is_csv


class MemoryFileStore:
    """Dict-backed IFileStore holding raw bytes, as an object store would."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def upload(self, path: str, data: bytes) -> None:
        """Drop a source file into the store."""
        self._files[path] = data

    def read_bytes(self, path: str) -> bytes:
        try:
            return self._files[path]
        except KeyError as exc:
            raise FileStoreError(f"No such file: {path!r}") from exc

    def read_csv(self, path: str) -> str:
        try:
            return self.read_bytes(path).decode(CSV_ENCODING)
        except UnicodeDecodeError as exc:
            raise FileStoreError(f"{path!r} is not UTF-8 text: {exc}") from exc

    def write_aba(self, path: str, document: AbaDocument) -> str:
        self._files[path] = document.encode()
        return path

    def move(self, src: str, dst: str) -> None:
        self._files[dst] = self.read_bytes(src)
        del self._files[src]

    def list_csv(self, prefix: str) -> list[str]:
        return sorted(k for k in self._files if k.startswith(prefix) and is_csv(k))

    def list_files(self, prefix: str) -> list[str]:
        return sorted(k for k in self._files if k.startswith(prefix))
