"""Object key helpers shared by the file stores and the conversion service."""

from __future__ import annotations

import re
import time
from pathlib import PurePosixPath

_CSV_SUFFIX = re.compile(r"\.csv$", re.IGNORECASE)


def is_csv(path: str) -> bool:
    return bool(_CSV_SUFFIX.search(path))


def aba_filename(source: str | None = None) -> str:
    """``payroll.csv`` -> ``payroll.aba``; no source name -> ``<epoch-ms>.aba``."""
    if not source:
        return f"{int(time.time() * 1000)}.aba"
    name = PurePosixPath(source).name
    if is_csv(name):
        return _CSV_SUFFIX.sub(".aba", name)
    return f"{name}.aba"


def join_key(prefix: str, name: str) -> str:
    return f"{prefix.rstrip('/')}/{name}"
