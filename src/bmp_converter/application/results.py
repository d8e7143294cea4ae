"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BatchResult:
    """Structured batch outcome.

    ``files_seen`` counts every scanned directory entry, eligible or not.
    ``outputs`` is in completion order, which is unspecified.
    """

    files_seen: int
    converted: int
    elapsed_seconds: float
    outputs: tuple[Path, ...] = ()
