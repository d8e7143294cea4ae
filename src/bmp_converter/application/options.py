"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONCURRENCY = 5


def clamp_concurrency(value: int) -> int:
    """Return ``value`` raised to at least one slot."""
    return max(1, int(value))


@dataclass(frozen=True)
class BatchOptions:
    """Immutable batch configuration passed through use-cases and tasks."""

    input_dir: Path = Path(".")
    output_dir: Path = Path(".")
    silent: bool = False
    clean: bool = False
    concurrency: int = DEFAULT_CONCURRENCY


@dataclass(frozen=True)
class ConversionJob:
    """One eligible input file and where its PNG goes.

    Parameters
    ----------
    name : str
        Basename of the input file as listed.
    input_path : Path
        Full path of the BMP source.
    output_path : Path
        Full path of the PNG to write.
    clean : bool, default=False
        Delete ``input_path`` after the output is written and closed.
    silent : bool, default=False
        Suppress the per-file progress line.
    """

    name: str
    input_path: Path
    output_path: Path
    clean: bool = False
    silent: bool = False
