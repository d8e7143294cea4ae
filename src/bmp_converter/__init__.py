"""Top-level API for BMP to PNG batch conversion."""

from __future__ import annotations

from pathlib import Path

from bmp_converter.application.results import BatchResult
from bmp_converter.types import PathInput

__version__ = "0.1.0"


def convert_bmp_directory(
    input_dir: PathInput = ".",
    output_dir: PathInput = ".",
    *,
    silent: bool = False,
    clean: bool = False,
    concurrency: int = 5,
) -> BatchResult:
    """Convert every BMP file in a directory to PNG.

    Parameters
    ----------
    input_dir : str | PathLike, default="."
        Directory scanned for ``.bmp`` files. Surrounding whitespace and one
        pair of enclosing quotes are stripped.
    output_dir : str | PathLike, default="."
        Directory receiving the ``.png`` files. It must already exist.
    silent : bool, default=False
        Suppress progress and summary output.
    clean : bool, default=False
        Delete each BMP once its PNG is written.
    concurrency : int, default=5
        Maximum files converted at once. Values below 1 mean 1.

    Returns
    -------
    BatchResult
        Entry count, converted count, elapsed time and written paths.
    """
    from .api import convert_bmp_directory as _impl

    return _impl(
        str(input_dir),
        str(output_dir),
        silent=silent,
        clean=clean,
        concurrency=concurrency,
    )


def convert_bmp_file(input_path: PathInput, output_path: PathInput | None = None) -> Path:
    """Convert one BMP file to PNG.

    Parameters
    ----------
    input_path : str | PathLike
        Source BMP file.
    output_path : str | PathLike | None, default=None
        PNG destination. When omitted, the ``.png`` sibling of
        ``input_path`` is used.
    """
    from .api import convert_bmp_file as _impl

    return _impl(Path(input_path), Path(output_path) if output_path is not None else None)


__all__ = [
    "BatchResult",
    "convert_bmp_directory",
    "convert_bmp_file",
]
