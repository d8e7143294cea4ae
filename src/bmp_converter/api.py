"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from bmp_converter.application.results import BatchResult
from bmp_converter.application.use_cases import build_batch_options
from bmp_converter.application.use_cases import convert_directory
from bmp_converter.application.use_cases import convert_file


def convert_bmp_directory(
    input_dir: str | Path = ".",
    output_dir: str | Path = ".",
    *,
    silent: bool = False,
    clean: bool = False,
    concurrency: int = 5,
) -> BatchResult:
    """Convert every ``.bmp`` file in ``input_dir`` into ``output_dir``."""
    options = build_batch_options(
        input_dir=input_dir,
        output_dir=output_dir,
        silent=silent,
        clean=clean,
        concurrency=concurrency,
    )
    return convert_directory(options=options)


def convert_bmp_file(input_path: Path, output_path: Optional[Path] = None) -> Path:
    """Convert a single BMP file to PNG."""
    return convert_file(input_path=input_path, output_path=output_path)
