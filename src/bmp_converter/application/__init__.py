"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from bmp_converter.application.options import BatchOptions, ConversionJob
from bmp_converter.application.ports import (
    DirectoryLister,
    ImageDecoder,
    ImageEncoder,
    Reporter,
)
from bmp_converter.application.results import BatchResult


def build_batch_options(
    *,
    input_dir: str | Path = ".",
    output_dir: str | Path = ".",
    silent: bool = False,
    clean: bool = False,
    concurrency: int = 5,
) -> BatchOptions:
    """Build typed batch options via lazy use-case import."""
    from bmp_converter.application.use_cases import build_batch_options as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        silent=silent,
        clean=clean,
        concurrency=concurrency,
    )


def convert_directory(
    *,
    options: BatchOptions,
    lister: DirectoryLister | None = None,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
    reporter: Reporter | None = None,
) -> BatchResult:
    """Convert a directory of BMP files via lazy use-case import."""
    from bmp_converter.application.use_cases import convert_directory as _impl

    return _impl(
        options=options,
        lister=lister,
        decoder=decoder,
        encoder=encoder,
        reporter=reporter,
    )


__all__ = [
    "BatchOptions",
    "BatchResult",
    "ConversionJob",
    "build_batch_options",
    "convert_directory",
]
