"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pydantic import ValidationError

from bmp_converter.adapters.codecs import PillowBmpDecoder, PillowPngEncoder
from bmp_converter.adapters.listing import OsDirectoryLister
from bmp_converter.application.options import BatchOptions, ConversionJob
from bmp_converter.application.ports import (
    DirectoryLister,
    ImageDecoder,
    ImageEncoder,
    Reporter,
)
from bmp_converter.application.results import BatchResult
from bmp_converter.application.scheduler import BoundedScheduler
from bmp_converter.application.tasks import ConversionTask, build_job
from bmp_converter.errors import ConfigurationError
from bmp_converter.infrastructure.reporting import ConsoleReporter
from bmp_converter.paths import is_eligible, output_name_for
from bmp_converter.schemas import BatchConversionConfig

logger = logging.getLogger(__name__)


def convert_directory(
    *,
    options: BatchOptions,
    lister: DirectoryLister | None = None,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
    reporter: Reporter | None = None,
) -> BatchResult:
    """Use-case: convert every BMP in ``options.input_dir`` to PNG.

    Raises
    ------
    DirectoryListError
        If the input directory cannot be listed. No job has started.
    ConversionError
        From the first file that fails. Files converted before it remain.
    """
    started = time.perf_counter()

    lister = lister or OsDirectoryLister()
    decoder = decoder or PillowBmpDecoder()
    encoder = encoder or PillowPngEncoder()
    reporter = reporter or ConsoleReporter(silent=options.silent)

    entries = lister.list(Path(options.input_dir))
    jobs = [build_job(entry.name, options) for entry in entries if is_eligible(entry)]
    logger.info(
        "found %d entries in %s, %d eligible", len(entries), options.input_dir, len(jobs)
    )

    scheduler = BoundedScheduler(ConversionTask(decoder, encoder, reporter))
    result = scheduler.process(jobs, options.concurrency)

    elapsed = time.perf_counter() - started
    if not options.silent:
        reporter.report(len(entries), elapsed)
    return BatchResult(
        files_seen=len(entries),
        converted=result.converted,
        elapsed_seconds=elapsed,
        outputs=result.outputs,
    )


def convert_file(
    *,
    input_path: Path,
    output_path: Path | None = None,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> Path:
    """Use-case: convert a single BMP file without scheduling or reporting."""
    job = ConversionJob(
        name=input_path.name,
        input_path=input_path,
        output_path=output_path or input_path.with_name(output_name_for(input_path.name)),
        silent=True,
    )
    task = ConversionTask(decoder or PillowBmpDecoder(), encoder or PillowPngEncoder())
    return task.run(job)


def build_batch_options(
    *,
    input_dir: str | Path = ".",
    output_dir: str | Path = ".",
    silent: bool = False,
    clean: bool = False,
    concurrency: int = 5,
) -> BatchOptions:
    """Build typed, validated options from command/API params."""
    try:
        config = BatchConversionConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            silent=silent,
            clean=clean,
            concurrency=concurrency,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid batch conversion parameters: {exc}") from exc
    return BatchOptions(
        input_dir=config.input_dir,
        output_dir=config.output_dir,
        silent=config.silent,
        clean=config.clean,
        concurrency=config.concurrency,
    )
