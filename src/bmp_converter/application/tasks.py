"""Per-file conversion unit of work."""

from __future__ import annotations

import logging
from pathlib import Path

from bmp_converter.application.options import BatchOptions, ConversionJob
from bmp_converter.application.ports import ImageDecoder, ImageEncoder, Reporter
from bmp_converter.errors import (
    CleanupError,
    CreateError,
    DecodeError,
    EncodeError,
    OpenError,
)
from bmp_converter.paths import output_name_for

logger = logging.getLogger(__name__)


def build_job(name: str, options: BatchOptions) -> ConversionJob:
    """Create the job for input basename ``name`` under ``options``."""
    return ConversionJob(
        name=name,
        input_path=Path(options.input_dir) / name,
        output_path=Path(options.output_dir) / output_name_for(name),
        clean=options.clean,
        silent=options.silent,
    )


class ConversionTask:
    """Convert one BMP file to PNG.

    Parameters
    ----------
    decoder : ImageDecoder
        BMP decoder port.
    encoder : ImageEncoder
        PNG encoder port.
    reporter : Reporter | None, default=None
        Receives the per-file progress line for non-silent jobs.
    """

    def __init__(
        self,
        decoder: ImageDecoder,
        encoder: ImageEncoder,
        reporter: Reporter | None = None,
    ) -> None:
        self.decoder = decoder
        self.encoder = encoder
        self.reporter = reporter

    def run(self, job: ConversionJob) -> Path:
        """Run every stage for ``job`` and return the written PNG path.

        Raises
        ------
        OpenError, DecodeError, CreateError, EncodeError, CleanupError
            From the first stage that fails. Later stages do not run.
        """
        if not job.silent and self.reporter is not None:
            self.reporter.file_started(job.name)

        try:
            with job.input_path.open("rb") as source:
                data = source.read()
        except OSError as exc:
            raise OpenError(job.input_path, exc.strerror or str(exc)) from exc
        logger.debug("read %d bytes from %s", len(data), job.input_path)

        try:
            image = self.decoder.decode(data)
        except Exception as exc:
            raise DecodeError(job.input_path, str(exc)) from exc

        try:
            sink = job.output_path.open("wb")
        except OSError as exc:
            raise CreateError(job.output_path, exc.strerror or str(exc)) from exc

        try:
            with sink:
                self.encoder.encode(image, sink)
        except Exception as exc:
            raise EncodeError(job.output_path, str(exc)) from exc
        logger.debug("wrote %s", job.output_path)

        if job.clean:
            try:
                job.input_path.unlink()
            except OSError as exc:
                raise CleanupError(job.input_path, exc.strerror or str(exc)) from exc
            logger.debug("removed source %s", job.input_path)

        return job.output_path
