"""Bounded-concurrency dispatch of conversion jobs."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Protocol

from bmp_converter.application.options import (
    DEFAULT_CONCURRENCY,
    ConversionJob,
    clamp_concurrency,
)
from bmp_converter.application.results import BatchResult

logger = logging.getLogger(__name__)


class JobRunner(Protocol):
    """Anything that can run a single job, such as ``ConversionTask``."""

    def run(self, job: ConversionJob) -> Path:
        """Run ``job`` and return its output path."""


class BoundedScheduler:
    """Run one task per job with at most ``concurrency`` active at once.

    A bounded semaphore holds the slots. The dispatch loop takes a slot
    before submitting each job and every task gives its slot back when it
    finishes, whatever the outcome. The first failure stops further
    dispatch; tasks already running are waited for, then the failure is
    re-raised from :meth:`process`.
    """

    def __init__(self, runner: JobRunner) -> None:
        self.runner = runner

    def process(
        self,
        jobs: Iterable[ConversionJob],
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> BatchResult:
        """Run ``jobs`` and aggregate their outcome.

        Parameters
        ----------
        jobs : Iterable[ConversionJob]
            Jobs to dispatch, in dispatch order.
        concurrency : int, default=5
            Maximum simultaneously active tasks. Values below 1 mean 1.

        Returns
        -------
        BatchResult
            Converted count and scheduling wall time. ``files_seen`` equals
            the number of jobs; callers that scanned more entries replace it.

        Raises
        ------
        BaseException
            The first error raised by any task.
        """
        limit = clamp_concurrency(concurrency)
        slots = threading.BoundedSemaphore(limit)
        lock = threading.Lock()
        failures: list[BaseException] = []
        outputs: list[Path] = []
        started = time.perf_counter()

        def run_in_slot(job: ConversionJob) -> None:
            try:
                output = self.runner.run(job)
            except BaseException as exc:
                with lock:
                    if not failures:
                        logger.debug("conversion failed for %s: %s", job.name, exc)
                    failures.append(exc)
            else:
                with lock:
                    outputs.append(output)
            finally:
                slots.release()

        def failed() -> bool:
            with lock:
                return bool(failures)

        futures: list[Future[None]] = []
        with ThreadPoolExecutor(
            max_workers=limit, thread_name_prefix="bmp-to-png"
        ) as executor:
            for job in jobs:
                slots.acquire()
                if failed():
                    slots.release()
                    break
                futures.append(executor.submit(run_in_slot, job))
        logger.debug("dispatched %d job(s) with %d slot(s)", len(futures), limit)

        if failures:
            raise failures[0]
        for future in futures:
            future.result()

        return BatchResult(
            files_seen=len(futures),
            converted=len(outputs),
            elapsed_seconds=time.perf_counter() - started,
            outputs=tuple(outputs),
        )
