"""Console progress and summary reporter."""

from __future__ import annotations

import typer


class ConsoleReporter:
    """Print per-file progress and the batch summary to stdout.

    Parameters
    ----------
    silent : bool, default=False
        Suppress all output.
    """

    def __init__(self, silent: bool = False) -> None:
        self.silent = silent

    def file_started(self, name: str) -> None:
        """Print ``Processing "<name>"``."""
        if self.silent:
            return
        typer.echo(f'Processing "{name}"')

    def report(self, count: int, elapsed: float) -> None:
        """Print ``Processed <count> files in <elapsed>s`` with millisecond precision."""
        if self.silent:
            return
        typer.echo(f"Processed {count} files in {elapsed:.3f}s")
