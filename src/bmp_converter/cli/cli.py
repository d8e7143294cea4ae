#!/usr/bin/env python3
"""
bmp_converter.cli.cli

Typer-based CLI for converting a directory of BMP images to PNG.

Examples
--------
Convert BMPs in the current directory in place:

    bmp-to-png

Convert from one directory to another, deleting sources, 8 at a time:

    bmp-to-png --input ./scans --output ./png --clean -c 8
"""

from __future__ import annotations

import logging
import traceback

import typer

from bmp_converter import __version__
from bmp_converter.errors import BmpConverterError

app = typer.Typer(
    name="bmp-to-png",
    help="Convert BMP images in a directory to PNG.",
    add_completion=False,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(debug: bool) -> None:
    """Route library logging to stderr; DEBUG when ``debug`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bmp-to-png {__version__}")
        raise typer.Exit()


@app.command()
def convert_cmd(
    input_dir: str = typer.Option(
        ".",
        "--input",
        envvar="BMP2PNG_INPUT",
        help="Path to process BMP files in.",
    ),
    output_dir: str = typer.Option(
        ".",
        "--output",
        envvar="BMP2PNG_OUTPUT",
        help="Path to write PNG files out.",
    ),
    silent: bool = typer.Option(
        False, "--silent", envvar="BMP2PNG_SILENT", help="Don't print anything to stdout."
    ),
    clean: bool = typer.Option(
        False, "--clean", envvar="BMP2PNG_CLEAN", help="Delete BMPs after processing."
    ),
    concurrency: int = typer.Option(
        5,
        "-c",
        "--concurrency",
        envvar="BMP2PNG_CONCURRENCY",
        help="Number of concurrent operations (minimum 1).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert every .bmp file in --input to a .png file in --output.

    Parameters
    ----------
    input_dir : str, default="."
        Directory scanned for BMP files. Quotes and whitespace are trimmed.
    output_dir : str, default="."
        Existing directory receiving the PNG files.
    silent : bool, default=False
        Suppress per-file progress and the summary line.
    clean : bool, default=False
        Delete each BMP once its PNG has been written.
    concurrency : int, default=5
        Maximum number of files converted at once.

    Notes
    -----
    - The first failing file aborts the batch with a non-zero exit code.
      Files converted before it stay on disk.
    """
    del version
    _configure_logging(debug)

    try:
        from bmp_converter.api import convert_bmp_directory

        convert_bmp_directory(
            input_dir=input_dir,
            output_dir=output_dir,
            silent=silent,
            clean=clean,
            concurrency=concurrency,
        )
    except BmpConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


if __name__ == "__main__":
    app()
