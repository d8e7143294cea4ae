"""End-to-end smoke test for the installed CLI entrypoint."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

import bmp_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert bmp_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["bmp-to-png", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "--concurrency" in result.stdout


def test_cli_missing_input_directory_fails_cleanly(tmp_path: Path) -> None:
    """Ensure CLI exits non-zero with a readable message for a missing directory."""
    result = subprocess.run(
        ["bmp-to-png", "--input", str(tmp_path / "missing"), "--output", str(tmp_path)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "directorylisterror" in result.stderr.lower()


def test_cli_converts_and_reports(tmp_path: Path, make_bmp: Callable[..., Path]) -> None:
    """Run a real conversion through the console script."""
    make_bmp(tmp_path / "photo.bmp")

    result = subprocess.run(
        ["bmp-to-png", "--input", f'"{tmp_path}"', "--output", str(tmp_path)],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert 'Processing "photo.bmp"' in result.stdout
    assert "Processed 1 files in" in result.stdout
    assert (tmp_path / "photo.png").exists()
