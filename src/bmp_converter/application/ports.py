"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol

from bmp_converter.types import RasterImage

if TYPE_CHECKING:
    from bmp_converter.adapters.listing import FileEntry


class DirectoryLister(Protocol):
    """Enumerate the entries of a directory."""

    def list(self, path: Path) -> Sequence[FileEntry]:
        """Return entries; raise ``DirectoryListError`` if unreadable."""


class ImageDecoder(Protocol):
    """Decode source bytes into an in-memory raster."""

    def decode(self, data: bytes) -> RasterImage:
        """Raise on malformed input."""


class ImageEncoder(Protocol):
    """Encode an in-memory raster into a binary sink."""

    def encode(self, image: RasterImage, sink: BinaryIO) -> None:
        """Raise on encoder or I/O failure."""


class Reporter(Protocol):
    """Progress and summary sink."""

    def file_started(self, name: str) -> None:
        """Announce that ``name`` is about to be processed."""

    def report(self, count: int, elapsed: float) -> None:
        """Summarize a finished batch."""
