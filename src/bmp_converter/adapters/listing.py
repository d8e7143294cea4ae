"""Directory listing adapter."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from bmp_converter.errors import DirectoryListError
from bmp_converter.paths import file_extension


@dataclass(frozen=True)
class FileEntry:
    """Read-only snapshot of one directory entry."""

    name: str
    is_dir: bool
    extension: str

    @classmethod
    def from_name(cls, name: str, *, is_dir: bool = False) -> FileEntry:
        """Build an entry, deriving the extension from ``name``."""
        return cls(name=name, is_dir=is_dir, extension=file_extension(name))


class OsDirectoryLister:
    """List a directory with ``os.scandir``, sorted by name."""

    def list(self, path: Path) -> Sequence[FileEntry]:
        """Return the entries of ``path``.

        Parameters
        ----------
        path : Path
            Directory to enumerate.

        Returns
        -------
        Sequence[FileEntry]
            Entries sorted by filename.

        Raises
        ------
        DirectoryListError
            If the directory is missing, not a directory, or unreadable.
        """
        try:
            with os.scandir(path) as iterator:
                entries = [
                    FileEntry.from_name(item.name, is_dir=item.is_dir())
                    for item in iterator
                ]
        except OSError as exc:
            raise DirectoryListError(path, exc.strerror or str(exc)) from exc
        return sorted(entries, key=lambda entry: entry.name)
