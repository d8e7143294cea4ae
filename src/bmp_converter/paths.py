"""Path helpers: user path normalization, input eligibility and output naming."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bmp_converter.adapters.listing import FileEntry

BMP_EXTENSION = ".bmp"
PNG_EXTENSION = ".png"
_QUOTES = ('"', "'")


def normalize_path(raw: str) -> str:
    """Clean a user-supplied directory path.

    Whitespace is trimmed, the path is cleaned with ``os.path.normpath`` and one
    pair of matching enclosing quotes is removed.

    Parameters
    ----------
    raw : str
        Path as typed on the command line.

    Returns
    -------
    str
        Normalized path. May be empty (``'""'`` normalizes to ``''``).
    """
    cleaned = os.path.normpath(raw.strip())
    if len(cleaned) < 2:
        return cleaned
    first, last = cleaned[0], cleaned[-1]
    if first == last and first in _QUOTES:
        return cleaned[1:-1]
    return cleaned


def file_extension(name: str) -> str:
    """Return the suffix of ``name`` starting at its last dot, or ``""``."""
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


def is_eligible(entry: FileEntry) -> bool:
    """Return whether a directory entry is a BMP file to convert.

    Extension matching is case-sensitive: ``photo.BMP`` is skipped.
    """
    if entry.is_dir:
        return False
    return entry.extension == BMP_EXTENSION


def output_name_for(name: str) -> str:
    """Derive the PNG filename for an input basename.

    Only the last dot splits the name, so ``a.b.bmp`` becomes ``a.b.png``.
    A name without any dot keeps its full text: ``README`` becomes
    ``README.png``.
    """
    index = name.rfind(".")
    stem = name if index < 0 else name[:index]
    return f"{stem}{PNG_EXTENSION}"
