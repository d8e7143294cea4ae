"""Unit tests for the directory lister and Pillow codec adapters."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from bmp_converter.adapters.codecs import PillowBmpDecoder, PillowPngEncoder
from bmp_converter.adapters.listing import FileEntry, OsDirectoryLister
from bmp_converter.errors import DirectoryListError


def test_lister_returns_sorted_entries_with_dir_flag(tmp_path: Path) -> None:
    """List files and directories by name, flagging directories."""
    (tmp_path / "b.bmp").write_bytes(b"")
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "sub.bmp").mkdir()

    entries = OsDirectoryLister().list(tmp_path)

    assert [entry.name for entry in entries] == ["a.txt", "b.bmp", "sub.bmp"]
    assert entries[1] == FileEntry(name="b.bmp", is_dir=False, extension=".bmp")
    assert entries[2].is_dir is True


def test_lister_missing_directory_raises(tmp_path: Path) -> None:
    """Report a missing input directory as a listing error."""
    missing = tmp_path / "missing"
    with pytest.raises(DirectoryListError) as excinfo:
        OsDirectoryLister().list(missing)
    assert excinfo.value.path == missing
    assert excinfo.value.exit_code == 3


def test_lister_rejects_regular_file(tmp_path: Path) -> None:
    """A file path is not a listable directory."""
    target = tmp_path / "file.bmp"
    target.write_bytes(b"")
    with pytest.raises(DirectoryListError):
        OsDirectoryLister().list(target)


def test_decoder_reads_bmp_pixels(
    tmp_path: Path,
    make_bmp: Callable[..., Path],
    sample_rgb: Image.Image,
) -> None:
    """Decode a BMP into an image with the original pixels."""
    path = make_bmp(tmp_path / "photo.bmp")

    image = PillowBmpDecoder().decode(path.read_bytes())

    assert image.size == (5, 4)
    np.testing.assert_array_equal(np.asarray(image), np.asarray(sample_rgb))


@pytest.mark.parametrize(
    ("payload", "match"),
    [
        (b"", "empty file"),
        (b"definitely not an image", "not a BMP"),
    ],
)
def test_decoder_rejects_invalid_payloads(payload: bytes, match: str) -> None:
    """Raise ValueError for empty or unrecognized payloads."""
    with pytest.raises(ValueError, match=match):
        PillowBmpDecoder().decode(payload)


def test_decoder_rejects_png_payload(sample_rgb: Image.Image) -> None:
    """A PNG renamed to .bmp is not accepted."""
    buffer = BytesIO()
    sample_rgb.save(buffer, format="PNG")
    with pytest.raises(ValueError, match="not a BMP"):
        PillowBmpDecoder().decode(buffer.getvalue())


def test_decoder_rejects_truncated_bmp(
    tmp_path: Path, make_bmp: Callable[..., Path]
) -> None:
    """A BMP cut short inside its pixel data fails to decode."""
    data = make_bmp(tmp_path / "photo.bmp", width=32, height=32).read_bytes()
    with pytest.raises(ValueError):
        PillowBmpDecoder().decode(data[: len(data) // 2])


def test_encoder_writes_png(sample_rgb: Image.Image) -> None:
    """Encode into a binary sink as PNG."""
    sink = BytesIO()
    PillowPngEncoder().encode(sample_rgb, sink)

    sink.seek(0)
    with Image.open(sink) as decoded:
        assert decoded.format == "PNG"
        np.testing.assert_array_equal(np.asarray(decoded), np.asarray(sample_rgb))


def test_encoder_converts_unsupported_modes() -> None:
    """Modes PNG cannot store are converted before saving."""
    image = Image.new("CMYK", (2, 2), (0, 0, 0, 0))
    sink = BytesIO()
    PillowPngEncoder().encode(image, sink)

    sink.seek(0)
    with Image.open(sink) as decoded:
        assert decoded.mode == "RGBA"


def test_decoder_rejects_headerless_dib(
    tmp_path: Path, make_bmp: Callable[..., Path]
) -> None:
    """A DIB payload without the ``BM`` file header is not a BMP."""
    data = make_bmp(tmp_path / "photo.bmp").read_bytes()
    assert data[:2] == b"BM"
    with pytest.raises(ValueError, match="not a BMP"):
        PillowBmpDecoder().decode(data[14:])
