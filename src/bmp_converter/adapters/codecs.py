"""Pillow-backed BMP decoder and PNG encoder."""

from __future__ import annotations

from io import BytesIO
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from bmp_converter.types import RasterImage

# Modes Pillow's PNG plugin writes directly; anything else goes through RGBA.
_PNG_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


class PillowBmpDecoder:
    """Decode BMP bytes into a Pillow image."""

    def decode(self, data: bytes) -> RasterImage:
        """Decode a complete BMP payload.

        Parameters
        ----------
        data : bytes
            Raw file content.

        Returns
        -------
        RasterImage
            Fully loaded image, detached from ``data``.

        Raises
        ------
        ValueError
            If the payload is empty, not a BMP, or truncated/corrupt.
        """
        if not data:
            raise ValueError("empty file")
        try:
            with Image.open(BytesIO(data), formats=["BMP"]) as image:
                image.load()
                return image.copy()
        except UnidentifiedImageError as exc:
            raise ValueError("not a BMP image") from exc
        except (OSError, SyntaxError) as exc:
            raise ValueError(f"corrupt BMP data: {exc}") from exc


class PillowPngEncoder:
    """Encode a Pillow image as PNG into a binary sink."""

    def encode(self, image: RasterImage, sink: BinaryIO) -> None:
        """Write ``image`` to ``sink`` in PNG format."""
        if image.mode not in _PNG_MODES:
            image = image.convert("RGBA")
        image.save(sink, format="PNG")
