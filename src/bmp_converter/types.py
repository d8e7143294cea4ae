"""Shared type aliases for converter modules."""

from __future__ import annotations

from os import PathLike

from PIL import Image

type RasterImage = Image.Image
type PathInput = str | PathLike[str]
