"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def sample_image(width: int = 5, height: int = 4) -> Image.Image:
    """Return an RGB image whose pixels all differ."""
    image = Image.new("RGB", (width, height))
    image.putdata(
        [
            ((x * 40) % 256, (y * 60) % 256, (x * y * 7) % 256)
            for y in range(height)
            for x in range(width)
        ]
    )
    return image


@pytest.fixture
def make_bmp() -> Callable[..., Path]:
    """Write a small valid BMP file and return its path."""

    def _make(path: Path, width: int = 5, height: int = 4) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        sample_image(width, height).save(path, format="BMP")
        return path

    return _make


@pytest.fixture
def sample_rgb() -> Image.Image:
    """In-memory RGB image matching what ``make_bmp`` writes."""
    return sample_image()
