"""Pydantic schemas for runtime validation of batch inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bmp_converter.application.options import DEFAULT_CONCURRENCY, clamp_concurrency
from bmp_converter.paths import normalize_path


class BatchConversionConfig(BaseModel):
    """Validated input for directory-wide BMP to PNG conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path = Path(".")
    output_dir: Path = Path(".")
    silent: bool = False
    clean: bool = False
    concurrency: int = Field(default=DEFAULT_CONCURRENCY)

    @field_validator("input_dir", "output_dir", mode="before")
    @classmethod
    def _normalize_dir(cls, value: object) -> object:
        if isinstance(value, (str, Path)):
            return Path(normalize_path(str(value)))
        return value

    @field_validator("concurrency")
    @classmethod
    def _clamp_concurrency(cls, value: int) -> int:
        return clamp_concurrency(value)
