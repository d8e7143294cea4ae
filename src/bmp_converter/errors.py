"""Exception hierarchy for BMP to PNG batch conversion."""

from __future__ import annotations

from pathlib import Path


class BmpConverterError(Exception):
    """Base class for all converter errors.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error aborts a run.
    """

    exit_code = 1


class ConfigurationError(BmpConverterError):
    """Raised when batch configuration values are invalid."""

    exit_code = 2


class DirectoryListError(BmpConverterError):
    """Raised when the input directory cannot be enumerated."""

    exit_code = 3

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot list input directory '{path}': {reason}")


class ConversionError(BmpConverterError):
    """Raised when a single file fails to convert.

    Parameters
    ----------
    path : Path | str
        File the failing stage was operating on.
    reason : str
        Human-readable cause, usually the chained exception message.
    """

    exit_code = 4
    stage = "convert"

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.stage} failed for '{path}': {reason}")


class OpenError(ConversionError):
    """Input file could not be opened or read."""

    stage = "open"


class DecodeError(ConversionError):
    """Input bytes are not a decodable BMP image."""

    stage = "decode"


class CreateError(ConversionError):
    """Output file could not be created or truncated."""

    stage = "create"


class EncodeError(ConversionError):
    """PNG encoding into the output file failed."""

    stage = "encode"


class CleanupError(ConversionError):
    """Source file could not be removed after a successful conversion."""

    stage = "cleanup"


__all__ = [
    "BmpConverterError",
    "ConfigurationError",
    "DirectoryListError",
    "ConversionError",
    "OpenError",
    "DecodeError",
    "CreateError",
    "EncodeError",
    "CleanupError",
]
