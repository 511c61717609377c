"""Package-specific exception types."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base class for errors raised around a conversion.

    The conversion engine itself never raises; these errors only come from
    reading the input document or writing the generated files.
    """


class InputError(ConversionError):
    """Base class for problems with the Markdown source."""


class InputNotFoundError(InputError):
    """Raised when the Markdown source path does not exist.

    Args:
        path: Path that was requested.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Input file does not exist: {path}")


class InputUnreadableError(InputError):
    """Raised when the Markdown source exists but cannot be read.

    Args:
        path: Path that was requested.
        reason: Human-readable explanation of the failure.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read input file {path}: {reason}")


class OutputWriteError(ConversionError):
    """Raised when one of the generated files cannot be written.

    Args:
        path: Path of the artifact that failed.
        reason: Human-readable explanation of the failure.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not open file {path} for writing: {reason}")
