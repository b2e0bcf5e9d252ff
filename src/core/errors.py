"""pixelflip exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class PixelFlipError(Exception):
    """Base exception for all pixelflip failures."""


class PixelConfigError(PixelFlipError):
    """Raised for invalid runtime configuration."""


class PixelUsageError(PixelFlipError):
    """Raised for invalid command-line usage.

    The message carries the usage text and an example invocation.
    """


class PixelIngestError(PixelFlipError):
    """Raised when a pixel source cannot be read."""


class PixelParseError(PixelFlipError):
    """Raised when a single pixel line is malformed."""


class PixelEmptyResultError(PixelIngestError):
    """Raised when a fully scanned source yielded no valid pixels."""

    def __init__(self, message: str, malformed_count: int = 0) -> None:
        super().__init__(message)
        self.malformed_count = malformed_count


class PixelStoreError(PixelFlipError):
    """Raised when flipped pixels cannot be written."""
