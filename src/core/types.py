"""Shared typed models.

This module defines immutable data models used by ingest, transforms,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from core.constants import DEFAULT_OUTPUT_PATH


@dataclass(frozen=True)
class Pixel:
    """One image sample.

    Attributes:
        x: Column coordinate.
        y: Row coordinate.
        r: Red channel, nominally in [0, 1].
        g: Green channel, nominally in [0, 1].
        b: Blue channel, nominally in [0, 1].
    """

    x: int
    y: int
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class PixelLoadResult:
    """Pixels loaded from one source plus line accounting.

    Attributes:
        pixels: Parsed pixels in input order.
        loaded_count: Number of lines parsed successfully.
        malformed_count: Number of non-empty lines rejected by the parser.
        source_path: Path or display name of the source.
    """

    pixels: tuple[Pixel, ...]
    loaded_count: int
    malformed_count: int
    source_path: str


@dataclass(frozen=True)
class ChannelAverages:
    """Arithmetic mean of each color channel."""

    red: float
    green: float
    blue: float


@dataclass(frozen=True)
class PixelFlipOptions:
    """User-facing options for one flip run.

    Attributes:
        input_path: Pixel text file to read, as given on the command line.
        output_path: Destination for flipped pixels.
    """

    input_path: str | Path
    output_path: Path = field(default=DEFAULT_OUTPUT_PATH)


@dataclass(frozen=True)
class PixelFlipResult:
    """Summary of a completed flip run."""

    load: PixelLoadResult
    averages: ChannelAverages | None
    output_path: Path
