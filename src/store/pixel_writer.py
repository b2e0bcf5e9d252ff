"""Pixel text writer.

This module serializes pixels as ``x,y,r,g,b`` lines with fixed-point
color channels, one pixel per line and no header.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.constants import (
    DEFAULT_FLOAT_PRECISION,
    FIELD_DELIMITER,
    INPUT_ENCODING,
    LINE_TERMINATOR,
    MIN_FLOAT_PRECISION,
)
from core.errors import PixelStoreError
from core.logging_config import get_logger
from core.types import Pixel

_LOGGER = get_logger(__name__)


def write_pixel_file(
    output_path: Path,
    pixels: Iterable[Pixel],
    precision: int = DEFAULT_FLOAT_PRECISION,
) -> Path:
    """Write pixels to a text file.

    Args:
        output_path: Destination file, replaced if it exists.
        pixels: Pixels in output order.
        precision: Fractional digits for color channels.

    Returns:
        The written path.

    Raises:
        PixelStoreError: If precision is invalid or the file cannot be written.
    """
    _validate_precision(precision)
    written = 0
    try:
        with output_path.open("w", encoding=INPUT_ENCODING, newline="") as handle:
            for pixel in pixels:
                handle.write(format_pixel_line(pixel, precision) + LINE_TERMINATOR)
                written += 1
    except OSError as error:
        raise PixelStoreError(
            f"Error: could not open output file '{output_path}' for writing."
        ) from error
    _LOGGER.info("pixel_file_written", output_path=str(output_path), pixels=written)
    return output_path


def format_pixel_line(pixel: Pixel, precision: int = DEFAULT_FLOAT_PRECISION) -> str:
    """Format one pixel as a delimited line without terminator.

    Args:
        pixel: Pixel to format.
        precision: Fractional digits for color channels.

    Returns:
        ``x,y,r,g,b`` text.
    """
    fields = (
        str(pixel.x),
        str(pixel.y),
        f"{pixel.r:.{precision}f}",
        f"{pixel.g:.{precision}f}",
        f"{pixel.b:.{precision}f}",
    )
    return FIELD_DELIMITER.join(fields)


def _validate_precision(precision: int) -> None:
    """Validate channel precision input."""
    if precision < MIN_FLOAT_PRECISION:
        raise PixelStoreError(
            f"Invalid float precision {precision}: expected value >= {MIN_FLOAT_PRECISION}. "
            "Configure at least 15 fractional digits."
        )
