"""Pixel source readers.

This module loads pixel records from local text files or line streams.
Malformed lines are counted and skipped; they never abort a load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from core.constants import DECODE_ERROR_POLICY, INPUT_ENCODING, STREAM_SOURCE_NAME
from core.errors import PixelEmptyResultError, PixelIngestError, PixelParseError
from core.logging_config import get_logger
from core.types import Pixel, PixelLoadResult
from ingest.line_parser import parse_pixel_line, strip_line_terminator

_LOGGER = get_logger(__name__)


def read_pixel_file(source_path: str | Path) -> PixelLoadResult:
    """Load pixels from a local text file.

    Undecodable bytes are replaced so the affected line fails parsing
    and is counted as malformed.

    Args:
        source_path: Input pixel file, as given by the caller.

    Returns:
        Loaded pixels with line counts.

    Raises:
        PixelIngestError: If the file cannot be opened.
        PixelEmptyResultError: If no line parsed successfully.
    """
    try:
        with Path(source_path).open(
            "r", encoding=INPUT_ENCODING, errors=DECODE_ERROR_POLICY
        ) as handle:
            result = load_pixels(handle, source_name=str(source_path))
    except OSError as error:
        raise PixelIngestError(f"Error: could not open input file '{source_path}'.") from error
    _LOGGER.info(
        "pixel_file_loaded",
        source_path=str(source_path),
        loaded=result.loaded_count,
        malformed=result.malformed_count,
    )
    return result


def load_pixels(
    lines: Iterable[str],
    source_name: str = STREAM_SOURCE_NAME,
) -> PixelLoadResult:
    """Parse pixels from an iterable of text lines.

    Args:
        lines: Text lines, typically an open file handle.
        source_name: Display name used in logs and errors.

    Returns:
        Loaded pixels in input order with line counts.

    Raises:
        PixelEmptyResultError: If no line parsed successfully.
    """
    pixels: list[Pixel] = []
    malformed_count = 0
    for line_number, line in enumerate(lines, 1):
        if not strip_line_terminator(line):
            continue
        try:
            pixels.append(parse_pixel_line(line))
        except PixelParseError as error:
            malformed_count += 1
            _LOGGER.warning(
                "pixel_line_rejected",
                source=source_name,
                line_number=line_number,
                reason=str(error),
            )
    if not pixels:
        raise PixelEmptyResultError(
            "No valid pixels were read. Aborting.", malformed_count=malformed_count
        )
    return PixelLoadResult(
        pixels=tuple(pixels),
        loaded_count=len(pixels),
        malformed_count=malformed_count,
        source_path=source_name,
    )
