"""Vertical flip transform.

Rows are mirrored about the largest observed row index, so the flip
does not depend on a fixed image height or a dense row range.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from core.types import Pixel


def find_max_row(pixels: Sequence[Pixel]) -> int | None:
    """Return the largest ``y`` value, or ``None`` for no pixels."""
    if not pixels:
        return None
    return max(pixel.y for pixel in pixels)


def flip_vertically(pixels: Sequence[Pixel]) -> list[Pixel]:
    """Mirror every pixel row about the observed maximum row.

    Args:
        pixels: Pixels in input order.

    Returns:
        Flipped pixels in the same order. Only ``y`` differs.
    """
    max_row = find_max_row(pixels)
    if max_row is None:
        return []
    return [replace(pixel, y=max_row - pixel.y) for pixel in pixels]
