"""Per-channel color averaging.

This module computes the mean red, green, and blue values of an image.
Each channel is summed as one contiguous float64 row, which numpy
reduces with pairwise summation.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from core.constants import DEFAULT_REPORT_PRECISION
from core.types import ChannelAverages, Pixel

NO_DATA_MESSAGE = "No pixels loaded."


def compute_channel_averages(pixels: Sequence[Pixel]) -> ChannelAverages | None:
    """Compute the arithmetic mean of each color channel.

    Args:
        pixels: Pixels to aggregate. Not modified.

    Returns:
        Channel means, or ``None`` when there is no data.
    """
    if not pixels:
        return None
    channels = np.ascontiguousarray(
        np.array([(pixel.r, pixel.g, pixel.b) for pixel in pixels], dtype=np.float64).T
    )
    red, green, blue = channels.sum(axis=1) / len(pixels)
    return ChannelAverages(red=float(red), green=float(green), blue=float(blue))


def render_channel_report(
    averages: ChannelAverages | None,
    precision: int = DEFAULT_REPORT_PRECISION,
) -> list[str]:
    """Render human-readable average lines.

    Args:
        averages: Channel means or ``None`` for no data.
        precision: Fractional digits per mean.

    Returns:
        Report lines without trailing newlines.
    """
    if averages is None:
        return [NO_DATA_MESSAGE]
    return [
        f"Average R: {averages.red:.{precision}f}",
        f"Average G: {averages.green:.{precision}f}",
        f"Average B: {averages.blue:.{precision}f}",
    ]
