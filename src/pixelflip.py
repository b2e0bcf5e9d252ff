"""Public SDK surface for pixelflip.

This module provides a stable import path for library users.
It re-exports the pipeline stages and typed models.
"""

from __future__ import annotations

from core.config import PixelFlipConfig
from core.types import ChannelAverages, Pixel, PixelFlipOptions, PixelFlipResult, PixelLoadResult
from ingest.line_parser import parse_pixel_line
from ingest.pipeline import PixelFlipRunner
from ingest.pixel_reader import load_pixels, read_pixel_file
from store.pixel_writer import format_pixel_line, write_pixel_file
from transforms.channel_averages import compute_channel_averages, render_channel_report
from transforms.vertical_flip import find_max_row, flip_vertically

__all__ = [
    "ChannelAverages",
    "Pixel",
    "PixelFlipConfig",
    "PixelFlipOptions",
    "PixelFlipResult",
    "PixelFlipRunner",
    "PixelLoadResult",
    "compute_channel_averages",
    "find_max_row",
    "flip_vertically",
    "format_pixel_line",
    "load_pixels",
    "parse_pixel_line",
    "read_pixel_file",
    "render_channel_report",
    "write_pixel_file",
]
