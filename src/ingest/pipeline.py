"""Flip pipeline orchestration.

This module coordinates pixel loading, channel averaging, the vertical
flip, and the final write, echoing a console report between stages.
"""

from __future__ import annotations

from typing import Callable

from core.config import PixelFlipConfig
from core.logging_config import get_logger
from core.types import PixelFlipOptions, PixelFlipResult, PixelLoadResult
from ingest.pixel_reader import read_pixel_file
from store.pixel_writer import write_pixel_file
from transforms.channel_averages import compute_channel_averages, render_channel_report
from transforms.vertical_flip import flip_vertically

_LOGGER = get_logger(__name__)


class PixelFlipRunner:
    """Runner for one load, average, flip, and write pass."""

    def __init__(
        self,
        options: PixelFlipOptions,
        config: PixelFlipConfig,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._options = options
        self._config = config
        self._echo = echo

    def run(self) -> PixelFlipResult:
        """Execute the pipeline and return its summary.

        The output file is opened only after every in-memory stage succeeded.
        """
        load_result = read_pixel_file(self._options.input_path)
        self._echo(render_load_summary(load_result))
        averages = compute_channel_averages(load_result.pixels)
        for report_line in render_channel_report(averages, self._config.report_precision):
            self._echo(report_line)
        flipped_pixels = flip_vertically(load_result.pixels)
        output_path = write_pixel_file(
            self._options.output_path,
            flipped_pixels,
            self._config.float_precision,
        )
        self._echo(f"Wrote flipped pixels to '{output_path}'.")
        _LOGGER.info(
            "pixel_flip_completed",
            input_path=str(self._options.input_path),
            output_path=str(output_path),
            loaded=load_result.loaded_count,
            malformed=load_result.malformed_count,
        )
        return PixelFlipResult(load=load_result, averages=averages, output_path=output_path)


def render_load_summary(load_result: PixelLoadResult) -> str:
    """Render the one-line load summary.

    Args:
        load_result: Completed load.

    Returns:
        Summary such as ``Loaded 2 pixels.``.
    """
    summary = f"Loaded {load_result.loaded_count} pixels"
    if load_result.malformed_count > 0:
        summary += f" ({load_result.malformed_count} malformed line(s) skipped)"
    return summary + "."
