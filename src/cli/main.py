"""pixelflip CLI entry point.

This module parses the single input-path argument and maps
pipeline errors onto process exit codes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import NoReturn, Sequence

from core.config import PixelFlipConfig, parse_log_level
from core.constants import EXIT_FAILURE, EXIT_SUCCESS, USAGE_EXAMPLE
from core.errors import PixelFlipError, PixelUsageError
from core.logging_config import configure_logging
from core.types import PixelFlipOptions
from ingest.pipeline import PixelFlipRunner


class PixelFlipArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises ``PixelUsageError`` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise PixelUsageError(
            f"{self.format_usage()}{self.prog}: error: {message}\n{self.epilog}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = PixelFlipArgumentParser(
        prog="pixelflip",
        description="Average pixel colors and flip the image vertically",
        epilog=USAGE_EXAMPLE,
    )
    parser.add_argument("input_file", help="Pixel text file with x,y,r,g,b lines")
    parser.add_argument(
        "--log-level",
        help="Override PIXELFLIP_LOG_LEVEL for this command",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pixelflip CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = _build_config(args.log_level)
        configure_logging(config.log_level)
        options = PixelFlipOptions(
            input_path=args.input_file,
            output_path=config.output_path,
        )
        PixelFlipRunner(options, config).run()
    except PixelFlipError as error:
        print(error, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


def _build_config(log_level: str | None) -> PixelFlipConfig:
    """Build config with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Validated config.
    """
    config = PixelFlipConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config
