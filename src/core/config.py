"""Runtime configuration model for pixelflip.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    DEFAULT_FLOAT_PRECISION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_REPORT_PRECISION,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import PixelConfigError


@dataclass(frozen=True)
class PixelFlipConfig:
    """Validated runtime configuration.

    Attributes:
        output_path: Destination file for flipped pixels.
        float_precision: Fractional digits written for color channels.
        report_precision: Fractional digits shown in the average report.
        log_level: Minimum structured log level emitted on stderr.
    """

    output_path: Path = DEFAULT_OUTPUT_PATH
    float_precision: int = DEFAULT_FLOAT_PRECISION
    report_precision: int = DEFAULT_REPORT_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "PixelFlipConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            PixelConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv("PIXELFLIP_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(log_level=parse_log_level(log_level_value))


def parse_log_level(raw_value: str) -> str:
    """Parse and normalize a log level name.

    Args:
        raw_value: Raw level name from environment or CLI.

    Returns:
        Lowercase level name.

    Raises:
        PixelConfigError: If the level name is unknown.
    """
    level = raw_value.strip().lower()
    if level not in SUPPORTED_LOG_LEVELS:
        raise PixelConfigError(
            f"Invalid log level '{raw_value}': expected one of {SUPPORTED_LOG_LEVELS}. "
            "Set PIXELFLIP_LOG_LEVEL or --log-level to a supported value."
        )
    return level
