"""Core constants used across pixelflip modules.

This module centralizes the pixel text format and default settings.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

FIELD_DELIMITER = ","
PIXEL_FIELD_COUNT = 5
LINE_TERMINATOR = "\n"
DEFAULT_OUTPUT_PATH = Path("flipped.dat")
DEFAULT_FLOAT_PRECISION = 16
MIN_FLOAT_PRECISION = 15
DEFAULT_REPORT_PRECISION = 6
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
INPUT_ENCODING = "utf-8"
DECODE_ERROR_POLICY = "replace"
STREAM_SOURCE_NAME = "<stream>"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
USAGE_EXAMPLE = "Example: pixelflip pixels.dat"
