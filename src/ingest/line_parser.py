"""Single-line pixel parsing.

This module converts one ``x,y,r,g,b`` text line into a ``Pixel``.
A line is accepted whole or rejected whole.
"""

from __future__ import annotations

from core.constants import FIELD_DELIMITER, PIXEL_FIELD_COUNT
from core.errors import PixelParseError
from core.types import Pixel


def parse_pixel_line(line: str) -> Pixel:
    """Parse one delimited pixel line.

    Args:
        line: Raw text line, with or without its line terminator.

    Returns:
        Parsed pixel.

    Raises:
        PixelParseError: If the field count or any numeric field is invalid.
    """
    fields = strip_line_terminator(line).split(FIELD_DELIMITER)
    if len(fields) != PIXEL_FIELD_COUNT:
        raise PixelParseError(
            f"Expected {PIXEL_FIELD_COUNT} '{FIELD_DELIMITER}'-separated fields, "
            f"got {len(fields)}."
        )
    x_text, y_text, r_text, g_text, b_text = fields
    return Pixel(
        x=_parse_int_field("x", x_text),
        y=_parse_int_field("y", y_text),
        r=_parse_float_field("r", r_text),
        g=_parse_float_field("g", g_text),
        b=_parse_float_field("b", b_text),
    )


def strip_line_terminator(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n`` without touching other whitespace."""
    return line.rstrip("\r\n")


def _parse_int_field(name: str, text: str) -> int:
    """Parse a base-10 integer coordinate field.

    Args:
        name: Field name for error context.
        text: Raw field text.

    Returns:
        Parsed integer.

    Raises:
        PixelParseError: If the text is not a base-10 integer.
    """
    if "_" in text:
        raise PixelParseError(f"Field '{name}' is not a base-10 integer: '{text}'.")
    try:
        return int(text, 10)
    except ValueError as error:
        raise PixelParseError(f"Field '{name}' is not a base-10 integer: '{text}'.") from error


def _parse_float_field(name: str, text: str) -> float:
    """Parse a decimal color channel field."""
    if "_" in text:
        raise PixelParseError(f"Field '{name}' is not a decimal number: '{text}'.")
    try:
        return float(text)
    except ValueError as error:
        raise PixelParseError(f"Field '{name}' is not a decimal number: '{text}'.") from error
