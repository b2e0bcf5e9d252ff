"""Unit tests for the vertical flip transform."""

from __future__ import annotations

from core.types import Pixel
from transforms.vertical_flip import find_max_row, flip_vertically


def _pixels() -> list[Pixel]:
    return [
        Pixel(0, 0, 0.5, 0.5, 0.5),
        Pixel(1, 3, 1.0, 0.0, 0.0),
        Pixel(2, 1, 0.0, 1.0, 0.0),
    ]


def test_flip_vertically_mirrors_about_max_row() -> None:
    """Rows should map to max_y - y with x and channels unchanged."""
    flipped = flip_vertically(_pixels())

    assert [pixel.y for pixel in flipped] == [3, 0, 2]
    assert [(p.x, p.r, p.g, p.b) for p in flipped] == [
        (p.x, p.r, p.g, p.b) for p in _pixels()
    ]


def test_flip_vertically_twice_restores_rows() -> None:
    """Flipping twice should return every row to its original value."""
    pixels = _pixels()

    assert flip_vertically(flip_vertically(pixels)) == pixels


def test_flip_vertically_keeps_rows_in_range() -> None:
    """Flipped rows should stay within zero and the original maximum."""
    pixels = [Pixel(0, y, 0.0, 0.0, 0.0) for y in (2, 9, 5, 0)]
    max_row = find_max_row(pixels)

    flipped = flip_vertically(pixels)

    assert max_row == 9
    assert all(0 <= pixel.y <= max_row for pixel in flipped)


def test_flip_vertically_handles_sparse_offset_rows() -> None:
    """Observed maximum should drive the flip even for non-zero-based rows."""
    pixels = [Pixel(0, 10, 0.0, 0.0, 0.0), Pixel(0, 14, 0.0, 0.0, 0.0)]

    assert [pixel.y for pixel in flip_vertically(pixels)] == [4, 0]


def test_flip_vertically_is_noop_for_empty_input() -> None:
    """Empty input should flip to an empty list."""
    assert flip_vertically([]) == []
    assert find_max_row([]) is None
