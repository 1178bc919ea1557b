from collections.abc import Iterator
from typing import NamedTuple

import numpy as np

from glyphpic.colour import Rgba
from glyphpic.errors import InvalidGridError
from glyphpic.glyphs import GlyphStream


class Cell(NamedTuple):
    row: int
    col: int
    colour: Rgba
    glyphs: str | None  # two characters, or None for a transparent sample


def validate_grid(grid) -> np.ndarray:
    """Return the grid as a (rows, cols, 4) uint8 array, rejecting empty or malformed grids."""
    try:
        arr = np.asarray(grid, dtype=np.uint8)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidGridError(f"Invalid pixel grid: {exc}") from exc
    if arr.ndim != 3 or arr.shape[2] != 4:
        raise InvalidGridError(f"Pixel grid must have shape (rows, cols, 4), got {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise InvalidGridError("Invalid pixel dimensions: grid is empty")
    return arr


def walk_grid(grid, glyphs: GlyphStream) -> Iterator[list[Cell]]:
    """Yield one list of cells per row, pulling two glyphs for every opaque sample.

    Every renderer goes through here, so all of them consume the glyph stream
    in the same order. Transparent samples take no glyphs. The grid is
    validated before anything is yielded.
    """
    return _walk(validate_grid(grid), glyphs)


def _walk(arr: np.ndarray, glyphs: GlyphStream) -> Iterator[list[Cell]]:
    for y, row in enumerate(arr):
        cells = []
        for x, pixel in enumerate(row):
            colour = Rgba(*(int(v) for v in pixel))
            if colour.a == 0:
                cells.append(Cell(y, x, colour, None))
                continue
            # A terminal character is about twice as tall as wide, so two glyphs make a square
            pair = glyphs.next_glyph() + glyphs.next_glyph()
            cells.append(Cell(y, x, colour, pair))
        yield cells
