import sys
from typing import TextIO

from glyphpic.ansi import RESET, foreground
from glyphpic.engine import walk_grid
from glyphpic.glyphs import GlyphStream


def render_terminal(grid, glyphs: GlyphStream, stream: TextIO | None = None) -> None:
    """Print a pixel grid straight to the terminal in truecolor.

    Rows are indented by one space and the whole picture is framed by blank
    lines. Background colour does not apply here.
    """
    if stream is None:
        stream = sys.stdout
    rows = walk_grid(grid, glyphs)
    stream.write("\n")
    for cells in rows:
        stream.write(" ")
        for cell in cells:
            if cell.glyphs is None:
                stream.write("  ")
            else:
                stream.write(f"{foreground(cell.colour)}{cell.glyphs}{RESET}")
        stream.write("\n")
    stream.write("\n")
    stream.flush()
