from glyphpic.colour import TRANSPARENT, Rgba
from glyphpic.engine import walk_grid
from glyphpic.glyphs import GlyphStream

RESET = "\033[0m"


def foreground(colour: Rgba) -> str:
    return f"\033[38;2;{colour.r};{colour.g};{colour.b}m"


def background(colour: Rgba) -> str:
    return f"\033[48;2;{colour.r};{colour.g};{colour.b}m"


def render_ansi(grid, glyphs: GlyphStream, bg: Rgba = TRANSPARENT) -> str:
    """Render a pixel grid as 24-bit ANSI text, one line per row.

    With a visible background colour every cell, blank or not, is wrapped in
    a background escape first.
    """
    prefix = background(bg) if bg.a > 0 else ""
    out = []
    for cells in walk_grid(grid, glyphs):
        parts = []
        for cell in cells:
            if cell.glyphs is None:
                parts.append(f"{prefix}  {RESET}" if prefix else "  ")
            else:
                parts.append(f"{prefix}{foreground(cell.colour)}{cell.glyphs}{RESET}")
        parts.append("\n")
        out.append("".join(parts))
    return "".join(out)
