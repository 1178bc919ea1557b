import html

from glyphpic.colour import TRANSPARENT, Rgba
from glyphpic.engine import walk_grid
from glyphpic.glyphs import GlyphStream

DEFAULT_PAGE_BACKGROUND = "#000"
PRE_STYLE = "font-family:'Courier New',Courier,monospace;font-size:8px;line-height:10px;margin:0;white-space:pre;"


def page_background(bg: Rgba) -> str:
    if bg.a > 0:
        return f"rgba({bg.r},{bg.g},{bg.b},{bg.a / 255:.2f})"
    return DEFAULT_PAGE_BACKGROUND


def render_html(grid, glyphs: GlyphStream, bg: Rgba = TRANSPARENT) -> str:
    """Render a pixel grid as a standalone HTML page with one coloured span per cell."""
    rows = walk_grid(grid, glyphs)
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "  <head>",
        '    <meta charset="UTF-8">',
        "  </head>",
        f'  <body style="background:{page_background(bg)};margin:20px;">',
        f'    <pre style="{PRE_STYLE}">',
    ]
    for cells in rows:
        parts = []
        for cell in cells:
            if cell.glyphs is None:
                parts.append("  ")
                continue
            r, g, b = cell.colour.rgb
            parts.append(f'<span style="color:rgb({r},{g},{b})">{html.escape(cell.glyphs)}</span>')
        lines.append("".join(parts))
    lines += ["    </pre>", "  </body>", "</html>"]
    return "\n".join(lines) + "\n"
