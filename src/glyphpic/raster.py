import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from glyphpic.colour import TRANSPARENT, Rgba
from glyphpic.engine import validate_grid, walk_grid
from glyphpic.errors import ConfigError
from glyphpic.glyphs import GlyphStream
from glyphpic.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

FONT_DIR = Path(__file__).resolve().parent / "fonts"
BUNDLED_FONT = FONT_DIR / "SourceCodePro-Bold.ttf"


def load_font(font_size: int, font_path: str | Path | None = None) -> ImageFont.FreeTypeFont:
    """Load the glyph face: an explicit TrueType file, or the monospace face shipped with the package."""
    if font_path is None:
        font_path = BUNDLED_FONT
    logger.debug("using font %s at %dpt", font_path, font_size)
    try:
        return ImageFont.truetype(str(font_path), font_size)
    except OSError as exc:
        raise ConfigError(f"Cannot load font {font_path}: {exc}") from exc


def render_raster(
    grid,
    glyphs: GlyphStream,
    bg: Rgba = TRANSPARENT,
    settings: Settings = DEFAULT_SETTINGS,
    font: ImageFont.FreeTypeFont | None = None,
) -> Image.Image:
    """Draw the glyph mosaic onto an RGBA canvas of square cells.

    Glyph pairs are placed on the cell grid with their baseline one cell below
    the cell top. The second glyph starts half a cell to the right.
    """
    arr = validate_grid(grid)
    if font is None:
        font = load_font(settings.font_size, settings.font_path)

    cell = settings.cell_size
    height, width = arr.shape[:2]
    canvas = Image.new("RGBA", (int(cell * width), int(cell * height)), tuple(bg))
    draw = ImageDraw.Draw(canvas, "RGBA")

    for cells in walk_grid(arr, glyphs):
        for c in cells:
            if c.glyphs is None:
                continue
            x = int(c.col * cell)
            y = int((c.row + 1) * cell)
            for i, char in enumerate(c.glyphs):
                draw.text((x + i * cell / 2, y), char, fill=tuple(c.colour), font=font, anchor="ls")
    return canvas
