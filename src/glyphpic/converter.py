import logging
from pathlib import Path
from typing import TextIO

from glyphpic.ansi import render_ansi
from glyphpic.colour import TRANSPARENT, Rgba
from glyphpic.errors import ConfigError, OutputIOError
from glyphpic.glyphs import open_glyph_stream
from glyphpic.page import render_html
from glyphpic.raster import render_raster
from glyphpic.sampling import extract_grid, load_image, prepare_image
from glyphpic.settings import DEFAULT_SETTINGS, Settings
from glyphpic.terminal import render_terminal

logger = logging.getLogger(__name__)

OUTPUT_KINDS = {
    ".png": "png",
    ".html": "html",
    ".txt": "text",
    ".ansi": "text",
}


def output_kind(output: str | Path | None) -> str:
    """Pick the renderer for an output path by its extension; no path means the terminal."""
    if output is None:
        return "terminal"
    ext = Path(output).suffix.lower()
    try:
        return OUTPUT_KINDS[ext]
    except KeyError:
        supported = ", ".join(OUTPUT_KINDS)
        raise ConfigError(f"unsupported output format {ext or repr(str(output))} (supported: {supported})") from None


def _write(output: Path, data: str | bytes) -> None:
    try:
        if isinstance(data, bytes):
            output.write_bytes(data)
        else:
            output.write_text(data, encoding="utf-8")
    except OSError as exc:
        raise OutputIOError(f"cannot write output file {output}: {exc}") from exc


def convert(
    image_path: str | Path,
    output: str | Path | None = None,
    text_source: str | Path | None = None,
    bg: Rgba = TRANSPARENT,
    settings: Settings = DEFAULT_SETTINGS,
    stream: TextIO | None = None,
) -> Path | None:
    """Run the whole pipeline for one image and return where the result went.

    The output is rendered in memory before the destination is touched, so a
    failed run leaves no partial file behind.
    """
    kind = output_kind(output)
    logger.debug("rendering %s as %s", image_path, kind)

    image = prepare_image(load_image(image_path), settings.max_dimension)
    grid = extract_grid(image)
    glyphs = open_glyph_stream(text_source)

    if kind == "terminal":
        render_terminal(grid, glyphs, stream)
        return None

    output = Path(output)
    if kind == "png":
        canvas = render_raster(grid, glyphs, bg, settings)
        try:
            canvas.save(output, format="PNG")
        except OSError as exc:
            raise OutputIOError(f"cannot write output file {output}: {exc}") from exc
    elif kind == "html":
        _write(output, render_html(grid, glyphs, bg))
    else:
        _write(output, render_ansi(grid, glyphs, bg))
    return output
