import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from glyphpic.errors import DecodeError, SourceNotFoundError

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(f"Cannot open image: {path}")
    try:
        with Image.open(path) as image:
            image.load()
            return image
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeError(f"Cannot decode image {path}: {exc}") from exc


def fit_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Scale (width, height) down to fit a square box, keeping aspect ratio. Never scales up."""
    scale = min(max_dimension / width, max_dimension / height, 1.0)
    # Tolerance keeps e.g. 7 * (30 / 7) from flooring to 29
    new_width = max(1, math.floor(width * scale + 1e-9))
    new_height = max(1, math.floor(height * scale + 1e-9))
    return new_width, new_height


def prepare_image(image: Image.Image, max_dimension: int = 30) -> Image.Image:
    """Downscale an image so one pixel becomes one output cell."""
    image = image.convert("RGBA")
    size = fit_size(image.width, image.height, max_dimension)
    if size == image.size:
        return image
    logger.debug("resizing %dx%d to %dx%d", image.width, image.height, *size)
    return image.resize(size, Image.LANCZOS)


def extract_grid(image: Image.Image) -> np.ndarray:
    """Copy an image into a (rows, cols, 4) uint8 RGBA array."""
    return np.array(image.convert("RGBA"), dtype=np.uint8)
