import string
from typing import NamedTuple

from glyphpic.errors import ConfigError

HEX_DIGITS = set(string.hexdigits)


class Rgba(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


TRANSPARENT = Rgba(0, 0, 0, 0)


def parse_colour(value: str) -> Rgba:
    """Parse ``rgb``, ``rrggbb`` or ``rrggbbaa`` hex, optionally prefixed with ``0x``.

    The 3-digit form doubles each digit and, like the 6-digit form, is fully
    opaque.
    """
    cleaned = value.strip().lower()
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]

    if len(cleaned) == 3:
        cleaned = "".join(c * 2 for c in cleaned)
    if len(cleaned) == 6:
        cleaned += "ff"
    if len(cleaned) != 8 or not set(cleaned) <= HEX_DIGITS:
        raise ConfigError(f"Invalid colour format: {value!r} (expected 3, 6 or 8 hex digits)")

    return Rgba(*(int(cleaned[i : i + 2], 16) for i in range(0, 8, 2)))
