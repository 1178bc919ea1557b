PLACEHOLDER = "a"


def is_glyph(char: str) -> bool:
    """Space, printable ASCII, or anything above 126. Other control characters are not glyphs."""
    code = ord(char)
    return char == " " or 33 <= code <= 126 or code > 126


def filter_glyphs(text: str) -> str:
    return "".join(c for c in text if is_glyph(c))
