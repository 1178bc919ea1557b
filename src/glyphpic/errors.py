class GlyphpicError(Exception):
    """Base class for every failure of a conversion run."""


class ConfigError(GlyphpicError, ValueError):
    """Bad command-line input: colour string, output extension."""


class SourceNotFoundError(GlyphpicError):
    pass


class DecodeError(GlyphpicError):
    pass


class NoQualifyingTextError(GlyphpicError):
    """A text source yielded no usable characters or no text files."""


class InvalidGridError(GlyphpicError, ValueError):
    pass


class OutputIOError(GlyphpicError):
    pass
