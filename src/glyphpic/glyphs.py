import codecs
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from glyphpic.charsets import PLACEHOLDER, filter_glyphs
from glyphpic.errors import GlyphpicError, NoQualifyingTextError, SourceNotFoundError
from glyphpic.sniff import find_text_files

logger = logging.getLogger(__name__)

CorpusLoader = Callable[[Path], str]


def _replace_each_byte(exc: UnicodeDecodeError) -> tuple[str, int]:
    # One replacement character per undecodable byte, not per malformed sequence
    return "\ufffd" * (exc.end - exc.start), exc.end


codecs.register_error("glyphpic.replace_each_byte", _replace_each_byte)


def load_corpus(path: str | Path) -> str:
    """Read a text file and keep only characters usable as glyphs."""
    text = Path(path).read_text(encoding="utf-8", errors="glyphpic.replace_each_byte")
    glyphs = filter_glyphs(text)
    if not glyphs:
        raise NoQualifyingTextError(f"No usable characters in {path}")
    return glyphs


class GlyphStream:
    """Endless, deterministic source of glyphs cycling through one or more corpora.

    Each corpus is consumed from start to end. When it runs out the offset
    wraps to zero and, if there are several corpora, the next one is loaded
    through ``loader``. A corpus that fails to reload leaves the previous
    characters in place; the stream itself never raises.
    """

    def __init__(self, corpora: Sequence[Path], loader: CorpusLoader = load_corpus, chars: str | None = None):
        self.corpora = list(corpora)
        self.loader = loader
        self.index = 0
        self.offset = 0
        if chars is None:
            chars = loader(self.corpora[0])
        self.chars = chars

    @classmethod
    def placeholder(cls) -> "GlyphStream":
        return cls([], chars=PLACEHOLDER)

    def next_glyph(self) -> str:
        char = self.chars[self.offset]
        self.offset += 1
        if self.offset >= len(self.chars):
            self.offset = 0
            if len(self.corpora) > 1:
                self._rotate()
        return char

    def _rotate(self) -> None:
        self.index = (self.index + 1) % len(self.corpora)
        corpus = self.corpora[self.index]
        try:
            self.chars = self.loader(corpus)
        except (OSError, GlyphpicError) as exc:
            logger.warning("cannot reload %s, keeping previous text: %s", corpus, exc)
            return
        logger.debug("rotated to corpus %d: %s", self.index, corpus)

    def __iter__(self):
        return self

    def __next__(self) -> str:
        return self.next_glyph()


def open_glyph_stream(source: str | Path | None, loader: CorpusLoader = load_corpus) -> GlyphStream:
    """Build the glyph stream for a text-source argument.

    No source gives the placeholder stream. A file is a single corpus, a
    directory contributes every text file found beneath it.
    """
    if not source:
        return GlyphStream.placeholder()

    path = Path(source)
    if not path.exists():
        raise SourceNotFoundError(f"Text source not found: {path}")

    if path.is_dir():
        try:
            corpora = find_text_files(path)
        except OSError as exc:
            raise SourceNotFoundError(f"Cannot read text source {path}: {exc}") from exc
    else:
        corpora = [path]

    if not corpora:
        raise NoQualifyingTextError(f"No text files found in {path}")

    try:
        return GlyphStream(corpora, loader)
    except (OSError, NoQualifyingTextError) as exc:
        logger.warning("falling back to placeholder glyph: %s", exc)
        return GlyphStream.placeholder()
