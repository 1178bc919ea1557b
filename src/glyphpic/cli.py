import argparse
import logging
import sys

from glyphpic.colour import parse_colour
from glyphpic.converter import convert
from glyphpic.errors import GlyphpicError
from glyphpic.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glyphpic", description="Render an image as a mosaic of coloured characters"
    )
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-w", "--with", dest="text_source", default=None, help="File or directory containing text to use for characters"
    )
    parser.add_argument(
        "-b", "--bg", default="00000000", help="Background colour as hex, e.g. 000, ffffff, 00000080 (default: none)"
    )
    parser.add_argument(
        "-a",
        "--as",
        dest="output",
        default=None,
        help="Output file (.png, .html, .txt or .ansi). Prints to the terminal when omitted.",
    )
    parser.add_argument("-f", "--font", default=None, help="TrueType font for PNG output (default: system monospace)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug details to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        bg = parse_colour(args.bg)
        saved = convert(args.image, args.output, args.text_source, bg, Settings(font_path=args.font))
    except GlyphpicError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if saved is not None:
        print(f"Saved to: {saved}")
