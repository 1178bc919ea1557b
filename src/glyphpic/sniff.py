"""Content-type sniffing for text-source discovery.

Only the leading bytes of a file are inspected; names and extensions are
ignored, so a ``.dat`` full of prose counts as text and a ``.txt`` holding a
PNG does not.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

SNIFF_LENGTH = 512

# (signature, content type), checked in order against the raw head
_SIGNATURES = [
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\x0d\x0a\x1a\x0a", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"BM", "image/bmp"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"Rar!\x1a\x07", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
]

# Tag prefixes matched case-insensitively after leading whitespace
_HTML_TAGS = [
    b"<!doctype html",
    b"<html",
    b"<head",
    b"<script",
    b"<iframe",
    b"<h1",
    b"<div",
    b"<font",
    b"<table",
    b"<a",
    b"<style",
    b"<title",
    b"<b",
    b"<body",
    b"<br",
    b"<p",
    b"<!--",
]

_WHITESPACE = b"\t\n\x0c\r "
_BINARY_BYTES = frozenset([*range(0x00, 0x09), 0x0B, *range(0x0E, 0x1B), *range(0x1C, 0x20)])


def _is_tag_end(head: bytes, length: int) -> bool:
    # A tag name must be followed by a space or '>' to count
    return len(head) > length and head[length : length + 1] in (b" ", b">")


def sniff_content_type(head: bytes) -> str:
    """Guess a MIME type from the first bytes of a file."""
    head = head[:SNIFF_LENGTH]
    for signature, content_type in _SIGNATURES:
        if head.startswith(signature):
            return content_type
    if head[:4] == b"RIFF" and head[8:14] == b"WEBPVP":
        return "image/webp"

    stripped = head.lstrip(_WHITESPACE)
    lowered = stripped.lower()
    if lowered.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"
    for tag in _HTML_TAGS:
        if lowered.startswith(tag) and (tag == b"<!--" or _is_tag_end(lowered, len(tag))):
            return "text/html; charset=utf-8"

    if any(byte in _BINARY_BYTES for byte in head):
        return "application/octet-stream"
    return "text/plain; charset=utf-8"


def is_text_type(content_type: str) -> bool:
    return (
        content_type.startswith("text/")
        or content_type in ("application/json", "application/xml")
        or "javascript" in content_type
    )


def is_text_file(path: str | Path) -> bool:
    """Read the head of a file and report whether it sniffs as text. Unreadable files are not text."""
    try:
        with open(path, "rb") as f:
            head = f.read(SNIFF_LENGTH)
    except OSError as exc:
        logger.debug("skipping unreadable %s: %s", path, exc)
        return False
    return is_text_type(sniff_content_type(head))


def _raise(exc: OSError) -> None:
    raise exc


def find_text_files(directory: str | Path) -> list[Path]:
    """Recursively collect text files under a directory, sorted by path.

    A subdirectory that cannot be listed raises instead of being skipped.
    """
    found = []
    for root, _dirs, names in os.walk(directory, onerror=_raise):
        found.extend(p for p in (Path(root) / name for name in names) if is_text_file(p))
    found.sort()
    logger.debug("found %d text files under %s", len(found), directory)
    return found
