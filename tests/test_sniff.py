import pytest

from glyphpic.sniff import find_text_files, is_text_file, is_text_type, sniff_content_type
from tests.conftest import deny_listing


@pytest.mark.parametrize(
    "head, expected",
    [
        (b"plain old prose\n", "text/plain; charset=utf-8"),
        (b"", "text/plain; charset=utf-8"),
        (b"  <?xml version='1.0'?><a/>", "text/xml; charset=utf-8"),
        (b"\n<!DOCTYPE html><html>", "text/html; charset=utf-8"),
        (b"<p>hi</p>", "text/html; charset=utf-8"),
        (b"\xef\xbb\xbfbom text", "text/plain; charset=utf-8"),
        (b"\x89PNG\r\n\x1a\n\x00\x00", "image/png"),
        (b"GIF89a....", "image/gif"),
        (b"\xff\xd8\xff\xe0", "image/jpeg"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"%PDF-1.7", "application/pdf"),
        (b"PK\x03\x04rest", "application/zip"),
        (b"text with a \x00 null", "application/octet-stream"),
    ],
)
def test_sniff_content_type(head, expected):
    assert sniff_content_type(head) == expected


def test_only_head_is_inspected():
    head = b"a" * 512 + b"\x00"
    assert sniff_content_type(head) == "text/plain; charset=utf-8"


def test_tag_prefix_needs_terminator():
    assert sniff_content_type(b"<paragraph") == "text/plain; charset=utf-8"


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("text/plain; charset=utf-8", True),
        ("text/html; charset=utf-8", True),
        ("application/json", True),
        ("application/xml", True),
        ("application/javascript", True),
        ("application/octet-stream", False),
        ("image/png", False),
    ],
)
def test_is_text_type(content_type, expected):
    assert is_text_type(content_type) is expected


def test_is_text_file_ignores_extension(tmp_path):
    prose = tmp_path / "notes.dat"
    prose.write_text("just words")
    fake = tmp_path / "fake.txt"
    fake.write_bytes(b"\x89PNG\r\n\x1a\n")
    assert is_text_file(prose)
    assert not is_text_file(fake)


def test_is_text_file_unreadable_path(tmp_path):
    assert not is_text_file(tmp_path / "missing")


def test_find_text_files_recursive_and_sorted(tmp_path):
    (tmp_path / "z").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "z" / "deep.txt").write_text("deep")
    (tmp_path / "a" / "two.txt").write_text("two")
    (tmp_path / "a" / "one.txt").write_text("one")
    (tmp_path / "top.txt").write_text("top")
    (tmp_path / "a" / "bin").write_bytes(b"\x00\x01")

    found = find_text_files(tmp_path)
    assert [p.relative_to(tmp_path).as_posix() for p in found] == [
        "a/one.txt",
        "a/two.txt",
        "top.txt",
        "z/deep.txt",
    ]


def test_find_text_files_reports_unlistable_subdirectory(tmp_path, monkeypatch):
    (tmp_path / "ok.txt").write_text("fine")
    locked = tmp_path / "locked"
    locked.mkdir()
    deny_listing(monkeypatch, locked)
    with pytest.raises(PermissionError):
        find_text_files(tmp_path)
