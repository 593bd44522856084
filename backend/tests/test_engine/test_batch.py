"""Tests for batch processing."""

import pytest

from tests.conftest import MALFORMED_SVG, NOT_SVG_XML, SIMPLE_SVG, SIMPLE_SVG_CLEANED

from svg_cleaner.engine.batch import SourceFile, clean_batch, process_file, read_source
from svg_cleaner.errors import NoValidFilesError, ReadFailureError


def _file(name: str, text: str, media_type: str = "") -> SourceFile:
    return SourceFile(name=name, read=lambda: text.encode("utf-8"), media_type=media_type)


def _unreadable(name: str) -> SourceFile:
    def read() -> bytes:
        raise OSError("disk gone")

    return SourceFile(name=name, read=read)


def test_is_svg_by_extension_or_media_type():
    assert _file("a.SVG", "").is_svg
    assert _file("blob", "", media_type="image/svg+xml").is_svg
    assert not _file("a.png", "", media_type="image/png").is_svg


def test_batch_keeps_submission_order_and_continues_after_errors():
    batch = clean_batch([
        _file("b.svg", SIMPLE_SVG),
        _file("broken.svg", MALFORMED_SVG),
        _file("page.svg", NOT_SVG_XML),
        _file("a.svg", SIMPLE_SVG),
    ])
    assert [f.name for f in batch.files] == ["b.svg", "broken.svg", "page.svg", "a.svg"]
    assert [f.ok for f in batch.files] == [True, False, False, True]
    assert batch.files[0].result.cleaned_text == SIMPLE_SVG_CLEANED
    assert batch.files[1].error.kind == "malformed"
    assert batch.files[1].error.filename == "broken.svg"
    assert batch.files[2].error.kind == "no_svg_root"
    assert batch.succeeded == 2
    assert batch.failed == 2


def test_non_svg_files_skipped():
    batch = clean_batch([_file("notes.txt", "hello"), _file("a.svg", SIMPLE_SVG)])
    assert [f.name for f in batch.files] == ["a.svg"]
    assert len(batch.skipped) == 1
    assert batch.skipped[0].kind == "unsupported_input"
    assert batch.skipped[0].filename == "notes.txt"


def test_no_valid_files():
    with pytest.raises(NoValidFilesError) as exc:
        clean_batch([_file("a.png", "x"), _file("b.txt", "y")])
    assert exc.value.message == "No valid SVG files."


def test_empty_batch():
    with pytest.raises(NoValidFilesError):
        clean_batch([])


def test_read_failure_reported():
    result = process_file(_unreadable("gone.svg"))
    assert not result.ok
    assert result.error.kind == "read_failure"
    assert "disk gone" in result.error.message


def test_non_utf8_is_read_failure():
    source = SourceFile(name="latin.svg", read=lambda: b"<svg>\xff</svg>")
    with pytest.raises(ReadFailureError):
        read_source(source)


def test_read_failure_does_not_stop_batch():
    batch = clean_batch([_unreadable("gone.svg"), _file("a.svg", SIMPLE_SVG)])
    assert [f.ok for f in batch.files] == [False, True]


def test_oversized_file_does_not_stop_batch():
    batch = clean_batch(
        [_file("big.svg", SIMPLE_SVG), _file("small.svg", "<svg/>")],
        max_bytes=50,
    )
    assert [f.ok for f in batch.files] == [False, True]
    assert batch.files[0].error.kind == "too_large"
    assert batch.files[0].error.filename == "big.svg"
    assert batch.files[1].result.cleaned_text == "<svg/>"
