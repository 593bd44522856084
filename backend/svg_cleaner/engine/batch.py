"""Batch processing — one file at a time, in submission order.

Files that are not SVG by media type or extension are set aside before any
work starts. Every other file yields exactly one FileResult: either a
CleanResult or the error that stopped it. One bad file never stops the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from svg_cleaner.engine.cleaner import CleanResult, clean
from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.errors import (
    DocumentTooLargeError,
    NoValidFilesError,
    ReadFailureError,
    SvgCleanerError,
    UnsupportedInputError,
)

logger = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"


@dataclass
class SourceFile:
    name: str
    read: Callable[[], bytes]
    media_type: str = ""

    @property
    def is_svg(self) -> bool:
        return self.media_type == SVG_MEDIA_TYPE or self.name.lower().endswith(".svg")


@dataclass
class FileResult:
    name: str
    result: CleanResult | None = None
    error: SvgCleanerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    files: list[FileResult] = field(default_factory=list)
    skipped: list[UnsupportedInputError] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for f in self.files if f.ok)

    @property
    def failed(self) -> int:
        return len(self.files) - self.succeeded


def read_source(source: SourceFile, max_bytes: int | None = None) -> str:
    """Read and decode one file.

    Read and decode failures become ReadFailureError; more than ``max_bytes``
    bytes is a DocumentTooLargeError.
    """
    try:
        data = source.read()
    except OSError as e:
        raise ReadFailureError(f"Failed to read file: {e}", filename=source.name) from e
    if max_bytes is not None and len(data) > max_bytes:
        raise DocumentTooLargeError(f"SVG exceeds {max_bytes} bytes", filename=source.name)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ReadFailureError(f"Failed to read file: not UTF-8 text ({e.reason})", filename=source.name) from e


def process_file(
    source: SourceFile,
    config: PipelineConfig | None = None,
    max_bytes: int | None = None,
) -> FileResult:
    try:
        text = read_source(source, max_bytes)
        result = clean(text, config)
    except SvgCleanerError as e:
        e.filename = e.filename or source.name
        logger.warning("Error processing %s: %s", source.name, e.message)
        return FileResult(name=source.name, error=e)
    return FileResult(name=source.name, result=result)


def clean_batch(
    sources: Iterable[SourceFile],
    config: PipelineConfig | None = None,
    max_bytes: int | None = None,
) -> BatchResult:
    """Clean every SVG in ``sources``. Raises NoValidFilesError if none qualifies.

    A file larger than ``max_bytes`` gets a ``too_large`` error entry like any
    other per-file failure.
    """
    batch = BatchResult()
    accepted: list[SourceFile] = []
    for source in sources:
        if source.is_svg:
            accepted.append(source)
        else:
            batch.skipped.append(
                UnsupportedInputError(f"Not an SVG file: {source.name}", filename=source.name)
            )

    if not accepted:
        raise NoValidFilesError()

    logger.info("Batch: %d file(s) queued, %d skipped", len(accepted), len(batch.skipped))
    for source in accepted:
        batch.files.append(process_file(source, config, max_bytes))

    logger.info("Batch complete: %d ok, %d failed", batch.succeeded, batch.failed)
    return batch
