"""POST /api/clean/* — single-document, batch and download cleaning."""

from __future__ import annotations

import re
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from svg_cleaner.config import Settings
from svg_cleaner.dependencies import get_settings
from svg_cleaner.engine.batch import SVG_MEDIA_TYPE, SourceFile, clean_batch
from svg_cleaner.engine.cleaner import clean
from svg_cleaner.errors import NoValidFilesError, SvgParseError
from svg_cleaner.models.requests import BatchCleanRequest, CleanRequest, DownloadRequest
from svg_cleaner.models.responses import (
    BatchResponse,
    CleanResponse,
    ErrorDetail,
    FileResultResponse,
)
from svg_cleaner.utils.sizes import byte_size

router = APIRouter(prefix="/clean")

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9._-]")


def _check_size(svg: str, settings: Settings) -> None:
    if byte_size(svg) > settings.max_document_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"SVG exceeds {settings.max_document_bytes} bytes",
        )


def _parse_error(e: SvgParseError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=ErrorDetail(kind=e.kind, message=e.message).model_dump(),
    )


@router.post("", response_model=CleanResponse)
async def clean_svg(req: CleanRequest, settings: Settings = Depends(get_settings)) -> CleanResponse:
    _check_size(req.svg, settings)
    start = time.perf_counter()
    try:
        result = clean(req.svg)
    except SvgParseError as e:
        raise _parse_error(e) from e
    elapsed = (time.perf_counter() - start) * 1000
    return CleanResponse.from_result(result, processing_time_ms=round(elapsed, 1))


@router.post("/batch", response_model=BatchResponse)
async def clean_svg_batch(
    req: BatchCleanRequest,
    settings: Settings = Depends(get_settings),
) -> BatchResponse:
    """Oversized files become per-file ``too_large`` errors; the rest are still cleaned."""
    sources = [
        SourceFile(
            name=upload.name,
            media_type=upload.media_type,
            read=lambda content=upload.content: content.encode("utf-8"),
        )
        for upload in req.files
    ]
    try:
        batch = clean_batch(sources, max_bytes=settings.max_document_bytes)
    except NoValidFilesError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    files: list[FileResultResponse] = []
    for item in batch.files:
        if item.ok:
            files.append(FileResultResponse(
                name=item.name,
                ok=True,
                result=CleanResponse.from_result(item.result),
            ))
        else:
            files.append(FileResultResponse(
                name=item.name,
                ok=False,
                error=ErrorDetail(kind=item.error.kind, message=item.error.message),
            ))

    return BatchResponse(
        files=files,
        skipped=[e.filename or "" for e in batch.skipped],
        succeeded=batch.succeeded,
        failed=batch.failed,
    )


@router.post("/download")
async def download_clean_svg(
    req: DownloadRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    """Clean and return the document as a file attachment."""
    _check_size(req.svg, settings)
    try:
        result = clean(req.svg)
    except SvgParseError as e:
        raise _parse_error(e) from e

    filename = _UNSAFE_FILENAME_RE.sub("_", req.filename) or "cleaned.svg"
    if not filename.lower().endswith(".svg"):
        filename += ".svg"
    return Response(
        content=result.cleaned_text,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
