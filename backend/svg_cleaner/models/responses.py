"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg_cleaner.engine.cleaner import CleanResult
from svg_cleaner.utils.sizes import format_file_size


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    passes_registered: int = 0


class ErrorDetail(BaseModel):
    kind: str
    message: str


class CleanResponse(BaseModel):
    svg: str
    original_size: int
    cleaned_size: int
    savings: int
    savings_percent: float
    original_size_label: str = ""
    cleaned_size_label: str = ""
    optimized: bool = False
    changes: dict[str, int] = Field(default_factory=dict)
    processing_time_ms: float = 0.0

    @classmethod
    def from_result(cls, result: CleanResult, processing_time_ms: float = 0.0) -> CleanResponse:
        return cls(
            svg=result.cleaned_text,
            original_size=result.original_byte_size,
            cleaned_size=result.cleaned_byte_size,
            savings=result.savings,
            savings_percent=result.savings_percent,
            original_size_label=format_file_size(result.original_byte_size),
            cleaned_size_label=format_file_size(result.cleaned_byte_size),
            optimized=result.savings > 0,
            changes=result.stats,
            processing_time_ms=processing_time_ms,
        )


class FileResultResponse(BaseModel):
    name: str
    ok: bool
    result: CleanResponse | None = None
    error: ErrorDetail | None = None


class BatchResponse(BaseModel):
    files: list[FileResultResponse] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    succeeded: int = 0
    failed: int = 0
