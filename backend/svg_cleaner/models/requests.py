"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CleanRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class UploadedFile(BaseModel):
    name: str = Field(..., description="Original file name")
    media_type: str = Field(default="", description="Declared MIME type, e.g. image/svg+xml")
    content: str = Field(..., description="File content as text")


class BatchCleanRequest(BaseModel):
    files: list[UploadedFile] = Field(..., description="Files in submission order")


class DownloadRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    filename: str = Field(default="cleaned.svg", description="File name for the attachment")
