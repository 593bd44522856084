"""Exceptions raised by the cleaning core and the batch processor."""

from __future__ import annotations


class SvgCleanerError(Exception):
    """Base class. ``kind`` is a stable identifier surfaced to API/CLI users."""

    kind = "error"

    def __init__(self, message: str, *, filename: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.filename = filename


class UnsupportedInputError(SvgCleanerError):
    kind = "unsupported_input"


class NoValidFilesError(SvgCleanerError):
    kind = "no_valid_files"

    def __init__(self, message: str = "No valid SVG files.", **kwargs) -> None:
        super().__init__(message, **kwargs)


class ReadFailureError(SvgCleanerError):
    kind = "read_failure"


class DocumentTooLargeError(SvgCleanerError):
    kind = "too_large"


class SvgParseError(SvgCleanerError):
    kind = "parse_error"


class MalformedSvgError(SvgParseError):
    """Input is not well-formed XML. ``message`` carries the parser diagnostic."""

    kind = "malformed"


class NoSvgRootError(SvgParseError):
    kind = "no_svg_root"

    def __init__(self, message: str = "No SVG element found", **kwargs) -> None:
        super().__init__(message, **kwargs)
