"""Final string normalization applied after serialization."""

from __future__ import annotations

import re

from svg_cleaner.utils.identifiers import strip_zero_width

_XML_DECL_RE = re.compile(r"^\s*<\?xml[^>]*\?>\s*")
_INTER_TAG_WS_RE = re.compile(r">\s+<")
_WS_RUN_RE = re.compile(r"\s+")


def format_svg(svg_text: str) -> str:
    svg_text = _XML_DECL_RE.sub("", svg_text)
    svg_text = _INTER_TAG_WS_RE.sub("><", svg_text)
    svg_text = _WS_RUN_RE.sub(" ", svg_text)
    svg_text = strip_zero_width(svg_text)
    return svg_text.strip()
