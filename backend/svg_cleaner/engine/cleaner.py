"""Pipeline driver — parse → passes → serialize → format, plus size accounting.

``clean()`` is the only entry point the HTTP API, the CLI and the batch
processor use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.pipeline import create_pipeline
from svg_cleaner.svg.formatter import format_svg
from svg_cleaner.svg.parser import parse_svg
from svg_cleaner.svg.serializer import serialize_svg
from svg_cleaner.utils.sizes import byte_size, savings_percent

logger = logging.getLogger(__name__)


@dataclass
class CleanResult:
    cleaned_text: str
    original_byte_size: int
    cleaned_byte_size: int
    # Changes per pass id, for reporting
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def savings(self) -> int:
        return self.original_byte_size - self.cleaned_byte_size

    @property
    def savings_percent(self) -> float:
        return savings_percent(self.original_byte_size, self.cleaned_byte_size)


def clean(svg_source: str, config: PipelineConfig | None = None) -> CleanResult:
    """Clean one SVG document.

    Raises MalformedSvgError / NoSvgRootError before any pass runs; no partial
    output is ever returned.
    """
    document = parse_svg(svg_source)

    pipeline = create_pipeline(config)
    ctx = CleanContext(document=document, config=pipeline.config)
    pipeline.run(ctx)

    cleaned = format_svg(serialize_svg(ctx.document))
    result = CleanResult(
        cleaned_text=cleaned,
        original_byte_size=byte_size(svg_source),
        cleaned_byte_size=byte_size(cleaned),
        stats=dict(ctx.stats),
    )
    logger.info(
        "Cleaned SVG: %d → %d bytes (%.1f%%)",
        result.original_byte_size,
        result.cleaned_byte_size,
        result.savings_percent,
    )
    return result
