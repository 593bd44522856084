"""P02 — ViewBox synthesis from root width/height."""

from __future__ import annotations

import math
import re

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass

# Leading decimal number, the way "100px" or "12.5em" start
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_length(value: str | None) -> float | None:
    """Numeric part of a length (``"100px"`` → 100.0); None if there is none or it is not finite."""
    if not value:
        return None
    match = _LEADING_NUMBER_RE.match(value)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def format_number(number: float) -> str:
    """Shortest plain rendering: 100.0 → ``100``, 12.5 → ``12.5``."""
    if number == int(number):
        return str(int(number))
    return repr(number)


@cleaning_pass(
    id="P02",
    stage=Stage.STRUCTURE,
    dependencies=["P01"],
    description="Synthesize viewBox from width/height",
)
def synthesize_viewbox(ctx: CleanContext) -> None:
    root = ctx.document.root
    if root.get("viewBox"):
        return

    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))
    if width is None or height is None:
        return

    root.set("viewBox", f"0 0 {format_number(width)} {format_number(height)}")
    ctx.record("P02")
