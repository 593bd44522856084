"""P05 — Hidden Element Pruning.

Style detection is plain substring matching on the style attribute, not CSS
parsing, so ``not-display:none`` also counts as hidden.
"""

from __future__ import annotations

from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass
from svg_cleaner.svg.document import Element


def is_hidden(el: Element, config: PipelineConfig) -> bool:
    if el.get("display") == "none" or el.get("visibility") == "hidden":
        return True
    style = el.get("style") or ""
    return any(marker in style for marker in config.hidden_style_markers)


@cleaning_pass(
    id="P05",
    stage=Stage.STRUCTURE,
    dependencies=["P04"],
    description="Remove display:none / visibility:hidden elements",
)
def remove_hidden_elements(ctx: CleanContext) -> None:
    doc = ctx.document
    for el in doc.elements():
        if el is doc.root or not is_hidden(el, ctx.config):
            continue
        # Descendants of an element removed earlier in this loop are already detached
        if doc.remove(el):
            ctx.record("P05")
