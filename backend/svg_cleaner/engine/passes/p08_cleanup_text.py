"""P08 — Text Content Cleanup.

Strips zero-width characters from the direct text of <text>/<tspan> and trims
whitespace at the start and end of that text. Nested <tspan> content is
handled when that tspan itself is visited.
"""

from __future__ import annotations

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass
from svg_cleaner.svg.document import Element, Text
from svg_cleaner.utils.identifiers import strip_zero_width


def clean_direct_text(el: Element) -> int:
    """Clean ``el``'s own text nodes in place. Returns how many changed."""
    changed = 0
    first, last = 0, len(el.children) - 1
    for i, node in enumerate(list(el.children)):
        if not isinstance(node, Text):
            continue
        cleaned = strip_zero_width(node.data)
        if i == first:
            cleaned = cleaned.lstrip()
        if i == last:
            cleaned = cleaned.rstrip()
        if cleaned == node.data:
            continue
        if cleaned:
            node.data = cleaned
        else:
            el.children.remove(node)
            node.parent = None
        changed += 1
    return changed


@cleaning_pass(
    id="P08",
    stage=Stage.ATTRIBUTES,
    dependencies=["P07"],
    description="Strip zero-width characters from text content",
)
def cleanup_text_content(ctx: CleanContext) -> None:
    for el in ctx.document.elements_named(*ctx.config.text_tags):
        changed = clean_direct_text(el)
        if changed:
            ctx.record("P08", changed)
