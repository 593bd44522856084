"""P01 — Metadata & Comment Removal.

Drops <title>, <desc>, <metadata> and every comment, strips editor bookkeeping
attributes from the whole tree and the editor namespace declarations nothing
uses any more.
"""

from __future__ import annotations

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P01",
    stage=Stage.METADATA,
    description="Remove metadata elements, comments and editor attributes",
)
def strip_metadata(ctx: CleanContext) -> None:
    doc = ctx.document
    cfg = ctx.config

    for el in doc.elements_named(*cfg.metadata_tags):
        if doc.remove(el):
            ctx.record("P01")

    for comment in doc.comments():
        if doc.remove(comment):
            ctx.record("P01")

    # Explicit worklist instead of recursion; editor output nests deeply
    stack = [doc.root]
    while stack:
        el = stack.pop()
        for name in cfg.editor_attributes:
            if el.remove_attribute(name):
                ctx.record("P01")
        stack.extend(el.element_children())

    removed = doc.drop_unused_namespaces(list(cfg.editor_namespace_prefixes))
    if removed:
        ctx.record("P01", removed)
