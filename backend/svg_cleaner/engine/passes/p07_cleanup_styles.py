"""Blank style attributes (P07)."""

from __future__ import annotations

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.passes.p04_flatten_groups import flatten_if_bare
from svg_cleaner.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P07",
    stage=Stage.ATTRIBUTES,
    dependencies=["P06"],
    description="Remove empty style attributes",
)
def cleanup_styles(ctx: CleanContext) -> None:
    for el in ctx.document.elements():
        style = el.get("style")
        if style is not None and not style.strip():
            el.remove_attribute("style")
            ctx.record("P07")
            flatten_if_bare(ctx, el)
