"""Drop width/height from the root <svg>. Runs after P02, which reads them."""

from __future__ import annotations

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass


@cleaning_pass(
    id="P03",
    stage=Stage.STRUCTURE,
    dependencies=["P02"],
    description="Remove root width/height",
)
def drop_dimensions(ctx: CleanContext) -> None:
    root = ctx.document.root
    for name in ("width", "height"):
        if root.remove_attribute(name):
            ctx.record("P03")
