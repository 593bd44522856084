"""P04 — Group Flattening.

Replaces <g> elements carrying none of transform/style/class/id with their
children. Every group is judged on its own attributes from a snapshot taken
before any unwrapping.

Later passes can strip the last of those attributes from a group (an identity
transform, a blank style, an id that transliterates to nothing); they call
``flatten_if_bare`` so such a group goes the same way here and a second
cleaning run has nothing left to do.
"""

from __future__ import annotations

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.registry import Stage, cleaning_pass
from svg_cleaner.svg.document import Element


def is_bare_group(el: Element, keep: tuple[str, ...]) -> bool:
    return el.local_name == "g" and not any(el.get(name) for name in keep)


def flatten_if_bare(ctx: CleanContext, el: Element) -> bool:
    """Unwrap ``el`` if it is a group left without any attribute that keeps groups."""
    if not is_bare_group(el, ctx.config.group_keep_attributes):
        return False
    if ctx.document.unwrap(el):
        ctx.record("P04")
        return True
    return False


@cleaning_pass(
    id="P04",
    stage=Stage.STRUCTURE,
    dependencies=["P03"],
    description="Flatten groups without transform/style/class/id",
)
def flatten_groups(ctx: CleanContext) -> None:
    for group in ctx.document.elements_named("g"):
        flatten_if_bare(ctx, group)
