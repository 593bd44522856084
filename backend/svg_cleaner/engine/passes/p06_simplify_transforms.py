"""P06 — Transform Simplification.

Only syntactically trivial identity fragments are stripped; no matrix math.
Transforms without one of the exact identity substrings stay byte-for-byte.
"""

from __future__ import annotations

import re

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.passes.p04_flatten_groups import flatten_if_bare
from svg_cleaner.engine.registry import Stage, cleaning_pass

_IDENTITY_RE = re.compile(r"translate\(0[,\s]0\)|scale\(1\)")
_WS_RUN_RE = re.compile(r"\s+")


def simplify_transform(value: str, triggers: tuple[str, ...]) -> str | None:
    """Return the simplified transform, ``""`` if nothing is left, None if untouched."""
    if not any(t in value for t in triggers):
        return None
    value = _IDENTITY_RE.sub("", value)
    return _WS_RUN_RE.sub(" ", value).strip()


@cleaning_pass(
    id="P06",
    stage=Stage.ATTRIBUTES,
    dependencies=["P05"],
    description="Strip identity translate/scale fragments",
)
def simplify_transforms(ctx: CleanContext) -> None:
    for el in ctx.document.elements():
        value = el.get("transform")
        if not value:
            continue
        simplified = simplify_transform(value, ctx.config.identity_transforms)
        if simplified is None:
            continue
        if simplified:
            el.set("transform", simplified)
        else:
            el.remove_attribute("transform")
            flatten_if_bare(ctx, el)
        ctx.record("P06")
