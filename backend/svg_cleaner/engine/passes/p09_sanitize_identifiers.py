"""P09 — Attribute/ID Sanitization & Reference Rewrite.

Three stages over the whole tree:

1. Value cleanup: ``id``, ``class``, ``inkscape:label``, ``aria-*`` and
   ``data-*`` values are transliterated to ``[A-Za-z0-9_-]``; any other value
   holding ``url(#…)`` together with non-ASCII text gets its url ids
   transliterated (an id that cleans to nothing becomes ``none``).
2. ``<style>`` text holding non-ASCII gets the same treatment for ``url(#…)``
   and ``.class`` selectors.
3. Id propagation: every id change made above or here is recorded as an
   old → new mapping, and the mapping is pushed through a ReferenceIndex built
   from the current tree so no reference is left pointing at an old id.

The mapping is a plain value handed from the sanitizing steps to the rewrite
step. Two ids that clean to the same value both map to it; whichever element
comes last in document order keeps the duplicate id (no collision handling).
"""

from __future__ import annotations

import logging

from svg_cleaner.engine.config import PipelineConfig
from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.passes.p04_flatten_groups import flatten_if_bare
from svg_cleaner.engine.references import ReferenceIndex
from svg_cleaner.engine.registry import Stage, cleaning_pass
from svg_cleaner.svg.document import SvgDocument
from svg_cleaner.utils.identifiers import (
    has_non_ascii,
    transliterate,
    transliterate_class_selectors,
    transliterate_url_refs,
)

logger = logging.getLogger(__name__)

IdMapping = dict[str, str]


def _is_sanitized(name: str, config: PipelineConfig) -> bool:
    if name in config.sanitized_attributes:
        return True
    return any(marker in name for marker in config.sanitized_attribute_markers)


def sanitize_attribute_values(ctx: CleanContext) -> IdMapping:
    """Stage 1. Returns the ids renamed along the way."""
    cfg = ctx.config
    mapping: IdMapping = {}

    for el in ctx.document.elements():
        touched_keep_attribute = False
        for name, value in list(el.attributes.items()):
            if name in cfg.protected_attributes:
                continue

            new_value = value
            if _is_sanitized(name, cfg):
                new_value = transliterate(value)
            if "url(#" in value and has_non_ascii(value):
                rewritten = transliterate_url_refs(value)
                if rewritten != value:
                    new_value = rewritten

            if new_value == value:
                continue
            if new_value:
                el.set(name, new_value)
                if name == "id":
                    mapping[value] = new_value
            else:
                el.remove_attribute(name)
            ctx.record("P09")
            touched_keep_attribute = touched_keep_attribute or name in cfg.group_keep_attributes
        if touched_keep_attribute:
            flatten_if_bare(ctx, el)

    return mapping


def sanitize_style_elements(ctx: CleanContext) -> None:
    """Stage 2."""
    for style in ctx.document.elements_named("style"):
        css = style.text
        if not css or not has_non_ascii(css):
            continue
        cleaned = transliterate_class_selectors(transliterate_url_refs(css))
        if cleaned != css:
            style.text = cleaned
            ctx.record("P09")


def sanitize_ids(document: SvgDocument) -> IdMapping:
    """Transliterate every remaining id. Empty results drop the id and are not mapped."""
    mapping: IdMapping = {}
    for el in document.elements():
        original = el.get("id")
        if original is None:
            continue
        clean_id = transliterate(original)
        if clean_id and clean_id != original:
            el.set("id", clean_id)
            mapping[original] = clean_id
        elif not clean_id:
            el.remove_attribute("id")
    return mapping


def rewrite_references(document: SvgDocument, mapping: IdMapping) -> int:
    """Stage 3 rewrite. Returns the number of locations changed."""
    if not mapping:
        return 0
    index = ReferenceIndex.build(document)
    rewritten = 0
    for old_id, new_id in mapping.items():
        count = index.rename(old_id, new_id)
        if count:
            logger.debug("Rewrote %d reference(s) #%s → #%s", count, old_id, new_id)
        rewritten += count
    return rewritten


@cleaning_pass(
    id="P09",
    stage=Stage.REFERENCES,
    dependencies=["P08"],
    description="Sanitize ids/classes and rewrite id references",
)
def sanitize_identifiers(ctx: CleanContext) -> None:
    mapping = sanitize_attribute_values(ctx)
    sanitize_style_elements(ctx)
    late = sanitize_ids(ctx.document)
    if late:
        ctx.record("P09", len(late))
    mapping.update(late)

    rewritten = rewrite_references(ctx.document, mapping)
    if rewritten:
        ctx.record("P09", rewritten)
    if mapping:
        logger.debug("Renamed %d id(s)", len(mapping))
