"""ReferenceIndex — where each id is referenced from.

A reference is either ``url(#id)`` anywhere in an attribute value or in the
text of a ``<style>`` element, or an attribute whose whole value is ``#id``
(``href``, ``xlink:href``). The index is built from the tree as it stands and
keeps itself in step when ids are renamed through it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svg_cleaner.svg.document import Element, SvgDocument
from svg_cleaner.utils.identifiers import URL_REF_RE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    element: Element
    # Attribute name, or None for the text of a <style> element
    attribute: str | None
    # The reference exactly as written: "url(#id)" or "#id"
    raw: str

    @property
    def in_stylesheet(self) -> bool:
        return self.attribute is None


class ReferenceIndex:
    """Mapping from referenced id → list of locations referencing it."""

    def __init__(self) -> None:
        self._refs: dict[str, list[Reference]] = {}

    @classmethod
    def build(cls, document: SvgDocument) -> ReferenceIndex:
        index = cls()
        for el in document.elements():
            for key, value in el.attributes.items():
                for match in URL_REF_RE.finditer(value):
                    index.add(match.group(1), Reference(el, key, match.group(0)))
                if value.startswith("#") and len(value) > 1:
                    index.add(value[1:], Reference(el, key, value))
            if el.local_name == "style" and el.text:
                for match in URL_REF_RE.finditer(el.text):
                    index.add(match.group(1), Reference(el, None, match.group(0)))
        logger.debug("Reference index: %d ids referenced", len(index))
        return index

    def add(self, target_id: str, ref: Reference) -> None:
        self._refs.setdefault(target_id, []).append(ref)

    def __len__(self) -> int:
        return len(self._refs)

    def rename(self, old_id: str, new_id: str) -> int:
        """Point every reference to ``old_id`` at ``new_id``. Returns the number of rewritten locations.

        In attributes every ``url(#old)`` occurrence is replaced and a value of
        exactly ``#old`` becomes ``#new``; in stylesheets only ``url(#old)``
        occurrences are replaced.
        """
        refs = self._refs.pop(old_id, [])
        if not refs:
            return 0

        old_url, new_url = f"url(#{old_id})", f"url(#{new_id})"
        rewritten = 0
        seen: set[tuple[int, str | None]] = set()
        moved: list[Reference] = []

        for ref in refs:
            location = (id(ref.element), ref.attribute)
            if location not in seen:
                seen.add(location)
                if ref.in_stylesheet:
                    text = ref.element.text or ""
                    if old_url in text:
                        ref.element.text = text.replace(old_url, new_url)
                        rewritten += 1
                else:
                    value = ref.element.get(ref.attribute)
                    if value is not None:
                        updated = value.replace(old_url, new_url)
                        if updated == f"#{old_id}":
                            updated = f"#{new_id}"
                        if updated != value:
                            ref.element.set(ref.attribute, updated)
                            rewritten += 1
            raw = new_url if ref.raw == old_url else f"#{new_id}"
            moved.append(Reference(ref.element, ref.attribute, raw))

        self._refs.setdefault(new_id, []).extend(moved)
        return rewritten
