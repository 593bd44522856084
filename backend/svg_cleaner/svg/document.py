"""Parsed SVG document model.

A small DOM: Element, Text and Comment nodes with a parent back-reference.
Names are kept exactly as written in the source (``inkscape:label``,
``xmlns:sodipodi``), and attribute order is source order, so anything no pass
touches serializes back the way it came in.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    parent: Element | None = field(default=None, init=False, repr=False)


@dataclass(eq=False)
class Text(Node):
    data: str = ""


@dataclass(eq=False)
class Comment(Node):
    data: str = ""


@dataclass(eq=False)
class ProcessingInstruction(Node):
    target: str = ""
    data: str = ""


@dataclass(eq=False)
class Element(Node):
    tag: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list, repr=False)

    @property
    def local_name(self) -> str:
        """Tag without prefix (``svg:g`` → ``g``)."""
        return self.tag.rsplit(":", 1)[-1]

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def set(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> bool:
        return self.attributes.pop(name, None) is not None

    def append(self, node: Node) -> None:
        node.parent = self
        self.children.append(node)

    def element_children(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]

    def text_children(self) -> list[Text]:
        return [c for c in self.children if isinstance(c, Text)]

    @property
    def text(self) -> str:
        """Concatenated direct text children."""
        return "".join(t.data for t in self.text_children())

    @text.setter
    def text(self, value: str) -> None:
        """Replace every direct text child with one leading text node (none if ``value`` is empty)."""
        for c in self.text_children():
            c.parent = None
        self.children = [c for c in self.children if not isinstance(c, Text)]
        if value:
            node = Text(data=value)
            node.parent = self
            self.children.insert(0, node)

    def iter(self) -> Iterator[Element]:
        """This element and every descendant element, in document order."""
        stack: list[Element] = [self]
        while stack:
            el = stack.pop()
            yield el
            stack.extend(reversed(el.element_children()))

    def iter_nodes(self) -> Iterator[Node]:
        """Every descendant node (elements, text, comments), in document order."""
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Element):
                stack.extend(reversed(node.children))


class SvgDocument:
    """A parsed SVG document whose root element is ``<svg>``."""

    def __init__(self, root: Element) -> None:
        self.root = root

    # ── traversal ────────────────────────────────────────────────────────

    def elements(self) -> list[Element]:
        """Snapshot of every element in document order, root included."""
        return list(self.root.iter())

    def elements_named(self, *names: str) -> list[Element]:
        wanted = set(names)
        return [el for el in self.root.iter() if el.local_name in wanted]

    def comments(self) -> list[Comment]:
        return [n for n in self.root.iter_nodes() if isinstance(n, Comment)]

    def contains(self, node: Node) -> bool:
        """True while ``node`` is still attached under the root."""
        current: Node | None = node
        while current is not None:
            if current is self.root:
                return True
            current = current.parent
        return False

    # ── mutation ─────────────────────────────────────────────────────────

    def remove(self, node: Node) -> bool:
        """Detach ``node`` and its subtree. Returns False if it was already detached."""
        parent = node.parent
        if parent is None or not self.contains(parent):
            return False
        parent.children.remove(node)
        node.parent = None
        return True

    def unwrap(self, el: Element) -> bool:
        """Replace ``el`` by its children, keeping their order. Returns False if detached."""
        parent = el.parent
        if parent is None or not self.contains(parent):
            return False
        idx = parent.children.index(el)
        for child in el.children:
            child.parent = parent
        parent.children[idx:idx + 1] = el.children
        el.children = []
        el.parent = None
        return True

    def uses_prefix(self, prefix: str) -> bool:
        """True if any element or attribute name in the tree is qualified with ``prefix``."""
        marker = f"{prefix}:"
        for el in self.root.iter():
            if el.tag.startswith(marker):
                return True
            if any(name.startswith(marker) for name in el.attributes):
                return True
        return False

    def drop_unused_namespaces(self, prefixes: list[str]) -> int:
        """Remove ``xmlns:prefix`` declarations for the given prefixes nothing uses any more."""
        unused = [p for p in prefixes if not self.uses_prefix(p)]
        removed = 0
        for el in self.root.iter():
            for prefix in unused:
                if el.remove_attribute(f"xmlns:{prefix}"):
                    removed += 1
        return removed
