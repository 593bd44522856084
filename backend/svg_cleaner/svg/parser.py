"""SVG parser — facade over expat.

Converts raw SVG text → SvgDocument, failing fast on input that is not
well-formed XML or whose root element is not ``<svg>``. Expat runs without
namespace processing so prefixes and ``xmlns`` declarations stay ordinary,
ordered attributes.
"""

from __future__ import annotations

import logging
from xml.parsers import expat

from svg_cleaner.errors import MalformedSvgError, NoSvgRootError
from svg_cleaner.svg.document import Comment, Element, ProcessingInstruction, SvgDocument, Text

logger = logging.getLogger(__name__)


class _TreeBuilder:
    """Expat callbacks building the node tree. Nodes outside the root element are dropped."""

    def __init__(self) -> None:
        self.root: Element | None = None
        self._stack: list[Element] = []

    def start_element(self, name: str, attrs: list[str]) -> None:
        el = Element(tag=name, attributes=dict(zip(attrs[::2], attrs[1::2])))
        if self._stack:
            self._stack[-1].append(el)
        elif self.root is None:
            self.root = el
        self._stack.append(el)

    def end_element(self, name: str) -> None:
        self._stack.pop()

    def character_data(self, data: str) -> None:
        if not self._stack:
            return
        parent = self._stack[-1]
        last = parent.children[-1] if parent.children else None
        if isinstance(last, Text):
            last.data += data
        else:
            parent.append(Text(data=data))

    def comment(self, data: str) -> None:
        if self._stack:
            self._stack[-1].append(Comment(data=data))

    def processing_instruction(self, target: str, data: str) -> None:
        if self._stack:
            self._stack[-1].append(ProcessingInstruction(target=target, data=data))


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse raw SVG text into an SvgDocument."""
    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.character_data
    parser.CommentHandler = builder.comment
    parser.ProcessingInstructionHandler = builder.processing_instruction

    try:
        # str input is fed as UTF-8 whatever the prolog's encoding says
        parser.Parse(svg_text, True)
    except expat.ExpatError as e:
        raise MalformedSvgError(f"Invalid SVG file: {e}") from e

    root = builder.root
    if root is None:
        raise MalformedSvgError("Invalid SVG file: no element found")
    if root.local_name != "svg":
        raise NoSvgRootError(f"No SVG element found (root element is <{root.tag}>)")

    doc = SvgDocument(root)
    logger.info("Parsed SVG: %d elements", len(doc.elements()))
    return doc
