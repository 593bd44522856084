"""Write an SvgDocument back to markup."""

from __future__ import annotations

from svg_cleaner.svg.document import Comment, Element, Node, ProcessingInstruction, SvgDocument, Text


def _escape_text(data: str) -> str:
    return data.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _escape_attr(value: str) -> str:
    return _escape_text(value).replace('"', "&quot;")


def _start_tag(el: Element) -> str:
    attrs = "".join(f' {name}="{_escape_attr(value)}"' for name, value in el.attributes.items())
    return f"<{el.tag}{attrs}"


def serialize_svg(document: SvgDocument) -> str:
    """Serialize the root ``<svg>`` element and everything under it.

    Anything outside the root (prolog, doctype, top-level comments) is not
    emitted. Childless elements are written self-closing.
    """
    parts: list[str] = []
    # (node, closing) pairs; an explicit stack keeps deep documents off the call stack
    stack: list[tuple[Node, bool]] = [(document.root, False)]
    while stack:
        node, closing = stack.pop()
        if isinstance(node, Element):
            if closing:
                parts.append(f"</{node.tag}>")
            elif not node.children:
                parts.append(_start_tag(node) + "/>")
            else:
                parts.append(_start_tag(node) + ">")
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
        elif isinstance(node, Text):
            parts.append(_escape_text(node.data))
        elif isinstance(node, Comment):
            parts.append(f"<!--{node.data}-->")
        elif isinstance(node, ProcessingInstruction):
            parts.append(f"<?{node.target} {node.data}?>" if node.data else f"<?{node.target}?>")
    return "".join(parts)
