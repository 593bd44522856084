"""Pipeline configuration — the fixed rule tables the cleaning passes consult."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Element, attribute and marker lists used by the passes."""

    # Elements dropped wholesale by the metadata pass
    metadata_tags: tuple[str, ...] = ("title", "desc", "metadata")

    # Editor bookkeeping attributes, removed from every element
    editor_attributes: tuple[str, ...] = (
        "inkscape:version",
        "inkscape:export-filename",
        "inkscape:export-xdpi",
        "inkscape:export-ydpi",
        "sodipodi:docname",
    )
    # xmlns:<prefix> declarations dropped once nothing uses them
    editor_namespace_prefixes: tuple[str, ...] = ("inkscape", "sodipodi", "rdf", "cc", "dc")

    # A <g> carrying any of these is kept
    group_keep_attributes: tuple[str, ...] = ("transform", "style", "class", "id")

    # Literal substrings of a style attribute that mark an element hidden
    hidden_style_markers: tuple[str, ...] = (
        "display:none",
        "display: none",
        "visibility:hidden",
        "visibility: hidden",
    )

    # Transform fragments with no visual effect
    identity_transforms: tuple[str, ...] = ("translate(0,0)", "translate(0 0)", "scale(1)")

    text_tags: tuple[str, ...] = ("text", "tspan")

    # Attributes whose values are transliterated to [A-Za-z0-9_-]
    sanitized_attributes: tuple[str, ...] = ("id", "class", "inkscape:label")
    # ...and any attribute whose name contains one of these
    sanitized_attribute_markers: tuple[str, ...] = ("aria-", "data-")
    # Never touched by attribute sanitization
    protected_attributes: tuple[str, ...] = ("d", "transform")
