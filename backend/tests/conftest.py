"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svg_cleaner.engine.context import CleanContext
from svg_cleaner.engine.pipeline import register_passes
from svg_cleaner.svg.parser import parse_svg


# Sample SVGs

SIMPLE_SVG = (
    '<?xml version="1.0"?>'
    '<svg width="100" height="100" viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">'
    "<title>x</title>"
    '<g transform="translate(0,0)"><circle cx="50" cy="50" r="40" fill="blue"/></g>'
    "</svg>"
)

SIMPLE_SVG_CLEANED = (
    '<svg viewBox="0 0 100 100" xmlns="http://www.w3.org/2000/svg">'
    '<circle cx="50" cy="50" r="40" fill="blue"/>'
    "</svg>"
)

INKSCAPE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Created with Inkscape (http://www.inkscape.org/) -->
<svg
   xmlns:dc="http://purl.org/dc/elements/1.1/"
   xmlns:cc="http://creativecommons.org/ns#"
   xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
   xmlns="http://www.w3.org/2000/svg"
   xmlns:sodipodi="http://sodipodi.sourceforge.net/DTD/sodipodi-0.0.dtd"
   xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape"
   width="210mm"
   height="297mm"
   viewBox="0 0 210 297"
   version="1.1"
   id="svg8"
   inkscape:version="1.0 (4035a4fb49, 2020-05-01)"
   sodipodi:docname="drawing.svg">
  <title id="title1">Drawing</title>
  <metadata id="metadata5">
    <rdf:RDF>
      <cc:Work rdf:about="">
        <dc:format>image/svg+xml</dc:format>
      </cc:Work>
    </rdf:RDF>
  </metadata>
  <g
     inkscape:label="Layer 1"
     inkscape:groupmode="layer"
     id="layer1">
    <!-- background -->
    <rect style="fill:#ff0000" width="50" height="50" x="10" y="10" id="rect10" />
  </g>
</svg>
'''

INKSCAPE_SVG_CLEANED = (
    '<svg xmlns="http://www.w3.org/2000/svg" '
    'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
    'viewBox="0 0 210 297" version="1.1" id="svg8">'
    '<g inkscape:label="Layer_1" inkscape:groupmode="layer" id="layer1">'
    '<rect style="fill:#ff0000" width="50" height="50" x="10" y="10" id="rect10"/>'
    "</g></svg>"
)

HIDDEN_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<g style="display:none"><rect width="1" height="1"/><circle r="1"/></g>'
    '<rect display="none" width="2" height="2"/>'
    '<path visibility="hidden" d="M0 0"/>'
    '<rect width="3" height="3"/>'
    "</svg>"
)

UNICODE_ID_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<defs><linearGradient id="무제"><stop offset="0"/></linearGradient></defs>'
    '<rect fill="url(#무제)" width="10" height="10"/>'
    "</svg>"
)

ASCII_REF_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">'
    '<defs><linearGradient id="grad one"><stop offset="0"/></linearGradient>'
    '<path id="shape.1" d="M0 0h5v5z"/></defs>'
    '<rect fill="url(#grad one)" width="10" height="10"/>'
    '<use xlink:href="#shape.1"/>'
    "</svg>"
)

ASCII_REF_SVG_CLEANED = (
    '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" viewBox="0 0 10 10">'
    '<defs><linearGradient id="grad_one"><stop offset="0"/></linearGradient>'
    '<path id="shape_1" d="M0 0h5v5z"/></defs>'
    '<rect fill="url(#grad_one)" width="10" height="10"/>'
    '<use xlink:href="#shape_1"/>'
    "</svg>"
)

STYLESHEET_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    "<style>.icon-아이콘{fill:url(#그라디언트)}.b{fill:red}._무제{fill:blue}</style>"
    '<rect class="icon-아이콘" width="1" height="1"/>'
    "</svg>"
)

TEXT_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">'
    '<text x="1" y="5">\u200b Hello\ufeff <tspan>\u200dworld</tspan></text>'
    "</svg>"
)

NO_VIEWBOX_SVG = '<svg xmlns="http://www.w3.org/2000/svg" width="24px" height="12.5"><rect/></svg>'

ALREADY_CLEAN_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle cx="12" cy="12" r="10"/></svg>'

MALFORMED_SVG = "<svg><rect></svg>"

NOT_SVG_XML = "<html><body/></html>"

ALL_SAMPLES = [
    SIMPLE_SVG,
    INKSCAPE_SVG,
    HIDDEN_SVG,
    UNICODE_ID_SVG,
    ASCII_REF_SVG,
    STYLESHEET_SVG,
    TEXT_SVG,
    NO_VIEWBOX_SVG,
    ALREADY_CLEAN_SVG,
]


@pytest.fixture(scope="session", autouse=True)
def _passes_registered() -> None:
    register_passes()


@pytest.fixture
def make_ctx():
    """Build a CleanContext from raw SVG text."""

    def _make(svg_text: str) -> CleanContext:
        return CleanContext(document=parse_svg(svg_text))

    return _make
