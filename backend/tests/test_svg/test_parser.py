"""Tests for SVG parser."""

import pytest

from tests.conftest import INKSCAPE_SVG, MALFORMED_SVG, NOT_SVG_XML, SIMPLE_SVG, TEXT_SVG

from svg_cleaner.errors import MalformedSvgError, NoSvgRootError, SvgParseError
from svg_cleaner.svg.document import Comment, Element, Text
from svg_cleaner.svg.parser import parse_svg


def test_parse_simple():
    doc = parse_svg(SIMPLE_SVG)
    assert doc.root.tag == "svg"
    assert [el.tag for el in doc.elements()] == ["svg", "title", "g", "circle"]


def test_attribute_order_preserved():
    doc = parse_svg(SIMPLE_SVG)
    assert list(doc.root.attributes) == ["width", "height", "viewBox", "xmlns"]


def test_namespace_declarations_are_plain_attributes():
    doc = parse_svg(INKSCAPE_SVG)
    attrs = list(doc.root.attributes)
    assert attrs[:6] == [
        "xmlns:dc",
        "xmlns:cc",
        "xmlns:rdf",
        "xmlns",
        "xmlns:sodipodi",
        "xmlns:inkscape",
    ]
    assert doc.root.get("inkscape:version").startswith("1.0")


def test_prefixed_tags_kept_as_written():
    doc = parse_svg(INKSCAPE_SVG)
    tags = {el.tag for el in doc.elements()}
    assert {"rdf:RDF", "cc:Work", "dc:format"} <= tags


def test_comments_inside_root_kept():
    doc = parse_svg(INKSCAPE_SVG)
    comments = doc.comments()
    # The prolog comment sits outside the root and is dropped
    assert [c.data for c in comments] == [" background "]


def test_parent_links():
    doc = parse_svg(SIMPLE_SVG)
    circle = doc.elements_named("circle")[0]
    assert circle.parent.tag == "g"
    assert circle.parent.parent is doc.root
    assert doc.root.parent is None


def test_text_nodes():
    doc = parse_svg(TEXT_SVG)
    text = doc.elements_named("text")[0]
    assert isinstance(text.children[0], Text)
    assert isinstance(text.children[1], Element)
    assert text.text == "\u200b Hello\ufeff "


def test_entities_decoded():
    doc = parse_svg('<svg xmlns="http://www.w3.org/2000/svg"><text>a &amp; b &lt; c</text></svg>')
    assert doc.elements_named("text")[0].text == "a & b < c"


def test_malformed_raises():
    with pytest.raises(MalformedSvgError) as exc:
        parse_svg(MALFORMED_SVG)
    assert exc.value.message.startswith("Invalid SVG file:")


@pytest.mark.parametrize("source", ["", "not xml at all", "<svg>&nbsp;</svg>", "<svg a=1/>"])
def test_not_well_formed_raises(source):
    with pytest.raises(MalformedSvgError):
        parse_svg(source)


def test_non_svg_root_raises():
    with pytest.raises(NoSvgRootError) as exc:
        parse_svg(NOT_SVG_XML)
    assert "No SVG element found" in exc.value.message
    assert exc.value.kind == "no_svg_root"


def test_parse_errors_share_base():
    for source in (MALFORMED_SVG, NOT_SVG_XML):
        with pytest.raises(SvgParseError):
            parse_svg(source)


def test_prefixed_svg_root_accepted():
    doc = parse_svg('<svg:svg xmlns:svg="http://www.w3.org/2000/svg"><svg:rect/></svg:svg>')
    assert doc.root.local_name == "svg"
    assert doc.elements()[1].local_name == "rect"


def test_comment_node_type():
    doc = parse_svg("<svg><!--hi--><rect/></svg>")
    assert isinstance(doc.root.children[0], Comment)
