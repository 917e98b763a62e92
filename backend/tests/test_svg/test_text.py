"""Tests for text label extraction."""

from svg_wkt.svg.parser import descendants, parse_markup
from svg_wkt.svg.text import DEFAULT_FONT_SIZE, build_text_label, text_content


def _label(svg, engine, config):
    root = parse_markup(svg)
    text = next(el for el in descendants(root) if el.tag.endswith("text"))
    return build_text_label(text, [root], engine, config)


def test_whitespace_is_collapsed(engine, config):
    root = parse_markup("<svg><text>  a \n  b </text></svg>")
    assert text_content(root[0]) == "a b"


def test_blank_text_has_no_label(engine, config):
    assert _label("<svg><text> </text></svg>", engine, config) is None


def test_default_font_size_and_origin(engine, config):
    label = _label("<svg><text>ab</text></svg>", engine, config)
    width = 2 * DEFAULT_FONT_SIZE * 0.6
    assert label.path == f"LINESTRING(0 0, {width:g} 0)"
    assert label.font_size is None
    assert label.font_family is None


def test_font_from_style_attribute(engine, config):
    svg = '<svg><text x="1 2 3" y="4" style="font-size: 20px; font-family: Georgia, serif">a</text></svg>'
    label = _label(svg, engine, config)
    assert label.font_size == "20px"
    assert label.font_family == "Georgia, serif"
    assert label.path == "LINESTRING(1 -4, 13 -4)"


def test_element_transform_applies(engine, config):
    svg = '<svg><text x="0" y="0" font-size="10" transform="rotate(90)">a</text></svg>'
    label = _label(svg, engine, config)
    assert label.path == "LINESTRING(0 0, 0 -6)"
