"""Text labels — `<text>` runs as two-point lines in root coordinates."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.geometry import GeometryEngine
from svg_wkt.models.responses import TextLabel
from svg_wkt.utils.numbers import format_point, parse_float, round_coord

# CSS initial font size, px
DEFAULT_FONT_SIZE = 16.0


def _parse_style(style: str | None) -> dict[str, str]:
    """ "font-size: 12px; fill: red" → {"font-size": "12px", "fill": "red"}"""
    decls: dict[str, str] = {}
    for decl in (style or "").split(";"):
        name, sep, value = decl.partition(":")
        if sep and name.strip():
            decls[name.strip().lower()] = value.strip()
    return decls


def _lookup(chain: list[ET.Element], name: str) -> str | None:
    """Nearest declaration of a font property, walking from the element up."""
    for node in reversed(chain):
        value = node.get(name) or _parse_style(node.get("style")).get(name)
        if value:
            return value
    return None


def text_content(element: ET.Element) -> str:
    """Character content with whitespace runs collapsed, as rendered by default."""
    return " ".join("".join(element.itertext()).split())


def _first_coordinate(value: str | None) -> float:
    # x/y may list one position per character; the first one anchors the run.
    if value:
        value = re.split(r"[\s,]+", value.strip())[0]
    number = parse_float(value)
    return 0.0 if math.isnan(number) else number


def build_text_label(
    element: ET.Element,
    ancestors: list[ET.Element],
    engine: GeometryEngine,
    config: ConversionConfig,
) -> TextLabel | None:
    """Label for one `<text>` element; None when it has no characters.

    `ancestors` runs from the document root down to the element's parent.
    """
    text = text_content(element)
    if not text:
        return None

    chain = [*ancestors, element]
    font_size = _lookup(chain, "font-size")
    font_family = _lookup(chain, "font-family")

    size = parse_float(font_size)
    if math.isnan(size):
        size = DEFAULT_FONT_SIZE

    ctm = engine.compose(*(engine.parse_transform(node.get("transform")) for node in chain))
    x = _first_coordinate(element.get("x"))
    y = _first_coordinate(element.get("y"))

    start = engine.apply_transform(ctm, (x, y))
    end = engine.apply_transform(ctm, (x + engine.text_width(text, size), y))
    start = (round_coord(start[0], config.precision), round_coord(start[1], config.precision))
    end = (round_coord(end[0], config.precision), round_coord(end[1], config.precision))

    return TextLabel(
        text=text,
        path=f"LINESTRING({format_point(*start)}, {format_point(*end)})",
        font_size=font_size,
        font_family=font_family,
    )
