"""SVG markup → element tree, and tree elements → shape records.

Each recognized tag maps to one shape record holding its raw geometry
attributes; anything else is an `UnsupportedShape`. Tag names are compared
without their XML namespace.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from svg_wkt.errors import EmptyInputError, InvalidMarkupError
from svg_wkt.utils.numbers import parse_float

logger = logging.getLogger(__name__)

# Primary geometry tags, in the order they are collected.
SHAPE_TAGS = ("polygon", "polyline", "line", "rect", "circle", "ellipse", "path")


@dataclass(frozen=True)
class PolygonShape:
    points: str | None


@dataclass(frozen=True)
class PolylineShape:
    points: str | None


@dataclass(frozen=True)
class LineShape:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RectShape:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class CircleShape:
    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class EllipseShape:
    cx: float
    cy: float
    rx: float
    ry: float


@dataclass(frozen=True)
class PathShape:
    d: str | None


@dataclass(frozen=True)
class UnsupportedShape:
    tag: str


Shape = (
    PolygonShape
    | PolylineShape
    | LineShape
    | RectShape
    | CircleShape
    | EllipseShape
    | PathShape
    | UnsupportedShape
)


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def parse_markup(svg: str | None) -> ET.Element:
    """Parse SVG markup into an element tree root."""
    # Halt if svg is missing or blank.
    if svg is None or not svg.strip():
        raise EmptyInputError()

    try:
        root = ET.fromstring(svg.strip())
    except ET.ParseError as e:
        # Halt if malformed.
        raise InvalidMarkupError(f"Invalid XML: {e}") from e

    logger.debug("Parsed markup root <%s>", strip_ns(root.tag))
    return root


def descendants(root: ET.Element) -> list[ET.Element]:
    """All element descendants of `root` in document order, root excluded."""
    return [el for el in root.iter() if el is not root and isinstance(el.tag, str)]


def shape_from_element(element: ET.Element) -> Shape:
    attr = element.get
    match strip_ns(element.tag):
        case "polygon":
            return PolygonShape(attr("points"))
        case "polyline":
            return PolylineShape(attr("points"))
        case "line":
            return LineShape(
                parse_float(attr("x1")),
                parse_float(attr("y1")),
                parse_float(attr("x2")),
                parse_float(attr("y2")),
            )
        case "rect":
            return RectShape(
                parse_float(attr("x")),
                parse_float(attr("y")),
                parse_float(attr("width")),
                parse_float(attr("height")),
            )
        case "circle":
            return CircleShape(parse_float(attr("cx")), parse_float(attr("cy")), parse_float(attr("r")))
        case "ellipse":
            return EllipseShape(
                parse_float(attr("cx")),
                parse_float(attr("cy")),
                parse_float(attr("rx")),
                parse_float(attr("ry")),
            )
        case "path":
            return PathShape(attr("d"))
        case other:
            return UnsupportedShape(other)
