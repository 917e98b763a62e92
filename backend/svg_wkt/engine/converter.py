"""Document orchestrator — SVG markup → geometry collection, named spaces and text labels."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

from svg_wkt.engine import shapes
from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.geometry import GeometryEngine, get_engine
from svg_wkt.engine.paths import path_fragments
from svg_wkt.models.responses import ConversionResult, NamedSpace, TextLabel
from svg_wkt.svg.parser import (
    SHAPE_TAGS,
    CircleShape,
    EllipseShape,
    LineShape,
    PathShape,
    PolygonShape,
    PolylineShape,
    RectShape,
    Shape,
    UnsupportedShape,
    descendants,
    parse_markup,
    shape_from_element,
    strip_ns,
)
from svg_wkt.svg.text import build_text_label

logger = logging.getLogger(__name__)


def shape_to_wkt(shape: Shape, engine: GeometryEngine, config: ConversionConfig) -> list[str]:
    """Top-level WKT fragments for one shape. Only paths can yield more than one."""
    match shape:
        case PolygonShape(points=points):
            return [shapes.polygon(points)]
        case PolylineShape(points=points):
            return [shapes.polyline(points)]
        case LineShape(x1=x1, y1=y1, x2=x2, y2=y2):
            return [shapes.line(x1, y1, x2, y2)]
        case RectShape(x=x, y=y, width=width, height=height):
            return [shapes.rect(x, y, width, height)]
        case CircleShape(cx=cx, cy=cy, r=r):
            return [shapes.circle(cx, cy, r, config)]
        case EllipseShape(cx=cx, cy=cy, rx=rx, ry=ry):
            return [shapes.ellipse(cx, cy, rx, ry, config)]
        case PathShape(d=d):
            return path_fragments(d, engine, config)
        case UnsupportedShape():
            return ["EMPTY"]


class Converter:
    """Converts one SVG document per `convert` call; holds no per-document state."""

    def __init__(
        self,
        engine: GeometryEngine | None = None,
        config: ConversionConfig | None = None,
    ) -> None:
        self.engine = engine or get_engine()
        self.config = config or ConversionConfig()

    def convert(self, svg: str | None) -> ConversionResult:
        start = time.perf_counter()
        root = parse_markup(svg)
        elements = descendants(root)

        # Fragments per element, shared by the primary and named-space passes.
        cache: dict[int, list[str]] = {}

        def fragments_of(element: ET.Element) -> list[str]:
            key = id(element)
            if key not in cache:
                shape = shape_from_element(element)
                if isinstance(shape, UnsupportedShape):
                    logger.debug("Unsupported <%s> element; emitting EMPTY", shape.tag)
                cache[key] = shape_to_wkt(shape, self.engine, self.config)
            return cache[key]

        geometries: list[str] = []
        for tag in SHAPE_TAGS:
            for element in elements:
                if strip_ns(element.tag) == tag:
                    geometries.extend(fragments_of(element))

        spaces = [
            NamedSpace(
                id=element.get("id"),
                title=element.get("title"),
                space=",".join(fragments_of(element)) or "EMPTY",
            )
            for element in root.iter()
            if element.get("id") is not None
        ]

        strings = self._text_labels(root)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Converted SVG: %d geometries, %d spaces, %d strings in %.1fms",
            len(geometries),
            len(spaces),
            len(strings),
            elapsed,
        )
        return ConversionResult(
            detail=f"GEOMETRYCOLLECTION({','.join(geometries)})",
            spaces=spaces,
            strings=strings,
        )

    def _text_labels(self, root: ET.Element) -> list[TextLabel]:
        labels: list[TextLabel] = []

        def visit(node: ET.Element, ancestors: list[ET.Element]) -> None:
            for child in node:
                if not isinstance(child.tag, str):
                    continue
                if strip_ns(child.tag) == "text":
                    label = build_text_label(child, ancestors + [node], self.engine, self.config)
                    if label is not None:
                        labels.append(label)
                else:
                    visit(child, ancestors + [node])

        visit(root, [])
        return labels


def create_converter(config: ConversionConfig | None = None) -> Converter:
    """Converter with the default engine; config defaults are read from settings now."""
    return Converter(config=config or ConversionConfig.from_settings())


def convert(
    svg: str | None,
    config: ConversionConfig | None = None,
    engine: GeometryEngine | None = None,
) -> ConversionResult:
    """SVG markup → ConversionResult."""
    return Converter(engine=engine, config=config or ConversionConfig.from_settings()).convert(svg)


def convert_json(
    svg: str | None,
    config: ConversionConfig | None = None,
    engine: GeometryEngine | None = None,
) -> str:
    """SVG markup → JSON text; absent titles and font fields are omitted."""
    return convert(svg, config, engine).model_dump_json(by_alias=True, exclude_none=True)
