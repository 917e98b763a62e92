"""Curve-string builder — one subpath's commands → comma-joined WKT fragment text.

Straight runs accumulate into a LineString point buffer. Circular arcs (equal
radii) become 3-point CIRCULARSTRING fragments; every other curve is flattened
into the buffer by sampling along its length. The caller supplies the outer
LINESTRING / COMPOUNDCURVE / POLYGON wrapper.
"""

from __future__ import annotations

import logging
from typing import Any

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.geometry import GeometryEngine, Point
from svg_wkt.svg.path_data import PathCommand
from svg_wkt.utils.numbers import format_point, js_round, round_coord

logger = logging.getLogger(__name__)

EMPTY_CURVE = " EMPTY"


def sample_curve(
    segment: Any,
    engine: GeometryEngine,
    config: ConversionConfig,
) -> list[Point]:
    """`round(length × density) + 1` evenly spaced points, endpoints included."""
    length = engine.length(segment)
    count = int(js_round(length * config.density))
    if count <= 0:
        return [_rounded(engine.point_at_length(segment, 0.0), config)]

    return [
        _rounded(engine.point_at_length(segment, length * i / count), config)
        for i in range(count + 1)
    ]


def _rounded(point: Point, config: ConversionConfig) -> Point:
    return (round_coord(point[0], config.precision), round_coord(point[1], config.precision))


def line_string_text(points: list[Point]) -> str:
    return "(" + ",".join(format_point(x, y) for x, y in points) + ")"


def circular_string_text(start: Point, mid: Point, end: Point) -> str:
    return f"CIRCULARSTRING({format_point(*start)}, {format_point(*mid)}, {format_point(*end)})"


def is_circular_arc(command: PathCommand) -> bool:
    return command.type == "A" and command.values[0] == command.values[1]


def curve_string(
    commands: list[PathCommand],
    engine: GeometryEngine,
    config: ConversionConfig,
) -> str:
    """Walk one ring or subpath and return its fragments, comma-joined."""
    line_pts: list[Point] = []
    fragments: list[str] = []
    first_pt: Point | None = None
    last_pt: Point = (0.0, 0.0)

    for step in commands:
        if step.type == "M":
            # Move pen
            pass
        elif step.type == "L":
            if not line_pts:
                line_pts.append(last_pt)
            line_pts.append(step.end_point)
        elif step.type == "Z":
            # Close by returning to start
            if first_pt is not None and first_pt != last_pt:
                line_pts.append(first_pt)
        else:
            segment = engine.segment(last_pt, step)
            if is_circular_arc(step):
                if line_pts:
                    fragments.append(line_string_text(line_pts))
                    line_pts = []
                length = engine.length(segment)
                mid_pt = _rounded(engine.point_at_length(segment, length / 2), config)
                fragments.append(circular_string_text(last_pt, mid_pt, step.end_point))
            else:
                # Bezier, quadratic and elliptical arcs are flattened
                line_pts.extend(sample_curve(segment, engine, config))

        if len(step.values) >= 2:
            last_pt = step.end_point
            if first_pt is None:
                first_pt = last_pt

    # At least two points per line
    if len(line_pts) > 1:
        fragments.append(line_string_text(line_pts))

    logger.debug("Curve string: %d commands -> %d fragments", len(commands), len(fragments))
    # At least one part per multi curve
    return ",".join(fragments) if fragments else EMPTY_CURVE
