"""Shape formula builders — line, polyline, polygon, rect, circle, ellipse → WKT.

Coordinates copied from attributes are emitted as written; coordinates derived
with trigonometry are rounded to `config.precision`. Every Y is negated.
"""

from __future__ import annotations

import math

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.utils.numbers import format_number, format_point, js_round, round_coord, to_number


def line(x1: float, y1: float, x2: float, y2: float) -> str:
    return f"LINESTRING({format_point(x1, y1)},{format_point(x2, y2)})"


def _point_pairs(points: str | None) -> list[str]:
    """ "1,2 3,4 " → ["1 -2", "3 -4"]. The x item is kept verbatim."""
    pairs: list[str] = []
    for pair in (points or "").split():
        items = pair.split(",")
        if len(items) > 1:
            items[1] = format_number(-to_number(items[1]))
        else:
            items.append(format_number(math.nan))
        pairs.append(" ".join(items))
    return pairs


def polyline(points: str | None) -> str:
    pts = _point_pairs(points)
    if not pts:
        return "LINESTRING EMPTY"
    return f"LINESTRING({','.join(pts)})"


def polygon(points: str | None) -> str:
    pts = _point_pairs(points)
    if not pts:
        return "POLYGON EMPTY"
    # Close.
    pts.append(pts[0])
    return f"POLYGON(({','.join(pts)}))"


def rect(x: float, y: float, width: float, height: float) -> str:
    # 0,0 origin by default.
    if math.isnan(x):
        x = 0.0
    if math.isnan(y):
        y = 0.0

    # No corner rounding.
    pts = [
        format_point(x, y),  # top left
        format_point(x + width, y),  # top right
        format_point(x + width, y + height),  # bottom right
        format_point(x, y + height),  # bottom left
        format_point(x, y),  # close
    ]
    return f"POLYGON(({','.join(pts)}))"


def circle(cx: float, cy: float, r: float, config: ConversionConfig) -> str:
    """Closed circular string: four quarter arcs sharing endpoints, five points."""
    pts = []
    for i in range(5):
        angle = math.radians(90 * i)
        x = round_coord(cx + r * math.cos(angle), config.precision)
        y = round_coord(cy + r * math.sin(angle), config.precision)
        pts.append(format_point(x, y))
    return f"CIRCULARSTRING({','.join(pts)})"


def ellipse_point_count(rx: float, ry: float, config: ConversionConfig) -> int:
    """Points on the ring, from the RMS-radius approximation of the circumference."""
    circumference = 2 * math.pi * math.sqrt((rx**2 + ry**2) / 2)
    count = js_round(circumference * config.density)
    if not math.isfinite(count):
        return 0
    return int(count)


def ellipse(cx: float, cy: float, rx: float, ry: float, config: ConversionConfig) -> str:
    """Ellipses are always approximated as polygons."""
    count = ellipse_point_count(rx, ry, config)
    if count <= 0:
        return "POLYGON EMPTY"

    interval = 360 / count
    pts = []
    for i in range(count):
        angle = math.radians(interval * i)
        x = round_coord(cx + rx * math.cos(angle), config.precision)
        y = round_coord(cy + ry * math.sin(angle), config.precision)
        pts.append(format_point(x, y))

    # Close.
    pts.append(pts[0])
    return f"POLYGON(({','.join(pts)}))"
