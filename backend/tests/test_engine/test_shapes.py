"""Tests for the shape formula builders."""

import math

import pytest

from svg_wkt.engine import shapes
from svg_wkt.engine.config import ConversionConfig


def _pairs(wkt: str) -> list[str]:
    inner = wkt[wkt.rindex("(") + 1 : wkt.index(")")]
    return inner.split(",")


def test_line():
    assert shapes.line(0, 0, 10, 10) == "LINESTRING(0 0,10 -10)"


def test_line_propagates_nan():
    assert shapes.line(math.nan, 0, 1, 1) == "LINESTRING(NaN 0,1 -1)"


def test_polygon_closes_ring():
    assert shapes.polygon("0,0 10,0 10,10") == "POLYGON((0 0,10 0,10 -10,0 0))"


def test_polyline():
    assert shapes.polyline("1,2 3,4 ") == "LINESTRING(1 -2,3 -4)"


def test_polyline_keeps_x_text():
    assert shapes.polyline("1.50,2") == "LINESTRING(1.50 -2)"


def test_empty_points():
    assert shapes.polyline(None) == "LINESTRING EMPTY"
    assert shapes.polygon("") == "POLYGON EMPTY"


def test_rect_square():
    assert shapes.rect(0, 0, 10, 10) == "POLYGON((0 0,10 0,10 -10,0 -10,0 0))"


@pytest.mark.parametrize(
    "x,y,w,h,expected",
    [
        (1, 2, 3, 4, "POLYGON((1 -2,4 -2,4 -6,1 -6,1 -2))"),
        (-5, 5, 10, 2.5, "POLYGON((-5 -5,5 -5,5 -7.5,-5 -7.5,-5 -5))"),
        (0.5, 0, 1, 1, "POLYGON((0.5 0,1.5 0,1.5 -1,0.5 -1,0.5 0))"),
    ],
)
def test_rect_ring(x, y, w, h, expected):
    assert shapes.rect(x, y, w, h) == expected


def test_rect_defaults_origin():
    assert shapes.rect(math.nan, math.nan, 5, 2) == "POLYGON((0 0,5 0,5 -2,0 -2,0 0))"


def test_circle(config):
    assert shapes.circle(0, 0, 5, config) == "CIRCULARSTRING(5 0,0 -5,-5 0,0 5,5 0)"


def test_circle_five_points_closed(config):
    pts = _pairs(shapes.circle(10, 20, 2.5, config))
    assert len(pts) == 5
    assert pts[0] == pts[-1] == "12.5 -20"


def test_circle_uses_precision():
    wkt = shapes.circle(0, 0, 0.33333, ConversionConfig(precision=1))
    assert wkt == "CIRCULARSTRING(0.3 0,0 -0.3,-0.3 0,0 0.3,0.3 0)"


@pytest.mark.parametrize("rx,ry,count", [(10, 10, 63), (10, 5, 50), (1, 1, 6)])
def test_ellipse_point_count(config, rx, ry, count):
    assert shapes.ellipse_point_count(rx, ry, config) == count
    pts = _pairs(shapes.ellipse(0, 0, rx, ry, config))
    assert len(pts) == count + 1
    assert pts[0] == pts[-1]


def test_ellipse_density():
    assert shapes.ellipse_point_count(10, 10, ConversionConfig(density=2)) == 126


def test_ellipse_is_polygon(config):
    wkt = shapes.ellipse(0, 0, 10, 5, config)
    assert wkt.startswith("POLYGON((10 0,")
    assert wkt.endswith(",10 0))")


def test_degenerate_ellipse(config):
    assert shapes.ellipse(0, 0, 0, 0, config) == "POLYGON EMPTY"
