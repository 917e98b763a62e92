"""Geometry engine — curve length, point-at-length and transform math.

The converter only talks to the `GeometryEngine` protocol, so the path
decomposition can run against any implementation. `SvgPathToolsEngine` is the
default, built on svgpathtools segments and numpy 3×3 affine matrices.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Protocol

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier
from svgpathtools.parser import parse_transform

from svg_wkt.svg.path_data import PathCommand

Point = tuple[float, float]

# Average glyph advance in em units; used to place the end of a text run.
_AVERAGE_ADVANCE_EM = 0.6


class GeometryEngine(Protocol):
    def segment(self, start: Point, command: PathCommand) -> Any: ...

    def length(self, segment: Any) -> float: ...

    def point_at_length(self, segment: Any, distance: float) -> Point: ...

    def parse_transform(self, text: str | None) -> NDArray[np.float64]: ...

    def compose(self, *matrices: NDArray[np.float64]) -> NDArray[np.float64]: ...

    def apply_transform(self, matrix: NDArray[np.float64], point: Point) -> Point: ...

    def text_width(self, text: str, font_size: float) -> float: ...


class SvgPathToolsEngine:
    """GeometryEngine backed by svgpathtools."""

    def segment(self, start: Point, command: PathCommand) -> Path:
        """Build the one-segment path `M start <command>`."""
        p0 = complex(*start)
        v = command.values
        end = complex(v[-2], v[-1])

        if command.type == "C":
            seg = CubicBezier(p0, complex(v[0], v[1]), complex(v[2], v[3]), end)
        elif command.type == "Q":
            seg = QuadraticBezier(p0, complex(v[0], v[1]), end)
        elif command.type == "A":
            rx, ry = abs(v[0]), abs(v[1])
            # Zero radius draws a straight line; coincident endpoints draw nothing.
            if rx == 0 or ry == 0 or p0 == end:
                seg = Line(p0, end)
            else:
                seg = Arc(p0, complex(rx, ry), v[2], bool(v[3]), bool(v[4]), end)
        else:
            seg = Line(p0, end)
        return Path(seg)

    def length(self, segment: Path) -> float:
        return float(segment.length())

    def point_at_length(self, segment: Path, distance: float) -> Point:
        total = self.length(segment)
        if total <= 0 or distance <= 0:
            t = 0.0
        elif distance >= total:
            t = 1.0
        else:
            t = segment.ilength(distance)
        pt = segment.point(t)
        return (float(pt.real), float(pt.imag))

    def parse_transform(self, text: str | None) -> NDArray[np.float64]:
        if not text or not text.strip():
            return np.identity(3)
        return np.asarray(parse_transform(text), dtype=float)

    def compose(self, *matrices: NDArray[np.float64]) -> NDArray[np.float64]:
        """Outermost first: compose(root, group, element)."""
        return reduce(np.matmul, matrices, np.identity(3))

    def apply_transform(self, matrix: NDArray[np.float64], point: Point) -> Point:
        x, y, _ = matrix @ np.array([point[0], point[1], 1.0])
        return (float(x), float(y))

    def text_width(self, text: str, font_size: float) -> float:
        return len(text) * font_size * _AVERAGE_ADVANCE_EM


_default_engine = SvgPathToolsEngine()


def get_engine() -> SvgPathToolsEngine:
    return _default_engine
