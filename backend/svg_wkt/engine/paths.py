"""Path decomposer — classifies a `d` attribute into WKT geometry fragments.

Closed paths (one or more `...Z` rings) become a single POLYGON or
CURVEPOLYGON. Open paths become sibling fragments: one LINESTRING or
MULTILINESTRING for the arc-free subpaths, then one COMPOUNDCURVE per
arc-bearing subpath. Approach from:
http://whaticode.com/2012/02/01/converting-svg-paths-to-polygons/
"""

from __future__ import annotations

import logging
import re

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.curves import curve_string
from svg_wkt.engine.geometry import GeometryEngine
from svg_wkt.svg.path_data import PathCommand, has_arc, normalize_path, split_subpaths

logger = logging.getLogger(__name__)

# Each closed ring: a run of non-close text terminated by a close command.
_RING_RE = re.compile(r"[^zZ]+[zZ]")

_NUM = r"(?>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)"
_SEP = r"[\s,]*"
# An arc's seven parameters run straight into further digits, e.g. "A5 5 0 0 1 10 10.5.5 7".
_ARC_RUN_ON_RE = re.compile(
    rf"([Aa]{_SEP}{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}{_SEP}[01]{_SEP}[01]{_SEP}{_NUM}{_SEP}{_NUM})(?=\.?\d)"
)

# Fewer commands than M + 3 segments + Z cannot enclose an area.
_MIN_RING_COMMANDS = 5


def split_arc_run_on(d: str) -> str:
    """Start a LineTo where digits run on past an arc's seventh parameter."""
    return _ARC_RUN_ON_RE.sub(r"\1 L", d)


def _is_compound(ring: list[PathCommand]) -> bool:
    return has_arc(ring) and any(c.type not in ("M", "A", "Z") for c in ring)


def _normalize_ring(text: str) -> list[PathCommand]:
    text = text.strip()
    # A bare close command left over from "Z Z" draws nothing.
    if text in ("z", "Z"):
        return []
    return normalize_path(text)


def _closed_path(rings: list[list[PathCommand]], engine: GeometryEngine, config: ConversionConfig) -> str:
    if any(has_arc(ring) for ring in rings):
        parts = []
        for ring in rings:
            curve = curve_string(ring, engine, config)
            if _is_compound(ring):
                curve = f"COMPOUNDCURVE({curve})"
            parts.append(curve)
        return f"CURVEPOLYGON({','.join(parts)})"

    # Prevent < 4 point linear polygon
    if any(len(ring) < _MIN_RING_COMMANDS for ring in rings):
        logger.warning(
            "Closed path has a ring with fewer than %d commands; emitting LINESTRING EMPTY",
            _MIN_RING_COMMANDS,
        )
        return "LINESTRING EMPTY"

    parts = [curve_string(ring, engine, config) for ring in rings]
    return f"POLYGON({','.join(parts)})"


def _open_path(commands: list[PathCommand], engine: GeometryEngine, config: ConversionConfig) -> list[str]:
    groups = split_subpaths(commands)
    multi_lines = [g for g in groups if not has_arc(g)]
    compound_curves = [g for g in groups if has_arc(g)]

    geometry: list[str] = []
    if len(multi_lines) > 1:
        lines = ",".join(curve_string(g, engine, config) for g in multi_lines)
        geometry.append(f"MULTILINESTRING({lines})")
    elif multi_lines:
        geometry.append(f"LINESTRING{curve_string(multi_lines[0], engine, config)}")

    for group in compound_curves:
        geometry.append(f"COMPOUNDCURVE({curve_string(group, engine, config)})")

    return geometry


def path_fragments(d: str | None, engine: GeometryEngine, config: ConversionConfig) -> list[str]:
    """Convert path data to its top-level WKT fragments.

    A closed path always yields exactly one fragment. An open path yields one
    fragment per geometry family found; they are siblings, not one geometry.
    Text after the last close command of a closed path is discarded.
    """
    d = split_arc_run_on(d or "")

    # Try to extract polygon paths closed with 'Z'.
    rings = [_normalize_ring(text) for text in _RING_RE.findall(d.strip())]
    if rings:
        return [_closed_path(rings, engine, config)]

    # Otherwise, construct line strings / compound curves from the unclosed path.
    return _open_path(normalize_path(d), engine, config)


def path(d: str | None, engine: GeometryEngine, config: ConversionConfig) -> str:
    """`path_fragments` joined with commas."""
    return ",".join(path_fragments(d, engine, config))
