"""Number helpers — rounding, parsing and WKT number text. No engine imports."""

from __future__ import annotations

import math
import re

import numpy as np

# Leading numeric prefix, as read by attribute parsers ("10px" -> 10).
_FLOAT_PREFIX_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
# Whole-string numeric literal.
_NUMBER_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
# Magnitudes written in exponent form.
_EXPONENT_ABOVE = 1e21
_EXPONENT_BELOW = 1e-6


def js_round(value: float) -> float:
    """Round to the nearest integer, halves toward +inf (not banker's rounding)."""
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def round_coord(value: float, precision: int) -> float:
    """Round a derived coordinate to `precision` decimal places.

    Re-rounding an already-rounded value at the same precision is a no-op.
    """
    if not math.isfinite(value):
        return value
    root = 10 ** precision
    return math.floor(value * root + 0.5) / root


def format_number(value: float) -> str:
    """Shortest decimal text for a coordinate: 10 not 10.0, -0 prints as 0.

    Magnitudes outside [1e-6, 1e21) switch to exponent form.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if abs(value) >= _EXPONENT_ABOVE or abs(value) < _EXPONENT_BELOW:
        # 1e+21, 1.5e-7
        return np.format_float_scientific(value, trim="-", exp_digits=1)
    return np.format_float_positional(value, trim="-")


def format_point(x: float, y: float) -> str:
    """`x -y`; flips Y into the WKT up-is-positive convention."""
    return f"{format_number(x)} {format_number(-y)}"


def parse_float(text: str | None) -> float:
    """Parse the leading number of an attribute value; NaN when absent or non-numeric."""
    if text is None:
        return math.nan
    match = _FLOAT_PREFIX_RE.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def to_number(text: str | None) -> float:
    """Strict whole-string conversion: blank is 0, anything non-numeric is NaN."""
    if text is None:
        return math.nan
    stripped = text.strip()
    if not stripped:
        return 0.0
    if not _NUMBER_RE.match(stripped):
        return math.nan
    return float(stripped)
