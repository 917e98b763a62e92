"""Path data normalizer — raw `d` string → ordered absolute drawing commands.

- Relative commands are resolved against the current point.
- Shorthands are expanded: H/V → L, S → C and T → Q with the reflected control point.
- Implicit repeats become one command per parameter group (a repeated moveto
  continues as lineto), so the command count matches the source instructions.
- Arc flags are read as single `0`/`1` characters ("a1 1 0 0110 10" is valid).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from svg_wkt.errors import PathDataError

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATORS = " \t\r\n\f,"
_COMMANDS = "MmLlHhVvCcSsQqTtAaZz"

# Parameters consumed per command group.
_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0}
# Arc parameter slots holding the large-arc and sweep flags.
_ARC_FLAG_SLOTS = (3, 4)


@dataclass(frozen=True)
class PathCommand:
    """One absolute drawing command: type in M, L, C, Q, A, Z."""

    type: str
    values: tuple[float, ...] = ()

    @property
    def end_point(self) -> tuple[float, float] | None:
        if len(self.values) < 2:
            return None
        return (self.values[-2], self.values[-1])

    def to_path_data(self) -> str:
        return " ".join([self.type, *(repr(v) for v in self.values)])


class _Scanner:
    """Cursor over path data text."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_separators(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _SEPARATORS:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def read_command(self) -> str | None:
        ch = self.text[self.pos]
        if ch in _COMMANDS:
            self.pos += 1
            return ch
        return None

    def read_number(self) -> float:
        self.skip_separators()
        match = _NUMBER_RE.match(self.text, self.pos)
        if not match:
            raise PathDataError(self._describe("number"))
        self.pos = match.end()
        return float(match.group(0))

    def read_flag(self) -> float:
        self.skip_separators()
        if self.at_end() or self.text[self.pos] not in "01":
            raise PathDataError(self._describe("arc flag"))
        self.pos += 1
        return float(self.text[self.pos - 1])

    def _describe(self, expected: str) -> str:
        if self.at_end():
            return f"Expected {expected} at end of path data {self.text!r}"
        return f"Expected {expected} at offset {self.pos} in path data {self.text!r}, got {self.text[self.pos]!r}"


def _read_params(scanner: _Scanner, upper: str) -> list[float]:
    params: list[float] = []
    for slot in range(_ARITY[upper]):
        if upper == "A" and slot in _ARC_FLAG_SLOTS:
            params.append(scanner.read_flag())
        else:
            params.append(scanner.read_number())
    return params


def normalize_path(d: str) -> list[PathCommand]:
    """Tokenize `d` into absolute commands. Blank input yields no commands.

    Parsing stops at the first error and keeps the commands read before it, so
    data that does not open with a moveto yields no commands at all.
    """
    commands: list[PathCommand] = []
    try:
        _parse_into(d or "", commands)
    except PathDataError as e:
        logger.warning("Path data truncated after %d commands: %s", len(commands), e)
    logger.debug("Normalized path data into %d commands", len(commands))
    return commands


def _parse_into(d: str, commands: list[PathCommand]) -> None:
    scanner = _Scanner(d)

    cx = cy = 0.0  # current point
    sx = sy = 0.0  # start of the current subpath
    cubic_ctrl: tuple[float, float] | None = None
    quad_ctrl: tuple[float, float] | None = None
    active: str | None = None

    while True:
        scanner.skip_separators()
        if scanner.at_end():
            break

        letter = scanner.read_command()
        if letter is None:
            if active is None:
                raise PathDataError(f"Path data must begin with a moveto command: {d!r}")
            if active in "Zz":
                raise PathDataError(f"Unexpected parameters after closepath in path data {d!r}")
            letter = active
        elif not commands and letter not in "Mm":
            raise PathDataError(f"Path data must begin with a moveto command: {d!r}")
        active = letter

        upper = letter.upper()
        relative = letter.islower()

        if upper == "Z":
            commands.append(PathCommand("Z"))
            cx, cy = sx, sy
            cubic_ctrl = quad_ctrl = None
            continue

        p = _read_params(scanner, upper)
        ox, oy = (cx, cy) if relative else (0.0, 0.0)
        next_cubic: tuple[float, float] | None = None
        next_quad: tuple[float, float] | None = None

        if upper == "M":
            cx, cy = p[0] + ox, p[1] + oy
            sx, sy = cx, cy
            commands.append(PathCommand("M", (cx, cy)))
            # Further pairs after a moveto are implicit linetos.
            active = "l" if relative else "L"
        elif upper == "L":
            cx, cy = p[0] + ox, p[1] + oy
            commands.append(PathCommand("L", (cx, cy)))
        elif upper == "H":
            cx = p[0] + ox
            commands.append(PathCommand("L", (cx, cy)))
        elif upper == "V":
            cy = p[0] + oy
            commands.append(PathCommand("L", (cx, cy)))
        elif upper == "C":
            x1, y1, x2, y2 = p[0] + ox, p[1] + oy, p[2] + ox, p[3] + oy
            cx, cy = p[4] + ox, p[5] + oy
            commands.append(PathCommand("C", (x1, y1, x2, y2, cx, cy)))
            next_cubic = (x2, y2)
        elif upper == "S":
            if cubic_ctrl is not None:
                x1, y1 = 2 * cx - cubic_ctrl[0], 2 * cy - cubic_ctrl[1]
            else:
                x1, y1 = cx, cy
            x2, y2 = p[0] + ox, p[1] + oy
            cx, cy = p[2] + ox, p[3] + oy
            commands.append(PathCommand("C", (x1, y1, x2, y2, cx, cy)))
            next_cubic = (x2, y2)
        elif upper == "Q":
            x1, y1 = p[0] + ox, p[1] + oy
            cx, cy = p[2] + ox, p[3] + oy
            commands.append(PathCommand("Q", (x1, y1, cx, cy)))
            next_quad = (x1, y1)
        elif upper == "T":
            if quad_ctrl is not None:
                x1, y1 = 2 * cx - quad_ctrl[0], 2 * cy - quad_ctrl[1]
            else:
                x1, y1 = cx, cy
            cx, cy = p[0] + ox, p[1] + oy
            commands.append(PathCommand("Q", (x1, y1, cx, cy)))
            next_quad = (x1, y1)
        else:  # A
            cx, cy = p[5] + ox, p[6] + oy
            commands.append(PathCommand("A", (p[0], p[1], p[2], p[3], p[4], cx, cy)))

        cubic_ctrl, quad_ctrl = next_cubic, next_quad


def split_subpaths(commands: list[PathCommand]) -> list[list[PathCommand]]:
    """Group commands into subpaths; a new group starts at every moveto."""
    groups: list[list[PathCommand]] = []
    for command in commands:
        if command.type == "M" or not groups:
            groups.append([command])
        else:
            groups[-1].append(command)
    return groups


def has_arc(commands: list[PathCommand]) -> bool:
    return any(c.type == "A" for c in commands)
