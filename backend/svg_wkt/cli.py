"""
svg-wkt — convert an SVG file to WKT.

Usage:
  svg-wkt drawing.svg                      # prints the JSON result
  svg-wkt drawing.svg -o drawing.json      # saves the JSON result
  svg-wkt drawing.svg --detail-only        # prints only the GEOMETRYCOLLECTION
  cat drawing.svg | svg-wkt -              # reads from stdin
"""

from __future__ import annotations

import argparse
import sys

from svg_wkt.dependencies import get_settings
from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.converter import create_converter
from svg_wkt.errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SVG → WKT converter")
    parser.add_argument("input", help="SVG file, or - for stdin")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--precision", type=int, help="Decimal places for sampled coordinates")
    parser.add_argument("--density", type=float, help="Curve sample points per unit of length")
    parser.add_argument("--detail-only", action="store_true", help="Print only the geometry collection")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.input == "-":
        raw = sys.stdin.read()
    else:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            print(f"File not found: {args.input}", file=sys.stderr)
            return 1

    defaults = ConversionConfig.from_settings(get_settings())
    try:
        config = ConversionConfig(
            precision=defaults.precision if args.precision is None else args.precision,
            density=defaults.density if args.density is None else args.density,
        )
        result = create_converter(config).convert(raw)
    except (ConversionError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    text = result.detail if args.detail_only else result.model_dump_json(by_alias=True, exclude_none=True)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"→ Saved: {args.output}", file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
