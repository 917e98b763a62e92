"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.geometry import SvgPathToolsEngine


# Sample SVGs

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <path d="M0 0 L10 10"/>
  <line x1="0" y1="0" x2="10" y2="10"/>
  <polygon points="0,0 10,0 10,10"/>
</svg>'''

ALL_TAGS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M0 0 L10 0 L10 10 L0 10 Z"/>
  <ellipse cx="0" cy="0" rx="1" ry="1"/>
  <circle cx="0" cy="0" r="5"/>
  <rect x="0" y="0" width="10" height="10"/>
  <line x1="0" y1="0" x2="10" y2="10"/>
  <polyline points="0,0 5,5"/>
  <polygon points="0,0 10,0 10,10"/>
</svg>'''

NAMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g id="floor" title="Ground floor">
    <rect id="room-1" title="Kitchen" x="0" y="0" width="10" height="10"/>
    <path id="corridor" d="M0 0 L10 0 M0 10 L10 10"/>
  </g>
  <circle cx="0" cy="0" r="5"/>
</svg>'''

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <text x="10" y="20" font-size="10" font-family="Arial">Hi</text>
  <g transform="translate(5,5)" style="font-family: Courier">
    <text x="0" y="0" font-size="10">A</text>
  </g>
  <text x="0" y="0">   </text>
</svg>'''

CURVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path d="M0 0 L10 0 A5 5 0 0 1 20 0 L20 10 L0 10 Z"/>
  <path d="M0 0 L10 0 M20 0 A5 5 0 0 1 30 0"/>
</svg>'''


@pytest.fixture
def config() -> ConversionConfig:
    return ConversionConfig()


@pytest.fixture
def engine() -> SvgPathToolsEngine:
    return SvgPathToolsEngine()


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def named_svg() -> str:
    return NAMED_SVG


@pytest.fixture
def text_svg() -> str:
    return TEXT_SVG
