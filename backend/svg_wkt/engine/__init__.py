"""SVG → WKT conversion engine."""

from svg_wkt.engine.config import ConversionConfig
from svg_wkt.engine.converter import Converter, convert, convert_json, create_converter
from svg_wkt.engine.geometry import GeometryEngine, SvgPathToolsEngine
