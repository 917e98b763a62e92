"""svg-wkt — convert SVG shape markup to Well-Known Text geometry."""

from svg_wkt.engine import ConversionConfig, Converter, GeometryEngine, SvgPathToolsEngine, convert, convert_json
from svg_wkt.errors import ConversionError, EmptyInputError, InvalidMarkupError
from svg_wkt.models.responses import ConversionResult, NamedSpace, TextLabel

__version__ = "0.1.0"
