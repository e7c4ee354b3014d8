"""Chromacore: color models, conversions and alpha compositing."""

from .channels import Channel, Hue
from .colors import (
    ColorBase,
    RGB,
    HSL,
    HSV,
    CMYK,
    Gray,
    AnyColor,
    DIRECT_PATH_TOLERANCE,
    color_convert,
    convert_color,
    get_color_class,
    composite,
    premultiply,
    unpremultiply,
    composite_premultiplied,
)
from .conversions import (
    convert,
    np_convert,
    LumaWeights,
)
from .errors import OutOfRangeError, ColorParseError, ParseErrorKind
from .notation import parse_hex, to_hex, from_u32, to_u32, parse_css, to_css, parse_color
from .types.color_types import ColorSpace, ColorCapability
from .types.format_type import FormatType

__version__ = "0.1.0"

__all__ = [
    # channels
    "Channel",
    "Hue",
    # color models
    "ColorBase",
    "RGB",
    "HSL",
    "HSV",
    "CMYK",
    "Gray",
    "AnyColor",
    "ColorSpace",
    "ColorCapability",
    "FormatType",
    # conversion
    "DIRECT_PATH_TOLERANCE",
    "color_convert",
    "convert_color",
    "get_color_class",
    "convert",
    "np_convert",
    "LumaWeights",
    # compositing
    "composite",
    "premultiply",
    "unpremultiply",
    "composite_premultiplied",
    # notation
    "parse_hex",
    "to_hex",
    "from_u32",
    "to_u32",
    "parse_css",
    "to_css",
    "parse_color",
    # errors
    "OutOfRangeError",
    "ColorParseError",
    "ParseErrorKind",
]
