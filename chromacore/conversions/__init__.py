"""
Chromacore Color Space Conversions
==================================

Pure conversion functions between RGB, HSL, HSV, CMYK and grayscale, each
with a vectorized numpy twin (``np_`` prefix). All functions work on
normalized floats: RGB, saturation, lightness, value, CMYK and luma in
[0, 1], hue in degrees.

RGB is the canonical intermediate: every space converts to and from it.
HSL and HSV additionally convert directly into each other.

Undefined values
----------------
- Zero chroma (r == g == b) has hue 0 and saturation 0.
- Pure black in CMYK is (0, 0, 0, 1).

High-Level API
--------------
    convert(color, from_space, to_space, input_type, output_type)
        Convert a tuple, with optional alpha, between spaces and formats
    np_convert(color, from_space, to_space, input_type, output_type)
        Vectorized universal converter

Examples
--------
>>> from chromacore.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> unit_rgb_to_hsv(1.0, 0.0, 0.0)
(0.0, 1.0, 1.0)
>>> convert((255, 0, 0), "rgb", "cmyk")
(0, 255, 255, 0)
"""

# RGB → X
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .to_gray import unit_rgb_to_gray, np_unit_rgb_to_gray, LumaWeights, DEFAULT_LUMA_WEIGHTS

# X → RGB
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_cmyk_to_unit_rgb,
    gray_to_unit_rgb,
    np_gray_to_unit_rgb,
)

# HSV ↔ HSL
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import convert, np_convert, convert_unit

# Types and enums
from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',
    'unit_rgb_to_gray',
    'np_unit_rgb_to_gray',
    'LumaWeights',
    'DEFAULT_LUMA_WEIGHTS',

    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_cmyk_to_unit_rgb',
    'gray_to_unit_rgb',
    'np_gray_to_unit_rgb',

    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    'convert',
    'np_convert',
    'convert_unit',

    'FormatType',
    'ColorSpace',
]
