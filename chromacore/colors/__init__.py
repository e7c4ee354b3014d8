"""
Chromacore Color Classes
========================

Immutable color models with an explicit alpha channel.

Features
--------
- Immutable color instances (frozen after initialization)
- Value clamping to valid ranges on construction; hue wraps modulo 360
- One canonical alpha range for every model: [0.0, 1.0], 1.0 opaque
- Conversion between any two models through RGB
- Alpha compositing ("over")

Usage
-----
>>> from chromacore.colors import RGB, HSV, composite
>>>
>>> red = RGB.from_ints(255, 0, 0)
>>> red.convert("hsv")
HSV(h=0.0, s=1.0, v=1.0, alpha=1.0)
>>>
>>> HSV(400, 2.0, 0.5).value
(Hue(40.0), Channel(1.0), Channel(0.5), Channel(1.0))
>>>
>>> half = red.with_alpha(0.5)
>>> composite(half, RGB.from_ints(0, 0, 255)).to_ints()
(128, 0, 128)

Color Classes
-------------
    - RGB: red, green, blue
    - HSL: hue, saturation, lightness
    - HSV: hue, saturation, value
    - CMYK: cyan, magenta, yellow, key
    - Gray: luma

Notes
-----
- ``checked`` constructors raise ``OutOfRangeError`` instead of clamping
- HSL and HSV convert into each other directly; the result agrees with
  the RGB path within ``DIRECT_PATH_TOLERANCE``
"""

from .color_base import ColorBase
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from .gray import Gray
from .color import (
    AnyColor,
    DIRECT_PATH_TOLERANCE,
    color_convert,
    convert_color,
    get_color_class,
    space_to_class,
)
from .compositing import composite, premultiply, unpremultiply, composite_premultiplied


__all__ = [
    'ColorBase',
    'RGB',
    'HSL',
    'HSV',
    'CMYK',
    'Gray',
    'AnyColor',
    'DIRECT_PATH_TOLERANCE',
    'color_convert',
    'convert_color',
    'get_color_class',
    'space_to_class',
    'composite',
    'premultiply',
    'unpremultiply',
    'composite_premultiplied',
]
