"""
Text notations for colors.

Hexadecimal (``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``), packed
``0xRRGGBBAA`` integers and CSS-style functional notation::

    rgb(255, 128, 0)        rgba(100%, 50%, 0%, 0.5)
    hsl(30, 100%, 50%)      hsva(30, 1, 1, 50%)

Functional notation rules:

- spaces are ignored, names are case-insensitive;
- RGB numbers are 0-255, percentages 0-100%;
- hue numbers are degrees, a hue percentage is a fraction of a full turn;
- saturation/lightness/value and alpha numbers are 0-1, or percentages;
- every value is clamped into its domain, never rejected.
"""
from __future__ import annotations
import math
import re

from boundednumbers.functions import clamp

from .colors.color import AnyColor, space_to_class
from .colors.color_base import ColorBase
from .colors.rgb import RGB
from .errors import ColorParseError, ParseErrorKind
from .types.color_types import ColorSpace, parse_space
from .types.format_type import FormatType, HUE_360

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")

FUNCTIONAL_SPACES = {ColorSpace.RGB, ColorSpace.HSL, ColorSpace.HSV}


def parse_hex(text: str) -> RGB:
    """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional)."""
    digits = text.strip().removeprefix("#")
    if not _HEX_DIGITS.match(digits):
        raise ColorParseError(ParseErrorKind.INVALID_HEX_CHARS, text)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise ColorParseError(ParseErrorKind.INVALID_HEX_LENGTH, text)
    values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    return RGB.from_format(values, FormatType.INT)


def to_hex(color: ColorBase, include_alpha: bool | None = None) -> str:
    return color.to_rgb().to_hex(include_alpha)


def from_u32(value: int) -> RGB:
    """Unpack ``0xRRGGBBAA``."""
    value &= 0xFFFFFFFF
    return RGB.from_format(
        [(value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF],
        FormatType.INT,
    )


def to_u32(color: ColorBase) -> int:
    """Pack ``color`` as ``0xRRGGBBAA``."""
    r, g, b, a = color.to_rgb().to_format(FormatType.INT)
    return (r << 24) | (g << 16) | (b << 8) | a


def _parse_number(raw: str, text: str, number_max: float, percent_max: float) -> float:
    """Parse one argument into a fraction of its domain, clamped to [0, 1]."""
    try:
        if raw.endswith("%"):
            fraction = float(raw[:-1]) / 100.0 * (percent_max / number_max)
        else:
            fraction = float(raw) / number_max
    except ValueError:
        raise ColorParseError(ParseErrorKind.INVALID_NUMBER, text) from None
    if math.isnan(fraction):
        raise ColorParseError(ParseErrorKind.INVALID_NUMBER, text)
    return float(clamp(fraction, 0.0, 1.0))


def parse_css(text: str) -> AnyColor:
    """
    Parse functional notation into RGB, HSL or HSV.

    Raises:
        ColorParseError: malformed input or unsupported function name.
    """
    compact = text.replace(" ", "").lower()
    name, sep, rest = compact.partition("(")
    if not sep or not rest.endswith(")"):
        raise ColorParseError(ParseErrorKind.MISSING_PARENS, text)

    try:
        space, has_alpha = parse_space(name)
    except ValueError:
        raise ColorParseError(ParseErrorKind.UNKNOWN_FORMAT, text) from None
    if space not in FUNCTIONAL_SPACES:
        raise ColorParseError(ParseErrorKind.UNKNOWN_FORMAT, text)

    args = rest[:-1].split(",")
    if len(args) != 3 + has_alpha:
        raise ColorParseError(ParseErrorKind.INVALID_PARAM_COUNT, text)

    if space == ColorSpace.RGB:
        channels = [_parse_number(a, text, 255.0, 255.0) for a in args[:3]]
    else:
        hue_raw = args[0]
        if hue_raw.endswith("%"):
            hue = _parse_number(hue_raw, text, 1.0, 1.0) * HUE_360
        else:
            try:
                hue = float(hue_raw)
            except ValueError:
                raise ColorParseError(ParseErrorKind.INVALID_NUMBER, text) from None
        channels = [hue] + [_parse_number(a, text, 1.0, 1.0) for a in args[1:3]]

    alpha = _parse_number(args[3], text, 1.0, 1.0) if has_alpha else 1.0
    return space_to_class[space](*channels, alpha=alpha)  # type: ignore[return-value]


def float_to_nice_string(value: float) -> str:
    """Three decimals, with trailing zeros and a trailing point removed."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_css(color: ColorBase) -> str:
    """
    Render functional notation. RGB, HSL and HSV keep their own function;
    other models are written as ``rgb``/``rgba``. Alpha is written only when
    the color is not opaque.
    """
    if color.mode not in FUNCTIONAL_SPACES:
        color = color.to_rgb()

    if color.mode == ColorSpace.RGB:
        parts = [float_to_nice_string(float(c) * 255.0) for c in color.channels]
    else:
        h, *rest = color.channels
        parts = [float_to_nice_string(float(h))]
        parts += [float_to_nice_string(float(c) * 100.0) + "%" for c in rest]

    name = color.mode.value
    if not color.is_opaque:
        name += "a"
        parts.append(float_to_nice_string(float(color.alpha)))
    return f"{name}({', '.join(parts)})"


def parse_color(text: str) -> AnyColor:
    """Parse hex (``#`` required here) or functional notation. Spaces are ignored."""
    stripped = text.replace(" ", "")
    if stripped.startswith("#"):
        return parse_hex(stripped)
    return parse_css(stripped)


__all__ = [
    "parse_hex",
    "to_hex",
    "from_u32",
    "to_u32",
    "parse_css",
    "to_css",
    "parse_color",
    "float_to_nice_string",
]
