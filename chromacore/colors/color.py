from __future__ import annotations
from typing import Callable, Union

from .color_base import ColorBase, build_registry
from .rgb import RGB
from .hsl import HSL
from .hsv import HSV
from .cmyk import CMYK
from .gray import Gray
from ..conversions import hsl_to_hsv, hsv_to_hsl
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType

AnyColor = Union[RGB, HSL, HSV, CMYK, Gray]

space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(RGB, HSL, HSV, CMYK, Gray)

# Per-channel agreement between a direct shortcut and the RGB-mediated path
DIRECT_PATH_TOLERANCE = 1e-9


def _hsl_to_hsv(color: HSL) -> HSV:
    return HSV(*hsl_to_hsv(*color.channels), alpha=color.alpha)


def _hsv_to_hsl(color: HSV) -> HSL:
    return HSL(*hsv_to_hsl(*color.channels), alpha=color.alpha)


DIRECT_CONVERSIONS: dict[tuple[ColorSpace, ColorSpace], Callable[[ColorBase], ColorBase]] = {
    (ColorSpace.HSL, ColorSpace.HSV): _hsl_to_hsv,  # type: ignore[dict-item]
    (ColorSpace.HSV, ColorSpace.HSL): _hsv_to_hsl,  # type: ignore[dict-item]
}


def get_color_class(target: ColorSpace | str | type[ColorBase]) -> type[ColorBase]:
    """
    Resolve a conversion target to its model class.

    Args:
        target: a ``ColorSpace``, its string value (``"hsv"``) or a model class.

    Raises:
        ValueError: unknown space name.
        TypeError: anything else.
    """
    if isinstance(target, type) and issubclass(target, ColorBase):
        return target
    if isinstance(target, str):
        try:
            return space_to_class[ColorSpace(target.lower())]
        except ValueError:
            raise ValueError(f"Unsupported color space: {target!r}") from None
    raise TypeError(f"Cannot convert to {target!r}")


def color_convert(self: ColorBase, to_space: ColorSpace | str | type[ColorBase], *, direct: bool = True) -> ColorBase:
    """
    Convert this color to another model.

    The generic path is ``Target.from_rgb(self.to_rgb())``. HSL and HSV
    convert into each other directly unless ``direct`` is False; both paths
    agree within ``DIRECT_PATH_TOLERANCE``. Alpha is carried unchanged.

    Args:
        to_space: Target model (``ColorSpace``, name or class)
        direct: Allow pairwise shortcuts

    Returns:
        New instance of the target model
    """
    cls = get_color_class(to_space)
    if type(self) is cls:
        return self

    if direct:
        shortcut = DIRECT_CONVERSIONS.get((self.mode, cls.mode))
        if shortcut is not None:
            return shortcut(self)

    return cls.from_rgb(self.to_rgb())


ColorBase.convert = color_convert


def convert_color(value, color_space: ColorSpace | str | type[ColorBase]) -> ColorBase:
    """
    Coerce ``value`` into ``color_space``: colors are converted, raw
    sequences of unit floats (alpha optional, last) are used as channels.
    """
    color_class = get_color_class(color_space)
    if isinstance(value, ColorBase):
        return value.convert(color_class)
    return color_class.from_format(tuple(value), FormatType.FLOAT)
