from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..channels import Channel, Hue, RealNumber
from ..conversions import unit_rgb_to_hsl, hsl_to_unit_rgb
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property
from .rgb import RGB


class HSL(ColorBase):
    """Hue in degrees [0, 360), saturation and lightness in [0, 1], plus alpha."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "l")
    channel_types: ClassVar[Tuple[type, ...]] = (Hue, Channel, Channel)

    h = channel_property(0, "Hue in degrees.")
    s = channel_property(1, "Saturation.")
    l = channel_property(2, "Lightness.")

    def __init__(self, h: RealNumber = 0.0, s: RealNumber = 0.0, l: RealNumber = 0.0, alpha: RealNumber = 1.0) -> None:
        super().__init__((h, s, l), alpha)

    def to_rgb(self) -> RGB:
        return RGB(*hsl_to_unit_rgb(*self.channels), alpha=self.alpha)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Self:
        return cls(*unit_rgb_to_hsl(*rgb.channels), alpha=rgb.alpha)
