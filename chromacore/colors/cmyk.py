from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..channels import Channel, RealNumber
from ..conversions import unit_rgb_to_cmyk, cmyk_to_unit_rgb
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property
from .rgb import RGB


class CMYK(ColorBase):
    """Cyan, magenta, yellow and key (black) in [0, 1], plus alpha."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.CMYK
    channel_names: ClassVar[Tuple[str, ...]] = ("c", "m", "y", "k")
    channel_types: ClassVar[Tuple[type, ...]] = (Channel, Channel, Channel, Channel)

    c = channel_property(0)
    m = channel_property(1)
    y = channel_property(2)
    k = channel_property(3, "Key (black).")

    def __init__(
        self,
        c: RealNumber = 0.0,
        m: RealNumber = 0.0,
        y: RealNumber = 0.0,
        k: RealNumber = 0.0,
        alpha: RealNumber = 1.0,
    ) -> None:
        super().__init__((c, m, y, k), alpha)

    def to_rgb(self) -> RGB:
        return RGB(*cmyk_to_unit_rgb(*self.channels), alpha=self.alpha)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Self:
        return cls(*unit_rgb_to_cmyk(*rgb.channels), alpha=rgb.alpha)
