from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..channels import Channel, RealNumber
from ..conversions import unit_rgb_to_gray, gray_to_unit_rgb, LumaWeights, DEFAULT_LUMA_WEIGHTS
from ..types.color_types import ColorSpace
from .color_base import ColorBase, channel_property
from .rgb import RGB


class Gray(ColorBase):
    """A single luma channel in [0, 1], plus alpha."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.GRAY
    channel_names: ClassVar[Tuple[str, ...]] = ("luma",)
    channel_types: ClassVar[Tuple[type, ...]] = (Channel,)

    luma = channel_property(0)

    def __init__(self, luma: RealNumber = 0.0, alpha: RealNumber = 1.0) -> None:
        super().__init__((luma,), alpha)

    def to_rgb(self) -> RGB:
        return RGB(*gray_to_unit_rgb(self.luma), alpha=self.alpha)

    @classmethod
    def from_rgb(cls, rgb: RGB, weights: LumaWeights = DEFAULT_LUMA_WEIGHTS) -> Self:
        """Luma from ``rgb`` using ``weights`` (BT.601 by default)."""
        return cls(unit_rgb_to_gray(*rgb.channels, weights=weights), alpha=rgb.alpha)
