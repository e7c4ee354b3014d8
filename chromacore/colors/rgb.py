from __future__ import annotations
from typing import ClassVar, Tuple, Self

from ..channels import Channel, RealNumber
from ..types.color_types import ColorSpace
from ..types.format_type import FormatType
from .color_base import ColorBase, channel_property


class RGB(ColorBase):
    """
    Red, green and blue in [0, 1] plus alpha.

    RGB is the canonical intermediate of every conversion, so ``to_rgb``
    and ``from_rgb`` are identities.
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b")
    channel_types: ClassVar[Tuple[type, ...]] = (Channel, Channel, Channel)

    r = channel_property(0, "Red channel.")
    g = channel_property(1, "Green channel.")
    b = channel_property(2, "Blue channel.")

    def __init__(self, r: RealNumber = 0.0, g: RealNumber = 0.0, b: RealNumber = 0.0, alpha: RealNumber = 1.0) -> None:
        super().__init__((r, g, b), alpha)

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, alpha: RealNumber = 1.0) -> Self:
        """Build from 0-255 channels; alpha stays in [0, 1]."""
        return cls(*(Channel.from_format(v, FormatType.INT) for v in (r, g, b)), alpha=alpha)

    def to_ints(self) -> Tuple[int, int, int]:
        return tuple(c.to_format(FormatType.INT) for c in self.channels)  # type: ignore[return-value]

    def to_rgb(self) -> RGB:
        return self

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Self:
        if type(rgb) is cls:
            return rgb
        return cls(*rgb.channels, alpha=rgb.alpha)

    def to_hex(self, include_alpha: bool | None = None) -> str:
        """
        ``#RRGGBB``, or ``#RRGGBBAA`` when alpha is not opaque.

        Args:
            include_alpha: force the alpha digits on (True) or off (False).
        """
        if include_alpha is None:
            include_alpha = not self.is_opaque
        return "#" + "".join(f"{v:02X}" for v in self.to_format(FormatType.INT, include_alpha))

    def __str__(self) -> str:
        return self.to_hex()
