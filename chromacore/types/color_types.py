from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Protocol, Self, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

if TYPE_CHECKING:
    from ..channels import Channel
    from ..colors.rgb import RGB

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorElement = Union[Scalar, ScalarVector]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    CMYK = "cmyk"
    GRAY = "gray"

HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSV}

num_channels = {
    ColorSpace.RGB: 3,
    ColorSpace.HSL: 3,
    ColorSpace.HSV: 3,
    ColorSpace.CMYK: 4,
    ColorSpace.GRAY: 1,
}


def parse_space(name: str | ColorSpace) -> tuple[ColorSpace, bool]:
    """
    Split a space name such as ``"hsla"`` into its ``ColorSpace`` and an
    alpha flag. A trailing ``a`` requests an alpha channel.

    Raises:
        ValueError: for unknown names.
    """
    name = str(getattr(name, "value", name)).lower()
    try:
        return ColorSpace(name), False
    except ValueError:
        pass
    if name.endswith("a"):
        try:
            return ColorSpace(name[:-1]), True
        except ValueError:
            pass
    raise ValueError(f"Unknown color space: {name!r}")


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)


@runtime_checkable
class ColorCapability(Protocol):
    """What every color model provides to take part in conversions."""

    def to_rgb(self) -> RGB: ...

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Self: ...

    @property
    def alpha(self) -> Channel: ...

    def with_alpha(self, alpha: Scalar) -> Self: ...
