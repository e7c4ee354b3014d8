"""
Alpha compositing.

``composite`` implements the Porter-Duff "over" operator on straight
(unpremultiplied) colors. The math runs in RGB; the result is returned in
the operands' model. ``premultiply``/``unpremultiply`` and
``composite_premultiplied`` cover callers that keep premultiplied buffers.
"""
from __future__ import annotations
from typing import Tuple, TypeVar

from .color_base import ColorBase
from .rgb import RGB

C = TypeVar("C", bound=ColorBase)
Premultiplied = Tuple[float, float, float, float]


def composite(top: C, bottom: C) -> C:
    """
    Place ``top`` over ``bottom``.

    ``a_out = a_t + a_b * (1 - a_t)`` and each channel is
    ``(c_t * a_t + c_b * a_b * (1 - a_t)) / a_out``. When ``a_out`` is 0
    the result is transparent black.

    Raises:
        TypeError: if the operands are different models; convert first.
    """
    if type(top) is not type(bottom):
        raise TypeError(
            f"Cannot composite {type(top).__name__} over {type(bottom).__name__}; "
            "convert both to the same model first"
        )

    ta = float(top.alpha)
    ba = float(bottom.alpha)
    out_alpha = ta + ba * (1.0 - ta)

    if out_alpha == 0.0:
        return type(top).from_rgb(RGB(0.0, 0.0, 0.0, alpha=0.0))
    if ta == 1.0:
        return top
    if ta == 0.0:
        return bottom

    weight = ba * (1.0 - ta)
    channels = (
        (t * ta + b * weight) / out_alpha
        for t, b in zip(top.to_rgb().channels, bottom.to_rgb().channels)
    )
    return type(top).from_rgb(RGB(*channels, alpha=out_alpha))


def premultiply(color: ColorBase) -> Premultiplied:
    """RGB channels of ``color`` scaled by its alpha, alpha last."""
    rgb = color.to_rgb()
    a = float(rgb.alpha)
    return (rgb.r * a, rgb.g * a, rgb.b * a, a)


def unpremultiply(values: Premultiplied) -> RGB:
    """Inverse of ``premultiply``; zero alpha gives transparent black."""
    r, g, b, a = values
    if a == 0:
        return RGB(0.0, 0.0, 0.0, alpha=0.0)
    return RGB(r / a, g / a, b / a, alpha=a)


def composite_premultiplied(top: Premultiplied, bottom: Premultiplied) -> Premultiplied:
    """Over operator on premultiplied tuples: ``top + bottom * (1 - a_top)``."""
    keep = 1.0 - top[3]
    return tuple(t + b * keep for t, b in zip(top, bottom))  # type: ignore[return-value]
