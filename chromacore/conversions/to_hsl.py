import numpy as np
from numpy import ndarray as NDArray

from .to_hsv import rgb_hue, np_rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert normalized RGB to HSL.

    Saturation is 0 for zero chroma and for pure black or white.
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    chroma = xmax - xmin
    h = rgb_hue(r, g, b, xmax, chroma)
    l = (xmax + xmin) / 2.0
    if chroma == 0 or l == 0 or l == 1:
        s = 0.0
    else:
        s = chroma / (1.0 - abs(2.0 * l - 1.0))
    return h, s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    )
    xmax = np.maximum.reduce([r, g, b])
    xmin = np.minimum.reduce([r, g, b])
    chroma = xmax - xmin
    h = np_rgb_hue(r, g, b, xmax, chroma)
    l = (xmax + xmin) / 2.0
    undefined = (chroma == 0) | (l == 0) | (l == 1)
    denom = np.where(undefined, 1.0, 1.0 - np.abs(2.0 * l - 1.0))
    s = np.where(undefined, 0.0, chroma / denom)
    return np.stack([h, s, l], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Direct HSV to HSL, without going through RGB.

    Zero output saturation reports hue 0, as the RGB path does.
    """
    l = v * (1.0 - s / 2.0)
    if l == 0 or l == 1:
        sl = 0.0
    else:
        sl = (v - l) / min(l, 1.0 - l)
    return (0.0 if sl == 0 else h), sl, l


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(v, dtype=float)
    )
    l = v * (1.0 - s / 2.0)
    undefined = (l == 0) | (l == 1)
    denom = np.where(undefined, 1.0, np.minimum(l, 1.0 - l))
    sl = np.where(undefined, 0.0, (v - l) / denom)
    h = np.where(sl == 0, 0.0, h)
    return np.stack([h, sl, l], axis=-1)
