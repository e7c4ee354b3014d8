import numpy as np
from numpy import ndarray as NDArray


def rgb_hue(r: float, g: float, b: float, xmax: float, chroma: float) -> float:
    """
    Hue in degrees from normalized RGB, given its max and chroma.

    Zero chroma has no defined hue; it is reported as 0.
    """
    if chroma == 0:
        return 0.0
    if xmax == r:
        h = ((g - b) / chroma) % 6.0
    elif xmax == g:
        h = (b - r) / chroma + 2.0
    else:
        h = (r - g) / chroma + 4.0
    return 60.0 * h


def np_rgb_hue(r: NDArray, g: NDArray, b: NDArray, xmax: NDArray, chroma: NDArray) -> NDArray:
    """Vectorized ``rgb_hue``."""
    safe_c = np.where(chroma == 0, 1.0, chroma)
    h = np.where(
        xmax == r,
        ((g - b) / safe_c) % 6.0,
        np.where(xmax == g, (b - r) / safe_c + 2.0, (r - g) / safe_c + 4.0),
    )
    return np.where(chroma == 0, 0.0, 60.0 * h)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert normalized RGB to HSV.

    Input:
        r, g, b in [0, 1]

    Output:
        h in [0, 360), s in [0, 1], v in [0, 1]
    """
    xmax = max(r, g, b)
    xmin = min(r, g, b)
    chroma = xmax - xmin
    h = rgb_hue(r, g, b, xmax, chroma)
    s = 0.0 if xmax == 0 else chroma / xmax
    return h, s, xmax


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV.

    Returns:
        array of shape (..., 3)
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    )
    xmax = np.maximum.reduce([r, g, b])
    xmin = np.minimum.reduce([r, g, b])
    chroma = xmax - xmin
    h = np_rgb_hue(r, g, b, xmax, chroma)
    s = np.where(xmax == 0, 0.0, chroma / np.where(xmax == 0, 1.0, xmax))
    return np.stack([h, s, xmax], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Direct HSL to HSV, without going through RGB.

    Zero output saturation reports hue 0, as the RGB path does.
    """
    v = l + s * min(l, 1.0 - l)
    sv = 0.0 if v == 0 else 2.0 * (1.0 - l / v)
    return (0.0 if sv == 0 else h), sv, v


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(l, dtype=float)
    )
    v = l + s * np.minimum(l, 1.0 - l)
    sv = np.where(v == 0, 0.0, 2.0 * (1.0 - l / np.where(v == 0, 1.0, v)))
    h = np.where(sv == 0, 0.0, h)
    return np.stack([h, sv, v], axis=-1)
