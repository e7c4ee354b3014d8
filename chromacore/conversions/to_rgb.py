import numpy as np
from numpy import ndarray as NDArray


def _sector(c: float, x: float, h1: float) -> tuple[float, float, float]:
    if h1 < 1:
        return c, x, 0.0
    if h1 < 2:
        return x, c, 0.0
    if h1 < 3:
        return 0.0, c, x
    if h1 < 4:
        return 0.0, x, c
    if h1 < 5:
        return x, 0.0, c
    return c, 0.0, x


def _np_sector(c: NDArray, x: NDArray, h1: NDArray) -> NDArray:
    zero = np.zeros_like(c)
    sector = np.clip(np.floor(h1), 0, 5).astype(int)
    r = np.choose(sector, [c, x, zero, zero, x, c])
    g = np.choose(sector, [x, c, c, x, zero, zero])
    b = np.choose(sector, [zero, zero, x, c, c, x])
    return np.stack([r, g, b], axis=-1)


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to normalized RGB.

    Input:
        h in degrees (any value, taken modulo 360), s and v in [0, 1]
    """
    c = v * s
    h1 = (h % 360.0) / 60.0
    x = c * (1.0 - abs(h1 % 2.0 - 1.0))
    r1, g1, b1 = _sector(c, x, h1)
    m = v - c
    return r1 + m, g1 + m, b1 + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(v, dtype=float)
    )
    c = v * s
    h1 = (h % 360.0) / 60.0
    x = c * (1.0 - np.abs(h1 % 2.0 - 1.0))
    m = (v - c)[..., np.newaxis]
    return _np_sector(c, x, h1) + m


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSL to normalized RGB."""
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    h1 = (h % 360.0) / 60.0
    x = c * (1.0 - abs(h1 % 2.0 - 1.0))
    r1, g1, b1 = _sector(c, x, h1)
    m = l - c / 2.0
    return r1 + m, g1 + m, b1 + m


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h, s, l = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(l, dtype=float)
    )
    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    h1 = (h % 360.0) / 60.0
    x = c * (1.0 - np.abs(h1 % 2.0 - 1.0))
    m = (l - c / 2.0)[..., np.newaxis]
    return _np_sector(c, x, h1) + m


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    rest = 1.0 - k
    return (1.0 - c) * rest, (1.0 - m) * rest, (1.0 - y) * rest


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    c, m, y, k = np.broadcast_arrays(*(np.asarray(a, dtype=float) for a in (c, m, y, k)))
    rest = 1.0 - k
    return np.stack([(1.0 - c) * rest, (1.0 - m) * rest, (1.0 - y) * rest], axis=-1)


def gray_to_unit_rgb(luma: float) -> tuple[float, float, float]:
    return luma, luma, luma


def np_gray_to_unit_rgb(luma: NDArray) -> NDArray:
    luma = np.asarray(luma, dtype=float)
    return np.stack([luma, luma, luma], axis=-1)
