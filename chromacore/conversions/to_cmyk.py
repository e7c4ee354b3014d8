import numpy as np
from numpy import ndarray as NDArray


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert normalized RGB to CMYK.

    Key is ``1 - max(r, g, b)``. Pure black (K == 1) has C = M = Y = 0.
    """
    k = 1.0 - max(r, g, b)
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0
    rest = 1.0 - k
    return (rest - r) / rest, (rest - g) / rest, (rest - b) / rest, k


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    )
    k = 1.0 - np.maximum.reduce([r, g, b])
    black = k == 1
    rest = np.where(black, 1.0, 1.0 - k)
    c = np.where(black, 0.0, (rest - r) / rest)
    m = np.where(black, 0.0, (rest - g) / rest)
    y = np.where(black, 0.0, (rest - b) / rest)
    return np.stack([c, m, y, k], axis=-1)
