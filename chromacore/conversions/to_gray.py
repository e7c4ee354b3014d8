from enum import Enum
import numpy as np
from numpy import ndarray as NDArray


class LumaWeights(Enum):
    """Weights applied to (r, g, b) when computing luma."""
    BT601 = (0.299, 0.587, 0.114)
    BT709 = (0.2126, 0.7152, 0.0722)


DEFAULT_LUMA_WEIGHTS = LumaWeights.BT601


def unit_rgb_to_gray(
    r: float, g: float, b: float, weights: LumaWeights = DEFAULT_LUMA_WEIGHTS
) -> float:
    """
    Luma of a normalized RGB color as a weighted sum of its channels.

    Colors that are already gray (r == g == b) return that value exactly.
    """
    if r == g == b:
        return r
    wr, wg, wb = LumaWeights(weights).value
    return wr * r + wg * g + wb * b


def np_unit_rgb_to_gray(
    r: NDArray, g: NDArray, b: NDArray, weights: LumaWeights = DEFAULT_LUMA_WEIGHTS
) -> NDArray:
    """Vectorized luma; returns shape (..., 1) so it stacks like the other spaces."""
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float)
    )
    wr, wg, wb = LumaWeights(weights).value
    luma = np.where((r == g) & (g == b), r, wr * r + wg * g + wb * b)
    return luma[..., np.newaxis]
