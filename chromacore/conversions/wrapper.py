import numpy as np
from typing import Callable, cast

from ..types.format_type import FormatType, max_non_hue, HUE_360
from ..types.color_types import ColorElement, ColorSpace, HUE_SPACES, element_to_array, num_channels, parse_space

from .to_rgb import np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_cmyk_to_unit_rgb, np_gray_to_unit_rgb
from .to_hsv import np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import np_unit_rgb_to_hsl, np_hsv_to_hsl
from .to_cmyk import np_unit_rgb_to_cmyk
from .to_gray import np_unit_rgb_to_gray

# Every space reaches every other one through normalized RGB
CONVERT_TO_RGB: dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.CMYK: np_cmyk_to_unit_rgb,
    ColorSpace.GRAY: np_gray_to_unit_rgb,
}

CONVERT_FROM_RGB: dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.CMYK: np_unit_rgb_to_cmyk,
    ColorSpace.GRAY: np_unit_rgb_to_gray,
}

# Shortcuts that skip the RGB detour
CONVERT_NUMPY_DIRECT: dict[tuple[ColorSpace, ColorSpace], Callable[..., np.ndarray]] = {
    (ColorSpace.HSV, ColorSpace.HSL): np_hsv_to_hsl,
    (ColorSpace.HSL, ColorSpace.HSV): np_hsl_to_hsv,
}


def _channels(color: np.ndarray) -> list[np.ndarray]:
    return [color[..., i] for i in range(color.shape[-1])]


def normalize(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    """Scale a color from ``fmt`` into unit floats; hue stays in degrees."""
    maxval = max_non_hue[fmt]
    out = color / maxval
    if space in HUE_SPACES:
        out[..., 0] = color[..., 0]
    return out


def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    """Inverse of ``normalize``; INT output is rounded half to even."""
    maxval = max_non_hue[fmt]
    out = np.clip(color, 0.0, 1.0) * maxval
    if space in HUE_SPACES:
        out[..., 0] = color[..., 0] % HUE_360
    if fmt == FormatType.INT:
        out = np.round(out)
        if space in HUE_SPACES:
            out[..., 0] = out[..., 0] % HUE_360
        return out.astype(int)
    return out


def convert_alpha(alpha: np.ndarray | None, input_fmt: FormatType, output_fmt: FormatType) -> np.ndarray | None:
    if alpha is None:
        return None

    max_in = max_non_hue[input_fmt]
    max_out = max_non_hue[output_fmt]

    result = np.clip(alpha / max_in, 0.0, 1.0) * max_out
    return np.round(result).astype(int) if output_fmt == FormatType.INT else result


def convert_unit(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """Convert normalized channels (last axis) between two spaces."""
    if from_space == to_space:
        return color
    direct = CONVERT_NUMPY_DIRECT.get((from_space, to_space))
    if direct is not None:
        return direct(*_channels(color))
    rgb = color if from_space == ColorSpace.RGB else CONVERT_TO_RGB[from_space](*_channels(color))
    if to_space == ColorSpace.RGB:
        return rgb
    return CONVERT_FROM_RGB[to_space](*_channels(rgb))


def _convert_core(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
) -> np.ndarray:
    fs, has_alpha_in = parse_space(from_space)
    ts, has_alpha_out = parse_space(to_space)

    expected = num_channels[fs] + (1 if has_alpha_in else 0)
    if color.shape[-1] != expected:
        raise ValueError(f"{from_space} expects last dimension to be {expected}, got shape {color.shape}")

    if has_alpha_in:
        base = color[..., :-1]
        alpha = color[..., -1]
    else:
        base = color
        alpha = None

    # normalize → convert → scale
    base_norm = normalize(base, fs, input_fmt)
    converted = convert_unit(base_norm, fs, ts)
    out = scale(converted, ts, output_fmt)

    if has_alpha_out:
        new_alpha = convert_alpha(alpha, input_fmt, output_fmt)
        if new_alpha is None:
            # Default alpha value when no alpha in input
            default_alpha = max_non_hue[output_fmt]
            new_alpha = np.full(out.shape[:-1], default_alpha, dtype=out.dtype)
        return np.concatenate([out, new_alpha[..., None].astype(out.dtype)], axis=-1)

    return out


def convert(
    color: ColorElement,
    from_space: str,
    to_space: str,
    input_type: FormatType = FormatType.INT,
    output_type: FormatType = FormatType.INT,
) -> ColorElement:
    """
    Convert a single color given as a tuple.

    Spaces are ``rgb``, ``hsl``, ``hsv``, ``cmyk`` or ``gray``; a trailing
    ``a`` (``rgba``, ``hsla``, ...) marks an alpha channel as the last
    element. Alpha is carried through unchanged, rescaled to the output
    format, or defaults to opaque when only the output has one.
    """
    if from_space.lower() == to_space.lower() and FormatType(input_type) == FormatType(output_type):
        return color  # No conversion needed
    color_array = element_to_array(color)
    result = _convert_core(
        color_array,
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
    # Convert back to tuple for scalar output
    return tuple(result.tolist()) if result.ndim == 1 else cast(ColorElement, result)


def np_convert(
    color: np.ndarray,
    from_space: str,
    to_space: str,
    input_type: FormatType = FormatType.FLOAT,
    output_type: FormatType = FormatType.FLOAT,
) -> np.ndarray:
    """Vectorized ``convert`` over arrays of shape (..., channels)."""
    if from_space.lower() == to_space.lower() and FormatType(input_type) == FormatType(output_type):
        return color  # No conversion needed
    return _convert_core(
        np.array(color, dtype=float),
        from_space,
        to_space,
        FormatType(input_type),
        FormatType(output_type),
    )
