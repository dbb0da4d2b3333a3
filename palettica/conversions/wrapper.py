import numpy as np
from typing import Callable, Sequence, Tuple

from ..types.format_type import max_non_hue
from ..types.color_types import ColorSpace, Channels, element_to_array

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl, np_unit_rgb_to_hsl

UnitConversion = Callable[[float, float, float], Tuple[float, float, float]]

CONVERT_SCALAR: dict[tuple[str, str], UnitConversion] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("rgb", "hsl"): unit_rgb_to_hsl,
    ("hsv", "rgb"): hsv_to_unit_rgb,
    ("hsl", "rgb"): hsl_to_unit_rgb,
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
}

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
}


def normalize(color: Sequence[float], space: str) -> Tuple[float, float, float]:
    """Native scale (rgb 0-255, percentages) -> unit scale; hue stays in degrees."""
    maxval = max_non_hue[space]
    a, b, c = color
    if space == "rgb":
        return a / maxval, b / maxval, c / maxval
    if space in ("hsv", "hsl"):
        return a, b / maxval, c / maxval
    raise ValueError(f"Unknown space: {space}")


def scale(color: Sequence[float], space: str) -> Channels:
    """Unit scale -> native scale; hue stays in degrees."""
    maxval = max_non_hue[space]
    a, b, c = color
    if space == "rgb":
        return a * maxval, b * maxval, c * maxval
    if space in ("hsv", "hsl"):
        return a, b * maxval, c * maxval
    raise ValueError(f"Unknown space: {space}")


def convert(color: Sequence[float], from_space: ColorSpace, to_space: ColorSpace) -> Channels:
    """
    Convert one color between rgb/hsv/hsl at native scales.

    No rounding is applied; callers round when rendering.
    """
    fs, ts = from_space.lower(), to_space.lower()
    if fs == ts:
        a, b, c = color
        return float(a), float(b), float(c)

    key = (fs, ts)
    if key not in CONVERT_SCALAR:
        raise ValueError(f"Unsupported conversion: {from_space} -> {to_space}")
    converted = CONVERT_SCALAR[key](*normalize(color, fs))
    return scale(converted, ts)


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized conversion from native rgb (0-255) to hsv/hsl at native scales.

    Args:
        color: array of shape (..., 3)
        from_space: only "rgb" is supported as a vectorized source
        to_space: "rgb", "hsv" or "hsl"

    Returns:
        float array of shape (..., 3)
    """
    fs, ts = from_space.lower(), to_space.lower()
    arr = element_to_array(color)
    if fs == ts:
        return arr

    key = (fs, ts)
    if key not in CONVERT_NUMPY:
        raise ValueError(f"Unsupported vectorized conversion: {from_space} -> {to_space}")

    unit = arr / max_non_hue[fs]
    out = CONVERT_NUMPY[key](unit[..., 0], unit[..., 1], unit[..., 2])
    return np.stack(
        [out[..., 0], out[..., 1] * max_non_hue[ts], out[..., 2] * max_non_hue[ts]],
        axis=-1,
    )
