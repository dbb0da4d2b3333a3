import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, v) with h in [0, 360) and s, v in [0, 1]
    """
    v = max(r, g, b)
    diff = v - min(r, g, b)
    if diff == 0:
        return 0.0, 0.0, float(v)

    def diffc(c: float) -> float:
        return (v - c) / 6 / diff + 1 / 2

    s = diff / v
    rdif, gdif, bdif = diffc(r), diffc(g), diffc(b)
    if r == v:
        h = bdif - gdif
    elif g == v:
        h = 1 / 3 + rdif - bdif
    else:
        h = 2 / 3 + gdif - rdif

    if h < 0:
        h += 1
    elif h > 1:
        h -= 1
    return (h * 360) % 360, s, float(v)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    v = np.maximum(np.maximum(r, g), b)
    delta = v - np.minimum(np.minimum(r, g), b)
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        v == r,
        ((g - b) / safe_delta) % 6,
        np.where(v == g, (b - r) / safe_delta + 2, (r - g) / safe_delta + 4),
    )
    h = np.where(delta == 0, 0.0, h * 60.0) % 360

    s = np.where(v == 0, 0.0, delta / np.where(v == 0, 1.0, v))
    return np.stack([h, s, v], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert HSL (s, l in [0, 1]) to HSV (s, v in [0, 1]); hue passes through."""
    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, sv, v
