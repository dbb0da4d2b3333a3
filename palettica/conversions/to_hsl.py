import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, l) with h in [0, 360) and s, l in [0, 1]
    """
    lo = min(r, g, b)
    hi = max(r, g, b)
    delta = hi - lo

    if hi == lo:
        h = 0.0
    elif r == hi:
        h = (g - b) / delta
    elif g == hi:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta

    h = min(h * 60, 360)
    if h < 0:
        h += 360

    l = (lo + hi) / 2
    if hi == lo:
        s = 0.0
    elif l <= 0.5:
        s = delta / (hi + lo)
    else:
        s = delta / (2 - hi - lo)

    return h % 360, s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    hi = np.maximum(np.maximum(r, g), b)
    lo = np.minimum(np.minimum(r, g), b)
    delta = hi - lo
    safe_delta = np.where(delta == 0, 1.0, delta)

    h = np.where(
        hi == r,
        ((g - b) / safe_delta) % 6,
        np.where(hi == g, (b - r) / safe_delta + 2, (r - g) / safe_delta + 4),
    )
    h = np.where(delta == 0, 0.0, h * 60.0) % 360

    l = (hi + lo) / 2
    denom = np.where(l <= 0.5, hi + lo, 2 - hi - lo)
    s = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    return np.stack([h, s, l], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV (s, v in [0, 1]) to HSL (s, l in [0, 1]); hue passes through."""
    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        return h, 0.0, l
    return h, (v - l) / min(l, 1 - l), l
