"""
Numpy views of palettes and swatch images.

Typical use::

    arr = palette_array("#165DFF")             # (10, 3) uint8 rgb
    hsv = palette_array("#165DFF", space="hsv")
    render_swatch(generate_all("#165DFF")).save("arcoblue.png")
"""

from typing import Iterable

import numpy as np
from PIL import Image

from .colors import Color
from .conversions import np_convert
from .generate import generate_all
from .types.color_types import ColorLike, ColorSpace


def colors_to_array(colors: Iterable[ColorLike]) -> np.ndarray:
    """Stack rounded rgb channels of ``colors`` into an (N, 3) uint8 array."""
    rows = [Color.parse(c).rounded_rgb() for c in colors]
    if not rows:
        return np.zeros((0, 3), dtype=np.uint8)
    return np.array(rows, dtype=np.uint8)


def palette_array(color: ColorLike, *, dark: bool = False, space: ColorSpace = "rgb") -> np.ndarray:
    """
    Full 10-step palette as a numpy array.

    Args:
        color: seed color
        dark: use the dark-mode ramp
        space: "rgb" for uint8 channels, "hsv"/"hsl" for float channels
            (hue in degrees, percentages) computed from the rounded rgb

    Returns:
        array of shape (10, 3)
    """
    rgb = colors_to_array(generate_all(color, dark=dark))
    if space == "rgb":
        return rgb
    return np_convert(rgb.astype(float), "rgb", space)


def render_swatch(colors: Iterable[ColorLike], cell_size: int = 32) -> Image.Image:
    """
    Render colors as a horizontal strip of ``cell_size`` squares.

    Raises:
        ValueError: if ``cell_size`` is not positive or no colors are given
    """
    if cell_size <= 0:
        raise ValueError("cell_size must be a positive integer")
    rgb = colors_to_array(colors)
    if rgb.shape[0] == 0:
        raise ValueError("At least one color is required for a swatch")

    strip = np.repeat(rgb[np.newaxis, :, :], cell_size, axis=0)
    strip = np.repeat(strip, cell_size, axis=1)
    return Image.fromarray(strip.astype(np.uint8))
