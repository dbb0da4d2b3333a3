"""
camelCase aliases (deprecated).

Use the snake_case functions from ``palettica`` instead.
"""

import warnings

from .palette import color_palette
from .palette_dark import color_palette_dark
from .presets import get_preset_colors
from .utils.color_utils import get_rgb_str


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old} is deprecated. Use palettica.{new} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def colorPalette(color, index=6, format="hex"):
    _deprecated("colorPalette", "color_palette")
    return color_palette(color, index, format)


def colorPaletteDark(color, index=6, format="hex"):
    _deprecated("colorPaletteDark", "color_palette_dark")
    return color_palette_dark(color, index, format)


def getPresetColors():
    _deprecated("getPresetColors", "get_preset_colors")
    return get_preset_colors()


def getRgbStr(color):
    _deprecated("getRgbStr", "get_rgb_str")
    return get_rgb_str(color)
