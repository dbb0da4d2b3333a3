"""
Palettica - Design-System Palettes from a Seed Color
====================================================

Expand one brand color into a 10-step light-theme ramp and a 10-step
dark-theme ramp, rendered as hex, ``rgb()`` or ``hsl()`` strings.

Key Features
------------
- Light ramp: hue rotation, saturation and value stepped away from the seed
  (index 6 is the seed, 1 the lightest, 10 the darkest)
- Dark ramp: hue/value borrowed from the mirrored light entry, saturation
  stepped around a hue-dependent base tone
- Preset palettes for the built-in brand colors plus a fixed gray ramp
- Numpy arrays and PIL swatches of whole palettes

Quick Start
-----------
>>> from palettica import generate, generate_all, color_palette
>>> color_palette("#1890ff", 6)
'#1890FF'
>>> ramp = generate_all("#1890ff")
>>> len(ramp)
10
>>> generate("#1890ff", index=3, format="rgb")  # doctest: +SKIP
Single(color='rgb(...)')

Modules
-------
- colors: the Color value (parsing, HSV accessors, rendering)
- conversions: rgb/hsv/hsl conversions, scalar and numpy
- steps: per-step hue, saturation and value adjustments
- palette / palette_dark: one palette entry, light or dark
- generate: options and orchestration
- presets: brand color table
- swatch: numpy arrays and swatch images
"""

from .colors import Color
from .types.format_type import ColorFormat
from .palette import color_palette
from .palette_dark import color_palette_dark
from .generate import GenerateOptions, Single, Many, PaletteResult, generate, generate_one, generate_all
from .presets import PresetColor, PresetColors, BRAND_COLORS, GRAY_PRESET, get_preset_colors
from .utils.color_utils import get_color_string, get_rgb_str
from .swatch import palette_array, render_swatch

__version__ = "0.1.0"

__all__ = [
    "Color",
    "ColorFormat",
    "color_palette",
    "color_palette_dark",
    "GenerateOptions",
    "Single",
    "Many",
    "PaletteResult",
    "generate",
    "generate_one",
    "generate_all",
    "PresetColor",
    "PresetColors",
    "BRAND_COLORS",
    "GRAY_PRESET",
    "get_preset_colors",
    "get_color_string",
    "get_rgb_str",
    "palette_array",
    "render_swatch",
]
