"""
Palettica Color Adapter
=======================

``Color`` is the canonical color value every palette function goes through:
it parses color-like inputs, exposes hue / HSV saturation / HSV value, and
renders back to hex, ``rgb()`` and ``hsl()`` strings.

Accepted inputs
---------------
- strings: ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb()``, ``rgba()``,
  ``hsl()``, ``hsla()``, ``hsv()`` and CSS color names
- mappings with keys ``{r, g, b}``, ``{h, s, l}`` or ``{h, s, v}``
- ``(r, g, b)`` sequences or numpy arrays, 0-255
- 24-bit integers ``0xRRGGBB``
- existing ``Color`` instances

Usage
-----
>>> from palettica.colors import Color
>>> c = Color("orange")
>>> c.rgb_string()
'rgb(255, 165, 0)'
>>> round(c.hue)
39
"""

from .color import Color
from .parse import parse_color_like

__all__ = ['Color', 'parse_color_like']
