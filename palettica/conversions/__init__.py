"""
Palettica Color Space Conversions
=================================

Conversions between RGB, HSV and HSL used by the color adapter.

Unit-scale functions take and return channels in [0, 1] with hue in degrees;
``convert`` and ``np_convert`` work at native scales (rgb 0-255, hue 0-360,
saturation/value/lightness 0-100).

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)

HSV/HSL → RGB:
    hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v)
    hsl_to_hsv(h, s, l)

Examples
--------
>>> from palettica.conversions import convert
>>> convert((24, 144, 255), "rgb", "hsv")  # doctest: +ELLIPSIS
(208.83..., 90.58..., 100.0)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv, hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsv_to_hsl
from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb
from .wrapper import convert, np_convert

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'convert',
    'np_convert',
]
