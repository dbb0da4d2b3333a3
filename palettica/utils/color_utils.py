"""Rendering helpers shared by the palette functions."""

from ..colors import Color
from ..types.color_types import ColorLike
from ..types.format_type import ColorFormat


def get_color_string(color: Color, format: ColorFormat | str = ColorFormat.HEX) -> str:
    """
    Render a Color as a hex, ``rgb()`` or ``hsl()`` string.

    Args:
        color: Color instance
        format: 'hex' (default), 'rgb' or 'hsl'

    Returns:
        Formatted color string, channels rounded before stringifying

    Raises:
        ValueError: unknown format
    """
    fmt = ColorFormat(format)
    if fmt is ColorFormat.HEX:
        return color.hex()
    if fmt is ColorFormat.RGB:
        return color.rgb_string()
    return color.hsl_string()


def get_rgb_str(color: ColorLike) -> str:
    """
    Render any color-like value as ``"R,G,B"`` (no spaces, integers 0-255).

    >>> get_rgb_str("#ff0000")
    '255,0,0'
    """
    return ",".join(str(c) for c in Color.parse(color).rounded_rgb())
