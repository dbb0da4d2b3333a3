from .format_type import ColorFormat, native_maxima, max_non_hue, HUE_360
from .color_types import ColorLike, ColorSpace, Channels, HUE_SPACES

__all__ = [
    "ColorFormat",
    "native_maxima",
    "max_non_hue",
    "HUE_360",
    "ColorLike",
    "ColorSpace",
    "Channels",
    "HUE_SPACES",
]
