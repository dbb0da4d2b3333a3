"""Light-mode palette: one entry of the 10-step light theme gradient."""

from .colors import Color
from .types.color_types import ColorLike, Channels
from .types.format_type import ColorFormat
from .steps import (
    BASE_INDEX,
    HUE_STEP,
    MIN_SATURATION,
    MAX_VALUE,
    MIN_VALUE,
    step_distance,
    compute_hue,
    compute_light_saturation,
    compute_dark_saturation,
    compute_light_value,
    compute_dark_value,
)
from .utils.color_utils import get_color_string


def to_hsv(color: ColorLike) -> Channels:
    """Return ``(h, s, v)`` of any color-like, s and v in [0, 100]."""
    c = Color.parse(color)
    return c.hue, c.saturationv, c.brightness


def light_palette_color(color: ColorLike, index: float = BASE_INDEX) -> Color:
    """
    Compute the light-mode palette entry at ``index`` as a Color.

    Index 6 is the parsed input itself; lower indices are lighter, higher
    ones darker. Indices outside 1..10 extrapolate.
    """
    origin = Color.parse(color)
    if index == BASE_INDEX:
        return origin

    base_h, base_s, base_v = to_hsv(origin)
    is_light, step_index = step_distance(index)

    new_h = compute_hue(base_h, is_light, step_index, HUE_STEP)
    if is_light:
        new_s = compute_light_saturation(base_s, step_index, MIN_SATURATION)
        new_v = compute_light_value(base_v, step_index, MAX_VALUE)
    else:
        new_s = compute_dark_saturation(base_s, step_index)
        new_v = compute_dark_value(base_v, step_index, MIN_VALUE)

    return Color.from_hsv(new_h, new_s, new_v)


def color_palette(
    color: ColorLike,
    index: float = BASE_INDEX,
    format: ColorFormat | str = ColorFormat.HEX,
) -> str:
    """
    Light-mode palette color at ``index`` (1 lightest, 10 darkest).

    >>> color_palette("#1890ff", 6)
    '#1890FF'
    """
    return get_color_string(light_palette_color(color, index), format)
