"""
Dark-mode palette.

The dark ramp borrows hue and value from the light ramp at the mirrored
index (``11 - index``) and computes saturation on its own, stepping
linearly away from a base tone whose saturation is pulled down by a
hue-dependent offset.
"""

import math

from .colors import Color
from .palette import color_palette
from .steps import BASE_INDEX, MIN_SATURATION, LIGHT_STEPS, DARK_STEPS, PALETTE_SIZE, clamp, dark_mid_saturation
from .types.color_types import ColorLike
from .types.format_type import ColorFormat
from .utils.color_utils import get_color_string
from .utils.num_utils import round_half_up


def dark_saturation_steps(base_saturation: float) -> tuple[int, int]:
    """Return ``(step_down, step_up)``: per-step saturation change toward 9 and toward 100."""
    step_down = math.ceil((base_saturation - MIN_SATURATION) / DARK_STEPS)
    step_up = math.ceil((100 - base_saturation) / LIGHT_STEPS)
    return step_down, step_up


def dark_palette_color(color: ColorLike, index: float = BASE_INDEX) -> Color:
    """Compute the dark-mode palette entry at ``index`` as a Color."""
    idx = round_half_up(index)

    light_ref_index = int(clamp(PALETTE_SIZE + 1 - idx, 1, PALETTE_SIZE))
    # re-parsed from hex, so hue/value come from the rounded light color
    reference = Color(color_palette(color, light_ref_index, ColorFormat.HEX))

    origin = Color.parse(color)
    origin_hue = origin.hue
    origin_sat = origin.saturationv
    origin_v = origin.brightness

    mid_sat = dark_mid_saturation(origin_hue, origin_sat)
    base_saturation = Color.from_hsv(origin_hue, mid_sat, origin_v).saturationv
    step_down, step_up = dark_saturation_steps(base_saturation)

    if idx < BASE_INDEX:
        saturation = clamp(base_saturation + (BASE_INDEX - idx) * step_up, 0, 100)
    elif idx == BASE_INDEX:
        saturation = clamp(mid_sat, 0, 100)
    else:
        saturation = clamp(base_saturation - step_down * (idx - BASE_INDEX), 0, 100)

    return Color.from_hsv(reference.hue, saturation, reference.brightness)


def color_palette_dark(
    color: ColorLike,
    index: float = BASE_INDEX,
    format: ColorFormat | str = ColorFormat.HEX,
) -> str:
    """Dark-mode palette color at ``index``; index 1 is the darkest tone."""
    return get_color_string(dark_palette_color(color, index), format)
