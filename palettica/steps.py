"""
Per-step HSV adjustments.

Every function takes one base HSV component and an integer step distance
from the base index and returns the adjusted component. Hue results are
normalized into [0, 360); saturation and value results are clamped into
[0, 100].
"""

import math
from typing import Tuple

from .types.format_type import HUE_360

BASE_INDEX = 6
PALETTE_SIZE = 10

HUE_STEP = 2
MIN_SATURATION = 9
MAX_SATURATION = 100
MAX_VALUE = 100
MIN_VALUE = 30

# Lighter steps are indices 1..5, darker steps 7..10
LIGHT_STEPS = BASE_INDEX - 1
DARK_STEPS = PALETTE_SIZE - BASE_INDEX


def normalize_hue(deg: float) -> int:
    """Round to the nearest whole degree and wrap into [0, 360)."""
    h = int(math.floor(deg + 0.5)) % HUE_360
    if h < 0:
        h += HUE_360
    return h


def clamp(n: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, n))


def step_distance(index: float) -> Tuple[bool, float]:
    """Return ``(is_light, step_index)`` for a palette index."""
    is_light = index < BASE_INDEX
    return is_light, (BASE_INDEX - index) if is_light else (index - BASE_INDEX)


def compute_hue(base_hue: float, is_light: bool, step_index: float, step_deg: float = HUE_STEP) -> int:
    """
    Rotate hue by ``step_deg * step_index`` degrees.

    Inside the 60-240 band lighter steps rotate down and darker steps up;
    outside the band the directions are swapped.
    """
    if 60 <= base_hue <= 240:
        direction = -1 if is_light else 1
    else:
        direction = 1 if is_light else -1
    return normalize_hue(base_hue + direction * step_deg * step_index)


def compute_light_saturation(s: float, step_index: float, min_sat: float = MIN_SATURATION) -> float:
    # near-gray colors are left alone
    if s <= min_sat:
        return s
    per_step = (s - min_sat) / LIGHT_STEPS
    return clamp(s - per_step * step_index, 0, 100)


def compute_dark_saturation(s: float, step_index: float, max_sat: float = MAX_SATURATION) -> float:
    per_step = (max_sat - s) / DARK_STEPS
    return clamp(s + per_step * step_index, 0, 100)


def compute_light_value(v: float, step_index: float, max_value: float = MAX_VALUE) -> float:
    per_step = (max_value - v) / LIGHT_STEPS
    return clamp(v + per_step * step_index, 0, 100)


def compute_dark_value(v: float, step_index: float, min_value: float = MIN_VALUE) -> float:
    if v <= min_value:
        return v
    per_step = (v - min_value) / DARK_STEPS
    return clamp(v - per_step * step_index, 0, 100)


def dark_mid_saturation(hue: float, saturation: float) -> float:
    """
    Saturation of the dark-mode base tone (index 6).

    Hues in [50, 191) lose 20 points, all others 15.
    """
    offset = 20 if 50 <= hue < 191 else 15
    return clamp(saturation - offset, 0, 100)
