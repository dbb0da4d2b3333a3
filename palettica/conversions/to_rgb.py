import math
from typing import Tuple


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    h = h / 60
    hi = math.floor(h) % 6
    f = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    if hi == 0:
        return v, t, p
    if hi == 1:
        return q, v, p
    if hi == 2:
        return p, v, t
    if hi == 3:
        return p, q, v
    if hi == 4:
        return t, p, v
    return v, p, q


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        (r, g, b) in [0, 1]
    """
    if s == 0:
        return l, l, l

    h = h / 360
    t2 = l * (1 + s) if l < 0.5 else l + s - l * s
    t1 = 2 * l - t2

    channels = []
    for i in range(3):
        t3 = h + 1 / 3 * -(i - 1)
        if t3 < 0:
            t3 += 1
        if t3 > 1:
            t3 -= 1

        if 6 * t3 < 1:
            val = t1 + (t2 - t1) * 6 * t3
        elif 2 * t3 < 1:
            val = t2
        elif 3 * t3 < 2:
            val = t1 + (t2 - t1) * (2 / 3 - t3) * 6
        else:
            val = t1
        channels.append(val)

    return channels[0], channels[1], channels[2]
