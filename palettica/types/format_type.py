# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


# Native channel maxima per color space (hue is always degrees)
native_maxima = {
    "rgb": (255.0, 255.0, 255.0),
    "hsv": (360.0, 100.0, 100.0),
    "hsl": (360.0, 100.0, 100.0),
}

max_non_hue = {
    "rgb": 255.0,
    "hsv": 100.0,
    "hsl": 100.0,
}

HUE_360 = 360
