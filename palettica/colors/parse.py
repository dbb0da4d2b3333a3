"""Parsing of color-like inputs into a (model, channels) pair."""

from __future__ import annotations
import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Tuple

from numpy import ndarray
from PIL import ImageColor

from ..types.color_types import Channels, ColorSpace

if TYPE_CHECKING:
    from .color import Color

_NUM = r"([+-]?(?:\d+\.?\d*|\.\d+))"
_SEP = r"\s*[,\s]\s*"
_ALPHA = r"(?:\s*[,/]\s*[+-]?(?:\d+\.?\d*|\.\d+)%?)?"

HSL_PATTERN = re.compile(
    rf"^hsla?\(\s*{_NUM}(?:deg)?{_SEP}{_NUM}%{_SEP}{_NUM}%{_ALPHA}\s*\)$", re.IGNORECASE
)
HSV_PATTERN = re.compile(
    rf"^hs[vb]a?\(\s*{_NUM}(?:deg)?{_SEP}{_NUM}%{_SEP}{_NUM}%{_ALPHA}\s*\)$", re.IGNORECASE
)

# Sorted mapping keys -> model; alpha keys are ignored
MAPPING_MODELS: dict[str, ColorSpace] = {
    "bgr": "rgb",
    "hls": "hsl",
    "hsv": "hsv",
}
ALPHA_KEYS = {"a", "alpha"}


def parse_string(text: str) -> Tuple[ColorSpace, Channels]:
    """
    Parse a CSS-like color string.

    ``hsl()`` and ``hsv()`` keep their own model so no precision is lost;
    everything else (hex, ``rgb()``, named colors) goes through Pillow and
    ends up in the rgb model.

    Raises:
        ValueError: if the string is not a recognized color
    """
    stripped = text.strip()
    for pattern, model in ((HSL_PATTERN, "hsl"), (HSV_PATTERN, "hsv")):
        match = pattern.match(stripped)
        if match:
            h, s, x = (float(group) for group in match.groups())
            return model, (h, s, x)

    rgb = ImageColor.getrgb(stripped)
    return "rgb", (float(rgb[0]), float(rgb[1]), float(rgb[2]))


def parse_mapping(mapping: Mapping) -> Tuple[ColorSpace, Channels]:
    """Parse ``{r,g,b}``, ``{h,s,l}`` or ``{h,s,v}`` mappings."""
    keys = {str(k).lower(): k for k in mapping if str(k).lower() not in ALPHA_KEYS}
    hashed = "".join(sorted(keys))
    model = MAPPING_MODELS.get(hashed)
    if model is None:
        raise ValueError(f"Unable to parse color from mapping with keys: {sorted(keys)}")
    return model, tuple(float(mapping[keys[label]]) for label in model)  # type: ignore[return-value]


def parse_sequence(values: Sequence | ndarray) -> Tuple[ColorSpace, Channels]:
    """Parse an ``(r, g, b)`` or ``(r, g, b, a)`` sequence; alpha is dropped."""
    if len(values) not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels, got {len(values)}")
    r, g, b = (float(v) for v in list(values)[:3])
    return "rgb", (r, g, b)


def parse_color_like(color: "Color | object") -> Tuple[ColorSpace, Channels]:
    """
    Interpret any supported color-like value.

    Returns:
        (model, channels) at native scale

    Raises:
        ValueError: malformed strings, mappings or sequences
        TypeError: unsupported input types
    """
    from .color import Color

    if isinstance(color, Color):
        return color.mode, color.value
    if isinstance(color, str):
        return parse_string(color)
    if isinstance(color, bool):
        raise TypeError("Unable to parse color from a bool")
    if isinstance(color, int):
        return "rgb", (float((color >> 16) & 0xFF), float((color >> 8) & 0xFF), float(color & 0xFF))
    if isinstance(color, Mapping):
        return parse_mapping(color)
    if isinstance(color, (ndarray, Sequence)):
        return parse_sequence(color)
    raise TypeError(f"Unable to parse color from {type(color).__name__}")
