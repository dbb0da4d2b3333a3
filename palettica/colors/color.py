from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple

from ..conversions import convert
from ..types.color_types import Channels, ColorSpace, HUE_SPACES
from ..types.format_type import native_maxima, HUE_360
from ..utils.num_utils import round_half_up
from .parse import parse_color_like


def _limit(mode: ColorSpace, channels: Tuple[float, ...]) -> Channels:
    """Clamp rgb and percentage channels, wrap hue into [0, 360)."""
    limited = []
    for i, (v, m) in enumerate(zip(channels, native_maxima[mode])):
        v = float(v)
        if i == 0 and mode in HUE_SPACES:
            limited.append(v % HUE_360)
        else:
            limited.append(max(0.0, min(v, m)))
    return limited[0], limited[1], limited[2]


class Color:
    """
    Immutable canonical color value.

    A color remembers the model it was built in (``"rgb"``, ``"hsl"`` or
    ``"hsv"``) and its channels at native scale. Reading a channel of that
    model returns it verbatim; other models are converted on demand.

    >>> c = Color("#1890ff")
    >>> c.hex()
    '#1890FF'
    >>> Color({"h": 210, "s": 40, "v": 80}).saturationv
    40.0
    """

    __slots__ = ('_mode', '_value', '_is_frozen')

    spaces: ClassVar[Tuple[ColorSpace, ...]] = ("rgb", "hsv", "hsl")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: Any, mode: Optional[ColorSpace] = None) -> None:
        if mode is None:
            mode, channels = parse_color_like(color)
        else:
            mode = mode.lower()  # type: ignore[assignment]
            if mode not in self.spaces:
                raise ValueError(f"Unknown space: {mode}")
            channels = tuple(color)
            if len(channels) != 3:
                raise ValueError(f"{mode} expects 3 channels, got {len(channels)}")

        self._mode = mode
        self._value = _limit(mode, channels)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def parse(cls, color: Any) -> "Color":
        """Return ``color`` unchanged if it already is a Color, else parse it."""
        if isinstance(color, cls):
            return color
        return cls(color)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        return cls((h, s, v), "hsv")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def mode(self) -> ColorSpace:
        return self._mode

    @property
    def value(self) -> Channels:
        """Channels of the stored model at native scale."""
        return self._value

    def _channels(self, space: ColorSpace) -> Channels:
        if space == self._mode:
            return self._value
        return _limit(space, convert(self._value, self._mode, space))

    @property
    def rgb(self) -> Channels:
        return self._channels("rgb")

    @property
    def hsv(self) -> Channels:
        return self._channels("hsv")

    @property
    def hsl(self) -> Channels:
        return self._channels("hsl")

    @property
    def hue(self) -> float:
        """Hue in degrees [0, 360); read through the HSL model."""
        if self._mode in HUE_SPACES:
            return self._value[0]
        return self.hsl[0]

    @property
    def saturationv(self) -> float:
        """HSV saturation in [0, 100]."""
        return self.hsv[1]

    @property
    def brightness(self) -> float:
        """HSV value in [0, 100]."""
        return self.hsv[2]

    def convert(self, to_space: ColorSpace) -> "Color":
        """Return the same color rebuilt in another model."""
        to_space = to_space.lower()  # type: ignore[assignment]
        if to_space == self._mode:
            return self
        return Color(self._channels(to_space), to_space)

    # ------------------ RENDERERS ------------------
    def rounded_rgb(self) -> Tuple[int, int, int]:
        r, g, b = (round_half_up(c) for c in self.rgb)
        return r, g, b

    def hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*self.rounded_rgb())

    def rgb_string(self) -> str:
        r, g, b = self.rounded_rgb()
        return f"rgb({r}, {g}, {b})"

    def hsl_string(self) -> str:
        h, s, l = (round_half_up(c) for c in self.hsl)
        return f"hsl({h % HUE_360}, {s}%, {l}%)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._mode == other._mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._mode, self._value))

    def __repr__(self) -> str:
        return f"Color({self._mode}{self._value!r})"
