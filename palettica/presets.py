"""
Preset palettes for the built-in brand colors.

The table is built once, on first access, and handed out as a read-only
mapping of immutable ``PresetColor`` entries.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Tuple

from .generate import generate_all

BRAND_COLORS: Mapping[str, str] = MappingProxyType({
    "red": "#F53F3F",
    "orangered": "#F77234",
    "orange": "#FF7D00",
    "gold": "#F7BA1E",
    "yellow": "#FADC19",
    "lime": "#9FDB1D",
    "green": "#00B42A",
    "cyan": "#14C9C9",
    "blue": "#3491FA",
    "arcoblue": "#165DFF",
    "purple": "#722ED1",
    "pinkpurple": "#D91AD9",
    "magenta": "#F5319D",
})


@dataclass(frozen=True)
class PresetColor:
    """Light and dark 10-step ramps of one preset color."""

    light: Tuple[str, ...]
    dark: Tuple[str, ...]
    primary: str

    @classmethod
    def from_seed(cls, seed: str) -> "PresetColor":
        return cls(
            light=generate_all(seed),
            dark=generate_all(seed, dark=True),
            primary=seed,
        )


PresetColors = Mapping[str, PresetColor]

# Gray is hand-tuned, not generated
GRAY_PRESET = PresetColor(
    light=(
        "#f7f8fa",
        "#f2f3f5",
        "#e5e6eb",
        "#c9cdd4",
        "#a9aeb8",
        "#86909c",
        "#6b7785",
        "#4e5969",
        "#272e3b",
        "#1d2129",
    ),
    dark=(
        "#17171a",
        "#2e2e30",
        "#484849",
        "#5f5f60",
        "#78787a",
        "#929293",
        "#ababac",
        "#c5c5c5",
        "#dfdfdf",
        "#f6f6f6",
    ),
    primary="#6b7785",
)


@lru_cache(maxsize=None)
def get_preset_colors() -> PresetColors:
    """
    All preset palettes keyed by color name, plus ``gray``.

    >>> get_preset_colors()["gray"].primary
    '#6b7785'
    """
    presets = {name: PresetColor.from_seed(seed) for name, seed in BRAND_COLORS.items()}
    presets["gray"] = GRAY_PRESET
    return MappingProxyType(presets)
