"""
Palette orchestration.

``generate_one`` returns a single color string, ``generate_all`` the full
10-entry ramp; ``generate`` wraps either in a tagged result so callers can
branch on the shape without inspecting types.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from .palette import color_palette
from .palette_dark import color_palette_dark
from .steps import BASE_INDEX, PALETTE_SIZE
from .types.color_types import ColorLike
from .types.format_type import ColorFormat

PaletteFunction = Callable[[ColorLike, float, ColorFormat], str]


@dataclass(frozen=True)
class GenerateOptions:
    """
    Options for ``generate``.

    Attributes:
        index: palette index 1-10, 6 is the seed color (default 6)
        dark: use the dark-mode ramp (default False)
        list: return all 10 entries and ignore ``index`` (default False)
        format: 'hex', 'rgb' or 'hsl' (default 'hex')
    """

    index: float = BASE_INDEX
    dark: bool = False
    list: bool = False
    format: ColorFormat = field(default=ColorFormat.HEX)

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, Real):
            raise TypeError(f"index must be a number, got {type(self.index).__name__}")
        object.__setattr__(self, "format", ColorFormat(self.format))
        object.__setattr__(self, "dark", bool(self.dark))
        object.__setattr__(self, "list", bool(self.list))

    @classmethod
    def resolve(
        cls,
        options: Optional[Union["GenerateOptions", Mapping[str, Any]]] = None,
        **overrides: Any,
    ) -> "GenerateOptions":
        """Build options from an instance or mapping; keyword overrides win."""
        if options is None:
            base = cls()
        elif isinstance(options, cls):
            base = options
        elif isinstance(options, Mapping):
            base = cls(**options)
        else:
            raise TypeError(f"options must be GenerateOptions or a mapping, got {type(options).__name__}")
        return replace(base, **overrides) if overrides else base

    @property
    def palette_function(self) -> PaletteFunction:
        return color_palette_dark if self.dark else color_palette


@dataclass(frozen=True)
class Single:
    color: str


@dataclass(frozen=True)
class Many:
    colors: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def __getitem__(self, i: int) -> str:
        return self.colors[i]


PaletteResult = Union[Single, Many]


def generate_one(
    color: ColorLike,
    options: Optional[Union[GenerateOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> str:
    """Palette color at ``options.index`` (``options.list`` is ignored)."""
    opts = GenerateOptions.resolve(options, **overrides)
    return opts.palette_function(color, opts.index, opts.format)


def generate_all(
    color: ColorLike,
    options: Optional[Union[GenerateOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> Tuple[str, ...]:
    """All 10 palette colors, index 1 first (``options.index`` is ignored)."""
    opts = GenerateOptions.resolve(options, **overrides)
    func = opts.palette_function
    return tuple(func(color, i, opts.format) for i in range(1, PALETTE_SIZE + 1))


def generate(
    color: ColorLike,
    options: Optional[Union[GenerateOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> PaletteResult:
    """
    Generate one palette color or the whole ramp.

    >>> generate("#1890ff")
    Single(color='#1890FF')
    >>> len(generate("#1890ff", list=True))
    10
    """
    opts = GenerateOptions.resolve(options, **overrides)
    if opts.list:
        return Many(generate_all(color, opts))
    return Single(generate_one(color, opts))
