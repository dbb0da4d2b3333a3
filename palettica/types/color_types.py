from __future__ import annotations
from typing import Literal, Mapping, Sequence, Tuple, Union, TYPE_CHECKING
import numpy as np
from numpy import ndarray

if TYPE_CHECKING:
    from ..colors.color import Color

Scalar = int | float
Channels = Tuple[float, float, float]
ColorSpace = Literal["rgb", "hsv", "hsl"]
HUE_SPACES = {"hsl", "hsv"}

ColorLike = Union[
    str,
    int,
    Mapping[str, Scalar],
    Sequence[Scalar],
    ndarray,
    "Color",
]


def element_to_array(element: Union[Sequence[Scalar], ndarray]) -> np.ndarray:
    """
    Convert a channel sequence to a float numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float)
    return np.asarray(element, dtype=float)

