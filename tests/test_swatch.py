import numpy as np
import pytest
from palettica import palette_array, render_swatch, generate_all
from palettica.swatch import colors_to_array


def test_palette_array_rgb():
    arr = palette_array("#1890ff")
    assert arr.shape == (10, 3)
    assert arr.dtype == np.uint8
    assert tuple(arr[5]) == (24, 144, 255)
    assert tuple(arr[0]) == (232, 248, 255)


def test_palette_array_dark():
    arr = palette_array("#1890ff", dark=True)
    assert np.array_equal(arr, colors_to_array(generate_all("#1890ff", dark=True)))


def test_palette_array_hsv():
    arr = palette_array("#1890ff", space="hsv")
    assert arr.shape == (10, 3)
    assert np.allclose(arr[5], (208.831169, 90.588235, 100.0), atol=1e-3)
    assert np.all((arr[..., 0] >= 0) & (arr[..., 0] < 360))
    assert np.all((arr[..., 1:] >= 0) & (arr[..., 1:] <= 100))


def test_colors_to_array_empty():
    assert colors_to_array([]).shape == (0, 3)


def test_render_swatch():
    img = render_swatch(["#ff0000", "#00ff00"], cell_size=4)
    assert img.size == (8, 4)
    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == (255, 0, 0)
    assert img.getpixel((5, 2)) == (0, 255, 0)


def test_render_swatch_errors():
    with pytest.raises(ValueError):
        render_swatch([], cell_size=4)
    with pytest.raises(ValueError):
        render_swatch(["#ff0000"], cell_size=0)
