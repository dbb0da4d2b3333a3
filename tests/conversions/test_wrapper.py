import numpy as np
import pytest
from palettica.conversions import convert, np_convert
from samples import samples_rgb_hsv, samples_rgb_hsl


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_same_space_is_identity():
    assert convert((10, 20, 30), "rgb", "rgb") == (10.0, 20.0, 30.0)
    assert convert((10, 20, 30), "HSV", "hsv") == (10.0, 20.0, 30.0)


def test_convert_native_scales():
    for rgb, hsv_expected in samples_rgb_hsv.items():
        assert np.allclose(convert(rgb, "rgb", "hsv"), hsv_expected, atol=1e-3)
    for rgb, hsl_expected in samples_rgb_hsl.items():
        assert np.allclose(convert(rgb, "rgb", "hsl"), hsl_expected, atol=1e-3)


def test_hsv_hsl_direct():
    h, s, l = convert((210, 50, 80), "hsv", "hsl")
    rgb_direct = convert((h, s, l), "hsl", "rgb")
    rgb_via_hsv = convert((210, 50, 80), "hsv", "rgb")
    assert np.allclose(rgb_direct, rgb_via_hsv, atol=1e-9)


def test_convert_unknown_space():
    with pytest.raises(ValueError):
        convert((1, 2, 3), "rgb", "lab")  # type: ignore[arg-type]


def test_np_convert():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    result = np_convert(the_matrix, "rgb", "hsv")

    assert result.shape == (len(samples_rgb_hsv), 3)
    assert np.allclose(result, expected, atol=1e-3)


def test_np_convert_only_from_rgb():
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 3)), "hsv", "rgb")
