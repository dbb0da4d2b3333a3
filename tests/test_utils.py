import pytest
from palettica import Color, get_color_string, get_rgb_str
from palettica.utils.num_utils import round_half_up


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3


def test_get_rgb_str():
    assert get_rgb_str("#1890ff") == "24,144,255"
    assert get_rgb_str({"h": 0, "s": 100, "v": 100}) == "255,0,0"
    assert get_rgb_str((12.4, 12.5, 300)) == "12,13,255"


def test_get_rgb_str_bad_input():
    with pytest.raises(ValueError):
        get_rgb_str("nope")


def test_get_color_string():
    c = Color("#1890ff")
    assert get_color_string(c) == "#1890FF"
    assert get_color_string(c, "rgb") == "rgb(24, 144, 255)"
    assert get_color_string(c, "hsl") == "hsl(209, 100%, 55%)"
    with pytest.raises(ValueError):
        get_color_string(c, "cmyk")
