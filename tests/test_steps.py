import pytest
from palettica.steps import (
    normalize_hue,
    clamp,
    step_distance,
    compute_hue,
    compute_light_saturation,
    compute_dark_saturation,
    compute_light_value,
    compute_dark_value,
    dark_mid_saturation,
)


@pytest.mark.parametrize("deg, expected", [
    (0, 0),
    (0.5, 1),
    (-0.5, 0),
    (359.4, 359),
    (359.6, 0),
    (-10, 350),
    (370, 10),
    (720, 0),
    (-725.2, 355),
])
def test_normalize_hue(deg, expected):
    assert normalize_hue(deg) == expected


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(3.25, 0, 100) == 3.25


def test_step_distance():
    assert step_distance(1) == (True, 5)
    assert step_distance(5) == (True, 1)
    assert step_distance(6) == (False, 0)
    assert step_distance(10) == (False, 4)


@pytest.mark.parametrize("hue, is_light, steps, expected", [
    (100, True, 2, 96),
    (100, False, 2, 104),
    (60, True, 1, 58),
    (240, True, 1, 238),
    (241, True, 1, 243),
    (59, False, 1, 57),
    (300, True, 1, 302),
    (300, False, 1, 298),
    (359, True, 1, 1),
    (0.4, False, 1, 358),
])
def test_compute_hue(hue, is_light, steps, expected):
    assert compute_hue(hue, is_light, steps) == expected


def test_compute_hue_step_degrees():
    assert compute_hue(120, True, 3, step_deg=5) == 105


def test_compute_light_saturation():
    assert compute_light_saturation(8, 3) == 8
    assert compute_light_saturation(9, 3) == 9
    assert compute_light_saturation(59, 1) == 49
    assert compute_light_saturation(59, 5) == 9
    assert compute_light_saturation(59, 10) == 0
    assert compute_light_saturation(40, 2, min_sat=20) == 32


def test_compute_dark_saturation():
    assert compute_dark_saturation(60, 1) == 70
    assert compute_dark_saturation(60, 4) == 100
    assert compute_dark_saturation(60, 8) == 100
    assert compute_dark_saturation(60, 2, max_sat=80) == 70


def test_compute_light_value():
    assert compute_light_value(50, 1) == 60
    assert compute_light_value(50, 5) == 100
    assert compute_light_value(50, 10) == 100


def test_compute_dark_value():
    assert compute_dark_value(30, 2) == 30
    assert compute_dark_value(20, 2) == 20
    assert compute_dark_value(70, 1) == 60
    assert compute_dark_value(70, 4) == 30
    assert compute_dark_value(70, 8) == 0


@pytest.mark.parametrize("hue, expected", [
    (49, 65),
    (49.99, 65),
    (50, 60),
    (120, 60),
    (190.9, 60),
    (191, 65),
    (300, 65),
])
def test_dark_mid_saturation_band(hue, expected):
    assert dark_mid_saturation(hue, 80) == pytest.approx(expected)


def test_dark_mid_saturation_clamps():
    assert dark_mid_saturation(120, 10) == 0
    assert dark_mid_saturation(10, 5) == 0


@pytest.mark.parametrize("s", [-20, 0, 5, 9, 50, 99, 100, 140])
@pytest.mark.parametrize("step", [1, 2, 3, 4, 5])
def test_outputs_stay_in_range(s, step):
    for fn in (compute_dark_saturation, compute_light_value):
        assert 0 <= fn(s, step) <= 100
    for fn in (compute_light_saturation, compute_dark_value):
        out = fn(s, step)
        # floor guards hand back small inputs untouched
        if s > 30:
            assert 0 <= out <= 100
