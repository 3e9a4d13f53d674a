import math

import pytest

from vec2d.fmt import format_axis, format_pair, round_half_up


@pytest.mark.parametrize("value, decimals, expected", [
    (2.5, 0, 3.0),
    (-2.5, 0, -2.0),
    (10.9, 0, 11.0),
    (20.3, 0, 20.0),
    (5.222, 2, 5.22),
    (0.592, 2, 0.59),
    (0.125, 2, 0.13),
    (-0.125, 2, -0.12),
    (0.49999999999999994, 0, 0.0),
    (-0.5, 0, 0.0),
    (1e308, 2, math.inf),
    (-1e308, 2, -math.inf),
    (1e307, 0, 1e307),
])
def test_round_half_up(value, decimals, expected):
    assert round_half_up(value, decimals) == expected


def test_round_half_up_non_finite():
    assert round_half_up(math.inf, 2) == math.inf
    assert math.isnan(round_half_up(math.nan))


@pytest.mark.parametrize("value, round_to_int, expected", [
    (645.0, False, "645"),
    (-234, False, "-234"),
    (-0.0, False, "0"),
    (10.9, False, "10.9"),
    (10.9, True, "11"),
    (-0.4, True, "0"),
    (0.49999999999999994, True, "0"),
    (1e20, False, "1e+20"),
    (math.inf, True, "inf"),
])
def test_format_axis(value, round_to_int, expected):
    assert format_axis(value, round_to_int) == expected


def test_format_pair():
    assert format_pair(10.9, 20.3) == "(10.9, 20.3)"
    assert format_pair(10.9, 20.3, True) == "(11, 20)"
