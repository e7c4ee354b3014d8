from itertools import product

from chromacore.conversions import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    unit_rgb_to_cmyk,
    cmyk_to_unit_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
)
from ..samples import int_steps

rgb_tolerance = 1e-9


def _grid():
    for r, g, b in product(int_steps, repeat=3):
        yield r / 255, g / 255, b / 255


def _assert_close(actual, expected, tol=rgb_tolerance):
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol, (actual, expected)


def test_round_trip_rgb_hsv():
    for rgb in _grid():
        _assert_close(hsv_to_unit_rgb(*unit_rgb_to_hsv(*rgb)), rgb)


def test_round_trip_rgb_hsl():
    for rgb in _grid():
        _assert_close(hsl_to_unit_rgb(*unit_rgb_to_hsl(*rgb)), rgb)


def test_round_trip_rgb_cmyk():
    for rgb in _grid():
        _assert_close(cmyk_to_unit_rgb(*unit_rgb_to_cmyk(*rgb)), rgb)


def test_round_trip_hsv_hsl_hsv():
    for rgb in _grid():
        hsv = unit_rgb_to_hsv(*rgb)
        _assert_close(hsl_to_hsv(*hsv_to_hsl(*hsv)), hsv)
