"""Unit tests for coordinate_system.py."""

import pytest

from coordinate_system import engine_to_screen, in_bounds, screen_to_engine, surface_origin


def test_surface_origin_is_the_centre():
    assert surface_origin(50, 50) == (25, 25)
    assert surface_origin(51, 20) == (25, 10)


def test_engine_to_screen_flips_y():
    assert engine_to_screen([0, 0, 3, 4, -2, -5], 25, 25) == [25, 25, 28, 21, 23, 30]


def test_empty_coords():
    assert engine_to_screen([], 25, 25) == []
    assert screen_to_engine([], 25, 25) == []


@pytest.mark.parametrize("coords", [[0, 0], [7, -3], [-25, 24, 10, 10]])
def test_round_trip(coords):
    assert screen_to_engine(engine_to_screen(coords, 25, 25), 25, 25) == coords


@pytest.mark.parametrize("sx, sy, inside", [
    (0, 0, True),
    (49, 49, True),
    (50, 0, False),
    (0, -1, False),
    (-1, 10, False),
])
def test_in_bounds(sx, sy, inside):
    assert in_bounds(sx, sy, 50, 50) is inside
