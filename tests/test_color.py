import pytest

from fdfview.color import (
    N_BLUE,
    N_ORANGE,
    N_PINK,
    N_YELLOW,
    WHITE,
    Point,
    calc_color,
    calc_light,
    calc_percentage,
    z_color,
)


def test_percentage_zero_range_is_one():
    assert calc_percentage(5, 5, 3) == 1.0


def test_percentage_endpoints():
    assert calc_percentage(2, 12, 2) == 0.0
    assert calc_percentage(2, 12, 12) == 1.0
    assert calc_percentage(12, 2, 12) == 0.0


@pytest.mark.parametrize("a,b", [(0, 255), (200, 10), (77, 77)])
def test_light_endpoints(a, b):
    assert calc_light(a, b, 0.0) == a
    assert calc_light(a, b, 1.0) == b
    assert min(a, b) <= calc_light(a, b, 0.5) <= max(a, b)


def test_color_same_as_end_returns_current():
    cur = Point(3, 0, color=0x123456)
    assert calc_color(cur, Point(0, 0, color=0), Point(9, 0, color=0x123456), Point(9, 0)) == 0x123456


def test_color_at_start_and_end_of_line():
    start = Point(0, 0, color=0xFF0000)
    end = Point(10, 0, color=0x0000FF)
    delta = Point(10, 0)
    assert calc_color(Point(0, 0, color=0), start, end, delta) == 0xFF0000
    assert calc_color(Point(10, 0, color=0), start, end, delta) == 0x0000FF


def test_color_channels_stay_between_endpoints():
    start = Point(0, 0, color=0x10A020)
    end = Point(0, 20, color=0xF01080)
    delta = Point(0, -20)
    for y in range(21):
        c = calc_color(Point(0, y, color=0), start, end, delta)
        for shift in (16, 8, 0):
            ch = (c >> shift) & 0xFF
            lo = min((start.color >> shift) & 0xFF, (end.color >> shift) & 0xFF)
            hi = max((start.color >> shift) & 0xFF, (end.color >> shift) & 0xFF)
            assert lo <= ch <= hi


def test_z_color_default_palette():
    assert z_color(0, 100, 0, False) == N_ORANGE
    assert z_color(0, 100, 30, False) == N_PINK
    assert z_color(0, 100, 60, False) == WHITE
    assert z_color(0, 100, 90, False) == N_YELLOW


def test_z_color_alternate_palette():
    assert z_color(0, 100, 10, True) == WHITE
    assert z_color(0, 100, 80, True) == N_BLUE


def test_z_color_flat_map_uses_top_colour():
    assert z_color(0, 0, 0, False) == N_YELLOW
    assert z_color(0, 0, 0, True) == N_BLUE