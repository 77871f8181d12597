"""Points and the colour arithmetic used when drawing lines."""

from __future__ import annotations

from dataclasses import dataclass

RS = 16
GS = 8
BM = 0xFF

WHITE = 0xFFFFFF
N_BLUE = 0x1F51FF
N_ORANGE = 0xFF5F1F
N_PINK = 0xFF10F0
N_YELLOW = 0xFFFF33


@dataclass
class Point:
    """A grid or screen point with a height and a colour."""

    x: int
    y: int
    z: int = 0
    color: int = 0


def calc_percentage(start: int, end: int, value: int) -> float:
    """Return where ``value`` lies between ``start`` and ``end`` (1.0 if they match)."""
    span = end - start
    if not span:
        return 1.0
    return (value - start) / span


def calc_light(start: int, end: int, percentage: float) -> int:
    """Blend two channel intensities, truncating toward zero."""
    return int((1 - percentage) * start + percentage * end)


def calc_color(current: Point, start: Point, end: Point, delta: Point) -> int:
    """Interpolate the colour at ``current`` on the line from ``start`` to ``end``."""
    if current.color == end.color:
        return current.color
    if delta.x > delta.y:
        percentage = calc_percentage(start.x, end.x, current.x)
    else:
        percentage = calc_percentage(start.y, end.y, current.y)
    r = calc_light((start.color >> RS) & BM, (end.color >> RS) & BM, percentage)
    g = calc_light((start.color >> GS) & BM, (end.color >> GS) & BM, percentage)
    b = calc_light(start.color & BM, end.color & BM, percentage)
    return (r << RS) | (g << GS) | b


def z_color(min_z: int, max_z: int, height: int, alternate: bool) -> int:
    """Pick a palette colour for a height within the map's range."""
    percentage = calc_percentage(min_z, max_z, height)
    if alternate:
        return WHITE if percentage < 0.7 else N_BLUE
    if percentage < 0.1:
        return N_ORANGE
    if percentage < 0.5:
        return N_PINK
    if percentage < 0.7:
        return WHITE
    return N_YELLOW