"""View state for a height map: zoom, shift, rotation, projection and palette."""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum, auto

from .color import Point, z_color
from .mapfile import HeightMap

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080

FF = 0.01
FF_MAX = 10
ROT = 0.05
TRANS = 10
ZOOM = 1
SF = 2
INT_MAX = 2**31 - 1

_ISO_ANGLE = 0.52359877559


class Key(Enum):
    """Actions the viewer reacts to."""

    ESC = auto()
    R = auto()
    TAB = auto()
    PLUS = auto()
    MINUS = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    UP = auto()
    DOWN = auto()
    C = auto()


_TRANS_KEYS = {Key.W, Key.A, Key.S, Key.D}
_ROT_KEYS = {Key.KEY_1, Key.KEY_2, Key.KEY_3, Key.KEY_4, Key.KEY_5, Key.KEY_6}
_ZOOM_KEYS = {Key.PLUS, Key.MINUS}
_ALT_KEYS = {Key.UP, Key.DOWN}


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def rotate_x(angle: float, y: int, z: int) -> tuple[int, int]:
    """Rotate ``(y, z)`` around the x axis, truncating to integers."""
    new_y = int(y * math.cos(angle) + z * math.sin(angle))
    new_z = int(-y * math.sin(angle) + z * math.cos(angle))
    return new_y, new_z


def rotate_y(angle: float, x: int, z: int) -> tuple[int, int]:
    """Rotate ``(x, z)`` around the y axis, truncating to integers."""
    new_x = int(x * math.cos(angle) + z * math.sin(angle))
    new_z = int(-x * math.sin(angle) + z * math.cos(angle))
    return new_x, new_z


def rotate_z(angle: float, x: int, y: int) -> tuple[int, int]:
    """Rotate ``(x, y)`` around the z axis, truncating to integers."""
    new_x = int(x * math.cos(angle) - y * math.sin(angle))
    new_y = int(x * math.sin(angle) + y * math.cos(angle))
    return new_x, new_y


def isometric(x: int, y: int, z: int) -> tuple[int, int]:
    """Project ``(x, y, z)`` isometrically onto the screen plane."""
    new_x = int((x - y) * math.cos(_ISO_ANGLE))
    new_y = int(-z + (x + y) * math.sin(_ISO_ANGLE))
    return new_x, new_y


class View:
    """Everything needed to place a height map's points on the screen."""

    def __init__(
        self,
        height_map: HeightMap,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.map = height_map
        self.width = width
        self.height = height
        self.alternate_palette = False
        self.zoom = 0
        self.shift_x = 0
        self.shift_y = 0
        self.isometric = True
        self.ff = 1.0
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.rot_z = 0.0
        self.reset()

    def reset(self) -> None:
        """Restore zoom, shift, projection, flattening and rotation defaults."""
        self.zoom = max(
            self.width // self.map.width // 2,
            self.height // self.map.height // 2,
        )
        self.shift_x = self.width // 2
        self.shift_y = _trunc_div(self.height - self.map.height * self.zoom, 2)
        self.isometric = True
        self.ff = 1.0
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.rot_z = 0.0

    def adjust_alt(self, key: Key) -> None:
        """Raise or lower the flattening factor within its limits."""
        if key is Key.UP and self.ff < FF_MAX:
            self.ff += FF
        if key is Key.DOWN and self.ff > 0:
            self.ff -= FF

    def adjust_trans(self, key: Key) -> None:
        """Shift the drawing for a movement key."""
        if key is Key.W:
            self.shift_y += TRANS
        if key is Key.A:
            self.shift_x += TRANS
        if key is Key.S:
            self.shift_y -= TRANS
        if key is Key.D:
            self.shift_x -= TRANS

    def adjust_zoom(self, key: Key) -> None:
        """Zoom in or out, never below zero nor above the integer limit."""
        if key is Key.MINUS and self.zoom > 0:
            self.zoom -= ZOOM
        if key is Key.PLUS and self.zoom < INT_MAX:
            self.zoom += ZOOM

    def adjust_rot(self, key: Key) -> None:
        """Turn the map around one of its axes."""
        if key is Key.KEY_1:
            self.rot_x += ROT
        if key is Key.KEY_2:
            self.rot_x -= ROT
        if key is Key.KEY_3:
            self.rot_y += ROT
        if key is Key.KEY_4:
            self.rot_y -= ROT
        if key is Key.KEY_5:
            self.rot_z += ROT
        if key is Key.KEY_6:
            self.rot_z -= ROT

    def toggle_projection(self) -> None:
        """Switch between isometric and parallel projection."""
        self.isometric = not self.isometric

    def toggle_palette(self) -> None:
        """Switch between the two height palettes."""
        self.alternate_palette = not self.alternate_palette

    def create_point(self, x: int, y: int) -> Point:
        """Return the map point at grid position ``(x, y)`` with its colour."""
        z = self.map.z[y][x]
        if self.map.iscolor:
            color = self.map.colors[y][x]
        else:
            color = z_color(self.map.min_z, self.map.max_z, z, self.alternate_palette)
        return Point(x, y, z, color)

    def transform_point(self, point: Point) -> Point:
        """Scale, rotate, project and shift a point onto the screen."""
        x = point.x * self.zoom
        y = point.y * self.zoom
        z = int(point.z * (_trunc_div(self.zoom, SF) * self.ff))
        y, z = rotate_x(self.rot_x, y, z)
        x, z = rotate_y(self.rot_y, x, z)
        x, y = rotate_z(self.rot_z, x, y)
        if self.isometric:
            x, y = isometric(x, y, z)
        return replace(point, x=x + self.shift_x, y=y + self.shift_y, z=z)

    def handle_key(self, key: Key) -> bool:
        """Apply a key to the view; return False when the viewer should close."""
        if key is Key.ESC:
            return False
        if key is Key.R:
            self.reset()
        if key is Key.TAB:
            self.toggle_projection()
        if key in _ZOOM_KEYS:
            self.adjust_zoom(key)
        if key in _TRANS_KEYS:
            self.adjust_trans(key)
        if key in _ROT_KEYS:
            self.adjust_rot(key)
        if key in _ALT_KEYS:
            self.adjust_alt(key)
        if key is Key.C:
            self.toggle_palette()
        return True