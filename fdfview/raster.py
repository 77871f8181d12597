"""Pixel buffer, line rasterising and drawing of a whole height map."""

from __future__ import annotations

from collections.abc import Iterator

from .color import GS, RS, BM, WHITE, Point, calc_color
from .view import View

AS = 24
CYAN = 0x00FFFF
BYTES_PER_PIXEL = 4


class Canvas:
    """A 32-bit pixel buffer laid out like an X image."""

    def __init__(self, width: int, height: int, big_endian: bool = False) -> None:
        self.width = width
        self.height = height
        self.big_endian = big_endian
        self.bpp = BYTES_PER_PIXEL * 8
        self.line_length = width * BYTES_PER_PIXEL
        self.buffer = bytearray(self.line_length * height)

    def clear(self) -> None:
        """Set every byte of the buffer to zero."""
        self.buffer[:] = bytes(len(self.buffer))

    def _offset(self, x: int, y: int) -> int:
        return y * self.line_length + x * BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at ``(x, y)``; points outside the canvas are ignored."""
        if x >= self.width or y >= self.height or x < 0 or y < 0:
            return
        a = (color >> AS) & BM
        r = (color >> RS) & BM
        g = (color >> GS) & BM
        b = color & BM
        offset = self._offset(x, y)
        if self.big_endian:
            self.buffer[offset:offset + 4] = bytes((a, r, g, b))
        else:
            self.buffer[offset:offset + 4] = bytes((b, g, r, a))

    def pixel(self, x: int, y: int) -> int:
        """Return the colour stored at ``(x, y)``."""
        if x >= self.width or y >= self.height or x < 0 or y < 0:
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        offset = self._offset(x, y)
        raw = self.buffer[offset:offset + 4]
        return int.from_bytes(raw, "big" if self.big_endian else "little")


def line_points(start: Point, end: Point) -> Iterator[Point]:
    """Yield the points of a Bresenham line from ``start`` up to, not including, ``end``."""
    delta = Point(abs(end.x - start.x), -abs(end.y - start.y))
    sign_x = 1 if start.x < end.x else -1
    sign_y = 1 if start.y < end.y else -1
    error = delta.x + delta.y
    current = Point(start.x, start.y, start.z, start.color)
    while current.x != end.x or current.y != end.y:
        color = calc_color(current, start, end, delta)
        yield Point(current.x, current.y, current.z, color)
        doubled = error * 2
        if doubled > delta.y:
            error += delta.y
            current.x += sign_x
        if doubled < delta.x:
            error += delta.x
            current.y += sign_y


def draw_line(canvas: Canvas, start: Point, end: Point) -> None:
    """Draw a colour-graded line onto the canvas."""
    for point in line_points(start, end):
        canvas.put_pixel(point.x, point.y, point.color)


def render(canvas: Canvas, view: View) -> None:
    """Clear the canvas and draw the wireframe of the view's map onto it."""
    canvas.clear()
    if not view.zoom:
        return
    height_map = view.map
    for y in range(height_map.height):
        for x in range(height_map.width):
            here = view.transform_point(view.create_point(x, y))
            if x < height_map.width - 1:
                right = view.transform_point(view.create_point(x + 1, y))
                draw_line(canvas, here, right)
            if y < height_map.height - 1:
                below = view.transform_point(view.create_point(x, y + 1))
                draw_line(canvas, here, below)


_MENU = (
    (25, 30, WHITE, "CONSTROLS:"),
    (40, 20, CYAN, "'R' : RESET"),
    (40, 20, CYAN, "'W' : MOVE DOWN"),
    (40, 20, CYAN, "'A' : MOVE RIGHT"),
    (40, 20, CYAN, "'D' : MOVE LEFT"),
    (40, 20, CYAN, "'C' : CHANGE COLOR"),
    (40, 20, CYAN, "'+'/'-' : ZOOM IN/OUT"),
    (40, 20, CYAN, "'UP'/'DOWN' : FLATTEN"),
    (25, 30, WHITE, "ROTATE VIEW:"),
    (40, 20, CYAN, "'1'/'2' : X-AXIS"),
    (40, 20, CYAN, "'3'/'4' : Y-AXIS"),
    (40, 20, CYAN, "'5'/'6' : Z-AXIS"),
    (25, 30, WHITE, "TOGGLE PERSPECTIVE:"),
    (40, 20, CYAN, "'TAB' :  ISOMETRIC/PARALLEL"),
    (25, 30, WHITE, "EXIT:"),
    (40, 20, CYAN, "'ESC'/'(X)' : CLOSE WINDOW"),
)


def menu_lines() -> list[tuple[int, int, int, str]]:
    """Return the control menu as ``(x, y, color, text)`` entries."""
    lines = []
    vertical = 20
    for x, step, color, text in _MENU:
        vertical += step
        lines.append((x, vertical, color, text))
    return lines