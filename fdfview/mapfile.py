"""Reading height maps from ``.fdf`` files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from .errors import ExitStatus, FdfError

WHITE = 0xFFFFFF

_HEX_DIGITS = "0123456789abcdef"
_C_SPACE = " \t\n\v\f\r"


@dataclass
class HeightMap:
    """A grid of heights with a colour for every cell."""

    width: int
    height: int
    z: list[list[int]] = field(default_factory=list)
    colors: list[list[int]] = field(default_factory=list)
    min_z: int = 0
    max_z: int = 0
    iscolor: bool = False

    def record_z(self, z: int) -> int:
        """Widen the known height range to include ``z`` and return it."""
        if z < self.min_z:
            self.min_z = z
        if z > self.max_z:
            self.max_z = z
        return z


def _split(line: str) -> list[str]:
    return [token for token in line.rstrip("\r\n").split(" ") if token]


def _atoi(text: str) -> int:
    text = text.lstrip(_C_SPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for char in text:
        if not char.isdigit() or not char.isascii():
            break
        value = value * 10 + int(char)
    return sign * value


def _atoi_hex(text: str) -> int:
    value = 0
    for char in text.lower():
        digit = _HEX_DIGITS.find(char)
        if digit < 0:
            break
        value = value * 16 + digit
    return value


def find_width(tokens: list[str] | None) -> int:
    """Return the number of tokens in the first row; raise if there are none."""
    if not tokens:
        raise FdfError(ExitStatus.MAP_EMPTY_ERROR)
    return len(tokens)


def convert_hex_color(token: str) -> int | None:
    """Return the colour written after ``x`` in a token, or None if it has none."""
    rest = token.lstrip("0123456789-+,")
    if rest.startswith("x"):
        return _atoi_hex(rest[1:])
    return None


def parse_lines(lines: Iterable[str]) -> HeightMap:
    """Build a height map from the lines of a map file."""
    rows = list(lines)
    first = _split(rows[0]) if rows else None
    width = find_width(first)
    height_map = HeightMap(width=width, height=len(rows))
    for line in rows:
        tokens = _split(line)
        if len(tokens) < 2:
            raise FdfError(ExitStatus.INVALID_MAP_ERROR)
        z_row = [0] * width
        color_row = [0] * width
        for column, token in enumerate(tokens[:width]):
            z_row[column] = height_map.record_z(_atoi(token))
            color = convert_hex_color(token)
            if color is None:
                color_row[column] = WHITE
            else:
                height_map.iscolor = True
                color_row[column] = color
        height_map.z.append(z_row)
        height_map.colors.append(color_row)
    return height_map


def load_map(path: Union[str, PathLike]) -> HeightMap:
    """Read and parse a map file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise FdfError(ExitStatus.FILE_OPEN_ERROR) from exc
    return parse_lines(data.decode("latin-1").splitlines(keepends=True))