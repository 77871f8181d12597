"""Command entry point and the interactive window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .errors import COLOR_ERR_MSG, RESET_ERR_MSG, ExitStatus, FdfError, check_filename
from .mapfile import HeightMap, load_map
from .raster import Canvas, menu_lines, render
from .view import WINDOW_HEIGHT, WINDOW_WIDTH, Key, View

WINDOW_TITLE = "FDF"


def _key_table(pygame) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_r: Key.R,
        pygame.K_TAB: Key.TAB,
        pygame.K_PLUS: Key.PLUS,
        pygame.K_EQUALS: Key.PLUS,
        pygame.K_KP_PLUS: Key.PLUS,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_KP_MINUS: Key.MINUS,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_1: Key.KEY_1,
        pygame.K_2: Key.KEY_2,
        pygame.K_3: Key.KEY_3,
        pygame.K_4: Key.KEY_4,
        pygame.K_5: Key.KEY_5,
        pygame.K_6: Key.KEY_6,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_c: Key.C,
    }


def _to_rgb(canvas: Canvas) -> bytes:
    data = canvas.buffer
    r, g, b = (1, 2, 3) if canvas.big_endian else (2, 1, 0)
    out = bytearray(canvas.width * canvas.height * 3)
    out[0::3] = data[r::4]
    out[1::3] = data[g::4]
    out[2::3] = data[b::4]
    return bytes(out)


def _draw(pygame, screen, font, canvas: Canvas, view: View) -> None:
    render(canvas, view)
    image = pygame.image.frombuffer(_to_rgb(canvas), (canvas.width, canvas.height), "RGB")
    screen.blit(image, (0, 0))
    for x, y, color, text in menu_lines():
        label = font.render(text, True, ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        screen.blit(label, (x, y - label.get_height()))
    pygame.display.flip()


def run(height_map: HeightMap) -> ExitStatus:
    """Open the viewer window for a map and run until it is closed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 20)
    except pygame.error as exc:
        pygame.quit()
        raise FdfError(ExitStatus.MLX_ERROR) from exc
    try:
        view = View(height_map, WINDOW_WIDTH, WINDOW_HEIGHT)
        canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
        keys = _key_table(pygame)
        clock = pygame.time.Clock()
        _draw(pygame, screen, font, canvas, view)
        while True:
            dirty = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return ExitStatus.SUCCESS
                if event.type == pygame.KEYDOWN:
                    key = keys.get(event.key)
                    if key is None:
                        dirty = True
                        continue
                    if not view.handle_key(key):
                        return ExitStatus.SUCCESS
                    dirty = True
            if dirty:
                _draw(pygame, screen, font, canvas, view)
            clock.tick(60)
    finally:
        pygame.quit()


def _report(status: int, message: str) -> int:
    print(f"{COLOR_ERR_MSG}{message}{RESET_ERR_MSG}")
    return int(status)


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and show it; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 1:
            raise FdfError(ExitStatus.INVALID_ARGS_ERROR)
        filename = check_filename(args[0])
        height_map = load_map(filename)
        status = run(height_map)
    except FdfError as error:
        return _report(error.status, error.message)
    return _report(status, FdfError(status).message)


if __name__ == "__main__":
    sys.exit(main())