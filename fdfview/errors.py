"""Exit statuses, error messages and the map file name check."""

from __future__ import annotations

from enum import IntEnum

COLOR_ERR_MSG = "\033[33m"
RESET_ERR_MSG = "\033[0m"

MAP_EXTENSION = ".fdf"


class ExitStatus(IntEnum):
    """Process exit status for every way the program can end."""

    SUCCESS = 0
    INVALID_ARGS_ERROR = 1
    FILE_OPEN_ERROR = 2
    MEM_ALLOC_ERROR = 3
    MAP_EMPTY_ERROR = 4
    LIBFT_ERROR = 5
    MLX_ERROR = 6
    INVALID_FILENAME_ERROR = 7
    INVALID_MAP_ERROR = 8


_MESSAGES = {
    ExitStatus.INVALID_ARGS_ERROR: "INVALID_ARGS_ERROR: { Usage: ./fdf <map>.fdf }",
    ExitStatus.FILE_OPEN_ERROR: "FILE_OPEN_ERROR: Failed to open file",
    ExitStatus.MEM_ALLOC_ERROR: "MEM_ALLOC_ERROR: Failed in allocating memory",
    ExitStatus.MAP_EMPTY_ERROR: "MAP_EMPTY_ERROR: Map is empty...just like your soul",
    ExitStatus.LIBFT_ERROR: "LIBFT_ERROR: Your libft function failed",
    ExitStatus.MLX_ERROR: "MLX_ERROR: Your minilibx function failed",
    ExitStatus.SUCCESS: "SUCCESS: The program ran successfully",
    ExitStatus.INVALID_FILENAME_ERROR: (
        "INVALID_FILENAME_ERROR: The filename must end with .fdf"
    ),
}

_FALLBACK_MESSAGE = "That's not a valid map!"


def message_for(status: int) -> str:
    """Return the message shown for an exit status."""
    try:
        key = ExitStatus(status)
    except ValueError:
        return _FALLBACK_MESSAGE
    return _MESSAGES.get(key, _FALLBACK_MESSAGE)


class FdfError(Exception):
    """Raised when the program has to stop with a given exit status."""

    def __init__(self, status: int) -> None:
        self.status = status
        self.message = message_for(status)
        super().__init__(self.message)


def check_filename(filename: str) -> str:
    """Return the name if it ends with ``.fdf``, else raise FdfError."""
    if len(filename) < len(MAP_EXTENSION) or not filename.endswith(MAP_EXTENSION):
        raise FdfError(ExitStatus.INVALID_FILENAME_ERROR)
    return filename