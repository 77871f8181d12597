from unittest import mock

import pygame
import pytest

from fdfview.app import main, run
from fdfview.errors import ExitStatus
from fdfview.mapfile import parse_lines


@pytest.mark.parametrize("argv", [[], ["one.fdf", "two.fdf"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == ExitStatus.INVALID_ARGS_ERROR
    assert "INVALID_ARGS_ERROR" in capsys.readouterr().out


def test_bad_extension(capsys):
    assert main(["map.txt"]) == ExitStatus.INVALID_FILENAME_ERROR
    assert "must end with .fdf" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == ExitStatus.FILE_OPEN_ERROR
    assert "FILE_OPEN_ERROR" in capsys.readouterr().out


def test_empty_map(tmp_path, capsys):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    assert main([str(path)]) == ExitStatus.MAP_EMPTY_ERROR
    assert "MAP_EMPTY_ERROR" in capsys.readouterr().out


def test_run_closes_on_escape(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with mock.patch("pygame.event.get", return_value=events):
        status = run(parse_lines(["0 1\n", "1 0\n"]))
    assert status == ExitStatus.SUCCESS


def test_main_success_on_window_close(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "small.fdf"
    path.write_text("0 0 0\n0 10,0xff0000 0\n0 0 0\n")
    events = [pygame.event.Event(pygame.QUIT)]
    with mock.patch("pygame.event.get", return_value=events):
        status = main([str(path)])
    assert status == ExitStatus.SUCCESS
    assert "SUCCESS: The program ran successfully" in capsys.readouterr().out