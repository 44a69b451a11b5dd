from unittest import mock

import pygame
import pytest

from hogengine.window import WindowManager


@pytest.fixture
def display():
    surface = pygame.Surface((16, 9))
    with mock.patch("pygame.display.init"), mock.patch(
        "pygame.display.set_mode", return_value=surface
    ) as set_mode, mock.patch("pygame.display.set_caption") as set_caption, mock.patch(
        "pygame.display.quit"
    ) as quit_display:
        yield surface, set_mode, set_caption, quit_display


def test_init_creates_window(display):
    surface, set_mode, set_caption, _ = display
    manager = WindowManager()
    assert manager.init("My new Game Engine", 1600, 900, 1) is True
    assert manager.current_window is surface
    assert set_mode.call_args.args[0] == (1600, 900)
    set_caption.assert_called_with("My new Game Engine")


def test_init_failure_returns_false():
    with mock.patch("pygame.display.init"), mock.patch(
        "pygame.display.set_mode", side_effect=pygame.error("no video")
    ):
        manager = WindowManager()
        assert manager.init("t", 10, 10, 1) is False
        assert manager.current_window is None


def test_vsync_failure_falls_back(display):
    surface, set_mode, _, _ = display
    set_mode.side_effect = [pygame.error("vsync"), surface]
    manager = WindowManager()
    assert manager.init("t", 10, 10, 1) is True
    assert set_mode.call_count == 2


def test_set_title(display):
    surface, _, set_caption, _ = display
    manager = WindowManager()
    assert manager.init("t", 10, 10, 0) is True
    manager.set_title("FPS: 60")
    assert set_caption.call_args.args[0] == "FPS: 60"
    assert manager.current_window is surface


def test_set_title_without_window_raises():
    with pytest.raises(RuntimeError):
        WindowManager().set_title("x")


def test_destroy_closes_window(display):
    _, _, _, quit_display = display
    manager = WindowManager()
    manager.init("t", 10, 10, 0)
    manager.destroy()
    assert manager.current_window is None
    assert quit_display.call_count == 1