from unittest import mock

import pygame
import pytest

from hogengine.input import InputManager


def key_event(kind, scancode):
    return pygame.event.Event(kind, scancode=scancode)


@pytest.fixture
def manager():
    m = InputManager()
    m.init()
    return m


def test_key_down_then_up(manager):
    manager.handle_event(key_event(pygame.KEYDOWN, 4))
    assert manager.is_key_down(4) is True
    manager.handle_event(key_event(pygame.KEYUP, 4))
    assert manager.is_key_down(4) is False


def test_unknown_key_is_up(manager):
    assert manager.is_key_down(22) is False


def test_quit_event_sets_flag(manager):
    assert manager.quit_requested is False
    manager.handle_event(pygame.event.Event(pygame.QUIT))
    assert manager.quit_requested is True


def test_other_events_are_ignored(manager):
    manager.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2)))
    assert manager.quit_requested is False
    assert manager.is_key_down(4) is False


def test_update_reads_event_queue(manager):
    events = [key_event(pygame.KEYDOWN, 7), pygame.event.Event(pygame.QUIT)]
    with mock.patch("pygame.event.get", return_value=events):
        manager.update()
    assert manager.is_key_down(7) is True
    assert manager.quit_requested is True


def test_use_before_init_raises():
    m = InputManager()
    with pytest.raises(RuntimeError):
        m.is_key_down(4)
    with pytest.raises(RuntimeError):
        m.handle_event(key_event(pygame.KEYDOWN, 4))


def test_destroy_twice_raises(manager):
    manager.destroy()
    with pytest.raises(RuntimeError):
        manager.destroy()