"""Keyboard and quit tracking from pygame events."""

from __future__ import annotations

import pygame


class InputManager:
    """Keeps the pressed state of keys by scancode and whether quit was asked for."""

    def __init__(self) -> None:
        self._keys: dict[int, bool] | None = None
        self._quit_requested = False

    def init(self) -> None:
        """Start tracking input."""
        self._keys = {}

    def _require_init(self) -> dict[int, bool]:
        if self._keys is None:
            raise RuntimeError("InputManager not found!!")
        return self._keys

    def update(self) -> None:
        """Drain the pygame event queue and record what it holds."""
        self._require_init()
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Record a single event."""
        keys = self._require_init()
        if event.type == pygame.QUIT:
            self._quit_requested = True
        elif event.type == pygame.KEYDOWN:
            keys[event.scancode] = True
        elif event.type == pygame.KEYUP:
            keys[event.scancode] = False

    def is_key_down(self, scancode: int) -> bool:
        """Whether the key with this scancode is held."""
        return self._require_init().get(scancode, False)

    @property
    def quit_requested(self) -> bool:
        """Whether a quit event has been seen."""
        return self._quit_requested

    def destroy(self) -> None:
        """Stop tracking input."""
        self._require_init()
        self._keys = None