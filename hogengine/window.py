"""The application window."""

from __future__ import annotations

import logging

import pygame

log = logging.getLogger(__name__)


class WindowManager:
    """Opens, titles and closes the pygame window."""

    def __init__(self) -> None:
        self._window: pygame.Surface | None = None

    def init(self, title: str, width: int, height: int, vsync: int) -> bool:
        """Open a window; return whether it could be created."""
        pygame.display.init()
        flags = pygame.DOUBLEBUF | (pygame.SCALED if vsync else 0)
        try:
            try:
                window = pygame.display.set_mode((width, height), flags, vsync=int(vsync))
            except pygame.error:
                if not vsync:
                    raise
                window = pygame.display.set_mode((width, height), pygame.DOUBLEBUF)
        except pygame.error as exc:
            log.error("Could not create window: %s", exc)
            self._window = None
            return False
        self._window = window
        pygame.display.set_caption(title)
        return True

    def set_title(self, title: str) -> None:
        """Change the window title."""
        if self._window is None:
            raise RuntimeError("no window has been created")
        pygame.display.set_caption(title)

    @property
    def current_window(self) -> pygame.Surface | None:
        """The window surface, or None before a window exists."""
        return self._window

    def destroy(self) -> None:
        """Close the window."""
        pygame.display.quit()
        self._window = None