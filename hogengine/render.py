"""Transforms and the renderer that draws the textured sprite."""

from __future__ import annotations

import numpy as np
import pygame


class TextureError(RuntimeError):
    """Raised when a texture cannot be loaded."""


def ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Orthographic projection with near -1 and far 1."""
    m = np.identity(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -1.0
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    return m


def translate(x: float, y: float, z: float) -> np.ndarray:
    """Translation matrix."""
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


def scale(x: float, y: float, z: float) -> np.ndarray:
    """Scaling matrix."""
    return np.diag([x, y, z, 1.0])


def model_to_ndc(
    x: float, y: float, width: float, height: float, screen_width: float, screen_height: float
) -> np.ndarray:
    """Map a unit quad centred on the origin to normalised device coordinates."""
    projection = ortho(-screen_width / 2, screen_width / 2, -screen_height / 2, screen_height / 2)
    return projection @ translate(x, y, 1.0) @ scale(width, height, 1.0)


def _to_byte(value: float) -> int:
    return round(min(max(value, 0.0), 1.0) * 255)


class RenderManager:
    """Draws a textured quad onto the window surface."""

    def __init__(self) -> None:
        self._window: pygame.Surface | None = None
        self.screen_width = 0.0
        self.screen_height = 0.0
        self.sprite_rect = (100.0, 0.0, 1100.0, 1466.0)
        self.color = (1.0, 1.0, 1.0, 1.0)
        self._texture: pygame.Surface | None = None
        self._scaled: pygame.Surface | None = None
        self._transform: np.ndarray | None = None

    def _require_window(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("RenderManager has not been initialised")
        return self._window

    def init(self, window: pygame.Surface, width: float, height: float) -> None:
        """Attach the renderer to a window surface of the given size."""
        if window is None:
            raise RuntimeError("no window to render into")
        self._window = window
        self.screen_width = float(width)
        self.screen_height = float(height)
        self._transform = None

    def clear_background(self, r: float, g: float, b: float, a: float) -> None:
        """Fill the window with a colour given as components from 0 to 1."""
        self._require_window().fill(tuple(_to_byte(c) for c in (r, g, b, a)))

    def load_texture(self, path) -> None:
        """Load the image used as the sprite's texture."""
        try:
            texture = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"Failed to load texture: {path}") from exc
        self._texture = texture
        self._scaled = None

    def update(self) -> None:
        """Recompute the sprite's transform from its rectangle and the screen size."""
        x, y, w, h = self.sprite_rect
        self._transform = model_to_ndc(x, y, w, h, self.screen_width, self.screen_height)

    def _screen_rect(self) -> pygame.Rect:
        if self._transform is None:
            self.update()
        corners = np.array([[-0.5, -0.5, 0.0, 1.0], [0.5, 0.5, 0.0, 1.0]]).T
        ndc = self._transform @ corners
        xs = (ndc[0] + 1.0) / 2.0 * self.screen_width
        ys = (1.0 - ndc[1]) / 2.0 * self.screen_height
        left, top = round(float(xs.min())), round(float(ys.min()))
        right, bottom = round(float(xs.max())), round(float(ys.max()))
        return pygame.Rect(left, top, right - left, bottom - top)

    def _sized_texture(self, size: tuple[int, int]) -> pygame.Surface:
        if self._scaled is None or self._scaled.get_size() != size:
            texture = self._texture
            if texture.get_bitsize() >= 24:
                scaled = pygame.transform.smoothscale(texture, size)
            else:
                scaled = pygame.transform.scale(texture, size)
            if any(c != 1.0 for c in self.color):
                scaled = scaled.copy()
                scaled.fill(
                    tuple(_to_byte(c) for c in self.color), special_flags=pygame.BLEND_RGBA_MULT
                )
            self._scaled = scaled
        return self._scaled

    def draw(self) -> None:
        """Draw the textured sprite, if a texture has been loaded."""
        window = self._require_window()
        if self._texture is None:
            return
        rect = self._screen_rect()
        if rect.width <= 0 or rect.height <= 0:
            return
        window.blit(self._sized_texture(rect.size), rect.topleft)

    def swap_window(self) -> None:
        """Show what has been drawn."""
        self._require_window()
        pygame.display.flip()

    def destroy(self) -> None:
        """Release the texture and detach from the window."""
        self._require_window()
        self._texture = None
        self._scaled = None
        self._transform = None
        self._window = None