"""The engine's main loop, frame timing and the functions a game calls."""

from __future__ import annotations

import logging
import time
from typing import Callable

from .input import InputManager
from .objects import ObjectManager
from .render import RenderManager, TextureError
from .state import GameState, StateManager
from .window import WindowManager

log = logging.getLogger(__name__)

TEXTURE_PATH = "Assets/yujin.png"
CLEAR_COLOR = (1.0, 1.0, 1.0, 1.0)


class HogEngine:
    """Owns the managers, runs the frame loop and keeps frame timing."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self.input_manager = InputManager()
        self.window_manager = WindowManager()
        self.state_manager = StateManager()
        self.render_manager = RenderManager()
        self.object_manager = ObjectManager()
        self.last_frame = clock()
        self.target_frame_time = 0.0
        self.fps = 0.0
        self.dt = 0.0
        self.should_quit = False
        self._frames = 0
        self._accum = 0.0

    def frame_end(self) -> None:
        """Wait out the rest of the frame budget, then update dt and fps."""
        frame_end = self._clock()
        duration = frame_end - self.last_frame
        if self.target_frame_time > 0.0 and duration < self.target_frame_time:
            self._sleep(self.target_frame_time - duration)
            frame_end = self._clock()
            duration = frame_end - self.last_frame

        self.dt = duration
        self.last_frame = frame_end

        self._frames += 1
        self._accum += self.dt
        if self._accum >= 1.0:
            self.fps = self._frames / self._accum
            self._frames = 0
            self._accum = 0.0

    def update(self) -> None:
        """Run frames until a quit is asked for, then tear everything down."""
        while not self.should_quit:
            self.render_manager.clear_background(*CLEAR_COLOR)
            self.input_manager.update()
            self.state_manager.update()
            self.render_manager.update()
            self.render_manager.draw()
            self.render_manager.swap_window()

            if self.input_manager.quit_requested:
                self.should_quit = True
            self.frame_end()
        self.destroy()

    def destroy(self) -> None:
        """Shut down every manager."""
        self.input_manager.destroy()
        self.render_manager.destroy()
        self.window_manager.destroy()
        self.state_manager.destroy()
        self.object_manager.actors.clear()


_engine = HogEngine()


def run(
    title: str, width: int, height: int, target_fps: int, vsync: int, target_state: GameState
) -> None:
    """Open a window and run the game from the given state until it quits."""
    global _engine
    if target_fps == 0:
        raise ValueError("target_fps must not be zero")
    engine = _engine
    try:
        engine.input_manager.init()
        engine.window_manager.init(title, width, height, vsync)
        engine.render_manager.init(engine.window_manager.current_window, width, height)
        engine.state_manager.set_next_state(target_state)
        engine.target_frame_time = 1.0 / target_fps

        try:
            engine.render_manager.load_texture(TEXTURE_PATH)
        except TextureError as exc:
            log.error("%s", exc)
        engine.update()
    finally:
        _engine = HogEngine()


def set_next_game_state(state: GameState) -> None:
    """Switch to another game state at the start of the next frame."""
    _engine.state_manager.set_next_state(state)


def set_window_title(title: str) -> None:
    """Change the title of the game window."""
    _engine.window_manager.set_title(title)


def get_fps() -> float:
    """Frames per second measured over the last full second."""
    return _engine.fps


def get_dt() -> float:
    """Seconds the previous frame took."""
    return _engine.dt


def shut_down() -> None:
    """Stop the game after the current frame."""
    _engine.should_quit = True