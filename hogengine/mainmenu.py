"""A sample state that shows the frame rate and quits after a while."""

from __future__ import annotations

from .engine import get_dt, get_fps, run, set_window_title, shut_down
from .state import GameState


class MainMenu(GameState):
    """Shows the frame rate in the title and stops the game after a time limit."""

    def __init__(self, stage_limit: float = 30.0) -> None:
        self.stage_time = 0.0
        self.stage_limit = stage_limit

    def load(self) -> None:
        """Start the stage clock from zero."""
        self.stage_time = 0.0

    def init(self) -> None:
        """Store the time limit as a float number of seconds."""
        self.stage_limit = float(self.stage_limit)

    def update(self) -> None:
        """Count time, show the frame rate after a second, quit past the limit."""
        self.stage_time += get_dt()
        if self.stage_time > 1.0:
            set_window_title(f"FPS: {int(get_fps())}")
        if self.stage_time > self.stage_limit:
            shut_down()

    def destroy(self) -> None:
        """Reset the stage clock."""
        self.stage_time = 0.0


def main(argv=None) -> int:
    """Run the sample game."""
    run("My new Game Engine", 1600, 900, 100, 1, MainMenu())
    return 0