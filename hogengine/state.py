"""Game states and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GameState(ABC):
    """One stage of a game: loaded, initialised, updated every frame, destroyed."""

    @abstractmethod
    def load(self) -> None:
        """Load the resources the state needs."""

    @abstractmethod
    def init(self) -> None:
        """Set up the state after loading."""

    @abstractmethod
    def update(self) -> None:
        """Advance the state by one frame."""

    @abstractmethod
    def destroy(self) -> None:
        """Release whatever the state holds."""


class StateManager:
    """Runs the current game state and switches to a queued one between frames."""

    def __init__(self) -> None:
        self._current: GameState | None = None
        self._next: GameState | None = None

    @property
    def current_state(self) -> GameState | None:
        """The state that is running, if any."""
        return self._current

    def set_next_state(self, state: GameState | None) -> None:
        """Queue a state to replace the current one on the next update."""
        self._next = state

    def update(self) -> None:
        """Switch to a queued state if there is one, then update the current state."""
        if self._next is not None:
            if self._current is not None:
                self._current.destroy()
            self._current, self._next = self._next, None
            self._current.load()
            self._current.init()
        if self._current is not None:
            self._current.update()

    def destroy(self) -> None:
        """Destroy the current state and forget it."""
        if self._current is not None:
            self._current.destroy()
            self._current = None