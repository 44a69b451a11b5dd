"""Actors placed in the world and the manager that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vec2:
    """A two-component vector used for positions and sizes."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Actor:
    """Something in the world with a position and a size."""

    pos: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=Vec2)


class ObjectManager:
    """Holds the actors of the game in the order they were added."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []

    def add_new_actor(self, actor: Actor) -> None:
        """Add an actor to the world."""
        self.actors.append(actor)

    def __len__(self) -> int:
        return len(self.actors)

    def __iter__(self):
        return iter(self.actors)