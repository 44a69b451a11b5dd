"""A small 2D game engine with game states, input handling and sprite rendering."""

__version__ = "0.1.0"
__all__ = ["engine", "input", "mainmenu", "objects", "render", "state", "window"]