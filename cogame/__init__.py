"""Scene and game-object framework with the pieces of a side-scrolling streaming game."""

__version__ = "4.1.0"