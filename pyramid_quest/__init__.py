"""A terminal text adventure through an unexplored pyramid, with five endings to unlock."""

__version__ = "1.0.0"