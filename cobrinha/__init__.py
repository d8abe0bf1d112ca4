"""A snake arcade game with bonus fruits, a scoreboard and a start menu."""

__version__ = "0.1.0"