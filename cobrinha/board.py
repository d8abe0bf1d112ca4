"""Playing field geometry: cell bounds, wrapping and pixel mapping."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Board:
    """The rectangle of cells the snake moves in, plus screen layout.

    ``min_x``/``max_x`` and ``min_y``/``max_y`` bound the playing area in
    absolute cells (the maximum is exclusive). Snake segments keep
    coordinates relative to the area's origin. Fruits keep absolute ones.
    """

    min_x: int = 1
    max_x: int = 23
    min_y: int = 1
    max_y: int = 23
    cell_size: int = 25
    screen_width: int = 800
    screen_height: int = 600
    score_width: int = 200

    def __post_init__(self) -> None:
        if self.max_x <= self.min_x or self.max_y <= self.min_y:
            raise ValueError("board must have a positive width and height")
        if self.cell_size <= 0:
            raise ValueError("cell size must be positive")

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap relative coordinates around the edges of the area."""
        return x % self.width, y % self.height

    def random_cell(self, rng: random.Random) -> tuple[int, int]:
        """Pick a random cell inside the area, in absolute coordinates."""
        return (
            self.min_x + rng.randrange(self.width),
            self.min_y + rng.randrange(self.height),
        )

    def to_pixels(self, x: int, y: int) -> tuple[int, int]:
        """Top-left pixel of an absolute cell."""
        return x * self.cell_size, y * self.cell_size