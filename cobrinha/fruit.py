"""Fruits that appear on the board for the snake to eat."""

from __future__ import annotations

import random

from cobrinha.board import Board

FRUIT_KINDS = (
    "pera",
    "morango",
    "melancia",
    "banana",
    "uva",
    "laranja",
    "mamao",
    "abacaxi",
)


def random_fruit_kind(rng: random.Random) -> str:
    """Pick one of the bonus fruit kinds."""
    return rng.choice(FRUIT_KINDS)


class Fruit:
    """A fruit of some kind at an absolute cell, possibly hidden."""

    def __init__(self, kind: str, board: Board, rng: random.Random) -> None:
        self.kind = kind
        self.board = board
        self.rng = rng
        self.x = 0
        self.y = 0
        self.hidden = False

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def image_path(self) -> str:
        return f"imgs/frutas/{self.kind}.bmp"

    def place(self) -> None:
        """Move to a random cell and show the fruit."""
        self.x, self.y = self.board.random_cell(self.rng)
        self.hidden = False

    def hide(self) -> None:
        self.x = self.y = 0
        self.hidden = True

    def same_place(self, other: Fruit) -> bool:
        return self.position == other.position