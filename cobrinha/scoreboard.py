"""Score and bonus-fruit countdown shown beside the board."""

from __future__ import annotations


def format_number(num: int) -> str:
    """Render a non-negative number with at least four digits."""
    if num < 0:
        raise ValueError("only non-negative numbers can be shown")
    return str(num).zfill(4)


class Scoreboard:
    """Accumulated points and the bonus fruit currently on offer."""

    def __init__(self) -> None:
        self.points = 0
        self.points_text = "0000"
        self.steps = 0
        self.steps_text = ""
        self.fruit: str | None = None
        self.has_fruit = False

    def add_points(self, points: int) -> None:
        self.points += points
        self.points_text = format_number(self.points)

    def set_fruit(self, kind: str, steps: int) -> None:
        """Show a bonus fruit with ``steps`` moves left to catch it."""
        self.has_fruit = True
        self.fruit = kind
        self.steps = steps
        self.steps_text = format_number(steps)

    def decrement(self) -> None:
        self.steps -= 1
        if self.steps < 0:
            self.has_fruit = False
            self.steps_text = ""
        else:
            self.steps_text = format_number(self.steps)

    def picked(self) -> None:
        self.has_fruit = False