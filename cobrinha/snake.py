"""The snake: a chain of segments that moves, turns and grows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cobrinha.board import Board

START_ROW = 3


class Direction(Enum):
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_HEAD_SPRITES = {
    Direction.RIGHT: "cabecaCobraDireita",
    Direction.LEFT: "cabecaCobraEsquerda",
    Direction.UP: "cabecaCobraCima",
    Direction.DOWN: "cabecaCobraBaixo",
}

_TAIL_SPRITES = {
    Direction.RIGHT: "raboCobraDireita",
    Direction.LEFT: "raboCobraEsquerda",
    Direction.UP: "raboCobraCima",
    Direction.DOWN: "raboCobraBaixo",
}

# Keyed by (direction of the segment ahead, direction of this segment).
_CURVE_SPRITES = {
    (Direction.LEFT, Direction.UP): "corpoCobraCurvaEB",
    (Direction.DOWN, Direction.RIGHT): "corpoCobraCurvaEB",
    (Direction.DOWN, Direction.LEFT): "corpoCobraCurvaBD",
    (Direction.RIGHT, Direction.UP): "corpoCobraCurvaBD",
    (Direction.UP, Direction.LEFT): "corpoCobraCurvaDC",
    (Direction.RIGHT, Direction.DOWN): "corpoCobraCurvaDC",
    (Direction.LEFT, Direction.DOWN): "corpoCobraCurvaCE",
    (Direction.UP, Direction.RIGHT): "corpoCobraCurvaCE",
}

SPRITE_NAMES = (
    *_HEAD_SPRITES.values(),
    *_TAIL_SPRITES.values(),
    "corpoCobraHorizontal",
    "corpoCobraVertical",
    *sorted(set(_CURVE_SPRITES.values())),
)


@dataclass(frozen=True)
class Segment:
    """One piece of the snake, in coordinates relative to the board."""

    x: int
    y: int
    direction: Direction


class Snake:
    """A snake on a board; the first segment is the head."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.direction = Direction.RIGHT
        self._segments: list[Segment] = []

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def length(self) -> int:
        return len(self._segments)

    @property
    def head(self) -> Segment:
        if not self._segments:
            raise RuntimeError("snake has no segments")
        return self._segments[0]

    def reset(self, length: int) -> None:
        """Lay out a fresh snake of ``length`` segments heading right."""
        if length < 0:
            raise ValueError("length must not be negative")
        self.direction = Direction.RIGHT
        offset = self.board.width - (length - 1)
        start_x = self.board.min_x + int(offset / 2)
        self._segments = [
            Segment(start_x - i, START_ROW, self.direction) for i in range(length)
        ]

    def step(self) -> None:
        """Advance one cell: each segment takes the place of the one ahead."""
        if not self._segments:
            return
        head = self._segments[0]
        d = self.direction
        wx, wy = self.board.wrap(head.x + d.dx, head.y + d.dy)
        new_head = Segment(wx if d.dx else head.x, wy if d.dy else head.y, d)
        self._segments = [new_head, *self._segments[:-1]]

    def _turn(self, direction: Direction) -> None:
        if self.direction is not _OPPOSITE[direction]:
            self.direction = direction

    def turn_left(self) -> None:
        self._turn(Direction.LEFT)

    def turn_right(self) -> None:
        self._turn(Direction.RIGHT)

    def turn_up(self) -> None:
        self._turn(Direction.UP)

    def turn_down(self) -> None:
        self._turn(Direction.DOWN)

    def eat(self) -> None:
        """Grow by one segment stacked on the current tail."""
        if not self._segments:
            raise RuntimeError("snake has no segments")
        tail = self._segments[-1]
        self._segments.append(Segment(tail.x, tail.y, tail.direction))

    def head_at(self, x: int, y: int) -> bool:
        """Whether the head occupies the absolute cell (x, y)."""
        head = self.head
        return (head.x + self.board.min_x, head.y + self.board.min_y) == (x, y)

    def body_at(self, x: int, y: int) -> bool:
        """Whether any segment other than the head occupies absolute (x, y)."""
        return any(
            (seg.x + self.board.min_x, seg.y + self.board.min_y) == (x, y)
            for seg in self._segments[1:]
        )

    def bites_itself(self) -> bool:
        head = self.head
        return self.body_at(head.x + self.board.min_x, head.y + self.board.min_y)

    def sprites(self) -> list[tuple[str, tuple[int, int]]]:
        """Sprite name and pixel position of every segment, head first."""
        result: list[tuple[str, tuple[int, int]]] = []
        sprite = ""
        last = len(self._segments) - 1
        for index, seg in enumerate(self._segments):
            if index == 0:
                sprite = _HEAD_SPRITES[seg.direction]
            else:
                ahead = self._segments[index - 1].direction
                if index == last:
                    sprite = _TAIL_SPRITES[ahead]
                elif ahead is seg.direction:
                    horizontal = ahead in (Direction.LEFT, Direction.RIGHT)
                    sprite = (
                        "corpoCobraHorizontal" if horizontal else "corpoCobraVertical"
                    )
                else:
                    sprite = _CURVE_SPRITES.get((ahead, seg.direction), sprite)
            position = self.board.to_pixels(
                self.board.min_x + seg.x, self.board.min_y + seg.y
            )
            result.append((sprite, position))
        return result