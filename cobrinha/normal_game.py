"""The playing scene: snake, apples, bonus fruit and score."""

from __future__ import annotations

import random
from collections.abc import Collection
from enum import Enum, auto

from cobrinha.board import Board
from cobrinha.fruit import Fruit, random_fruit_kind
from cobrinha.scene import Key, Scene, Transition
from cobrinha.scoreboard import Scoreboard
from cobrinha.snake import Snake

START_LENGTH = 3
APPLE_POINTS = 10
BONUS_POINTS = 20
APPLES_PER_BONUS = 5
BONUS_STEPS = 30
MENU_SCENE = 0
GAME_OVER_DELAY = 200


class Phase(Enum):
    START = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class NormalGame(Scene):
    """A round of the game from "press start" until game over."""

    def __init__(self, board: Board, rng: random.Random) -> None:
        super().__init__()
        self.board = board
        self.rng = rng
        self._new_round()

    def _new_round(self) -> None:
        self.snake = Snake(self.board)
        self.snake.reset(START_LENGTH)
        self.apple = Fruit("maca", self.board, self.rng)
        self.apple.place()
        self.bonus = Fruit(random_fruit_kind(self.rng), self.board, self.rng)
        self.bonus.place()
        self.bonus.hide()
        self.score = Scoreboard()
        self.apples_eaten = -1
        self.total_apples = 0
        self.steps = 0
        self.bonus_active = False
        self.phase = Phase.START

    def enter(self) -> None:
        self.sounds.clear()
        self.music = None
        self._new_round()

    def leave(self) -> None:
        super().leave()

    def touches(self, fruit: Fruit) -> bool:
        """Whether any part of the snake lies on the fruit."""
        return self.snake.head_at(fruit.x, fruit.y) or self.snake.body_at(
            fruit.x, fruit.y
        )

    def tick(self, keys: Collection[Key]) -> Transition | None:
        if self.phase is Phase.START:
            if keys:
                self.phase = Phase.PLAYING
            self.music = "fundoNormalGame"
        elif self.phase is Phase.PLAYING:
            self._play_step(keys)
        elif self.phase is Phase.PAUSED:
            if Key.ENTER in keys:
                self.phase = Phase.PLAYING
        elif self.phase is Phase.GAME_OVER:
            if Key.ENTER in keys:
                return Transition(scene=MENU_SCENE, delay=GAME_OVER_DELAY)
        return None

    def _place_clear_of_snake(self, fruit: Fruit) -> None:
        fruit.place()
        while self.touches(fruit):
            fruit.place()

    def _end(self) -> None:
        self.phase = Phase.GAME_OVER
        self.music = "gameOver"

    def _play_step(self, keys: Collection[Key]) -> None:
        if Key.LEFT in keys:
            self.snake.turn_left()
        elif Key.RIGHT in keys:
            self.snake.turn_right()
        elif Key.UP in keys:
            self.snake.turn_up()
        elif Key.DOWN in keys:
            self.snake.turn_down()
        if Key.ENTER in keys:
            self.phase = Phase.PAUSED
        if Key.ESCAPE in keys:
            self._end()

        self.snake.step()

        if self.snake.head_at(self.apple.x, self.apple.y):
            self.snake.eat()
            self._place_clear_of_snake(self.apple)
            self.score.add_points(APPLE_POINTS)
            self.apples_eaten = (self.apples_eaten + 1) % APPLES_PER_BONUS
            self.total_apples += 1
            self._play("pegaFruta")

        if self.apples_eaten == APPLES_PER_BONUS - 1 and not self.bonus_active:
            self.bonus_active = True
            self.steps = BONUS_STEPS
            self.bonus.kind = random_fruit_kind(self.rng)
            self.score.set_fruit(self.bonus.kind, self.steps)
            self._place_clear_of_snake(self.bonus)

        if self.bonus_active:
            if self.snake.head_at(self.bonus.x, self.bonus.y):
                self.snake.eat()
                self.bonus.hide()
                self.score.add_points(BONUS_POINTS)
                self.score.picked()
                self.bonus_active = False
                self.apples_eaten = -1
                self._play("pegaFruta")
            else:
                self.steps -= 1
                if self.score.has_fruit:
                    self.score.decrement()

            if self.steps == 0:
                self.bonus.hide()
                self.score.picked()
                self._play("perdeFruta")
                self.bonus_active = False
                self.apples_eaten = -1

        if self.snake.bites_itself():
            self._end()
            self._play("morreu")