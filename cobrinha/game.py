"""The game loop: scene switching, input, sound and drawing."""

from __future__ import annotations

import argparse
import random
from collections.abc import Collection
from pathlib import Path

import pygame

from cobrinha.board import Board
from cobrinha.menu import Menu
from cobrinha.normal_game import NormalGame, Phase
from cobrinha.scene import Key, Scene, Transition
from cobrinha.snake import Snake

FRAME_MS = 100
MASK_COLOUR = (255, 0, 255)

_KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class Game:
    """Holds the scenes and drives whichever one is current."""

    def __init__(self, board: Board, rng: random.Random) -> None:
        self.board = board
        self.rng = rng
        self.asset_dir = Path(".")
        self.scenes: list[Scene] = [Menu(), NormalGame(board, rng)]
        self.current = 0
        self.running = True
        self.pending_sounds: list[str] = []
        self.scenes[self.current].enter()

    @property
    def scene(self) -> Scene:
        return self.scenes[self.current]

    def tick(self, keys: Collection[Key]) -> Transition | None:
        """Advance the current scene and act on what it asks for."""
        if not self.running:
            return None
        scene = self.scene
        transition = scene.tick(frozenset(keys))
        self.pending_sounds.extend(scene.sounds)
        scene.sounds.clear()
        if transition is not None:
            if transition.quit:
                self.running = False
            else:
                self.switch_to(transition.scene)
        return transition

    def switch_to(self, index: int) -> None:
        """Leave the current scene and enter scene ``index``."""
        if not 0 <= index < len(self.scenes):
            raise IndexError(f"no scene number {index}")
        self.scene.leave()
        self.scenes[index].enter()
        self.current = index

    def run(self) -> None:
        """Open a window and play until the player quits."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (self.board.screen_width, self.board.screen_height)
            )
            pygame.display.set_caption("Cobrinha")
            media = _Media(self.asset_dir)
            media.set_music(self.scene.music)
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                if not self.running:
                    break
                transition = self.tick(_pressed_keys())
                for sound in self.pending_sounds:
                    media.play(sound)
                self.pending_sounds.clear()
                if transition is not None and transition.delay:
                    pygame.time.wait(transition.delay)
                    pygame.event.clear()
                media.set_music(self.scene.music)
                screen.fill((0, 0, 0))
                _draw(screen, media, self.board, self.scene)
                pygame.display.flip()
                pygame.time.wait(FRAME_MS)
        finally:
            pygame.quit()


def _pressed_keys() -> frozenset[Key]:
    state = pygame.key.get_pressed()
    return frozenset(key for code, key in _KEY_MAP.items() if state[code])


class _Media:
    """Images, sound effects and music loaded on demand from an asset tree."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self._images: dict[str, pygame.Surface | None] = {}
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}
        self._music: str | None = None
        try:
            pygame.mixer.init()
            self.audio = True
        except pygame.error:
            self.audio = False

    def image(self, relative: str) -> pygame.Surface | None:
        if relative not in self._images:
            path = self.root / relative
            surface = None
            if path.is_file():
                surface = pygame.image.load(str(path)).convert()
                surface.set_colorkey(MASK_COLOUR)
            self._images[relative] = surface
        return self._images[relative]

    def play(self, name: str) -> None:
        if not self.audio:
            return
        if name not in self._sounds:
            path = self.root / "musicas" / f"{name}.wav"
            self._sounds[name] = pygame.mixer.Sound(str(path)) if path.is_file() else None
        sound = self._sounds[name]
        if sound is not None:
            sound.play()

    def set_music(self, name: str | None) -> None:
        if name == self._music:
            return
        self._music = name
        if not self.audio:
            return
        pygame.mixer.music.stop()
        if name is None:
            return
        path = self.root / "musicas" / f"{name}.mid"
        if not path.is_file():
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
        except pygame.error:
            pass


def _draw(screen: pygame.Surface, media: _Media, board: Board, scene: Scene) -> None:
    if isinstance(scene, Menu):
        _draw_menu(screen, media, board, scene)
    elif isinstance(scene, NormalGame):
        _draw_round(screen, media, board, scene)


def _draw_menu(screen: pygame.Surface, media: _Media, board: Board, menu: Menu) -> None:
    w, h = board.screen_width, board.screen_height
    background = media.image("imgs/StartGame.bmp")
    if background is not None:
        bw, bh = background.get_size()
        screen.blit(background, ((w - bw) // 2, (h - bh) // 2))
    entries = media.image("imgs/menu.bmp")
    if entries is None:
        return
    mw, mh = entries.get_size()
    left, top = (w - mw) // 2, 20 + (h - mh) // 2
    screen.blit(entries, (100 + left, top))
    arrow = media.image("imgs/seta.bmp")
    if arrow is not None:
        screen.blit(arrow, (60 + left, top + menu.cursor_offset))


def _draw_fruit(screen, media, board, fruit) -> None:
    if fruit.hidden:
        return
    image = media.image(fruit.image_path)
    if image is None:
        return
    x, y = board.to_pixels(fruit.x, fruit.y)
    fw, fh = image.get_size()
    screen.blit(image, (x + (board.cell_size - fw) // 2, y + (board.cell_size - fh) // 2))


def _draw_snake(screen, media, snake: Snake) -> None:
    for name, position in snake.sprites():
        image = media.image(f"imgs/cobra/{name}.bmp")
        if image is not None:
            screen.blit(image, position)


def _draw_digits(screen, media, text: str, x: int, y: int) -> None:
    digits = media.image("imgs/numeros2.bmp")
    if digits is None:
        return
    width = digits.get_width() // 10
    height = digits.get_height()
    for i, char in enumerate(text):
        digit = (ord(char) - ord("0")) % 10
        area = pygame.Rect(digit * width, 0, width, height)
        screen.blit(digits, (x + i * width, y), area)


def _draw_round(screen, media, board: Board, game: NormalGame) -> None:
    background = media.image("imgs/underGame.bmp")
    if background is not None:
        screen.blit(background, (0, 0))
    _draw_fruit(screen, media, board, game.apple)
    _draw_fruit(screen, media, board, game.bonus)
    _draw_snake(screen, media, game.snake)

    cell = board.cell_size
    score = game.score
    _draw_digits(screen, media, score.points_text, (board.max_x + 2) * cell, 2 * cell)
    if score.has_fruit and score.fruit is not None:
        fruit_image = media.image(f"imgs/frutas/{score.fruit}.bmp")
        if fruit_image is not None:
            screen.blit(fruit_image, ((board.max_x + 3) * cell, 13 * cell - 20))
        _draw_digits(screen, media, score.steps_text, (board.max_x + 2) * cell, 14 * cell)

    overlay = {
        Phase.GAME_OVER: "imgs/gameOver.bmp",
        Phase.START: "imgs/pressStart.bmp",
        Phase.PAUSED: "imgs/pausa.bmp",
    }.get(game.phase)
    if overlay is None:
        return
    image = media.image(overlay)
    if image is not None:
        ow, oh = image.get_size()
        screen.blit(
            image,
            (
                ((board.screen_width - board.score_width) - ow) // 2,
                (board.screen_height - oh) // 2,
            ),
        )


def main(argv: list[str] | None = None) -> int:
    """Start the game in a window."""
    parser = argparse.ArgumentParser(prog="cobrinha", description="Snake arcade game.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("."),
        help="directory holding the imgs/ and musicas/ folders",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    game = Game(Board(), random.Random(args.seed))
    game.asset_dir = args.assets
    game.run()
    return 0