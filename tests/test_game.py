import random

import pytest

from cobrinha.board import Board
from cobrinha.game import Game, main
from cobrinha.menu import Menu
from cobrinha.normal_game import NormalGame, Phase
from cobrinha.scene import Key, Transition


def _game():
    return Game(Board(), random.Random(3))


def test_starts_on_menu():
    game = _game()
    assert game.current == 0
    assert isinstance(game.scene, Menu)
    assert game.running
    assert game.scene.music == "startMusic"


def test_tick_collects_sounds():
    game = _game()
    assert game.tick({Key.DOWN}) is None
    assert game.scene.cursor == 1
    assert game.pending_sounds == ["cursor"]
    assert game.scene.sounds == []


def test_choosing_play_switches_scene():
    game = _game()
    transition = game.tick({Key.ENTER})
    assert transition == Transition(scene=1, delay=300)
    assert game.current == 1
    assert isinstance(game.scene, NormalGame)
    assert game.scene.phase is Phase.START
    assert game.scenes[0].music is None
    assert game.pending_sounds == ["decisao"]


def test_choosing_quit_stops_game():
    game = _game()
    game.tick({Key.UP})
    game.tick({Key.ENTER})
    assert not game.running
    assert game.current == 0
    assert game.tick({Key.DOWN}) is None
    assert game.scene.cursor == 3


def test_game_over_returns_to_menu():
    game = _game()
    game.switch_to(1)
    game.scene.phase = Phase.GAME_OVER
    game.tick({Key.ENTER})
    assert game.current == 0
    assert game.scene.cursor == 0


def test_switch_to_unknown_scene_fails():
    game = _game()
    with pytest.raises(IndexError):
        game.switch_to(len(game.scenes))
    with pytest.raises(IndexError):
        game.switch_to(-1)
    assert game.current == 0


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0