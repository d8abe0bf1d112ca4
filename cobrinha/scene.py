"""Scenes the game switches between, and the input they react to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """Keys the scenes react to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class Transition:
    """A request from a scene: switch to another scene, or quit the game.

    ``delay`` is a pause in milliseconds to take before the switch.
    """

    scene: int | None = None
    quit: bool = False
    delay: int = 0

    def __post_init__(self) -> None:
        if self.quit and self.scene is not None:
            raise ValueError("a transition cannot both quit and switch scenes")
        if not self.quit and self.scene is None:
            raise ValueError("a transition must name a scene or quit")
        if self.delay < 0:
            raise ValueError("delay must not be negative")


class Scene(ABC):
    """One screen of the game, driven one tick at a time.

    A scene exposes the music it wants playing in ``music`` and queues the
    sound effects it triggers in ``sounds``.
    """

    def __init__(self) -> None:
        self.music: str | None = None
        self.sounds: list[str] = []

    @abstractmethod
    def enter(self) -> None:
        """Prepare the scene to be shown."""

    @abstractmethod
    def tick(self, keys: Collection[Key]) -> Transition | None:
        """Advance one tick with the keys currently held."""

    def leave(self) -> None:
        """Stop the scene's music when it is left."""
        self.music = None

    def _play(self, sound: str) -> None:
        self.sounds.append(sound)