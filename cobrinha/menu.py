"""The title screen with its four-entry menu."""

from __future__ import annotations

from collections.abc import Collection

from cobrinha.scene import Key, Scene, Transition

MENU_ITEMS = 4
ITEM_SPACING = 46
PLAY_ITEM = 0
QUIT_ITEM = 3
PLAY_SCENE = 1
CHOICE_DELAY = 300


class Menu(Scene):
    """Title screen; a cursor moves over the entries, ENTER picks one."""

    def __init__(self) -> None:
        super().__init__()
        self.cursor = 0

    def enter(self) -> None:
        self.cursor = 0
        self.music = "startMusic"

    def tick(self, keys: Collection[Key]) -> Transition | None:
        if Key.UP in keys:
            self.cursor = (self.cursor - 1) % MENU_ITEMS
            self._play("cursor")
        elif Key.DOWN in keys:
            self.cursor = (self.cursor + 1) % MENU_ITEMS
            self._play("cursor")
        elif Key.ENTER in keys:
            if self.cursor == PLAY_ITEM:
                self._play("decisao")
                return Transition(scene=PLAY_SCENE, delay=CHOICE_DELAY)
            if self.cursor == QUIT_ITEM:
                self._play("decisao")
                return Transition(quit=True, delay=CHOICE_DELAY)
        return None

    def leave(self) -> None:
        super().leave()

    @property
    def cursor_offset(self) -> int:
        """Vertical pixel offset of the cursor from the first entry."""
        return (MENU_ITEMS * ITEM_SPACING + self.cursor * ITEM_SPACING) % (
            MENU_ITEMS * ITEM_SPACING
        )