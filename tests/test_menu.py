from cobrinha.menu import MENU_ITEMS, Menu
from cobrinha.scene import Key, Transition


def _menu():
    menu = Menu()
    menu.enter()
    return menu


def test_enter_resets_cursor_and_plays_music():
    menu = Menu()
    menu.cursor = 2
    menu.enter()
    assert menu.cursor == 0
    assert menu.music == "startMusic"


def test_down_moves_cursor_and_plays_sound():
    menu = _menu()
    assert menu.tick({Key.DOWN}) is None
    assert menu.cursor == 1
    assert menu.sounds == ["cursor"]


def test_up_wraps_to_last_entry():
    menu = _menu()
    menu.tick({Key.UP})
    assert menu.cursor == MENU_ITEMS - 1


def test_down_cycles_back_to_start():
    menu = _menu()
    for _ in range(MENU_ITEMS):
        menu.tick({Key.DOWN})
    assert menu.cursor == 0
    assert len(menu.sounds) == MENU_ITEMS


def test_up_takes_priority_over_down():
    menu = _menu()
    menu.tick({Key.UP, Key.DOWN})
    assert menu.cursor == MENU_ITEMS - 1


def test_no_keys_do_nothing():
    menu = _menu()
    assert menu.tick(set()) is None
    assert menu.cursor == 0
    assert menu.sounds == []


def test_enter_on_first_entry_starts_game():
    menu = _menu()
    assert menu.tick({Key.ENTER}) == Transition(scene=1, delay=300)
    assert menu.sounds == ["decisao"]


def test_enter_on_last_entry_quits():
    menu = _menu()
    menu.tick({Key.UP})
    transition = menu.tick({Key.ENTER})
    assert transition == Transition(quit=True, delay=300)


def test_enter_on_middle_entries_is_ignored():
    menu = _menu()
    menu.tick({Key.DOWN})
    menu.sounds.clear()
    assert menu.tick({Key.ENTER}) is None
    assert menu.sounds == []


def test_cursor_offset_follows_cursor():
    menu = _menu()
    assert menu.cursor_offset == 0
    menu.tick({Key.DOWN})
    assert menu.cursor_offset == 46


def test_leave_stops_music():
    menu = _menu()
    menu.leave()
    assert menu.music is None