import pytest

from cobrinha.board import Board
from cobrinha.snake import Direction, Segment, Snake


@pytest.fixture
def board():
    return Board(min_x=1, max_x=11, min_y=1, max_y=9, cell_size=10)


@pytest.fixture
def snake(board):
    s = Snake(board)
    s.reset(3)
    return s


def test_reset_lays_out_horizontal_line(snake):
    segs = snake.segments
    assert len(segs) == 3
    assert all(seg.direction is Direction.RIGHT for seg in segs)
    assert len({seg.y for seg in segs}) == 1
    assert [a.x - b.x for a, b in zip(segs, segs[1:])] == [1, 1]


def test_reset_rejects_negative_length(board):
    with pytest.raises(ValueError):
        Snake(board).reset(-1)


def test_step_moves_head_and_body_follows(snake):
    before = snake.segments
    snake.step()
    after = snake.segments
    assert after[0].x == before[0].x + 1
    assert after[0].y == before[0].y
    assert after[1:] == before[:-1]


def test_step_on_empty_snake_does_nothing(board):
    s = Snake(board)
    s.step()
    assert s.segments == ()


def test_reverse_turn_ignored(snake):
    snake.turn_left()
    assert snake.direction is Direction.RIGHT
    snake.turn_up()
    snake.turn_down()
    assert snake.direction is Direction.UP


def test_turn_up_moves_up(snake):
    before = snake.head
    snake.turn_up()
    snake.step()
    assert snake.head == Segment(before.x, before.y - 1, Direction.UP)


def test_wraps_around_width(snake, board):
    start = snake.head
    for _ in range(board.width):
        snake.step()
    assert (snake.head.x, snake.head.y) == (start.x, start.y)


def test_wraps_vertically(snake, board):
    snake.turn_up()
    for _ in range(snake.head.y + 1):
        snake.step()
    assert snake.head.y == board.height - 1


def test_eat_grows_on_tail(snake):
    tail = snake.segments[-1]
    snake.eat()
    assert snake.length == 4
    assert snake.segments[-1] == tail
    snake.step()
    assert snake.length == 4


def test_eat_on_empty_raises(board):
    with pytest.raises(RuntimeError):
        Snake(board).eat()


def test_head_at_uses_absolute_cells(snake, board):
    head = snake.head
    assert snake.head_at(head.x + board.min_x, head.y + board.min_y)
    assert not snake.head_at(head.x, head.y + board.min_y + 1)


def test_body_at_excludes_head(snake, board):
    head = snake.head
    tail = snake.segments[-1]
    assert not snake.body_at(head.x + board.min_x, head.y + board.min_y)
    assert snake.body_at(tail.x + board.min_x, tail.y + board.min_y)


def test_bites_itself(board):
    s = Snake(board)
    s.reset(5)
    assert not s.bites_itself()
    s.turn_up()
    s.step()
    s.turn_left()
    s.step()
    s.turn_down()
    s.step()
    assert s.bites_itself()


def test_straight_sprites(snake):
    names = [name for name, _ in snake.sprites()]
    assert names == ["cabecaCobraDireita", "corpoCobraHorizontal", "raboCobraDireita"]


def test_curve_sprite(snake):
    snake.turn_up()
    snake.step()
    names = [name for name, _ in snake.sprites()]
    assert names == ["cabecaCobraCima", "corpoCobraCurvaCE", "raboCobraDireita"]


def test_sprite_positions_follow_segments(snake, board):
    positions = [pos for _, pos in snake.sprites()]
    expected = [
        board.to_pixels(board.min_x + seg.x, board.min_y + seg.y)
        for seg in snake.segments
    ]
    assert positions == expected