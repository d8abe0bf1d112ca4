# cobrinha

A snake arcade game. Steer the snake around a wrapping board, eat apples
to grow and score points, and catch the bonus fruit before its countdown
runs out.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
cobrinha
```

Options:

- `--assets DIR` – directory holding the `imgs/` and `musicas/` folders
  with the game's images and sounds (default: the current directory).
- `--seed N` – seed for the random placement of fruits.

The game opens on a menu. Use the up and down arrows to move the cursor
and Enter to choose: the first entry starts a game and the last one quits.
The two entries in between do nothing. Closing the window also quits.

During a game:

- Any of the arrow keys, Enter or Escape starts play from the
  "press start" screen.
- The arrow keys steer the snake. It cannot turn straight back on itself.
- Enter pauses; Enter again resumes.
- Escape ends the game.

Every apple is worth 10 points and makes the snake one segment longer.
After every fifth apple a bonus fruit appears (pear, strawberry,
watermelon, banana, grape, orange, papaya or pineapple) together with a
countdown of 30 steps on the scoreboard. Catching it is worth 20 points;
if the countdown reaches zero it disappears. The snake passes through the
edges of the board and comes out on the other side, and the game is over
when it bites itself. Press Enter on the game-over screen to return to
the menu.

## Images and sounds

The package ships no artwork, sound effects or music. The window draws
`.bmp` images from `imgs/` (with `imgs/cobra/` for the snake and
`imgs/frutas/` for the fruits), plays `.wav` effects and `.mid` music from
`musicas/`, all under the `--assets` directory. Files that are missing are
skipped without an error, so without an asset tree the game runs in a
blank black window.

## Using the pieces

The game logic works without a window and can be driven directly:

```python
import random

from cobrinha.board import Board
from cobrinha.game import Game
from cobrinha.scene import Key

game = Game(Board(), random.Random(1))
transition = game.tick({Key.ENTER})   # choose "start" on the menu
assert transition.scene == 1          # the game is now in the playing scene
```

- `cobrinha.board.Board` describes the playing area: its bounds, how
  coordinates wrap around its edges and how cells map to pixels.
- `cobrinha.snake.Snake` holds the snake's segments and direction, moves
  it a step at a time, grows it and reports collisions; `sprites()` lists
  the image name and pixel position of every segment.
- `cobrinha.fruit.Fruit` is a fruit at a random cell that can be hidden;
  `random_fruit_kind` picks a bonus fruit kind.
- `cobrinha.scoreboard.Scoreboard` keeps the points and the bonus-fruit
  countdown; `cobrinha.scoreboard.format_number` gives the zero-padded form
  of at least four digits used on the scoreboard, and raises `ValueError`
  for negative numbers.
- `cobrinha.menu.Menu` and `cobrinha.normal_game.NormalGame` are the two
  scenes. Each `tick` takes the set of `Key` values held and may return a
  `Transition` asking to switch scenes or quit. Sound effects a scene
  triggers are queued in its `sounds` list and the music it wants is in
  `music`.
- `cobrinha.game.Game` holds the scenes, switches between them with
  `switch_to`, and `run()` opens the window and plays.