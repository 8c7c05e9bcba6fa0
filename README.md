# tuiles2048

This is the 2048 puzzle on a 4×4 board. You play it in the terminal, and the tiles are shown in colour. The on-screen messages are in French.

## How the game works

You choose a direction, and the tiles slide that way.

- When two equal tiles meet, they merge into one tile worth twice as much.
- The value of the merged tile is added to your score.
- After each move, a new tile appears on a random empty square if one is free. The new tile is a 2 nine times out of ten and a 4 otherwise.

You win as soon as a 2048 tile is on the board. The game is over when the board is full and no two neighbouring tiles are equal.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

The game uses the standard `curses` module, so it needs a POSIX terminal.

## Playing

```
tuiles2048
```

To make the random tiles repeatable, pass a seed:

```
tuiles2048 --seed 42
```

| Key               | Action     |
|-------------------|------------|
| Up arrow / `z`    | move up    |
| Down arrow / `s`  | move down  |
| Left arrow / `q`  | move left  |
| Right arrow / `d` | move right |
| `n`               | new game   |
| `a`               | quit       |

If you press any other key, a warning appears under the board, and the game waits for another key.

When you win or lose, a final message stays on screen for five seconds before the program exits.

## Using the model

`tuiles2048.model` holds the game rules and does no screen I/O.

- `Direction` is an enum with `UP`, `DOWN`, `LEFT` and `RIGHT`. Their values are the letters `"z"`, `"s"`, `"q"` and `"d"`.
- `empty_board()` returns a 4×4 board of zeros.
- `random_tile(rng)` returns 2 or 4.
- Four functions slide the board one way: `move_left(board)`, `move_right(board)`, `move_up(board)` and `move_down(board)`. Each returns a tuple `(new_board, points)` and leaves the board it was given unchanged.
- `move(board, direction)` does the same for a `Direction` or its letter. It raises `ValueError` for any other direction.
- `is_won(board)` tells whether a 2048 tile is present.
- `is_over(board)` tells whether no empty cell and no merge is left.

`Game(rng=None)` keeps a `board`, a `score` and a random source. A new `Game` already has two tiles placed. Its methods are:

- `reset()` starts a new game.
- `place_tile()` puts a 2 or a 4 on a random empty cell. It raises `ValueError` if the board is full.
- `play(direction)` moves the tiles, adds the points to the score, places a new tile where there is room, and returns the points scored.
- `is_won()` tells whether the game is won.
- `is_over()` tells whether no move is left.

```python
import random
from tuiles2048.model import Direction, Game, move_left

game = Game(random.Random(42))
game.play(Direction.LEFT)
print(game.board, game.score)

board, points = move_left([[2, 2, 0, 0], [0] * 4, [0] * 4, [0] * 4])
print(board[0], points)  # [4, 0, 0, 0] 4
```

`tuiles2048.cli` holds the terminal front end:

- `run(screen, rng)` plays a game on a curses window and returns the final `Game`.
- `main(argv=None)` is the entry point for the `tuiles2048` command.

## Tests

```
pytest
```