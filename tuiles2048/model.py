"""Board model for the 2048 sliding-tile game."""

from __future__ import annotations

import random
from enum import Enum

SIZE = 4
WINNING_TILE = 2048

_COMMON_TILE = 2
_RARE_TILE = 4
_COMMON_TILE_PERCENT = 90

Board = list[list[int]]


class Direction(str, Enum):
    """A move direction, valued by the keyboard letter that triggers it."""

    UP = "z"
    DOWN = "s"
    LEFT = "q"
    RIGHT = "d"


def random_tile(rng: random.Random) -> int:
    """Return 2 with probability 9/10, otherwise 4."""
    draw = rng.randint(1, 100)
    if draw <= _COMMON_TILE_PERCENT:
        return _COMMON_TILE
    return _RARE_TILE


def empty_board() -> Board:
    """Return a 4x4 board filled with zeros."""
    return [[0] * SIZE for _ in range(SIZE)]


def _slide(line: list[int]) -> tuple[list[int], int]:
    """Push the tiles of a line towards its start, merging equal neighbours.

    Each tile, taken in order from the start, travels as far as it can; it
    merges with the first equal tile it meets and then stops.
    """
    cells = list(line)
    gained = 0
    for start in range(1, len(cells)):
        if not cells[start]:
            continue
        pos = start
        while pos > 0:
            target = cells[pos - 1]
            if target == 0:
                cells[pos - 1], cells[pos] = cells[pos], 0
                pos -= 1
            elif target == cells[pos]:
                cells[pos - 1] *= 2
                gained += cells[pos - 1]
                cells[pos] = 0
                break
            else:
                break
    return cells, gained


def _slide_rows(rows: Board, reverse: bool) -> tuple[Board, int]:
    result = []
    gained = 0
    for row in rows:
        line = row[::-1] if reverse else row
        moved, points = _slide(line)
        result.append(moved[::-1] if reverse else moved)
        gained += points
    return result, gained


def _transpose(board: Board) -> Board:
    return [list(column) for column in zip(*board)]


def move_left(board: Board) -> tuple[Board, int]:
    """Slide every row left; return the new board and the points scored."""
    return _slide_rows(board, reverse=False)


def move_right(board: Board) -> tuple[Board, int]:
    """Slide every row right; return the new board and the points scored."""
    return _slide_rows(board, reverse=True)


def move_up(board: Board) -> tuple[Board, int]:
    """Slide every column up; return the new board and the points scored."""
    moved, gained = _slide_rows(_transpose(board), reverse=False)
    return _transpose(moved), gained


def move_down(board: Board) -> tuple[Board, int]:
    """Slide every column down; return the new board and the points scored."""
    moved, gained = _slide_rows(_transpose(board), reverse=True)
    return _transpose(moved), gained


_MOVES = {
    Direction.UP: move_up,
    Direction.DOWN: move_down,
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
}


def move(board: Board, direction: Direction | str) -> tuple[Board, int]:
    """Slide the board in a direction; raise ValueError for an unknown one."""
    try:
        chosen = Direction(direction)
    except ValueError:
        raise ValueError(f"Déplacement impossible: {direction!r}") from None
    return _MOVES[chosen](board)


def is_won(board: Board) -> bool:
    """Tell whether the board holds a 2048 tile."""
    return any(value == WINNING_TILE for row in board for value in row)


def is_over(board: Board) -> bool:
    """Tell whether no empty cell and no possible merge is left."""
    for row in board:
        if 0 in row or any(a == b for a, b in zip(row, row[1:])):
            return False
    for upper, lower in zip(board, board[1:]):
        if any(a == b for a, b in zip(upper, lower)):
            return False
    return True


class Game:
    """A game in progress: the board, the score and the random source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board: Board = empty_board()
        self.score = 0
        self.reset()

    def reset(self) -> None:
        """Start a new game: clear the score and place two tiles."""
        self.score = 0
        self.board = empty_board()
        self.place_tile()
        self.place_tile()

    def place_tile(self) -> None:
        """Put a 2 or a 4 on a random empty cell."""
        empty = [
            (r, c)
            for r, row in enumerate(self.board)
            for c, value in enumerate(row)
            if value == 0
        ]
        if not empty:
            raise ValueError("no empty cell left on the board")
        r, c = self.rng.choice(empty)
        self.board[r][c] = random_tile(self.rng)

    def play(self, direction: Direction | str) -> int:
        """Move the tiles, add a new tile where there is room, return the points."""
        self.board, gained = move(self.board, direction)
        self.score += gained
        if any(0 in row for row in self.board):
            self.place_tile()
        return gained

    def is_won(self) -> bool:
        """Tell whether the game is won."""
        return is_won(self.board)

    def is_over(self) -> bool:
        """Tell whether no move is left."""
        return is_over(self.board)