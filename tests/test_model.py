import random

import pytest

from tuiles2048.model import (
    Direction,
    Game,
    empty_board,
    is_over,
    is_won,
    move,
    move_down,
    move_left,
    move_right,
    move_up,
    random_tile,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert (low, high) == (1, 100)
        return self.value


def _random_board(rng):
    return [[rng.choice([0, 0, 2, 2, 4, 8, 16]) for _ in range(4)] for _ in range(4)]


def _total(board):
    return sum(sum(row) for row in board)


def _mirror(board):
    return [row[::-1] for row in board]


def _transpose(board):
    return [list(col) for col in zip(*board)]


CHECKER = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]


def test_random_tile_thresholds():
    assert random_tile(_FixedRng(1)) == 2
    assert random_tile(_FixedRng(90)) == 2
    assert random_tile(_FixedRng(91)) == 4
    assert random_tile(_FixedRng(100)) == 4


def test_random_tile_only_two_or_four():
    rng = random.Random(3)
    values = {random_tile(rng) for _ in range(500)}
    assert values == {2, 4}


def test_empty_board_rows_are_independent():
    board = empty_board()
    assert board == [[0] * 4 for _ in range(4)]
    board[0][0] = 2
    assert board[1][0] == 0


def test_move_left_chains_merges():
    board = [[2, 2, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    moved, points = move_left(board)
    assert moved[0] == [8, 0, 0, 0]
    assert points == 12


def test_move_left_does_not_mutate_input():
    board = [[0, 2, 0, 2], [4, 0, 4, 0], [0, 0, 0, 0], [2, 4, 8, 16]]
    copy = [row[:] for row in board]
    move_left(board)
    assert board == copy


def test_move_left_without_room_is_unchanged():
    moved, points = move_left(CHECKER)
    assert moved == CHECKER
    assert points == 0


@pytest.mark.parametrize("seed", range(20))
def test_moves_preserve_tile_total(seed):
    board = _random_board(random.Random(seed))
    for mover in (move_left, move_right, move_up, move_down):
        moved, _ = mover(board)
        assert _total(moved) == _total(board)


@pytest.mark.parametrize("seed", range(20))
def test_right_is_mirrored_left(seed):
    board = _random_board(random.Random(seed))
    left, left_points = move_left(_mirror(board))
    right, right_points = move_right(board)
    assert right == _mirror(left)
    assert right_points == left_points


@pytest.mark.parametrize("seed", range(20))
def test_up_and_down_are_transposed_rows(seed):
    board = _random_board(random.Random(seed))
    assert move_up(board)[0] == _transpose(move_left(_transpose(board))[0])
    assert move_down(board)[0] == _transpose(move_right(_transpose(board))[0])


@pytest.mark.parametrize("seed", range(10))
def test_move_accepts_letters_and_directions(seed):
    board = _random_board(random.Random(seed))
    assert move(board, "z") == move_up(board)
    assert move(board, "s") == move_down(board)
    assert move(board, Direction.LEFT) == move_left(board)
    assert move(board, "d") == move_right(board)


def test_move_rejects_unknown_direction():
    with pytest.raises(ValueError):
        move(empty_board(), "x")


def test_is_won():
    board = empty_board()
    assert is_won(board) is False
    board[2][3] = 2048
    assert is_won(board) is True


def test_is_over():
    assert is_over(CHECKER) is True
    with_gap = [row[:] for row in CHECKER]
    with_gap[3][3] = 0
    assert is_over(with_gap) is False
    horizontal = [row[:] for row in CHECKER]
    horizontal[0][1] = 2
    assert is_over(horizontal) is False
    vertical = [row[:] for row in CHECKER]
    vertical[1][0] = 2
    assert is_over(vertical) is False


def test_game_starts_with_two_tiles():
    game = Game(random.Random(1))
    tiles = [v for row in game.board for v in row if v]
    assert len(tiles) == 2
    assert set(tiles) <= {2, 4}
    assert game.score == 0


def test_game_is_deterministic_for_a_seed():
    a = Game(random.Random(42))
    b = Game(random.Random(42))
    for direction in (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN):
        assert a.play(direction) == b.play(direction)
    assert a.board == b.board
    assert a.score == b.score


def test_game_play_scores_and_adds_a_tile():
    game = Game(random.Random(0))
    game.board = [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
    points = game.play("q")
    assert points == 4
    assert game.score == 4
    assert game.board[0][0] == 4
    assert _total(game.board) in (6, 8)


def test_game_reset_clears_score():
    game = Game(random.Random(5))
    game.score = 100
    game.reset()
    assert game.score == 0
    assert sum(1 for row in game.board for v in row if v) == 2


def test_place_tile_on_full_board_raises():
    game = Game(random.Random(0))
    game.board = [row[:] for row in CHECKER]
    with pytest.raises(ValueError):
        game.place_tile()


def test_play_on_stuck_board_leaves_it_alone():
    game = Game(random.Random(0))
    game.board = [row[:] for row in CHECKER]
    assert game.play(Direction.LEFT) == 0
    assert game.board == CHECKER
    assert game.is_over() is True
    assert game.is_won() is False