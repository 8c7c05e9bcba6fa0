"""Terminal front end for the 2048 game."""

from __future__ import annotations

import argparse
import curses
import random

from .model import Direction, Game

NEW_GAME = "new"
QUIT = "quit"

_BORDER = "---------------------"
_HELP = (
    "\nCommandes : Flèche haut / z, Flèche bas / s , Flèche gauche /q ,\n"
    "Flèche droite / d, n (nouvelle partie), a (quitter)\n"
)
_INVALID = "La commande que vous avez choisie n'est pas valide! \n\n"
_WON = "Bravo! Vous avez gagné!\n"
_LOST = "Game over!\n"
_PAUSE_MS = 5000

_TILE_PAIRS = {
    2: 1,
    4: 2,
    8: 3,
    16: 4,
    32: 6,
    64: 5,
    128: 7,
    256: 8,
    512: 9,
    1024: 10,
    2048: 11,
}

_COLOR_PAIRS = (
    (1, curses.COLOR_BLACK, curses.COLOR_WHITE),
    (2, curses.COLOR_BLACK, curses.COLOR_YELLOW),
    (3, curses.COLOR_BLACK, curses.COLOR_RED),
    (4, curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    (5, curses.COLOR_WHITE, curses.COLOR_CYAN),
    (6, curses.COLOR_WHITE, curses.COLOR_BLUE),
    (7, curses.COLOR_BLACK, curses.COLOR_GREEN),
    (8, curses.COLOR_GREEN, curses.COLOR_WHITE),
    (9, curses.COLOR_RED, curses.COLOR_WHITE),
    (10, curses.COLOR_CYAN, curses.COLOR_WHITE),
    (11, curses.COLOR_BLUE, curses.COLOR_WHITE),
)

_KEYS: dict[int, Direction | str] = {
    curses.KEY_UP: Direction.UP,
    ord("z"): Direction.UP,
    curses.KEY_LEFT: Direction.LEFT,
    ord("q"): Direction.LEFT,
    curses.KEY_DOWN: Direction.DOWN,
    ord("s"): Direction.DOWN,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord("d"): Direction.RIGHT,
    ord("n"): NEW_GAME,
    ord("a"): QUIT,
}


def tile_color_pair(value: int) -> int:
    """Return the colour pair number for a tile, 0 when it has none."""
    return _TILE_PAIRS.get(value, 0)


def format_cell(value: int) -> str:
    """Return the text of one cell, including its left border."""
    return "|    " if value == 0 else f"|{value:4d}"


def key_to_action(key: int) -> Direction | str | None:
    """Map a key code to a direction, NEW_GAME, QUIT, or None if unknown."""
    return _KEYS.get(key)


def render(screen, game: Game) -> None:
    """Draw the board, the help line and the score."""
    screen.clear()
    border = curses.color_pair(6)
    screen.addstr(_BORDER + "\n", border)
    for row in game.board:
        for value in row:
            screen.addstr(format_cell(value), curses.color_pair(tile_color_pair(value)))
        screen.addstr("|\n", border)
        screen.addstr(_BORDER + "\n", border)
    screen.addstr(_HELP, curses.color_pair(3))
    screen.addstr(f"\nScore : {game.score}\n", curses.color_pair(2))
    screen.refresh()


def run(screen, rng: random.Random | None = None) -> Game:
    """Play until the game is won, lost or quit; return the final game."""
    screen.keypad(True)
    game = Game(rng)
    message = ""
    while not game.is_won() and not game.is_over():
        render(screen, game)
        if message:
            screen.addstr(message)
            screen.refresh()
            message = ""
        action = key_to_action(screen.getch())
        if action is None:
            message = _INVALID
        elif action == QUIT:
            break
        elif action == NEW_GAME:
            game.reset()
        else:
            game.play(action)

    ending = _WON if game.is_won() else _LOST if game.is_over() else ""
    if ending:
        render(screen, game)
        screen.addstr(ending)
        screen.refresh()
        curses.napms(_PAUSE_MS)
    return game


def _init_colors() -> None:
    curses.start_color()
    for number, foreground, background in _COLOR_PAIRS:
        curses.init_pair(number, foreground, background)


def _session(screen, rng: random.Random) -> Game:
    _init_colors()
    return run(screen, rng)


def main(argv: list[str] | None = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(prog="tuiles2048", description="Jeu 2048 en terminal.")
    parser.add_argument("--seed", type=int, default=None, help="graine du générateur aléatoire")
    args = parser.parse_args(argv)
    curses.wrapper(_session, random.Random(args.seed))
    return 0