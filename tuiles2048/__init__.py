"""The 2048 sliding-tile puzzle: game rules and a curses terminal front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]