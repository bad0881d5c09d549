"""Pure functions over time-ordered snapshot sequences."""

from .regression import slope
from .segments import GameSegment, split_by_game
from .windows import peak_window_start

__all__ = [
    "GameSegment",
    "peak_window_start",
    "slope",
    "split_by_game",
]
