"""Move selection strategies for the computer opponent."""

from .move_selector import MoveSelector
from .strategies import (
    CORNERS,
    CORNER_NEIGHBOURS,
    Strategy,
    corner_preferred_move,
    dangerous_positions,
    greedy_move,
    random_move,
)

__all__ = [
    "MoveSelector",
    "CORNERS",
    "CORNER_NEIGHBOURS",
    "Strategy",
    "corner_preferred_move",
    "dangerous_positions",
    "greedy_move",
    "random_move",
]
