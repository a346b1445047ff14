from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Sequence, Tuple, Union

import numpy as np

from othello.core import BoardArray, Cell, Player, Position, flipped_by

CORNERS: Tuple[Position, ...] = (
    Position(0, 0),
    Position(0, 7),
    Position(7, 0),
    Position(7, 7),
)

# Adjacent cells per corner, dangerous while that corner is empty.
CORNER_NEIGHBOURS: Dict[Position, Tuple[Position, ...]] = {
    Position(0, 0): (Position(0, 1), Position(1, 0), Position(1, 1)),
    Position(0, 7): (Position(0, 6), Position(1, 7), Position(1, 6)),
    Position(7, 0): (Position(7, 1), Position(6, 0), Position(6, 1)),
    Position(7, 7): (Position(7, 6), Position(6, 7), Position(6, 6)),
}


class Strategy(Enum):
    RANDOM = "random"
    GREEDY = "greedy"
    CORNER_PREFERRED = "corner"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: Union[str, "Strategy"]) -> "Strategy":
        if isinstance(value, Strategy):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for strategy in cls:
            if key in (strategy.value, strategy.name.lower()):
                return strategy
        choices = ", ".join(strategy.value for strategy in cls)
        raise ValueError(f"Unknown strategy {value!r}; expected one of: {choices}.")


_DESCRIPTIONS: Dict[Strategy, str] = {
    Strategy.RANDOM: "uniform choice among legal moves",
    Strategy.GREEDY: "maximize immediate flip count",
    Strategy.CORNER_PREFERRED: "corner-first then danger-avoiding greedy",
}


def random_move(moves: Sequence[Position], rng: np.random.Generator) -> Position:
    return moves[int(rng.integers(len(moves)))]


def greedy_move(board: BoardArray, moves: Sequence[Position], player: Player) -> Position:
    """Move with the most flips; the earliest one wins ties."""
    best_move = moves[0]
    best_flips = -1
    for move in moves:
        flips = len(flipped_by(board, move, player))
        if flips > best_flips:
            best_flips = flips
            best_move = move
    return best_move


def dangerous_positions(board: BoardArray) -> FrozenSet[Position]:
    dangerous = set()
    for corner in CORNERS:
        if board[corner.row, corner.col] == Cell.EMPTY:
            dangerous.update(CORNER_NEIGHBOURS[corner])
    return frozenset(dangerous)


def corner_preferred_move(board: BoardArray, moves: Sequence[Position], player: Player) -> Position:
    available = set(moves)
    for corner in CORNERS:
        if corner in available:
            return corner

    dangerous = dangerous_positions(board)
    safe_moves = [move for move in moves if move not in dangerous]
    if safe_moves:
        return greedy_move(board, safe_moves, player)
    return greedy_move(board, moves, player)
