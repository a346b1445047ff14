from __future__ import annotations

from typing import Optional, Union

import numpy as np

from othello.core import BoardArray, Player, Position, legal_moves
from othello.selector.strategies import (
    Strategy,
    corner_preferred_move,
    greedy_move,
    random_move,
)


class MoveSelector:
    """Picks a move for the computer player using one configurable strategy.

    Each game owns its own selector; the strategy must not be changed
    while ``get_best_move`` is running on the same instance.
    """

    def __init__(
        self,
        strategy: Union[Strategy, str] = Strategy.GREEDY,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._strategy = Strategy.parse(strategy)
        self.rng = rng or np.random.default_rng()

    def get_best_move(self, board: BoardArray, player: Player) -> Optional[Position]:
        moves = legal_moves(board, player)
        if not moves:
            return None

        if self._strategy == Strategy.RANDOM:
            return random_move(moves, self.rng)
        if self._strategy == Strategy.CORNER_PREFERRED:
            return corner_preferred_move(board, moves, player)
        return greedy_move(board, moves, player)

    def set_strategy(self, strategy: Union[Strategy, str]) -> None:
        self._strategy = Strategy.parse(strategy)

    def get_strategy(self) -> Strategy:
        return self._strategy

    def spawn(self, seed: Optional[int] = None) -> "MoveSelector":
        """Return a selector with the same strategy and an independent RNG."""
        return MoveSelector(self._strategy, rng=np.random.default_rng(seed))

    def __repr__(self) -> str:
        return f"MoveSelector(strategy={self._strategy.value})"
