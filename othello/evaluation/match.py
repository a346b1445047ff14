from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union

import numpy as np

from othello.core import (
    GameState,
    GameStatus,
    Player,
    Winner,
    initialize_game_state,
    submit_move,
    winner,
)
from othello.selector import MoveSelector, Strategy

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    black_strategy: Strategy
    white_strategy: Strategy
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float
    average_black_discs: float
    average_white_discs: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def play_game(black: MoveSelector, white: MoveSelector) -> Tuple[GameState, int]:
    """Play one game between two selectors; return the final state and ply count."""
    state = initialize_game_state()
    plies = 0
    while state.status == GameStatus.PLAYING:
        selector = black if state.player_to_move == Player.BLACK else white
        move = selector.get_best_move(state.board, state.player_to_move)
        if move is None:
            raise RuntimeError(f"{selector!r} found no move in a playing state.")
        result = submit_move(state, move)
        if not result.accepted:
            raise RuntimeError(f"{selector!r} produced illegal move {move}.")
        state = result.state
        plies += 1
    return state, plies


def evaluate_strategies(
    black_strategy: Union[Strategy, str],
    white_strategy: Union[Strategy, str],
    *,
    episodes: int,
    seed: Optional[int] = None,
    progress: Optional[Callable[[Iterable[int]], Iterable[int]]] = None,
) -> EvaluationResult:
    black_strategy = Strategy.parse(black_strategy)
    white_strategy = Strategy.parse(white_strategy)
    rng = np.random.default_rng(seed)
    black = MoveSelector(black_strategy, rng=np.random.default_rng(int(rng.integers(2**32))))
    white = MoveSelector(white_strategy, rng=np.random.default_rng(int(rng.integers(2**32))))

    black_wins = 0
    white_wins = 0
    draws = 0
    total_ply = 0
    total_black = 0
    total_white = 0

    games: Iterable[int] = range(episodes)
    if progress is not None:
        games = progress(games)

    for _ in games:
        final_state, plies = play_game(black, white)
        total_ply += plies
        total_black += final_state.black_count
        total_white += final_state.white_count

        outcome = winner(final_state)
        if outcome == Winner.BLACK:
            black_wins += 1
        elif outcome == Winner.WHITE:
            white_wins += 1
        else:
            draws += 1

    games_played = max(1, episodes)
    result = EvaluationResult(
        black_strategy=black_strategy,
        white_strategy=white_strategy,
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=total_ply / games_played,
        average_black_discs=total_black / games_played,
        average_white_discs=total_white / games_played,
    )
    logger.info(
        "%s (black) vs %s (white): %d games, %d-%d-%d",
        black_strategy.value,
        white_strategy.value,
        episodes,
        black_wins,
        white_wins,
        draws,
    )
    return result
