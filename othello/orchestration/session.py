from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

import numpy as np

from othello.core import (
    GameState,
    GameStatus,
    MoveResult,
    Player,
    Position,
    Winner,
    initialize_game_state,
    submit_move,
    winner,
)
from othello.selector import MoveSelector, Strategy

logger = logging.getLogger(__name__)


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human-vs-human"
    HUMAN_VS_AUTOMATED = "human-vs-ai"

    @classmethod
    def parse(cls, value: Union[str, "GameMode"]) -> "GameMode":
        if isinstance(value, GameMode):
            return value
        key = str(value).strip().lower()
        aliases = {"hvh": cls.HUMAN_VS_HUMAN, "hva": cls.HUMAN_VS_AUTOMATED}
        if key in aliases:
            return aliases[key]
        for mode in cls:
            if key in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(f"Unknown game mode {value!r}.")


@dataclass
class SessionConfig:
    mode: GameMode = GameMode.HUMAN_VS_HUMAN
    strategy: Strategy = Strategy.GREEDY
    automated_player: Player = Player.WHITE
    think_delay_sec: float = 0.0
    seed: Optional[int] = None


class GameSession:
    """One game as seen by a front end: current state, history, undo and the AI seat.

    Human and automated moves both go through ``submit_move``; the optional
    thinking delay is applied here before asking the selector, never in the
    rules or the selector.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        selector: Optional[MoveSelector] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or SessionConfig()
        self.selector = selector or MoveSelector(
            self.config.strategy,
            rng=np.random.default_rng(self.config.seed),
        )
        self._sleep = sleep
        self._history: List[GameState] = []
        self.reset()

    @property
    def state(self) -> GameState:
        return self._history[-1]

    @property
    def history(self) -> Tuple[GameState, ...]:
        return tuple(self._history)

    @property
    def mode(self) -> GameMode:
        return self.config.mode

    def set_mode(self, mode: Union[GameMode, str]) -> GameState:
        """Switch game mode; a mode change starts a new game."""
        self.config.mode = GameMode.parse(mode)
        return self.reset()

    def set_strategy(self, strategy: Union[Strategy, str]) -> None:
        self.selector.set_strategy(strategy)
        self.config.strategy = self.selector.get_strategy()

    def reset(self) -> GameState:
        self._history = [initialize_game_state()]
        logger.debug("New game (mode=%s)", self.config.mode.value)
        return self.state

    def undo(self) -> bool:
        if len(self._history) <= 1:
            return False
        self._history.pop()
        logger.debug("Undo; %d states remain", len(self._history))
        return True

    def automated_to_move(self) -> bool:
        return (
            self.config.mode == GameMode.HUMAN_VS_AUTOMATED
            and self.state.status == GameStatus.PLAYING
            and self.state.player_to_move == self.config.automated_player
        )

    def play(self, pos: Position) -> MoveResult:
        """Submit a move entered by a human."""
        if self.automated_to_move():
            return MoveResult.rejected(self.state, pos)
        return self._commit(submit_move(self.state, pos))

    def play_automated(self, delay: Optional[float] = None) -> MoveResult:
        if not self.automated_to_move():
            return MoveResult.rejected(self.state)

        delay = self.config.think_delay_sec if delay is None else delay
        if delay > 0:
            self._sleep(delay)

        state = self.state
        move = self.selector.get_best_move(state.board, state.player_to_move)
        if move is None:
            return MoveResult.rejected(state)
        return self._commit(submit_move(state, move))

    def winner(self) -> Optional[Winner]:
        return winner(self.state)

    def status_text(self) -> str:
        outcome = self.winner()
        vs_ai = self.config.mode == GameMode.HUMAN_VS_AUTOMATED
        if outcome == Winner.DRAW:
            return "It's a draw!"
        if outcome is not None:
            player = Player.BLACK if outcome == Winner.BLACK else Player.WHITE
            name = self._seat_name(player, vs_ai)
            return f"{name} win!" if name == "You" else f"{name} wins!"
        if vs_ai:
            return "AI's turn" if self.automated_to_move() else "Your turn"
        return f"{self.state.player_to_move.label}'s turn"

    def _seat_name(self, player: Player, vs_ai: bool) -> str:
        if not vs_ai:
            return player.label
        return "AI" if player == self.config.automated_player else "You"

    def _commit(self, result: MoveResult) -> MoveResult:
        if not result.accepted:
            logger.debug("Rejected move %s", result.position)
            return result

        self._history.append(result.state)
        logger.debug(
            "%s played %s (black=%d, white=%d)",
            self._history[-2].player_to_move.name,
            result.position,
            result.state.black_count,
            result.state.white_count,
        )
        if result.skipped is not None:
            logger.debug("%s has no legal move; turn passes", result.skipped.name)
        if result.state.is_terminal:
            logger.debug("Game over: %s", winner(result.state))
        return result
