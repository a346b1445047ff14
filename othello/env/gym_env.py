from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from othello.core import (
    BOARD_SIZE,
    POSITION_COUNT,
    Cell,
    GameState,
    Winner,
    decode_position,
    initialize_game_state,
    submit_move,
    winner,
)
from othello.features import BOARD_CHANNELS, build_board_tensor, legal_move_mask


class OthelloEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "to_move": spaces.Discrete(3),
            }
        )
        self.action_space = spaces.Discrete(POSITION_COUNT)

        self._state = initialize_game_state()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = initialize_game_state()
        return self._build_observation(), self._build_info(skipped=False)

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        result = submit_move(self._state, decode_position(int(action_index)))
        if not result.accepted:
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            return self._build_observation(), 0.0, self._state.is_terminal, False, self._build_info(skipped=False)

        self._state = result.state
        reward = self._compute_reward(self._state)
        terminated = self._state.is_terminal
        return self._build_observation(), reward, terminated, False, self._build_info(result.skipped is not None)

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, object]:
        return {
            "board": build_board_tensor(self._state),
            "to_move": int(self._state.player_to_move),
        }

    def _build_info(self, skipped: bool) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "black_count": self._state.black_count,
            "white_count": self._state.white_count,
            "skipped": skipped,
        }

    def _compute_reward(self, state: GameState) -> float:
        outcome = winner(state)
        if outcome == Winner.BLACK:
            return 1.0
        if outcome == Winner.WHITE:
            return -1.0
        return 0.0

    def _render_ascii(self) -> str:
        symbols = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
        rows = []
        for r in range(BOARD_SIZE):
            row = "".join(symbols[Cell(int(self._state.board[r, c]))] for c in range(BOARD_SIZE))
            rows.append(row)
        return "\n".join(rows)
