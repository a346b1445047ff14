from __future__ import annotations

import numpy as np

from othello.core import BOARD_SIZE, GameState, positions_to_mask

BOARD_CHANNELS = 3  # stones to move, opponent stones, legal moves


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board planes with shape (3, 8, 8) from the mover's point of view."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    mover = state.player_to_move
    tensor[0] = state.board == int(mover)
    tensor[1] = state.board == int(mover.opponent)
    tensor[2] = legal_move_mask(state).reshape(BOARD_SIZE, BOARD_SIZE)
    return tensor


def legal_move_mask(state: GameState) -> np.ndarray:
    return positions_to_mask(state.legal_moves)
