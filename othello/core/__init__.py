"""Core game logic for Othello."""

from .state import (
    BOARD_SIZE,
    BoardArray,
    Cell,
    GameState,
    GameStatus,
    MoveResult,
    Player,
    Position,
    Score,
    Winner,
)
from .rules import (
    DIRECTIONS,
    POSITION_COUNT,
    apply_move,
    decode_position,
    derive_game_state,
    empty_count,
    encode_position,
    flipped_by,
    in_bounds,
    initial_board,
    initialize_game_state,
    is_legal,
    legal_moves,
    make_board,
    opposite_of,
    positions_to_mask,
    score,
    submit_move,
    winner,
)

__all__ = [
    "BOARD_SIZE",
    "BoardArray",
    "Cell",
    "GameState",
    "GameStatus",
    "MoveResult",
    "Player",
    "Position",
    "Score",
    "Winner",
    "DIRECTIONS",
    "POSITION_COUNT",
    "apply_move",
    "decode_position",
    "derive_game_state",
    "empty_count",
    "encode_position",
    "flipped_by",
    "in_bounds",
    "initial_board",
    "initialize_game_state",
    "is_legal",
    "legal_moves",
    "make_board",
    "opposite_of",
    "positions_to_mask",
    "score",
    "submit_move",
    "winner",
]
