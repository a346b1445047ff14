"""Feature extraction helpers for Othello."""

from .observation import BOARD_CHANNELS, build_board_tensor, legal_move_mask
from .symmetry import (
    Transform,
    all_transforms,
    swap_colours,
    transform_board,
    transform_position,
    transform_positions,
)

__all__ = [
    "BOARD_CHANNELS",
    "build_board_tensor",
    "legal_move_mask",
    "Transform",
    "all_transforms",
    "swap_colours",
    "transform_board",
    "transform_position",
    "transform_positions",
]
