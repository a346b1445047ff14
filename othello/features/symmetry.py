from __future__ import annotations

from enum import Enum, auto
from typing import Callable, Dict, FrozenSet, Iterable, Tuple

import numpy as np

from othello.core import BOARD_SIZE, BoardArray, Cell, Position, make_board

BOARD_DIM = BOARD_SIZE


class Transform(Enum):
    IDENTITY = auto()
    ROT90 = auto()
    ROT180 = auto()
    ROT270 = auto()
    FLIP_H = auto()
    FLIP_V = auto()
    FLIP_MAIN_DIAG = auto()
    FLIP_ANTI_DIAG = auto()


def _identity(r: int, c: int) -> Tuple[int, int]:
    return r, c


def _rot90(r: int, c: int) -> Tuple[int, int]:
    return c, BOARD_DIM - 1 - r


def _rot180(r: int, c: int) -> Tuple[int, int]:
    return BOARD_DIM - 1 - r, BOARD_DIM - 1 - c


def _rot270(r: int, c: int) -> Tuple[int, int]:
    return BOARD_DIM - 1 - c, r


def _flip_h(r: int, c: int) -> Tuple[int, int]:
    return r, BOARD_DIM - 1 - c


def _flip_v(r: int, c: int) -> Tuple[int, int]:
    return BOARD_DIM - 1 - r, c


def _flip_main_diag(r: int, c: int) -> Tuple[int, int]:
    return c, r


def _flip_anti_diag(r: int, c: int) -> Tuple[int, int]:
    return BOARD_DIM - 1 - c, BOARD_DIM - 1 - r


_POSITION_FNS: Dict[Transform, Callable[[int, int], Tuple[int, int]]] = {
    Transform.IDENTITY: _identity,
    Transform.ROT90: _rot90,
    Transform.ROT180: _rot180,
    Transform.ROT270: _rot270,
    Transform.FLIP_H: _flip_h,
    Transform.FLIP_V: _flip_v,
    Transform.FLIP_MAIN_DIAG: _flip_main_diag,
    Transform.FLIP_ANTI_DIAG: _flip_anti_diag,
}

_SWAPPED = {Cell.EMPTY: Cell.EMPTY, Cell.BLACK: Cell.WHITE, Cell.WHITE: Cell.BLACK}


def all_transforms() -> Iterable[Transform]:
    return list(_POSITION_FNS.keys())


def transform_position(transform: Transform, pos: Position) -> Position:
    row, col = _POSITION_FNS[transform](pos.row, pos.col)
    return Position(row, col)


def transform_positions(transform: Transform, positions: Iterable[Position]) -> FrozenSet[Position]:
    return frozenset(transform_position(transform, pos) for pos in positions)


def swap_colours(board: BoardArray) -> BoardArray:
    swapped = np.zeros_like(board)
    for cell, mapped in _SWAPPED.items():
        swapped[board == cell] = mapped
    return make_board(swapped)


def transform_board(board: BoardArray, transform: Transform, *, swap: bool = False) -> BoardArray:
    """Move every stone to its transformed square, optionally swapping colours."""
    result = np.zeros_like(board)
    for (row, col), value in np.ndenumerate(board):
        nr, nc = _POSITION_FNS[transform](row, col)
        result[nr, nc] = value
    if swap:
        return swap_colours(result)
    return make_board(result)
