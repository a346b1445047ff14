from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

BOARD_SIZE = 8


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2


class Player(IntEnum):
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def label(self) -> str:
        return self.name.capitalize()


class GameStatus(Enum):
    PLAYING = "playing"
    FINISHED = "finished"
    DRAW = "draw"


class Winner(Enum):
    BLACK = "black"
    WHITE = "white"
    DRAW = "draw"


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Score:
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white


@dataclass(frozen=True, eq=False)
class GameState:
    board: BoardArray  # shape (8, 8), dtype=np.int8, read-only; values are Cell
    player_to_move: Player
    black_count: int
    white_count: int
    status: GameStatus
    legal_moves: Tuple[Position, ...]

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.PLAYING

    @property
    def score(self) -> Score:
        return Score(self.black_count, self.white_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.player_to_move == other.player_to_move
            and self.black_count == other.black_count
            and self.white_count == other.white_count
            and self.status == other.status
            and self.legal_moves == other.legal_moves
        )

    def __repr__(self) -> str:
        symbols = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
        board_str = "\n".join("".join(symbols[Cell(int(cell))] for cell in row) for row in self.board)
        return (
            f"GameState(to_move={self.player_to_move.name}, status={self.status.value}, "
            f"black={self.black_count}, white={self.white_count})\n"
            f"{board_str}"
        )


@dataclass(frozen=True)
class MoveResult:
    """Outcome of submitting a move.

    ``state`` is the new state when the move was accepted, otherwise the
    untouched input state. ``skipped`` names the player whose turn was
    passed over because they had no legal reply.
    """

    state: GameState
    accepted: bool
    position: Optional[Position] = None
    skipped: Optional[Player] = None

    @classmethod
    def rejected(cls, state: GameState, position: Optional[Position] = None) -> "MoveResult":
        return cls(state=state, accepted=False, position=position)
