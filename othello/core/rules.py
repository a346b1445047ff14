from __future__ import annotations

from typing import FrozenSet, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike

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

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
POSITION_COUNT = BOARD_SIZE * BOARD_SIZE


def initial_board() -> BoardArray:
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    board[3, 3] = Cell.WHITE
    board[4, 4] = Cell.WHITE
    board[3, 4] = Cell.BLACK
    board[4, 3] = Cell.BLACK
    return _freeze(board)


def make_board(cells: ArrayLike) -> BoardArray:
    """Return a read-only board built from an 8x8 array of cell values."""
    board = np.array(cells, dtype=np.int8)
    if board.shape != (BOARD_SIZE, BOARD_SIZE):
        raise ValueError(f"Board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {board.shape}.")
    if not np.isin(board, [int(cell) for cell in Cell]).all():
        raise ValueError("Board contains values that are not cells.")
    return _freeze(board)


def score(board: BoardArray) -> Score:
    black = int(np.count_nonzero(board == Cell.BLACK))
    white = int(np.count_nonzero(board == Cell.WHITE))
    return Score(black=black, white=white)


def empty_count(board: BoardArray) -> int:
    return int(np.count_nonzero(board == Cell.EMPTY))


def opposite_of(player: Player) -> Player:
    return player.opponent


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def flipped_by(board: BoardArray, pos: Position, player: Player) -> FrozenSet[Position]:
    if not in_bounds(pos.row, pos.col) or board[pos.row, pos.col] != Cell.EMPTY:
        return frozenset()

    opponent = opposite_of(player)
    flipped: List[Position] = []
    for dr, dc in DIRECTIONS:
        run: List[Position] = []
        r, c = pos.row + dr, pos.col + dc
        while in_bounds(r, c) and board[r, c] == opponent:
            run.append(Position(r, c))
            r += dr
            c += dc
        # the run only counts when it is closed off by one of the mover's stones
        if run and in_bounds(r, c) and board[r, c] == player:
            flipped.extend(run)
    return frozenset(flipped)


def is_legal(board: BoardArray, pos: Position, player: Player) -> bool:
    if not in_bounds(pos.row, pos.col) or board[pos.row, pos.col] != Cell.EMPTY:
        return False
    return bool(flipped_by(board, pos, player))


def legal_moves(board: BoardArray, player: Player) -> Tuple[Position, ...]:
    """Legal destinations for ``player`` in row-major order."""
    moves: List[Position] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            pos = Position(row, col)
            if is_legal(board, pos, player):
                moves.append(pos)
    return tuple(moves)


def apply_move(board: BoardArray, pos: Position, player: Player) -> Optional[BoardArray]:
    if not is_legal(board, pos, player):
        return None

    new_board = board.copy()
    new_board[pos.row, pos.col] = player
    for flipped in flipped_by(board, pos, player):
        new_board[flipped.row, flipped.col] = player
    return _freeze(new_board)


def derive_game_state(board: BoardArray, player: Player) -> GameState:
    """Build a consistent GameState for ``board`` with ``player`` due to move.

    If ``player`` has no legal move the turn passes to the opponent; if
    neither side can move the state is terminal.
    """
    board = make_board(board)
    counts = score(board)
    moves = legal_moves(board, player)
    to_move = player
    status = GameStatus.PLAYING

    if not moves:
        other_moves = legal_moves(board, opposite_of(player))
        if other_moves:
            to_move = opposite_of(player)
            moves = other_moves
        else:
            status = GameStatus.DRAW if counts.black == counts.white else GameStatus.FINISHED

    return GameState(
        board=board,
        player_to_move=to_move,
        black_count=counts.black,
        white_count=counts.white,
        status=status,
        legal_moves=moves,
    )


def initialize_game_state() -> GameState:
    return derive_game_state(initial_board(), Player.BLACK)


def submit_move(state: GameState, pos: Position) -> MoveResult:
    if state.status != GameStatus.PLAYING or pos not in state.legal_moves:
        return MoveResult.rejected(state, pos)

    mover = state.player_to_move
    new_board = apply_move(state.board, pos, mover)
    if new_board is None:
        return MoveResult.rejected(state, pos)

    next_state = derive_game_state(new_board, opposite_of(mover))
    skipped: Optional[Player] = None
    if next_state.status == GameStatus.PLAYING and next_state.player_to_move == mover:
        skipped = opposite_of(mover)
    return MoveResult(state=next_state, accepted=True, position=pos, skipped=skipped)


def winner(state: GameState) -> Optional[Winner]:
    if state.status == GameStatus.PLAYING:
        return None
    if state.status == GameStatus.DRAW:
        return Winner.DRAW
    return Winner.BLACK if state.black_count > state.white_count else Winner.WHITE


def encode_position(pos: Position) -> int:
    if not in_bounds(pos.row, pos.col):
        raise ValueError(f"Position {pos} is off the board.")
    return pos.row * BOARD_SIZE + pos.col


def decode_position(index: int) -> Position:
    if not 0 <= index < POSITION_COUNT:
        raise ValueError("Position index out of range.")
    row, col = divmod(int(index), BOARD_SIZE)
    return Position(row, col)


def positions_to_mask(positions: Sequence[Position]) -> np.ndarray:
    mask = np.zeros(POSITION_COUNT, dtype=np.int8)
    for pos in positions:
        mask[encode_position(pos)] = 1
    return mask


def _freeze(board: BoardArray) -> BoardArray:
    board.setflags(write=False)
    return board
