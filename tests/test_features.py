import numpy as np

from othello.core import (
    Player,
    Position,
    encode_position,
    initial_board,
    initialize_game_state,
    legal_moves,
    submit_move,
)
from othello.features import (
    Transform,
    all_transforms,
    build_board_tensor,
    legal_move_mask,
    swap_colours,
    transform_board,
    transform_position,
    transform_positions,
)
from othello.selector import MoveSelector, Strategy


def test_board_tensor_initial_planes():
    state = initialize_game_state()
    tensor = build_board_tensor(state)

    assert tensor.shape == (3, 8, 8)
    assert tensor.dtype == np.float32
    assert tensor[0].sum() == 2
    assert tensor[1].sum() == 2
    assert tensor[2].sum() == 4
    # Black to move: (3,4) is ours, (3,3) is the opponent's
    assert tensor[0, 3, 4] == 1.0
    assert tensor[1, 3, 3] == 1.0
    assert tensor[2, 2, 3] == 1.0


def test_board_tensor_follows_player_to_move():
    state = submit_move(initialize_game_state(), Position(2, 3)).state
    tensor = build_board_tensor(state)

    assert state.player_to_move == Player.WHITE
    assert tensor[0].sum() == 1
    assert tensor[1].sum() == 4


def test_legal_move_mask_matches_moves():
    state = initialize_game_state()
    mask = legal_move_mask(state)

    assert mask.shape == (64,)
    assert np.count_nonzero(mask) == len(state.legal_moves)
    for move in state.legal_moves:
        assert mask[encode_position(move)] == 1


def test_transform_position_rot90():
    assert transform_position(Transform.ROT90, Position(0, 1)) == Position(1, 7)
    assert transform_position(Transform.ROT180, Position(2, 3)) == Position(5, 4)


def test_initial_moves_symmetric_under_rotation():
    board = initial_board()
    black = set(legal_moves(board, Player.BLACK))
    white = set(legal_moves(board, Player.WHITE))

    assert transform_positions(Transform.ROT180, black) == black
    assert transform_positions(Transform.ROT180, white) == white
    assert np.array_equal(transform_board(board, Transform.ROT180), board)


def test_mirror_swaps_colours_of_initial_layout():
    board = initial_board()

    assert np.array_equal(transform_board(board, Transform.FLIP_H, swap=True), board)
    black = legal_moves(board, Player.BLACK)
    white = set(legal_moves(board, Player.WHITE))
    assert transform_positions(Transform.FLIP_H, black) == white


def test_legal_moves_commute_with_every_transform():
    selector = MoveSelector(Strategy.GREEDY)
    state = initialize_game_state()
    for _ in range(6):
        move = selector.get_best_move(state.board, state.player_to_move)
        state = submit_move(state, move).state

    for transform in all_transforms():
        moved = transform_board(state.board, transform)
        for player in Player:
            expected = transform_positions(transform, legal_moves(state.board, player))
            assert set(legal_moves(moved, player)) == expected


def test_swap_colours_is_involution():
    board = initial_board()
    swapped = swap_colours(board)

    assert swapped[3, 3] == int(Player.BLACK)
    assert np.array_equal(swap_colours(swapped), board)
    assert not swapped.flags.writeable
