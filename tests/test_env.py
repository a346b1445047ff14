import numpy as np
import pytest

from othello import OthelloEnv
from othello.core import Position, encode_position, legal_moves


def test_reset_returns_valid_observation():
    env = OthelloEnv()
    obs, info = env.reset()

    assert obs["board"].shape == (3, 8, 8)
    assert obs["to_move"] == 1
    assert "legal_action_mask" in info
    assert info["legal_action_mask"].shape == (64,)
    assert env.observation_space.contains(obs)


def test_legal_mask_matches_enumeration():
    env = OthelloEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = legal_moves(env.state.board, env.state.player_to_move)

    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_position(move)] == 1


def test_step_advances_state_and_returns_reward():
    env = OthelloEnv()
    obs, info = env.reset()
    action = encode_position(Position(2, 3))

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert next_obs["to_move"] == 2
    assert next_info["black_count"] == 4
    assert next_info["white_count"] == 1
    assert np.any(next_obs["board"] != obs["board"])


def test_illegal_action_raises_when_enforced():
    env = OthelloEnv()
    env.reset()

    with pytest.raises(ValueError):
        env.step(0)
    with pytest.raises(ValueError):
        env.step(64)


def test_illegal_action_is_noop_when_not_enforced():
    env = OthelloEnv(enforce_legal_actions=False)
    env.reset()
    before = env.state

    _, reward, terminated, _, _ = env.step(0)

    assert reward == 0.0
    assert not terminated
    assert env.state is before


def test_full_game_terminates_with_signed_reward():
    env = OthelloEnv()
    _, info = env.reset(seed=0)
    rng = np.random.default_rng(5)
    terminated = False
    reward = 0.0
    steps = 0
    while not terminated:
        legal = np.flatnonzero(info["legal_action_mask"])
        _, reward, terminated, _, info = env.step(int(rng.choice(legal)))
        steps += 1

    assert steps <= 60
    black, white = env.state.black_count, env.state.white_count
    if black > white:
        assert reward == 1.0
    elif white > black:
        assert reward == -1.0
    else:
        assert reward == 0.0


def test_render_ansi():
    env = OthelloEnv(render_mode="ansi")
    env.reset()
    rows = env.render().splitlines()

    assert len(rows) == 8
    assert rows[3] == "...WB..."
