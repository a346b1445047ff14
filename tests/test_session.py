import numpy as np
import pytest

from othello.core import GameStatus, Player, Position, Winner, initialize_game_state
from othello.orchestration import GameMode, GameSession, SessionConfig
from othello.selector import MoveSelector, Strategy


def test_new_session_starts_from_initial_state():
    session = GameSession()

    assert session.state == initialize_game_state()
    assert len(session.history) == 1
    assert session.status_text() == "Black's turn"


def test_accepted_move_is_recorded():
    session = GameSession()
    result = session.play(Position(2, 3))

    assert result.accepted
    assert len(session.history) == 2
    assert session.state is result.state
    assert session.status_text() == "White's turn"


def test_rejected_move_leaves_history_alone():
    session = GameSession()
    before = session.state

    result = session.play(Position(0, 0))

    assert not result.accepted
    assert session.state is before
    assert len(session.history) == 1


def test_undo_restores_previous_state():
    session = GameSession()
    session.play(Position(2, 3))
    session.play(Position(2, 2))

    assert session.undo()
    assert session.state.player_to_move == Player.WHITE
    assert len(session.history) == 2
    assert session.undo()
    assert session.state == initialize_game_state()
    assert not session.undo()
    assert len(session.history) == 1


def test_reset_discards_history():
    session = GameSession()
    session.play(Position(2, 3))

    state = session.reset()

    assert state == initialize_game_state()
    assert session.history == (state,)


def test_human_cannot_play_for_automated_seat():
    sleeps = []
    session = GameSession(
        SessionConfig(mode=GameMode.HUMAN_VS_AUTOMATED, think_delay_sec=0.8),
        sleep=sleeps.append,
    )
    assert not session.automated_to_move()
    assert not session.play_automated().accepted
    assert session.status_text() == "Your turn"

    session.play(Position(2, 3))
    assert session.automated_to_move()
    assert session.status_text() == "AI's turn"
    assert not session.play(Position(2, 2)).accepted

    result = session.play_automated()

    assert result.accepted
    assert sleeps == [0.8]
    assert session.state.player_to_move == Player.BLACK
    assert len(session.history) == 3


def test_automated_move_uses_selected_strategy():
    session = GameSession(SessionConfig(mode=GameMode.HUMAN_VS_AUTOMATED, strategy=Strategy.GREEDY))
    session.play(Position(2, 3))

    result = session.play_automated(delay=0)

    # every White reply flips one stone; greedy keeps the first in row-major order
    assert result.position == session.history[1].legal_moves[0]


def test_set_strategy_updates_selector():
    session = GameSession()
    session.set_strategy("random")

    assert session.selector.get_strategy() == Strategy.RANDOM
    assert session.config.strategy == Strategy.RANDOM


def test_mode_change_starts_new_game():
    session = GameSession()
    session.play(Position(2, 3))

    session.set_mode("hva")

    assert session.mode == GameMode.HUMAN_VS_AUTOMATED
    assert len(session.history) == 1


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        GameMode.parse("ai-vs-ai")


def test_automated_game_reaches_terminal_state():
    session = GameSession(
        SessionConfig(mode=GameMode.HUMAN_VS_AUTOMATED, strategy=Strategy.CORNER_PREFERRED, seed=1),
    )
    human = MoveSelector(Strategy.RANDOM, rng=np.random.default_rng(2))

    while not session.state.is_terminal:
        if session.automated_to_move():
            assert session.play_automated(delay=0).accepted
        else:
            state = session.state
            move = human.get_best_move(state.board, state.player_to_move)
            assert session.play(move).accepted

    assert session.state.status in (GameStatus.FINISHED, GameStatus.DRAW)
    outcome = session.winner()
    assert outcome is not None
    if outcome == Winner.DRAW:
        assert session.status_text() == "It's a draw!"
    elif outcome == Winner.WHITE:
        assert session.status_text() == "AI wins!"
    else:
        assert session.status_text() == "You win!"
