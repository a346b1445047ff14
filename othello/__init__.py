"""Othello rules engine and computer opponent."""

from . import core, env, evaluation, features, orchestration, selector
from .core import (
    Cell,
    GameState,
    GameStatus,
    MoveResult,
    Player,
    Position,
    Winner,
    initialize_game_state,
    submit_move,
)
from .env import OthelloEnv
from .evaluation import EvaluationResult, evaluate_strategies
from .orchestration import GameMode, GameSession, SessionConfig
from .selector import MoveSelector, Strategy

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "orchestration",
    "selector",
    "Cell",
    "GameState",
    "GameStatus",
    "MoveResult",
    "Player",
    "Position",
    "Winner",
    "initialize_game_state",
    "submit_move",
    "OthelloEnv",
    "EvaluationResult",
    "evaluate_strategies",
    "GameMode",
    "GameSession",
    "SessionConfig",
    "MoveSelector",
    "Strategy",
]
