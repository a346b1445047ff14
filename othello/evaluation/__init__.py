"""Evaluation helpers for Othello move selectors."""

from .match import EvaluationResult, evaluate_strategies, play_game

__all__ = ["EvaluationResult", "evaluate_strategies", "play_game"]
