"""Gymnasium environment wrapping the Othello rules."""

from .gym_env import OthelloEnv

__all__ = ["OthelloEnv"]
