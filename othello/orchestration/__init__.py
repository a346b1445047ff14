"""Game session orchestration used by front ends."""

from .session import GameMode, GameSession, SessionConfig

__all__ = ["GameMode", "GameSession", "SessionConfig"]
