# src/snake/__init__.py
"""Snake: a single-player grid game with a persisted high score."""

from .game import GameState, new_game_state, request_direction, spawn_food, step_game
from .session import GameSession, Snapshot
from .storage import HighScoreStore

__all__ = [
    "GameState", "new_game_state", "request_direction", "spawn_food", "step_game",
    "GameSession", "Snapshot", "HighScoreStore",
]
