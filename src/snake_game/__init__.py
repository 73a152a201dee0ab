# src/snake_game/__init__.py
"""Snake on a fixed grid: game rules, speed curve, tick clock and pygame front end."""

from snake_game.game import GameState, StepOutcome, new_game_state, spawn_food, step_game
from snake_game.session import SnakeSession
from snake_game.speed import SpeedController, interval_for

__all__ = [
    "GameState",
    "StepOutcome",
    "new_game_state",
    "spawn_food",
    "step_game",
    "SnakeSession",
    "SpeedController",
    "interval_for",
]
