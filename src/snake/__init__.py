# src/snake/__init__.py
"""Grid Snake: game state, rendering, input and loop driver for pygame."""

from .config import CFG, Config
from .grid import Direction
from .game import GameState, new_game_state, reset_game, set_direction, toggle_pause, step_game

__all__ = [
    "CFG", "Config", "Direction", "GameState",
    "new_game_state", "reset_game", "set_direction", "toggle_pause", "step_game",
]
