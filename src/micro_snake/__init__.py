"""Micro Snake — deterministic snake engine and autoplay policy."""

from micro_snake.autoplay import (
    AutoplayConfig,
    Difficulty,
    DifficultyPreset,
    autoplay_step,
    suggest_direction,
)
from micro_snake.config import GameConfig
from micro_snake.engine import GameState
from micro_snake.grid import Grid, GridPoint
from micro_snake.rng import RandomSource, default_rng
from micro_snake.session import Action, GameSession
from micro_snake.snake import Direction, Snake

__all__ = [
    "Action",
    "AutoplayConfig",
    "Difficulty",
    "DifficultyPreset",
    "Direction",
    "GameConfig",
    "GameSession",
    "GameState",
    "Grid",
    "GridPoint",
    "RandomSource",
    "Snake",
    "autoplay_step",
    "default_rng",
    "suggest_direction",
]
