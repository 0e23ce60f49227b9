"""Headless autoplay simulation for measuring policy score and throughput."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from micro_snake.autoplay import AutoplayConfig
from micro_snake.config import GameConfig
from micro_snake.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Results from a batch of autoplay games."""

    num_games: int
    total_ticks: int
    total_score: int
    best_score: int
    wall_time_seconds: float

    @property
    def mean_score(self) -> float:
        return self.total_score / self.num_games

    @property
    def games_per_second(self) -> float:
        return self.num_games / max(self.wall_time_seconds, 1e-9)

    @property
    def ticks_per_second(self) -> float:
        return self.total_ticks / max(self.wall_time_seconds, 1e-9)

    def summary(self) -> str:
        return (
            f"Simulation: {self.num_games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.2f}, best {self.best_score} | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def simulate(
    *,
    num_games: int = 100,
    columns: int = 18,
    rows: int = 18,
    difficulty: str = "normal",
    seed: int | None = 42,
    max_ticks: int = 2_000,
    presets: AutoplayConfig | None = None,
) -> SimulationResult:
    """Play *num_games* autoplay games back to back on one random stream.

    Each game ends on game over or after *max_ticks* ticks. *difficulty*
    is looked up in *presets*, which defaults to the built-in table.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")

    config = GameConfig(
        columns=columns, rows=rows, seed=seed,
        difficulty=difficulty, autoplay=True,
    )
    session = GameSession(config, presets=presets)

    total_ticks = 0
    total_score = 0
    best_score = 0
    start = time.perf_counter()

    for game in range(num_games):
        if game > 0:
            session.restart()
        while not session.state.is_game_over and session.ticks < max_ticks:
            session.step()
        total_ticks += session.ticks
        total_score += session.state.score
        best_score = max(best_score, session.state.score)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        num_games=num_games,
        total_ticks=total_ticks,
        total_score=total_score,
        best_score=best_score,
        wall_time_seconds=elapsed,
    )
    logger.info(result.summary())
    return result
