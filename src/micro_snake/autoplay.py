"""Heuristic autoplay policy with difficulty presets."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from micro_snake.rng import RandomSource, chance, choice
from micro_snake.snake import Direction

if TYPE_CHECKING:
    from micro_snake.engine import GameState

logger = logging.getLogger(__name__)


class Difficulty(enum.Enum):
    """Named autoplay presets, ordered from calmest to sharpest."""

    RELAXED = "relaxed"
    NORMAL = "normal"
    INTENSE = "intense"


@dataclass(frozen=True)
class DifficultyPreset:
    """How strongly the policy chases food, and how fast the game ticks.

    ``tick_interval`` is in seconds and is only read by whoever drives the
    game loop.
    """

    commit_probability: float
    tick_interval: float
    keep_heading: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.commit_probability <= 1.0:
            raise ValueError("commit_probability must be within [0, 1].")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")


DEFAULT_PRESETS: dict[Difficulty, DifficultyPreset] = {
    Difficulty.RELAXED: DifficultyPreset(
        commit_probability=0.3, tick_interval=0.24,
    ),
    Difficulty.NORMAL: DifficultyPreset(
        commit_probability=0.7, tick_interval=0.18,
    ),
    Difficulty.INTENSE: DifficultyPreset(
        commit_probability=0.95, tick_interval=0.12, keep_heading=True,
    ),
}

ALL_DIFFICULTIES: list[Difficulty] = list(Difficulty)


@dataclass
class AutoplayConfig:
    """Preset table keyed by difficulty name, loadable from JSON."""

    presets: dict[str, DifficultyPreset]

    @classmethod
    def default(cls) -> AutoplayConfig:
        return cls(presets={d.value: p for d, p in DEFAULT_PRESETS.items()})

    def get(self, difficulty: Difficulty | str) -> DifficultyPreset:
        """Look up the preset for a difficulty."""
        name = difficulty.value if isinstance(difficulty, Difficulty) else difficulty
        try:
            return self.presets[name]
        except KeyError:
            raise KeyError(f"Difficulty {name!r} not found in config.") from None

    def to_dict(self) -> dict:
        return {
            "presets": {
                name: asdict(preset) for name, preset in self.presets.items()
            },
        }

    def save(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Autoplay presets saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> AutoplayConfig:
        raw = json.loads(Path(path).read_text())
        presets = {
            name: DifficultyPreset(**values)
            for name, values in raw["presets"].items()
        }
        return cls(presets=presets)


def safe_directions(state: GameState) -> list[Direction]:
    """Directions that would survive the next tick, in declaration order."""
    reverse = state.direction.opposite if len(state.snake) > 1 else None
    return [
        direction
        for direction in Direction
        if direction != reverse
        and not state.is_fatal(state.head.moved(direction))
    ]


def _closest_to_food(
    state: GameState, candidates: list[Direction],
) -> list[Direction]:
    if state.food is None:
        return list(candidates)
    distances = {
        d: state.head.moved(d).distance(state.food) for d in candidates
    }
    shortest = min(distances.values())
    return [d for d in candidates if distances[d] == shortest]


def suggest_direction(
    state: GameState,
    rng: RandomSource,
    preset: DifficultyPreset,
) -> Direction:
    """Pick a heading that moves toward the food, with preset-tuned noise.

    Reads *state* only; entropy comes from *rng*. When every move is fatal
    the current heading is returned unchanged.
    """
    safe = safe_directions(state)
    if not safe:
        return state.direction

    best = _closest_to_food(state, safe)
    if preset.keep_heading and state.direction in best:
        return state.direction
    if chance(rng, preset.commit_probability):
        return choice(rng, best)
    return choice(rng, safe)


def autoplay_step(
    state: GameState,
    rng: RandomSource,
    preset: DifficultyPreset,
) -> Direction | None:
    """Request the suggested heading through :meth:`GameState.set_direction`.

    Returns ``None`` without drawing from *rng* when the game is over or
    paused.
    """
    if state.is_game_over or state.is_paused:
        return None
    direction = suggest_direction(state, rng, preset)
    state.set_direction(direction)
    return direction
