"""Game loop driver owning the state, random source, and tick cadence."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Callable

from micro_snake.autoplay import AutoplayConfig, DifficultyPreset, autoplay_step
from micro_snake.config import GameConfig
from micro_snake.engine import GameState
from micro_snake.rng import RandomSource, default_rng
from micro_snake.snake import Direction

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    """Non-directional session commands."""

    PAUSE = "pause"
    RESTART = "restart"


# Arrow keys, WASD, space to pause, r to restart.
KEY_BINDINGS: dict[str, Direction | Action] = {
    "up": Direction.UP,
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "left": Direction.LEFT,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    " ": Action.PAUSE,
    "space": Action.PAUSE,
    "r": Action.RESTART,
}


class GameSession:
    """Owns one game and feeds it input, autoplay, and ticks.

    A presentation layer calls :meth:`handle_key` for input events and
    either :meth:`step` from its own timer or awaits :meth:`run`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: RandomSource | None = None,
        presets: AutoplayConfig | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else default_rng(self.config.seed)
        self.presets = (
            presets if presets is not None else AutoplayConfig.default()
        )
        if self.config.difficulty not in self.presets.presets:
            raise ValueError(
                f"Unknown difficulty {self.config.difficulty!r}; "
                f"available: {', '.join(sorted(self.presets.presets))}.",
            )
        self.preset: DifficultyPreset = self.presets.get(self.config.difficulty)
        self.autoplay = self.config.autoplay
        self.state = GameState.new_game(
            self.config.columns, self.config.rows, self.rng,
        )
        self.ticks = 0

    @property
    def tick_interval(self) -> float:
        """Seconds between ticks."""
        if self.config.tick_interval is not None:
            return self.config.tick_interval
        return self.preset.tick_interval

    def handle_key(self, key: str) -> bool:
        """Apply a key press. Returns False for unbound keys."""
        action = KEY_BINDINGS.get(key.lower())
        if action is None:
            return False
        if isinstance(action, Direction):
            self.state.set_direction(action)
        elif action is Action.PAUSE:
            self.state.toggle_pause()
        elif action is Action.RESTART:
            self.restart()
        return True

    @property
    def is_active(self) -> bool:
        """Whether the next tick will advance the game."""
        return not (self.state.is_game_over or self.state.is_paused)

    def step(self) -> bool:
        """Run autoplay (if enabled) and advance one tick.

        Returns False, counting nothing, when the game is paused or over.
        A tick that ends the game still counts.
        """
        if not self.is_active:
            return False
        if self.autoplay:
            autoplay_step(self.state, self.rng, self.preset)
        self.state.tick(self.rng)
        self.ticks += 1
        return True

    def restart(self) -> None:
        """Discard the current game and start a fresh one."""
        self.state.reset(self.rng)
        self.ticks = 0
        logger.debug("Session restarted.")

    async def run(
        self,
        *,
        max_ticks: int | None = None,
        on_tick: Callable[[GameState], None] | None = None,
    ) -> GameState:
        """Tick at :attr:`tick_interval` until game over or *max_ticks*.

        Paused intervals do not count toward *max_ticks*; *on_tick* still
        fires every interval so the caller can redraw or resume.
        """
        count = 0
        while not self.state.is_game_over:
            if max_ticks is not None and count >= max_ticks:
                break
            await asyncio.sleep(self.tick_interval)
            if self.step():
                count += 1
            if on_tick is not None:
                on_tick(self.state)
        logger.info(
            "Session stopped after %d ticks with score %d.",
            self.ticks, self.state.score,
        )
        return self.state
