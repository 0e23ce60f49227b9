"""Tick-based game state composing grid, snake, and food logic."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable

from micro_snake.grid import Grid, GridPoint
from micro_snake.rng import RandomSource, uniform_index
from micro_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameState:
    """Single-snake game state and its gameplay operations.

    All abnormal outcomes (walls, self-collision, a full board) are state
    transitions that set :attr:`is_game_over`; nothing here raises once the
    state has been constructed. Every operation that needs entropy takes
    the random source explicitly.
    """

    def __init__(
        self,
        columns: int,
        rows: int,
        snake: Iterable[GridPoint | tuple[int, int]],
        direction: Direction = Direction.RIGHT,
        food: GridPoint | tuple[int, int] | None = None,
        *,
        pending_growth: int = 0,
        score: int = 0,
        is_game_over: bool = False,
        is_paused: bool = False,
    ) -> None:
        if pending_growth < 0:
            raise ValueError("pending_growth must be non-negative.")
        if score < 0:
            raise ValueError("score must be non-negative.")
        self.grid = Grid(columns, rows)
        self._snake = Snake(snake)
        self._direction = direction
        self._pending_direction: Direction | None = None
        self._food = GridPoint(*food) if food is not None else None
        self._pending_growth = pending_growth
        self._score = score
        self._is_game_over = is_game_over
        self._is_paused = is_paused

    @classmethod
    def new_game(
        cls, columns: int, rows: int, rng: RandomSource,
    ) -> GameState:
        """Start a game with a centred three-segment snake and food."""
        state = cls(columns, rows, Snake.centered(columns, rows), Direction.RIGHT)
        state.place_food(rng)
        return state

    # --- read accessors ---

    @property
    def columns(self) -> int:
        return self.grid.columns

    @property
    def rows(self) -> int:
        return self.grid.rows

    @property
    def snake(self) -> tuple[GridPoint, ...]:
        return tuple(self._snake)

    @property
    def head(self) -> GridPoint:
        return self._snake.head

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction | None:
        return self._pending_direction

    @property
    def food(self) -> GridPoint | None:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def pending_growth(self) -> int:
        return self._pending_growth

    @property
    def is_game_over(self) -> bool:
        return self._is_game_over

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    # --- rules shared with the autoplay policy ---

    def will_grow(self, next_head: GridPoint) -> bool:
        """Whether moving onto *next_head* keeps the tail this tick."""
        return self._pending_growth > 0 or next_head == self._food

    def is_fatal(self, next_head: GridPoint) -> bool:
        """Whether moving the head onto *next_head* would end the game."""
        if not self.grid.in_bounds(next_head):
            return True
        return self._snake.collides(next_head, self.will_grow(next_head))

    # --- mutators ---

    def set_direction(self, direction: Direction) -> None:
        """Buffer a heading for the next tick; the latest request wins."""
        if self._is_game_over:
            return
        if len(self._snake) > 1 and direction == self._direction.opposite:
            return
        self._pending_direction = direction

    def toggle_pause(self) -> None:
        """Flip between running and paused."""
        if self._is_game_over:
            return
        self._is_paused = not self._is_paused

    def tick(self, rng: RandomSource) -> None:
        """Advance the game by one step."""
        if self._is_game_over or self._is_paused:
            return

        if self._pending_direction is not None:
            self._direction = self._pending_direction
            self._pending_direction = None

        next_head = self._snake.head.moved(self._direction)

        # --- boundary check ---
        if not self.grid.in_bounds(next_head):
            self._end_game("wall")
            return

        # --- self-collision check (look-ahead) ---
        # The tail only counts when it will not be removed this tick.
        will_grow = self.will_grow(next_head)
        if self._snake.collides(next_head, will_grow):
            self._end_game("self-collision")
            return

        # --- move ---
        ate = next_head == self._food
        if ate:
            self._score += 1
            self._pending_growth += 1

        grow = self._pending_growth > 0
        if grow:
            self._pending_growth -= 1
        self._snake.advance(next_head, grow)

        # The body keeps its tail on this tick, so it already matches
        # the post-tick snake when the replacement food is placed.
        if ate:
            self.place_food(rng)

    def place_food(self, rng: RandomSource) -> None:
        """Put food on a uniformly chosen free cell.

        Free cells are enumerated row-major so a given random stream always
        picks the same cell. A full board ends the game and clears the food.
        """
        available = self.grid.free_cells(self._snake)
        if not available:
            logger.warning("No free cells left for food; board is full.")
            self._food = None
            self._end_game("board full")
            return
        self._food = available[uniform_index(rng, len(available))]

    def reset(self, rng: RandomSource) -> None:
        """Replace everything with a fresh game of the same dimensions."""
        fresh = GameState.new_game(self.columns, self.rows, rng)
        self.__dict__.update(fresh.__dict__)

    # --- snapshots ---

    def copy(self) -> GameState:
        """Return an independent copy of this state."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "columns": self.columns,
            "rows": self.rows,
            "snake": [list(seg) for seg in self._snake],
            "direction": self._direction.name.lower(),
            "pending_direction": (
                self._pending_direction.name.lower()
                if self._pending_direction is not None else None
            ),
            "food": list(self._food) if self._food is not None else None,
            "score": self._score,
            "pending_growth": self._pending_growth,
            "is_game_over": self._is_game_over,
            "is_paused": self._is_paused,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"GameState({self.columns}x{self.rows}, length={len(self._snake)}, "
            f"score={self._score}, game_over={self._is_game_over})"
        )

    def _end_game(self, cause: str) -> None:
        self._is_game_over = True
        logger.info(
            "Game over (%s) with score %d and length %d.",
            cause, self._score, len(self._snake),
        )
