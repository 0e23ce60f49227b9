"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from micro_snake.grid import GridPoint


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """An ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[GridPoint | tuple[int, int]]) -> None:
        self.body: deque[GridPoint] = deque(
            GridPoint(*seg) for seg in segments
        )
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @classmethod
    def centered(cls, columns: int, rows: int) -> Snake:
        """Three segments facing right, head at the board centre."""
        head_x = max(2, columns // 2)
        y = rows // 2
        return cls(GridPoint(head_x - i, y) for i in range(3))

    @property
    def head(self) -> GridPoint:
        return self.body[0]

    @property
    def tail(self) -> GridPoint:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[GridPoint]:
        return iter(self.body)

    def __contains__(self, point: object) -> bool:
        return point in self.body

    def collides(self, point: GridPoint, growing: bool) -> bool:
        """Check whether moving the head onto *point* hits the body.

        A snake that is not growing vacates its tail on the same tick, so
        the tail cell only counts while growing.
        """
        segments = list(self.body)
        if not growing:
            segments.pop()
        return point in segments

    def advance(self, new_head: GridPoint, grow: bool) -> GridPoint | None:
        """Push a new head and drop the tail unless growing.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()
