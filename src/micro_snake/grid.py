"""Grid coordinates and bounds for the snake board."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from micro_snake.snake import Direction


class GridPoint(NamedTuple):
    """A board cell. ``x`` is the column, ``y`` the row (0 at the top)."""

    x: int
    y: int

    def moved(self, direction: Direction) -> GridPoint:
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = direction.value
        return GridPoint(self.x + dx, self.y + dy)

    def distance(self, other: GridPoint) -> int:
        """Manhattan distance to *other*."""
        return abs(self.x - other.x) + abs(self.y - other.y)


class Grid:
    """Fixed-size board of ``columns`` x ``rows`` cells.

    Free cells are found through a NumPy occupancy mask laid out as
    ``(rows, columns)``, so enumeration is row-major: every column of
    row 0, then row 1, and so on.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid dimensions must be positive.")
        self.columns = columns
        self.rows = rows

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    def in_bounds(self, point: GridPoint) -> bool:
        """Check whether a point lies on the board."""
        return 0 <= point.x < self.columns and 0 <= point.y < self.rows

    def free_cells(self, occupied: Iterable[GridPoint]) -> list[GridPoint]:
        """Return every in-bounds cell not in *occupied*, row-major."""
        mask = np.zeros((self.rows, self.columns), dtype=bool)
        for point in occupied:
            if self.in_bounds(point):
                mask[point.y, point.x] = True
        ys, xs = np.nonzero(~mask)
        return [
            GridPoint(x, y)
            for y, x in zip(ys.tolist(), xs.tolist(), strict=True)
        ]
