"""Occupancy grid for the snake game."""

from __future__ import annotations

import enum

import numpy as np

from classic_snake.snake import GridPoint

# The initial snake is three cells wide, centred on cols // 2.
MIN_COLS = 4
MIN_ROWS = 1


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed rows x cols board mirroring snake and food positions.

    The array gives O(1) occupancy checks for collision detection and food
    rejection sampling. It is indexed ``cells[y, x]``.
    """

    def __init__(self, rows: int = 20, cols: int = 20) -> None:
        if rows < MIN_ROWS:
            raise ValueError(f"rows must be at least {MIN_ROWS}.")
        if cols < MIN_COLS:
            raise ValueError(f"cols must be at least {MIN_COLS}.")
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=np.int8)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, point: GridPoint) -> bool:
        """Check whether a point lies within ``[0, cols) x [0, rows)``."""
        return 0 <= point.x < self.cols and 0 <= point.y < self.rows

    def get(self, point: GridPoint) -> CellType:
        """Return the cell type at the given point."""
        return CellType(self.cells[point.y, point.x])

    def set(self, point: GridPoint, cell_type: CellType) -> None:
        """Set the cell type at the given point."""
        self.cells[point.y, point.x] = cell_type

    def is_snake(self, point: GridPoint) -> bool:
        return self.cells[point.y, point.x] == CellType.SNAKE

    def count(self, cell_type: CellType) -> int:
        """Return how many cells currently hold *cell_type*."""
        return int(np.count_nonzero(self.cells == cell_type))

    def point_at(self, index: int) -> GridPoint:
        """Convert a row-major cell index to a point."""
        y, x = divmod(index, self.cols)
        return GridPoint(x, y)
