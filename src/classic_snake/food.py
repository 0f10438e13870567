"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from classic_snake.grid import CellType
from classic_snake.snake import GridPoint

if TYPE_CHECKING:
    from classic_snake.grid import Grid
    from classic_snake.rng import LinearCongruentialRNG

logger = logging.getLogger(__name__)

# Returned when the snake fills the board. Not checked against the body.
FULL_BOARD_FALLBACK = GridPoint(0, 0)


class FoodSpawner:
    """Places the single food item by rejection sampling.

    Each draw picks a uniform row-major index from the seeded LCG and is
    retried while the cell holds a snake segment, so placement is fully
    reproducible from the seed.
    """

    def __init__(self, grid: Grid, rng: LinearCongruentialRNG) -> None:
        self.grid = grid
        self.rng = rng
        self.position: GridPoint | None = None

    def spawn(self, snake_length: int) -> GridPoint:
        """Place food on a free cell and return its position."""
        total = self.grid.size
        if snake_length >= total:
            # Self collision ends the game long before this in real play.
            logger.warning(
                "Board is full (%d cells); food falls back to %s.",
                total, FULL_BOARD_FALLBACK,
            )
            self.position = FULL_BOARD_FALLBACK
            return self.position

        candidate = self.grid.point_at(self.rng.next_int(total))
        while self.grid.is_snake(candidate):
            candidate = self.grid.point_at(self.rng.next_int(total))

        self.grid.set(candidate, CellType.FOOD)
        self.position = candidate
        return candidate
