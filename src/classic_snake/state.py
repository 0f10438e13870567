"""Deterministic single-snake game state and its step transition."""

from __future__ import annotations

import logging

from classic_snake.food import FoodSpawner
from classic_snake.grid import CellType, Grid
from classic_snake.rng import LinearCongruentialRNG
from classic_snake.snake import Direction, GridPoint, Snake, is_opposite

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 3


class GameState:
    """Authoritative snapshot of one game.

    The state owns the grid, snake, food spawner and seeded RNG. It is
    mutated only through :meth:`step`, :meth:`queue_direction`,
    :meth:`toggle_pause` and :meth:`reset`, and is not thread-safe: every
    call must come from the same execution context.

    Collisions never raise. They set :attr:`is_game_over`, after which
    :meth:`step` leaves everything untouched until :meth:`reset`.
    """

    def __init__(self, rows: int = 20, cols: int = 20, seed: int = 0) -> None:
        self.rows = rows
        self.cols = cols
        self.reset(seed)

    def reset(self, seed: int) -> None:
        """Discard the current game and rebuild it from *seed*."""
        self.grid = Grid(rows=self.rows, cols=self.cols)
        self.rng = LinearCongruentialRNG(seed)
        self.seed = self.rng.state

        head = GridPoint(self.cols // 2, self.rows // 2)
        self._snake = Snake(head, Direction.RIGHT, length=INITIAL_LENGTH)
        for seg in self._snake.body:
            self.grid.set(seg, CellType.SNAKE)

        self.pending_direction: Direction | None = None
        self.score = 0
        self.tick = 0
        self.is_game_over = False
        self.is_paused = False

        self._food = FoodSpawner(self.grid, self.rng)
        self._food.spawn(len(self._snake))

    @property
    def snake(self) -> tuple[GridPoint, ...]:
        """Head-first snake segments."""
        return self._snake.segments()

    @property
    def head(self) -> GridPoint:
        return self._snake.head

    @property
    def direction(self) -> Direction:
        """The committed direction, applied on the next step."""
        return self._snake.direction

    @direction.setter
    def direction(self, value: Direction) -> None:
        self._snake.direction = value

    @property
    def food(self) -> GridPoint:
        assert self._food.position is not None  # noqa: S101
        return self._food.position

    def queue_direction(self, direction: Direction) -> None:
        """Request a turn for the next step.

        Reversals of the committed direction are ignored; otherwise the
        request replaces any earlier one that has not been applied yet.
        """
        if is_opposite(self.direction, direction):
            logger.debug(
                "Ignoring reversal %s while heading %s.",
                direction.name, self.direction.name,
            )
            return
        self.pending_direction = direction

    def toggle_pause(self) -> None:
        self.is_paused = not self.is_paused

    def step(self) -> None:
        """Advance the game by one tick."""
        if self.is_game_over or self.is_paused:
            return

        pending = self.pending_direction
        if pending is not None and not is_opposite(self.direction, pending):
            self.direction = pending
        self.pending_direction = None

        new_head = self._snake.next_head()
        self.tick += 1

        # --- wall and self collision ---
        # The tail still counts as occupied: it only moves after this check.
        if not self.grid.in_bounds(new_head) or self.grid.is_snake(new_head):
            self._end_game()
            return

        # --- move ---
        ate = new_head == self._food.position
        vacated = self._snake.advance(new_head, grow=ate)
        self.grid.set(new_head, CellType.SNAKE)

        if ate:
            self.score += 1
            self._food.spawn(len(self._snake))
        else:
            assert vacated is not None  # noqa: S101
            self.grid.set(vacated, CellType.EMPTY)

    def get_state(self) -> dict:
        """Return a JSON-serialisable snapshot of the game."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "seed": self.seed,
            "tick": self.tick,
            "score": self.score,
            "direction": self.direction.name.lower(),
            "snake": self._snake.to_list(),
            "food": self.food.to_list(),
            "game_over": self.is_game_over,
            "paused": self.is_paused,
        }

    def _end_game(self) -> None:
        self.is_game_over = True
        logger.info(
            "Snake died at tick %d with score %d.", self.tick, self.score,
        )
