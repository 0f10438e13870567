"""Grid points, movement directions, and the snake body."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class GridPoint:
    """An integer cell coordinate. Origin is top-left, y grows downward."""

    x: int
    y: int

    def translate(self, direction: Direction) -> GridPoint:
        """Return the neighbouring point one cell towards *direction*."""
        dx, dy = direction.value
        return GridPoint(self.x + dx, self.y + dy)

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) unit vectors."""

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


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return True when *a* and *b* point in reversed directions."""
    return a.opposite is b


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The body initially
    extends away from *direction*, so a snake heading right has its
    segments to the left of the head.
    """

    def __init__(
        self,
        head: GridPoint,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[GridPoint] = deque(
            GridPoint(head.x - dx * i, head.y - dy * i) for i in range(length)
        )
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> GridPoint:
        """Return the head coordinate."""
        return self.body[0]

    def next_head(self) -> GridPoint:
        """Compute the next head position without moving."""
        return self.head.translate(self.direction)

    def advance(self, new_head: GridPoint, grow: bool = False) -> GridPoint | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def segments(self) -> tuple[GridPoint, ...]:
        """Return an immutable head-first copy of the body."""
        return tuple(self.body)

    def to_list(self) -> list[list[int]]:
        return [seg.to_list() for seg in self.body]
