"""Classic Snake: deterministic game core and tick loop."""

from classic_snake.config import GameConfig
from classic_snake.loop import GameLoop
from classic_snake.rng import LinearCongruentialRNG
from classic_snake.snake import Direction, GridPoint, is_opposite
from classic_snake.state import GameState

__all__ = [
    "Direction",
    "GameConfig",
    "GameLoop",
    "GameState",
    "GridPoint",
    "LinearCongruentialRNG",
    "is_opposite",
]
