"""Validated game configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from classic_snake.grid import MIN_COLS, MIN_ROWS

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Grid size, seed and tick cadence for a game loop.

    Invalid values are rejected at construction with a pydantic
    ``ValidationError``. A missing ``seed`` means one is derived from the
    loop's clock.
    """

    rows: int = Field(default=20, ge=MIN_ROWS)
    cols: int = Field(default=20, ge=MIN_COLS)
    seed: int | None = Field(default=None, ge=0)
    tick_interval_seconds: float = Field(default=0.18, gt=0)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.model_dump_json(indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
