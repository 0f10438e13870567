"""Fixed-interval asyncio tick loop driving a GameState."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from classic_snake.config import GameConfig
from classic_snake.snake import Direction
from classic_snake.state import GameState

logger = logging.getLogger(__name__)

TickListener = Callable[[GameState], None]


class GameLoop:
    """Owns a :class:`GameState` and steps it on a periodic asyncio task.

    Ticks and input both run on the event loop thread, so input never
    interleaves with a step; turns go through the state's queued direction.
    Two independent gates suppress movement: :attr:`is_running` here and
    ``GameState.is_paused``. The task keeps firing while paused.
    """

    def __init__(
        self,
        rows: int = 20,
        cols: int = 20,
        seed: int | None = None,
        tick_interval_seconds: float = 0.18,
        clock: Callable[[], float] = time.time,
        on_tick: TickListener | None = None,
    ) -> None:
        self.config = GameConfig(
            rows=rows,
            cols=cols,
            seed=seed,
            tick_interval_seconds=tick_interval_seconds,
        )
        self._clock = clock
        self._on_tick = on_tick
        resolved_seed = seed if seed is not None else self._clock_seed()
        self._state = GameState(rows=rows, cols=cols, seed=resolved_seed)
        self.is_running = False
        self._task: asyncio.Task | None = None

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        clock: Callable[[], float] = time.time,
        on_tick: TickListener | None = None,
    ) -> GameLoop:
        return cls(
            rows=config.rows,
            cols=config.cols,
            seed=config.seed,
            tick_interval_seconds=config.tick_interval_seconds,
            clock=clock,
            on_tick=on_tick,
        )

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_ticking(self) -> bool:
        """Whether the periodic task currently exists."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Begin ticking. Must be called from a running event loop.

        Calling it again while the task exists only re-enables stepping.
        """
        if self.is_ticking:
            self.is_running = True
            return
        self._task = asyncio.create_task(self._tick_loop())
        self.is_running = True
        logger.info(
            "Game loop started (interval=%.3fs, seed=%d).",
            self.config.tick_interval_seconds, self._state.seed,
        )

    def stop(self) -> None:
        """Cancel the tick task. No step runs after this returns."""
        task = self._task
        self._task = None
        self.is_running = False
        if task is not None and not task.done():
            task.cancel()
            logger.info("Game loop stopped at tick %d.", self._state.tick)

    def restart(self) -> None:
        """Rebuild the game from a fresh clock-derived seed and resume."""
        seed = self._clock_seed()
        self._state.reset(seed)
        self.is_running = True
        logger.info("Game restarted with seed %d.", self._state.seed)

    async def shutdown(self) -> None:
        """Stop ticking and wait for the cancelled task to finish."""
        task = self._task
        self.stop()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def set_direction(self, direction: Direction) -> None:
        self._state.queue_direction(direction)

    def toggle_pause(self) -> None:
        self._state.toggle_pause()

    def _clock_seed(self) -> int:
        return int(self._clock() * 1000)

    async def _tick_loop(self) -> None:
        """Sleep one interval, then step if running, until cancelled."""
        task = asyncio.current_task()
        interval = self.config.tick_interval_seconds
        try:
            while self._task is task:
                await asyncio.sleep(interval)
                if self._task is not task:
                    break
                if not self.is_running:
                    continue
                self._state.step()
                if self._on_tick is not None:
                    self._on_tick(self._state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled at tick %d.", self._state.tick)
        except Exception:
            logger.exception("Tick loop error at tick %d.", self._state.tick)
            self.is_running = False
            if self._task is task:
                self._task = None
