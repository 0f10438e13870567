"""Headless command line runner for the classic snake core."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
import time

from pydantic import ValidationError

from classic_snake.config import GameConfig
from classic_snake.loop import GameLoop
from classic_snake.snake import Direction
from classic_snake.state import GameState

logger = logging.getLogger(__name__)

_MOVE_CODES: dict[str, Direction | None] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
    ".": None,
}


def _parse_moves(value: str) -> list[Direction | None]:
    moves: list[Direction | None] = []
    for ch in value.upper():
        if ch not in _MOVE_CODES:
            raise argparse.ArgumentTypeError(
                f"invalid move {ch!r}; use U, D, L, R or '.'",
            )
        moves.append(_MOVE_CODES[ch])
    return moves


def _add_game_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed; derived from the current time when omitted.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Run the classic snake simulation without a display.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Step a game deterministically from scripted moves.",
    )
    _add_game_flags(sim_p)
    sim_p.add_argument(
        "--moves", type=_parse_moves, default=[],
        help="One move per step: U, D, L, R, or '.' for no input.",
    )
    sim_p.add_argument(
        "--steps", type=int, default=None,
        help="Number of steps (defaults to the number of moves, or 100).",
    )
    sim_p.add_argument(
        "--trace", action="store_true",
        help="Print a JSON snapshot after every step.",
    )

    # --- run ---
    run_p = sub.add_parser(
        "run", help="Drive a real-time game loop for a fixed duration.",
    )
    _add_game_flags(run_p)
    run_p.add_argument("--interval", type=float, default=None)
    run_p.add_argument("--duration", type=float, default=5.0)

    return parser


def _load_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser,
) -> GameConfig:
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        flag_map = {
            "rows": "rows",
            "cols": "cols",
            "seed": "seed",
            "interval": "tick_interval_seconds",
        }
        overrides = {
            cfg_name: getattr(args, cli_name)
            for cli_name, cfg_name in flag_map.items()
            if getattr(args, cli_name, None) is not None
        }
        if overrides:
            config = GameConfig(**{**config.model_dump(), **overrides})
    except (OSError, ValidationError) as exc:
        parser.error(str(exc))
    return config


def _run_simulate(
    args: argparse.Namespace, parser: argparse.ArgumentParser,
) -> int:
    config = _load_config(args, parser)
    seed = config.seed if config.seed is not None else int(time.time() * 1000)
    state = GameState(rows=config.rows, cols=config.cols, seed=seed)

    moves: list[Direction | None] = args.moves
    steps = args.steps if args.steps is not None else (len(moves) or 100)
    for i in range(steps):
        if state.is_game_over:
            break
        move = moves[i] if i < len(moves) else None
        if move is not None:
            state.queue_direction(move)
        state.step()
        if args.trace:
            print(json.dumps(state.get_state()))  # noqa: T201

    if not args.trace:
        print(json.dumps(state.get_state()))  # noqa: T201
    return 0


async def _drive(loop: GameLoop, duration: float) -> None:
    loop.start()
    deadline = asyncio.get_running_loop().time() + duration
    try:
        while not loop.state.is_game_over:
            remaining = deadline - asyncio.get_running_loop().time()
            if remaining <= 0:
                break
            await asyncio.sleep(
                min(remaining, loop.config.tick_interval_seconds),
            )
    finally:
        await loop.shutdown()


def _run_loop(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    config = _load_config(args, parser)
    if args.duration <= 0:
        parser.error("--duration must be positive.")
    loop = GameLoop.from_config(config)
    asyncio.run(_drive(loop, args.duration))
    print(json.dumps(loop.state.get_state()))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "run": _run_loop,
    }
    return handlers[args.command](args, parser)


if __name__ == "__main__":
    sys.exit(main())
