"""
main.py — Entry point.

Run with:
    python main.py [--grid-size 20] [--tick-ms 150] [--seed N] [--log-level INFO]

Requires:
    pip install pygame
"""

import argparse
import logging
import random
from typing import Optional, Sequence

from gridsnake.config import GRID_SIZE, TICK_MS, ConfigError, GameConfig
from gridsnake.controller import GameController
from gridsnake.model import GameEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Single-player grid snake.")
    parser.add_argument("--grid-size", type=int, default=GRID_SIZE, help="cells per side (default: %(default)s)")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS, help="milliseconds per snake step (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig(grid_size=args.grid_size, tick_ms=args.tick_ms)
    except ConfigError as exc:
        parser.error(str(exc))

    engine = GameEngine(config, rng=random.Random(args.seed))
    GameController(config, engine).run()


if __name__ == "__main__":
    main()
