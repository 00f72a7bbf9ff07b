"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--scores-file PATH] [--log-level DEBUG]

Requires:
    pip install pygame
"""

import argparse
import logging
import os
import random

from gridsnake.config import BASE_WIDTH, BASE_HEIGHT, CELL, DEFAULT_SCORES_FILE, SCORES_ENV_VAR
from gridsnake.scores import JsonFileStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake with wrap-around edges.")
    parser.add_argument("--width", type=int, default=BASE_WIDTH, help="initial window width in px")
    parser.add_argument("--height", type=int, default=BASE_HEIGHT, help="initial window height in px")
    parser.add_argument("--cell", type=int, default=CELL, help="cell size in px")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    parser.add_argument(
        "--scores-file",
        default=os.environ.get(SCORES_ENV_VAR, DEFAULT_SCORES_FILE),
        help=f"where the best score is kept (env: {SCORES_ENV_VAR})",
    )
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # pygame is imported here so --help works without a display
    from gridsnake.controller import GameController

    GameController(
        store=JsonFileStore(args.scores_file),
        window=(args.width, args.height),
        cell=args.cell,
        rng=random.Random(args.seed),
    ).run()


if __name__ == "__main__":
    main()
