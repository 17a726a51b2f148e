#!/usr/bin/env python3
"""Render a batch of mazes and their escapes as PNG pairs."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from labyrinth.config import LOG_LEVELS, setup_logging
from labyrinth.image import DEFAULT_CELL_SIZE, MazeImageRenderer
from labyrinth.maze import Maze


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("count", type=int, help="Number of mazes to render")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/mazes"),
        help="Directory to write maze and escape images",
    )
    parser.add_argument("--height", type=int, default=21)
    parser.add_argument("--width", type=int, default=21)
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logger = setup_logging(args.log_level)
    rng = random.Random(args.seed)
    renderer = MazeImageRenderer(cell_size=args.cell_size)
    maze_dir = args.output_dir / "mazes"
    escape_dir = args.output_dir / "escapes"

    for index in range(args.count):
        maze = Maze(args.height, args.width, rng=rng)
        renderer.save(maze, maze_dir / f"{index:04d}_maze.png")
        maze.find_escape()
        renderer.save(maze, escape_dir / f"{index:04d}_escape.png", show_escape=True)
    logger.info("Rendered %d mazes into %s", args.count, args.output_dir)


if __name__ == "__main__":
    main()
