"""Interactive console and command-line entry point."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from .config import LOG_LEVELS, get_logger, setup_logging
from .image import DEFAULT_CELL_SIZE, MazeImageRenderer
from .maze import InvalidDimension, Maze

logger = get_logger(__name__)

MENU_HEADER = "=============== Menu ==============="
INCORRECT_OPTION = "Incorrect option. Please try again"
SIZE_PROMPT = "Enter the size of the new maze (in the [size] or [height width] format) : "


class SizeFormatError(ValueError):
    """Raised for size input that is not one or two integers."""


def parse_size(text: str) -> Tuple[int, int]:
    """Parse ``"size"`` or ``"height width"`` into ``(height, width)``."""

    tokens = text.split()
    if len(tokens) not in (1, 2):
        raise SizeFormatError(f"Expected one or two numbers, got {len(tokens)}")
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise SizeFormatError(f"Not a number: {text.strip()!r}") from exc
    if len(values) == 1:
        return values[0], values[0]
    return values[0], values[1]


class MazeConsole:
    """Menu loop: generate a maze, display it, show its escape, exit."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._rng = rng
        self.maze: Optional[Maze] = None

    def start(self) -> None:
        while True:
            self._print_menu()
            line = self._read_line("Enter your Choice : ")
            if line is None:
                self._exit()
                return
            choice = line.strip()
            if choice == "1":
                self.generate()
            elif choice == "2" and self.maze is not None:
                self.display()
            elif choice == "3" and self.maze is not None:
                self.find_escape()
            elif choice == "4":
                self._exit()
                return
            else:
                self._print(INCORRECT_OPTION)

    def generate(self) -> None:
        line = self._read_line(SIZE_PROMPT)
        if line is None:
            return
        try:
            height, width = parse_size(line)
            maze = Maze(height, width, rng=self._rng)
        except SizeFormatError as exc:
            logger.debug("Rejected size input %r: %s", line, exc)
            self._print("Cannot generate a maze. Invalid size")
            return
        except InvalidDimension as exc:
            self._print(f"Cannot generate a maze. {exc}")
            return
        self.maze = maze
        self.display()

    def display(self) -> None:
        self._print(str(self.maze))

    def find_escape(self) -> None:
        self._print(self.maze.find_escape())

    # ------------------------------------------------------------------

    def _print_menu(self) -> None:
        self._print("\n\n" + MENU_HEADER)
        self._print("1. Generate a new maze")
        if self.maze is not None:
            self._print("2. Display the maze")
            self._print("3. Find the escape")
        self._print("4. Exit")

    def _read_line(self, prompt: str) -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def _exit(self) -> None:
        self._print("Bye!")

    def _print(self, text: str) -> None:
        self.stdout.write(text + "\n")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate perfect mazes and find their escape")
    parser.add_argument(
        "--size",
        type=str,
        default=None,
        help="Maze size as 'SIZE' or 'HEIGHT WIDTH'; starts the interactive menu when omitted",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    parser.add_argument("--escape", action="store_true", help="Also print the escape path")
    parser.add_argument(
        "--image",
        type=Path,
        default=None,
        help="Save a PNG rendering (with the escape path when --escape is set)",
    )
    parser.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.size is None:
        MazeConsole(rng=rng).start()
        return 0

    try:
        height, width = parse_size(args.size)
    except SizeFormatError as exc:
        print(f"Cannot generate a maze. Invalid size: {exc}", file=sys.stderr)
        return 2
    try:
        maze = Maze(height, width, rng=rng)
    except InvalidDimension as exc:
        print(f"Cannot generate a maze. {exc}", file=sys.stderr)
        return 2

    print(maze)
    if args.escape:
        print(maze.find_escape())
    if args.image is not None:
        renderer = MazeImageRenderer(cell_size=args.cell_size)
        renderer.save(maze, args.image, show_escape=args.escape)
    return 0


if __name__ == "__main__":
    sys.exit(main())
