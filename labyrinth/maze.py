"""Maze grid construction, escape finding and text rendering."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellType
from .config import (
    ESCAPE_GLYPH,
    MIN_DIMENSION,
    PASSAGE_GLYPH,
    WALL_GLYPH,
    get_logger,
)
from .generation import SpanningTreeGenerator
from .solving import EscapeSolver

logger = get_logger(__name__)

# Values used by ``Maze.to_array``.
WALL = 1
PASSAGE = 0
ESCAPE = 2

_ARRAY_VALUES = {
    CellType.WALL: WALL,
    CellType.PASSAGE: PASSAGE,
    CellType.ESCAPE: ESCAPE,
}


class InvalidDimension(ValueError):
    """Raised when a maze is requested with a height or width below three."""


class Maze:
    """A perfect maze: its passages form a tree between the entrance and the exit.

    The entrance is always at ``(0, 1)`` and the exit on the last row.  The
    grid is built once on construction; the only later change is marking the
    escape path the first time :meth:`find_escape` runs.
    """

    def __init__(self, height: int, width: int, *, rng: Optional[random.Random] = None) -> None:
        if height < MIN_DIMENSION or width < MIN_DIMENSION:
            raise InvalidDimension(
                f"Both the height and the width of the maze must be at least {MIN_DIMENSION}"
                f" (got {height}x{width})"
            )
        self._height = height
        self._width = width
        self._rng = rng if rng is not None else random.Random()
        self._grid: List[List[Cell]] = [[None] * width for _ in range(height)]  # type: ignore[list-item]
        self._solved = False
        self._escape: Tuple[Cell, ...] = ()
        self._escape_text: Optional[str] = None
        self._fill_grid()
        logger.info("Generated %dx%d maze", height, width)

    @classmethod
    def square(cls, size: int, *, rng: Optional[random.Random] = None) -> "Maze":
        return cls(size, size, rng=rng)

    # ------------------------------------------------------------------
    # Read-only views

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def grid(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def escape_path(self) -> Tuple[Cell, ...]:
        """Escape cells from entrance to exit; empty until the maze is solved."""

        return self._escape

    @property
    def exit_column(self) -> int:
        # Odd widths end with a passage column, even widths with an extra wall.
        return self._width - 3 + self._width % 2

    @property
    def entrance(self) -> Cell:
        return self._grid[0][1]

    @property
    def exit(self) -> Cell:
        return self._grid[self._height - 1][self.exit_column]

    def cell(self, row: int, column: int) -> Cell:
        return self._grid[row][column]

    # ------------------------------------------------------------------
    # Generation pipeline

    def _fill_grid(self) -> None:
        self._fill_alternately()
        self._fill_gaps()
        self._make_entrance_and_exit()
        self._generate_passages()

    def _put_cell(self, row: int, column: int, cell_type: CellType) -> None:
        self._grid[row][column] = Cell(row, column, cell_type)

    def _place(self, cells: Sequence[Cell]) -> None:
        for cell in cells:
            self._grid[cell.row][cell.column] = cell

    def _fill_alternately(self) -> None:
        """Walls on every even row and column, isolated passages elsewhere::

            ██████████
            ██  ██  ██
            ██████████
            ██  ██  ██
            ██████████
        """

        for row in range(self._height):
            for column in range(self._width):
                if row % 2 == 0 or column % 2 == 0:
                    self._put_cell(row, column, CellType.WALL)
                else:
                    self._put_cell(row, column, CellType.PASSAGE)

    def _fill_gaps(self) -> None:
        """Wall off the last row/column of even dimensions so no passage sits on the border."""

        if self._height % 2 == 0:
            for column in range(self._width):
                self._put_cell(self._height - 1, column, CellType.WALL)
        if self._width % 2 == 0:
            for row in range(self._height):
                self._put_cell(row, self._width - 1, CellType.WALL)

    def _make_entrance_and_exit(self) -> None:
        self._put_cell(0, 1, CellType.PASSAGE)
        self._put_cell(self._height - 1, self.exit_column, CellType.PASSAGE)
        if self._height % 2 == 0:
            # The last row is a forced wall, so link the exit to the interior.
            self._put_cell(self._height - 2, self.exit_column, CellType.PASSAGE)

    def _generate_passages(self) -> None:
        generator = SpanningTreeGenerator(self._height, self._width, rng=self._rng)
        self._place(generator.generate())

    # ------------------------------------------------------------------
    # Solving and rendering

    def find_escape(self) -> str:
        """Mark the path from the entrance to the exit and render it.

        The path is computed once; later calls return the same text.
        """

        if not self._solved:
            escape = EscapeSolver(self._grid, self.entrance, self.exit).find_escape()
            self._place(escape)
            self._escape = tuple(escape)
            self._solved = True
            self._escape_text = self.render(show_escape=True)
            logger.info("Escape path of %d cells found", len(escape))
        return self._escape_text

    def render(self, show_escape: bool = False) -> str:
        """Two characters per cell, one line per row::

            ██▓▓██████████
            ██▓▓▓▓▓▓██  ██
            ██████▓▓██  ██
            ██    ▓▓    ██
            ██████▓▓██████
            ██    ▓▓▓▓▓▓██
            ██████████▓▓██
        """

        lines = []
        for row in self._grid:
            glyphs = []
            for cell in row:
                if cell.is_wall:
                    glyphs.append(WALL_GLYPH)
                elif show_escape and cell.is_escape:
                    glyphs.append(ESCAPE_GLYPH)
                else:
                    glyphs.append(PASSAGE_GLYPH)
            lines.append("".join(glyphs) + "\n")
        return "".join(lines)

    def to_array(self) -> np.ndarray:
        return np.array(
            [[_ARRAY_VALUES[cell.type] for cell in row] for row in self._grid],
            dtype=np.int8,
        )

    def __str__(self) -> str:
        return self.render(show_escape=False)

    def __repr__(self) -> str:
        return f"Maze(height={self._height}, width={self._width}, solved={self._solved})"


def build_maze(height: int, width: int, *, rng: Optional[random.Random] = None) -> Maze:
    return Maze(height, width, rng=rng)


def render_maze(maze: Maze) -> str:
    return maze.render(show_escape=False)


def find_escape(maze: Maze) -> str:
    return maze.find_escape()


__all__ = [
    "ESCAPE",
    "InvalidDimension",
    "Maze",
    "PASSAGE",
    "WALL",
    "build_maze",
    "find_escape",
    "render_maze",
]
