"""Checking candidate escape paths against a maze."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .config import get_logger
from .maze import Maze
from .solving import EscapeSolver

logger = get_logger(__name__)

Position = Tuple[int, int]


@dataclass
class EscapeEvaluationResult:
    connected: bool
    touches_exit: bool
    stray_in_walls: bool
    is_shortest: bool
    path_cells: List[Position]
    message: str

    @property
    def is_valid(self) -> bool:
        return self.connected and self.touches_exit and not self.stray_in_walls

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "touches_exit": self.touches_exit,
            "stray_in_walls": self.stray_in_walls,
            "is_shortest": self.is_shortest,
            "path_cells": [list(cell) for cell in self.path_cells],
            "message": self.message,
        }


class EscapeEvaluator:
    """Evaluate a candidate path by walking it cell by cell from the entrance."""

    def __init__(self, maze: Maze) -> None:
        self.maze = maze

    def evaluate(self, candidate: Iterable[Sequence[int]]) -> EscapeEvaluationResult:
        cells: List[Position] = [(int(row), int(column)) for row, column in candidate]
        start = self.maze.entrance.position
        goal = self.maze.exit.position

        stray_in_walls = any(not self._is_open(cell) for cell in cells)
        connected = bool(cells) and cells[0] == start and self._is_contiguous(cells)
        touches_exit = bool(cells) and cells[-1] == goal

        is_shortest = False
        if connected and touches_exit and not stray_in_walls:
            is_shortest = len(cells) == self._shortest_length()

        if not cells:
            message = "No path given."
        elif stray_in_walls:
            message = "Path goes through walls."
        elif not touches_exit:
            message = "Path does not reach the exit."
        elif not connected:
            message = "Path is not continuous from entrance to exit."
        elif not is_shortest:
            message = "Path escapes but is not the shortest."
        else:
            message = "Path is a shortest escape."
        logger.debug("Evaluated %d-cell path: %s", len(cells), message)

        return EscapeEvaluationResult(
            connected=connected,
            touches_exit=touches_exit,
            stray_in_walls=stray_in_walls,
            is_shortest=is_shortest,
            path_cells=cells,
            message=message,
        )

    # ------------------------------------------------------------------

    def _shortest_length(self) -> int:
        # Leaves an unsolved maze unsolved.
        if self.maze.solved:
            return len(self.maze.escape_path)
        return len(EscapeSolver(self.maze.grid, self.maze.entrance, self.maze.exit).find_escape())

    def _is_open(self, cell: Position) -> bool:
        row, column = cell
        if not (0 <= row < self.maze.height and 0 <= column < self.maze.width):
            return False
        return not self.maze.cell(row, column).is_wall

    @staticmethod
    def _is_contiguous(cells: Sequence[Position]) -> bool:
        for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
            if abs(r1 - r2) + abs(c1 - c2) != 1:
                return False
        return True


__all__ = ["EscapeEvaluator", "EscapeEvaluationResult"]
