"""A* search for the escape path of a maze."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Sequence, Set

from .cell import Cell, CellType
from .config import get_logger

logger = get_logger(__name__)

EDGE_COST = 1

# Up, left, right, down.
DELTAS = ((-1, 0), (0, -1), (0, 1), (1, 0))

_REMOVED = -1


class PathNode:
    """Search bookkeeping for one grid position.

    ``g`` is the cost of the best known path from the start, ``h`` the
    Manhattan estimate to the end and ``f`` their sum.  ``parent`` is the
    arena index of the previous node on that path, ``None`` for the root.
    """

    __slots__ = ("row", "column", "is_wall", "g", "h", "f", "parent")

    def __init__(self, row: int, column: int, is_wall: bool) -> None:
        self.row = row
        self.column = column
        self.is_wall = is_wall
        self.g = 0
        self.h = 0
        self.f = 0
        self.parent: Optional[int] = None

    def calc_heuristic_to(self, node: "PathNode") -> None:
        self.h = abs(node.row - self.row) + abs(node.column - self.column)

    def has_better_path(self, node: "PathNode") -> bool:
        """Whether reaching this node through ``node`` is cheaper than the current path."""

        return node.g + EDGE_COST < self.g

    def update_path(self, node: "PathNode", index: int) -> None:
        self.parent = index
        self.g = node.g + EDGE_COST
        self.f = self.g + self.h

    def _key(self):
        return (self.row, self.column, self.is_wall)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathNode):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"PathNode(row={self.row}, column={self.column}, g={self.g}, h={self.h}, f={self.f})"


class EscapeSolver:
    """Find the shortest path between two passable cells of a grid.

    Nodes live in a flat arena indexed ``row * width + column``.  The open set
    is a binary heap keyed by ``f`` with an entry map so a node whose cost
    improves can be invalidated and pushed again.
    """

    def __init__(self, grid: Sequence[Sequence[Cell]], start: Cell, end: Cell) -> None:
        self.height = len(grid)
        self.width = len(grid[0]) if self.height else 0
        self.nodes: List[PathNode] = []
        self.start = self.to_index(start.row, start.column)
        self.end = self.to_index(end.row, end.column)
        self._create_nodes(grid, end)

        self._open: List[list] = []
        self._entries: Dict[int, list] = {}
        self._closed: Set[int] = set()
        self._counter = itertools.count()

    def _create_nodes(self, grid: Sequence[Sequence[Cell]], end: Cell) -> None:
        target = PathNode(end.row, end.column, False)
        for row in range(self.height):
            for column in range(self.width):
                node = PathNode(row, column, grid[row][column].is_wall)
                node.calc_heuristic_to(target)
                self.nodes.append(node)

    def to_index(self, row: int, column: int) -> int:
        return row * self.width + column

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def find_escape(self) -> List[Cell]:
        """Return escape cells from start to end, or an empty list if the end is unreachable."""

        start = self.nodes[self.start]
        start.f = start.h
        self._push(self.start)
        while self._open:
            current = self._pop()
            if current is None:
                break
            if current == self.end:
                path = self._reconstruct_path(current)
                logger.debug("Escape found with %d cells after closing %d nodes", len(path), len(self._closed))
                return path
            self._closed.add(current)
            self._update_neighbors(current)
        logger.warning(
            "No path from %s to %s",
            (start.row, start.column),
            (self.nodes[self.end].row, self.nodes[self.end].column),
        )
        return []

    # ------------------------------------------------------------------

    def _push(self, index: int) -> None:
        entry = [self.nodes[index].f, next(self._counter), index]
        self._entries[index] = entry
        heapq.heappush(self._open, entry)

    def _discard(self, index: int) -> None:
        entry = self._entries.pop(index)
        entry[-1] = _REMOVED

    def _pop(self) -> Optional[int]:
        while self._open:
            _, _, index = heapq.heappop(self._open)
            if index != _REMOVED:
                del self._entries[index]
                return index
        return None

    def _update_neighbors(self, current: int) -> None:
        node = self.nodes[current]
        for d_row, d_column in DELTAS:
            row = node.row + d_row
            column = node.column + d_column
            if not self.in_bounds(row, column):
                continue
            index = self.to_index(row, column)
            neighbor = self.nodes[index]
            if neighbor.is_wall or index in self._closed:
                continue
            if index in self._entries:
                if not neighbor.has_better_path(node):
                    continue
                self._discard(index)
            neighbor.update_path(node, current)
            self._push(index)

    def _reconstruct_path(self, index: int) -> List[Cell]:
        path: List[Cell] = []
        cursor: Optional[int] = index
        while cursor is not None:
            node = self.nodes[cursor]
            path.append(Cell(node.row, node.column, CellType.ESCAPE))
            cursor = node.parent
        path.reverse()
        return path


__all__ = ["EDGE_COST", "EscapeSolver", "PathNode"]
