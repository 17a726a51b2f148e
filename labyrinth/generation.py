"""Random spanning-tree carving of maze passages (randomized Kruskal)."""

from __future__ import annotations

import random
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .cell import Cell, CellType
from .config import get_logger
from .disjoint_set import DisjointSet

logger = get_logger(__name__)


class Edge(NamedTuple):
    """Two adjacent cells of the half-resolution grid as ``row * width + column`` indices."""

    first_cell: int
    second_cell: int


class SpanningTreeGenerator:
    """Connect the isolated passage cells of an alternating grid into a tree.

    The full maze is viewed at half resolution: every passage cell at odd
    coordinates becomes one node, and every wall cell between two such
    passages becomes an edge.  A random spanning tree over those nodes gives
    the walls to open, for example::

        ██  ██████          ██  ██████
        ██  ██  ██          ██      ██
        ██████████   ->     ██████  ██
        ██  ██  ██          ██      ██
        ██████  ██          ██████  ██
    """

    def __init__(self, height: int, width: int, *, rng: Optional[random.Random] = None) -> None:
        self.height = (height - 1) // 2
        self.width = (width - 1) // 2
        self._rng = rng if rng is not None else random.Random()

    @property
    def node_count(self) -> int:
        return self.height * self.width

    def generate(self) -> List[Cell]:
        """Return the passage cells that join every passage without cycles."""

        edges = self.create_edges()
        self._rng.shuffle(edges)
        tree = self.build_spanning_tree(edges)
        logger.debug(
            "Kept %d of %d edges over a %dx%d half-resolution grid",
            len(tree),
            len(edges),
            self.height,
            self.width,
        )
        return self.create_passages(tree)

    # ------------------------------------------------------------------

    def create_edges(self) -> List[Edge]:
        edges: List[Edge] = []
        for column in range(1, self.width):
            edges.append(Edge(self.to_index(0, column), self.to_index(0, column - 1)))
        for row in range(1, self.height):
            edges.append(Edge(self.to_index(row, 0), self.to_index(row - 1, 0)))
        for row in range(1, self.height):
            for column in range(1, self.width):
                edges.append(Edge(self.to_index(row, column), self.to_index(row, column - 1)))
                edges.append(Edge(self.to_index(row, column), self.to_index(row - 1, column)))
        return edges

    def build_spanning_tree(self, edges: Sequence[Edge]) -> List[Edge]:
        disjoint_set = DisjointSet(self.node_count)
        return [edge for edge in edges if disjoint_set.union(edge.first_cell, edge.second_cell)]

    def create_passages(self, tree: Sequence[Edge]) -> List[Cell]:
        passages: List[Cell] = []
        for edge in tree:
            first_row, first_column = self.from_index(edge.first_cell)
            second_row, second_column = self.from_index(edge.second_cell)
            passages.append(
                Cell(
                    first_row + second_row + 1,
                    first_column + second_column + 1,
                    CellType.PASSAGE,
                )
            )
        return passages

    def to_index(self, row: int, column: int) -> int:
        return row * self.width + column

    def from_index(self, index: int) -> Tuple[int, int]:
        return divmod(index, self.width)


__all__ = ["Edge", "SpanningTreeGenerator"]
