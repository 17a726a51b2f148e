"""Perfect maze generation and A* escape finding."""

__all__ = [
    "Cell",
    "CellType",
    "DisjointSet",
    "Edge",
    "SpanningTreeGenerator",
    "Maze",
    "InvalidDimension",
    "build_maze",
    "render_maze",
    "find_escape",
    "PathNode",
    "EscapeSolver",
    "MazeImageRenderer",
    "EscapeEvaluator",
    "EscapeEvaluationResult",
]

from .cell import Cell, CellType
from .disjoint_set import DisjointSet
from .generation import Edge, SpanningTreeGenerator
from .maze import InvalidDimension, Maze, build_maze, find_escape, render_maze
from .solving import EscapeSolver, PathNode
from .image import MazeImageRenderer
from .evaluator import EscapeEvaluator, EscapeEvaluationResult
