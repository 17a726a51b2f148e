"""Grid cell value type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


class CellType(Enum):
    WALL = "wall"
    PASSAGE = "passage"
    ESCAPE = "escape"


@dataclass(frozen=True)
class Cell:
    """One position of the maze grid together with its type.

    Cells are immutable; changing the type of a position means putting a new
    cell into the grid.
    """

    row: int
    column: int
    type: CellType

    @property
    def is_wall(self) -> bool:
        return self.type is CellType.WALL

    @property
    def is_passage(self) -> bool:
        # Escape cells are still walkable passages.
        return self.type is not CellType.WALL

    @property
    def is_escape(self) -> bool:
        return self.type is CellType.ESCAPE

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.column)

    def with_type(self, cell_type: CellType) -> "Cell":
        return replace(self, type=cell_type)


__all__ = ["Cell", "CellType"]
