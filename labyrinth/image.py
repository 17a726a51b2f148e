"""Raster rendering of mazes with Pillow."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from PIL import Image, ImageDraw

from .config import get_logger
from .maze import WALL, Maze

logger = get_logger(__name__)

PathLike = Union[str, Path]
Box = Tuple[int, int, int, int]

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)
ENTRANCE_COLOR = (220, 30, 30)
EXIT_COLOR = (40, 180, 80)
LINE_COLOR = (220, 0, 0)

DEFAULT_CELL_SIZE = 16


class MazeImageRenderer:
    """Draw a maze as square blocks, optionally with its escape path as a red line."""

    def __init__(self, *, cell_size: int = DEFAULT_CELL_SIZE) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size

    def canvas_size(self, maze: Maze) -> Tuple[int, int]:
        return maze.width * self.cell_size, maze.height * self.cell_size

    def cell_box(self, row: int, column: int) -> Box:
        """Inclusive pixel box ``(left, top, right, bottom)`` of one cell."""

        left = column * self.cell_size
        top = row * self.cell_size
        return left, top, left + self.cell_size - 1, top + self.cell_size - 1

    def cell_bboxes(self, maze: Maze) -> List[List[Box]]:
        return [[self.cell_box(r, c) for c in range(maze.width)] for r in range(maze.height)]

    def render(self, maze: Maze, *, show_escape: bool = False) -> Image.Image:
        canvas = Image.new("RGB", self.canvas_size(maze), PATH_COLOR)
        draw = ImageDraw.Draw(canvas)

        walls = maze.to_array() == WALL
        for r, c in zip(*walls.nonzero()):
            draw.rectangle(self.cell_box(int(r), int(c)), fill=WALL_COLOR)

        entrance = maze.entrance.position
        exit_ = maze.exit.position
        if show_escape and maze.escape_path:
            width = max(2, self.cell_size // 3)
            centers = [self._center(*cell.position) for cell in maze.escape_path]
            if len(centers) > 1:
                draw.line(centers, fill=LINE_COLOR, width=width, joint="curve")
            for position, color in ((entrance, ENTRANCE_COLOR), (exit_, EXIT_COLOR)):
                draw.rectangle(self.cell_box(*position), fill=color)
                self._dot(draw, position, width - 2)
        else:
            draw.rectangle(self.cell_box(*entrance), fill=ENTRANCE_COLOR)
            draw.rectangle(self.cell_box(*exit_), fill=EXIT_COLOR)
        return canvas

    def save(self, maze: Maze, path: PathLike, *, show_escape: bool = False) -> Path:
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        self.render(maze, show_escape=show_escape).save(destination)
        logger.info("Saved %dx%d maze image to %s", maze.height, maze.width, destination)
        return destination

    def _center(self, row: int, column: int) -> Tuple[float, float]:
        half = self.cell_size / 2
        return column * self.cell_size + half, row * self.cell_size + half

    def _dot(self, draw: ImageDraw.ImageDraw, position: Tuple[int, int], diameter: int) -> None:
        # Red dot so the line stays visible on the entrance and exit blocks.
        if diameter <= 0:
            return
        x, y = self._center(*position)
        radius = diameter / 2
        draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=LINE_COLOR)


__all__ = [
    "DEFAULT_CELL_SIZE",
    "MazeImageRenderer",
]
