"""Raster rendering of mazes and their solution paths."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from PIL import Image, ImageDraw

from .base import Cell, Maze

BACKGROUND_COLOR = (255, 255, 255)
CELL_COLOR = (255, 165, 0)
PATH_COLOR = (200, 200, 200)
WALL_COLOR = (0, 0, 0)


def cell_bbox(cell: Cell, cell_size: int) -> Tuple[int, int, int, int]:
    x, y = cell
    left = x * cell_size
    top = y * cell_size
    return left, top, left + cell_size, top + cell_size


class MazeRenderer:
    """Draw a maze onto a Pillow image, optionally highlighting a path."""

    def __init__(
        self,
        *,
        canvas_size: Tuple[int, int] = (600, 600),
        cell_size: Optional[int] = None,
        wall_thickness: int = 2,
    ) -> None:
        if canvas_size[0] <= 0 or canvas_size[1] <= 0:
            raise ValueError("canvas_size must be positive")
        if cell_size is not None and cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if wall_thickness <= 0:
            raise ValueError("wall_thickness must be positive")
        self.canvas_size = canvas_size
        self.cell_size = cell_size
        self.wall_thickness = wall_thickness

    def cell_size_for(self, maze: Maze) -> int:
        if self.cell_size is not None:
            return self.cell_size
        canvas_width, canvas_height = self.canvas_size
        size = min(canvas_width // maze.width, canvas_height // maze.height)
        if size < 1:
            raise ValueError(
                f"Canvas {canvas_width}x{canvas_height} is too small for a {maze.width}x{maze.height} maze"
            )
        return size

    def render(self, maze: Maze, path: Optional[Iterable[Cell]] = None) -> Image.Image:
        cell_size = self.cell_size_for(maze)
        if self.cell_size is None:
            dims = self.canvas_size
        else:
            dims = (maze.width * cell_size, maze.height * cell_size)
        image = Image.new("RGB", dims, BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        for cell in maze.cells():
            self._fill_cell(draw, cell, cell_size, CELL_COLOR)
        if path is not None:
            for cell in path:
                self._fill_cell(draw, maze.validate_cell(cell), cell_size, PATH_COLOR)
        for cell in maze.cells():
            self._draw_walls(draw, maze, cell, cell_size)
        return image

    # ------------------------------------------------------------------

    @staticmethod
    def _fill_cell(
        draw: ImageDraw.ImageDraw,
        cell: Cell,
        cell_size: int,
        color: Tuple[int, int, int],
    ) -> None:
        left, top, right, bottom = cell_bbox(cell, cell_size)
        draw.rectangle((left, top, right - 1, bottom - 1), fill=color)

    def _draw_walls(self, draw: ImageDraw.ImageDraw, maze: Maze, cell: Cell, cell_size: int) -> None:
        left, top, right, bottom = cell_bbox(cell, cell_size)
        thickness = min(self.wall_thickness, cell_size)
        walls = maze.walls_at(cell)
        if walls.top:
            draw.rectangle((left, top, right - 1, top + thickness - 1), fill=WALL_COLOR)
        if walls.right:
            draw.rectangle((right - thickness, top, right - 1, bottom - 1), fill=WALL_COLOR)
        if walls.bottom:
            draw.rectangle((left, bottom - thickness, right - 1, bottom - 1), fill=WALL_COLOR)
        if walls.left:
            draw.rectangle((left, top, left + thickness - 1, bottom - 1), fill=WALL_COLOR)


__all__ = ["MazeRenderer", "cell_bbox"]
