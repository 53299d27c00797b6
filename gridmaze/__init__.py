"""Perfect maze generation and shortest path search on rectangular grids."""

__all__ = [
    "Cell",
    "CellPath",
    "WallSet",
    "Maze",
    "MazeGenerator",
    "generate_maze",
    "PathSolver",
    "SearchResult",
    "find_path",
    "MazeRenderer",
    "MazeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "NoPathFoundError",
]

from .base import Cell, CellPath, WallSet, Maze
from .errors import MazeError, InvalidDimensionError, OutOfBoundsError, NoPathFoundError
from .generator import MazeGenerator, generate_maze
from .solver import PathSolver, SearchResult, find_path
from .render import MazeRenderer
