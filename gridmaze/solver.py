"""Breadth-first shortest path search over generated mazes."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .base import Cell, CellPath, Maze, facing_sides
from .errors import NoPathFoundError

logger = logging.getLogger(__name__)


@dataclass
class PathRecord:
    parent: Optional[Cell] = None
    distance: float = math.inf


class SearchResult:
    """Parent links and distances from one breadth-first search."""

    def __init__(self, maze: Maze, start: Cell, records: List[List[PathRecord]]) -> None:
        self.maze = maze
        self.start = start
        self._records = records

    def record(self, cell: Sequence[int]) -> PathRecord:
        x, y = self.maze.validate_cell(cell)
        return self._records[x][y]

    def distance_to(self, cell: Sequence[int]) -> float:
        return self.record(cell).distance

    def reached(self, cell: Sequence[int]) -> bool:
        return self.distance_to(cell) != math.inf

    def path_to(self, cell: Sequence[int]) -> CellPath:
        end = self.maze.validate_cell(cell)
        if not self.reached(end):
            raise NoPathFoundError(f"No path from {self.start} to {end}")

        path: List[Cell] = [end]
        current = end
        parent = self.record(current).parent
        while parent is not None:
            path.append(parent)
            current = parent
            parent = self.record(current).parent
        path.reverse()
        return tuple(path)


class PathSolver:
    """Find shortest paths in a maze with breadth-first search.

    Edges have unit weight, so the first time BFS reaches a cell is along
    its shortest path; in a perfect maze that path is also the only one.
    """

    def search(self, maze: Maze, start: Sequence[int]) -> SearchResult:
        start = maze.validate_cell(start)
        records = [[PathRecord() for _ in range(maze.height)] for _ in range(maze.width)]
        records[start[0]][start[1]].distance = 0

        queue: deque[Cell] = deque([start])
        reached = 1
        while queue:
            current = queue.popleft()
            walls = maze.walls[current[0]][current[1]]
            distance = records[current[0]][current[1]].distance
            for neighbor in maze.neighbors(current):
                side, _ = facing_sides(current, neighbor)
                if walls.is_closed(side):
                    continue
                record = records[neighbor[0]][neighbor[1]]
                if record.distance == math.inf:
                    record.parent = current
                    record.distance = distance + 1
                    queue.append(neighbor)
                    reached += 1

        logger.debug("BFS from %s reached %d/%d cells", start, reached, maze.size)
        return SearchResult(maze, start, records)

    def solve(self, maze: Maze, start: Sequence[int], end: Sequence[int]) -> CellPath:
        start = maze.validate_cell(start)
        end = maze.validate_cell(end)
        return self.search(maze, start).path_to(end)

    def distance(self, maze: Maze, start: Sequence[int], end: Sequence[int]) -> int:
        """Number of steps on the shortest path between two cells."""

        end = maze.validate_cell(end)
        result = self.search(maze, start)
        if not result.reached(end):
            raise NoPathFoundError(f"No path from {result.start} to {end}")
        return int(result.distance_to(end))


def find_path(
    maze: Maze,
    start: Optional[Sequence[int]] = None,
    end: Optional[Sequence[int]] = None,
) -> CellPath:
    """Shortest path between two cells, corner to corner by default."""

    if start is None:
        start = (0, 0)
    if end is None:
        end = (maze.width - 1, maze.height - 1)
    return PathSolver().solve(maze, start, end)


__all__ = ["PathSolver", "PathRecord", "SearchResult", "find_path"]
