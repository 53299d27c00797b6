"""Perfect maze generator using randomized iterative depth-first carving."""

from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from .base import SIDES, Cell, Maze, WallSet, facing_sides, neighbors, validate_dimensions
from .errors import InvalidDimensionError, OutOfBoundsError

logger = logging.getLogger(__name__)


class _WallBuilder:
    """Mutable wall grid owned by a single ``generate`` call."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._walls: List[List[Dict[str, bool]]] = [
            [dict.fromkeys(SIDES, True) for _ in range(height)] for _ in range(width)
        ]
        self.carved = 0

    def carve(self, cell: Cell, neighbor: Cell) -> None:
        side, facing = facing_sides(cell, neighbor)
        self._walls[cell[0]][cell[1]][side] = False
        self._walls[neighbor[0]][neighbor[1]][facing] = False
        self.carved += 1

    def freeze(self) -> Maze:
        walls = tuple(
            tuple(WallSet(**cell_walls) for cell_walls in column) for column in self._walls
        )
        return Maze(width=self.width, height=self.height, walls=walls)


class MazeGenerator:
    """Carve spanning-tree mazes over rectangular grids.

    Pass ``seed`` or an existing ``rng`` for reproducible output; the same
    generator yields a different maze on each call.
    """

    def __init__(
        self,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either seed or rng, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def generate(self, width: int, height: int) -> Maze:
        width, height = validate_dimensions(width, height)
        builder = _WallBuilder(width, height)
        visited = np.zeros((width, height), dtype=bool)

        start = (self._rng.randrange(width), self._rng.randrange(height))
        visited[start] = True
        stack: List[Cell] = [start]

        while stack:
            current = stack.pop()
            unvisited = [cell for cell in neighbors(current, width, height) if not visited[cell]]
            if not unvisited:
                continue
            stack.append(current)
            chosen = unvisited[self._rng.randrange(len(unvisited))]
            builder.carve(current, chosen)
            visited[chosen] = True
            stack.append(chosen)

        logger.debug(
            "Carved %d passages in %dx%d maze starting at %s",
            builder.carved,
            width,
            height,
            start,
        )
        return builder.freeze()

    def generate_batch(self, count: int, width: int, height: int) -> List[Maze]:
        """Generate ``count`` independent mazes of the same size."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.generate(width, height) for _ in range(count)]


def generate_maze(
    width: int,
    height: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Maze:
    return MazeGenerator(seed=seed, rng=rng).generate(width, height)


__all__ = ["MazeGenerator", "generate_maze"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a perfect maze and print its shortest path")
    parser.add_argument("width", type=int, help="Number of cells across")
    parser.add_argument("height", type=int, help="Number of cells down")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Defaults to the top-left cell")
    parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Defaults to the bottom-right cell")
    parser.add_argument("--image", type=Path, default=None, help="Optional PNG path for the rendered solution")
    parser.add_argument("--canvas-size", type=int, default=600, help="Square canvas size in pixels for --image")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    from .render import MazeRenderer
    from .solver import find_path

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        maze = generate_maze(args.width, args.height, seed=args.seed)
        path = find_path(
            maze,
            tuple(args.start) if args.start is not None else None,
            tuple(args.end) if args.end is not None else None,
        )
    except (InvalidDimensionError, OutOfBoundsError) as exc:
        parser.error(str(exc))

    if args.image is not None:
        try:
            renderer = MazeRenderer(canvas_size=(args.canvas_size, args.canvas_size))
            image = renderer.render(maze, path)
        except ValueError as exc:
            parser.error(str(exc))
        args.image.parent.mkdir(parents=True, exist_ok=True)
        image.save(args.image)

    summary = {
        "width": maze.width,
        "height": maze.height,
        "start": list(path[0]),
        "end": list(path[-1]),
        "length": len(path) - 1,
        "path": [list(cell) for cell in path],
    }
    if args.image is not None:
        summary["image"] = args.image.as_posix()
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
