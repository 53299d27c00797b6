"""Core data types shared by the maze generator, solver and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import InvalidDimensionError, OutOfBoundsError

Cell = Tuple[int, int]
CellPath = Tuple[Cell, ...]

SIDES = ("top", "right", "bottom", "left")

# (dx, dy) -> (side of the moving cell, facing side of the neighbour)
DIRECTION_SIDES: Dict[Tuple[int, int], Tuple[str, str]] = {
    (1, 0): ("right", "left"),
    (-1, 0): ("left", "right"),
    (0, 1): ("bottom", "top"),
    (0, -1): ("top", "bottom"),
}


@dataclass(frozen=True)
class WallSet:
    """Walls around one cell; ``True`` means the side is closed."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def is_closed(self, side: str) -> bool:
        if side not in SIDES:
            raise ValueError(f"Unknown wall side: {side!r}")
        return getattr(self, side)

    @property
    def closed_sides(self) -> Tuple[str, ...]:
        return tuple(side for side in SIDES if getattr(self, side))


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_dimensions(width: object, height: object) -> Tuple[int, int]:
    """Return ``(width, height)`` as ints or raise :class:`InvalidDimensionError`."""

    for name, value in (("width", width), ("height", height)):
        if not _is_integer(value):
            raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise InvalidDimensionError(f"{name} must be positive, got {value}")
    return int(width), int(height)


def neighbors(cell: Cell, width: int, height: int) -> List[Cell]:
    """Grid-adjacent cells of ``cell`` clipped to a ``width`` x ``height`` grid."""

    x, y = cell
    candidates = ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
    return [(nx, ny) for nx, ny in candidates if 0 <= nx < width and 0 <= ny < height]


def facing_sides(cell: Cell, neighbor: Cell) -> Tuple[str, str]:
    """Return the wall of ``cell`` facing ``neighbor`` and the wall facing back."""

    delta = (neighbor[0] - cell[0], neighbor[1] - cell[1])
    try:
        return DIRECTION_SIDES[delta]
    except KeyError as exc:
        raise ValueError(f"Cells {cell} and {neighbor} are not adjacent") from exc


@dataclass(frozen=True)
class Maze:
    """Immutable wall topology of a generated maze, indexed as ``walls[x][y]``."""

    width: int
    height: int
    walls: Tuple[Tuple[WallSet, ...], ...]

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height)
        object.__setattr__(self, "walls", tuple(tuple(column) for column in self.walls))
        if len(self.walls) != self.width or any(len(column) != self.height for column in self.walls):
            raise ValueError(
                f"Wall grid does not match maze dimensions {self.width}x{self.height}"
            )

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, cell: Sequence[int]) -> bool:
        try:
            x, y = cell
        except (TypeError, ValueError):
            return False
        return _is_integer(x) and _is_integer(y) and 0 <= x < self.width and 0 <= y < self.height

    def validate_cell(self, cell: Sequence[int]) -> Cell:
        """Normalise ``cell`` to an ``(x, y)`` tuple or raise :class:`OutOfBoundsError`."""

        if not self.contains(cell):
            raise OutOfBoundsError(
                f"Cell {cell!r} is outside the {self.width}x{self.height} maze"
            )
        x, y = cell
        return int(x), int(y)

    def cells(self) -> Iterator[Cell]:
        for x in range(self.width):
            for y in range(self.height):
                yield (x, y)

    def walls_at(self, cell: Sequence[int]) -> WallSet:
        x, y = self.validate_cell(cell)
        return self.walls[x][y]

    def neighbors(self, cell: Cell) -> List[Cell]:
        return neighbors(cell, self.width, self.height)

    def is_open(self, cell: Cell, neighbor: Cell) -> bool:
        """Whether the wall shared by two adjacent cells has been carved."""

        side, _ = facing_sides(cell, neighbor)
        return not self.walls_at(cell).is_closed(side)

    def open_edges(self) -> List[Tuple[Cell, Cell]]:
        """Every carved passage once, as ``(cell, right or lower neighbour)``."""

        edges: List[Tuple[Cell, Cell]] = []
        for x, y in self.cells():
            walls = self.walls[x][y]
            if x + 1 < self.width and not walls.right:
                edges.append(((x, y), (x + 1, y)))
            if y + 1 < self.height and not walls.bottom:
                edges.append(((x, y), (x, y + 1)))
        return edges


__all__ = [
    "Cell",
    "CellPath",
    "SIDES",
    "WallSet",
    "Maze",
    "neighbors",
    "facing_sides",
    "validate_dimensions",
]
