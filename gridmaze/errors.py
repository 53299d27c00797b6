"""Exceptions raised by maze generation and path search."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by the package."""


class InvalidDimensionError(MazeError, ValueError):
    """Width or height is not a positive integer."""


class OutOfBoundsError(MazeError, ValueError):
    """A cell lies outside the maze grid."""


class NoPathFoundError(MazeError, RuntimeError):
    """The end cell was never reached from the start cell.

    A carved maze is a spanning tree, so this signals a broken maze rather
    than bad input.
    """


__all__ = [
    "MazeError",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "NoPathFoundError",
]
