"""
Type definitions for grid decomposition.

Coordinate Convention:
    All coordinates use (col, row) order, where:
    - col: x-axis, increases rightward (0 to width-1)
    - row: y-axis, increases downward (0 to height-1)

    Grids themselves are indexed as grid[row][col].
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple, TypeAlias


# Grid representations
Cell: TypeAlias = int | bool
Grid: TypeAlias = Sequence[Sequence[Cell]]  # Dense: grid[row][col] -> truthy if occupied
OccupancyPredicate: TypeAlias = Callable[[int, int], bool]  # (col, row) -> is occupied


# Coordinate systems
class Coord(NamedTuple):
    col: int
    row: int


Box: TypeAlias = tuple[Coord, Coord]  # (top_left, bottom_right) corners, both inclusive


class Proportions(NamedTuple):
    width: int
    height: int


__all__ = [
    "Cell",
    "Grid",
    "OccupancyPredicate",
    "Coord",
    "Box",
    "Proportions",
]
