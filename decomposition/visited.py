"""
Tracking of the cells already assigned to a component.

A tracker lives for exactly one decomposition and is never shared.
Each cell gets marked at most once: marking it twice means two components
claimed it, which the traversal must never let happen.

Two storages, chosen for memory only, with identical behavior:
- BitmapVisited: one byte per cell of the grid, O(1) operations
- SparseVisited: hash set of the marked cells, memory proportional to the
  number of occupied cells, meant for very large lazy grids
"""

from typing import Protocol

from constants import SPARSE_VISITED_MIN_AREA
from localtypes import Coord

from .accessor import DenseGrid, OccupancyGrid


class VisitedTracker(Protocol):
    def is_visited(self, coord: Coord) -> bool: ...

    def mark(self, coord: Coord) -> None: ...

    def __len__(self) -> int: ...


class BitmapVisited:
    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._cells = bytearray(width * height)

    def _index(self, coord: Coord) -> int:
        col, row = coord
        return row * self._width + col

    def is_visited(self, coord: Coord) -> bool:
        return self._cells[self._index(coord)] != 0

    def mark(self, coord: Coord) -> None:
        index = self._index(coord)
        assert not self._cells[index], f"Cell {coord} marked twice"
        self._cells[index] = 1

    def __len__(self) -> int:
        return self._cells.count(1)


class SparseVisited:
    def __init__(self) -> None:
        self._seen: set[Coord] = set()

    def is_visited(self, coord: Coord) -> bool:
        return coord in self._seen

    def mark(self, coord: Coord) -> None:
        assert coord not in self._seen, f"Cell {coord} marked twice"
        self._seen.add(coord)

    def __len__(self) -> int:
        return len(self._seen)


def visited_tracker_for(grid: OccupancyGrid) -> VisitedTracker:
    """
    Bitmap for dense grids and reasonably sized lazy ones,
    hash set for lazy grids covering at least SPARSE_VISITED_MIN_AREA cells.
    """
    if not isinstance(grid, DenseGrid) and grid.width * grid.height >= SPARSE_VISITED_MIN_AREA:
        return SparseVisited()
    return BitmapVisited(grid.width, grid.height)
