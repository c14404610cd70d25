"""
Decomposition of an occupancy grid into one bounding rectangle per object.

Objects are the maximal connected sets of occupied cells. What constitutes
"connected" is determined by the connectivity, 4-connectivity by default.

The grid is scanned in raster order (rows top to bottom, columns left to
right). The first occupied cell of an object met this way, its topmost then
leftmost cell, seeds a flood fill claiming the whole object. Rectangles are
therefore emitted in ascending (row, col) order of those seeds, and every
cell is examined a bounded number of times: the whole decomposition is
linear in the area of the grid.

A rectangle bounds its object only: it may contain empty cells, and the
rectangles of distinct objects may overlap.
"""

import logging
from collections.abc import Iterator
from typing import Any

from constants import DEFAULT_CONNECTIVITY, DEFAULT_TRAVERSAL
from localtypes import Coord, Grid, OccupancyPredicate
from rectangles import Rectangle

from .accessor import DenseGrid, OccupancyGrid, PredicateGrid, as_occupancy_grid
from .connectivity import Connectivity, CoordNeighborFunc, connectivity_to_neighbors
from .floodfill import TraversalModes, flood_fill, traversal_mode
from .visited import visited_tracker_for

logger = logging.getLogger(__name__)


def iter_component_rectangles(
    grid: OccupancyGrid,
    connectivity: Connectivity | str = DEFAULT_CONNECTIVITY,
    mode: TraversalModes | str = DEFAULT_TRAVERSAL,
) -> Iterator[Rectangle]:
    """
    Lazily yield the bounding rectangle of each object, in raster order of
    their topmost-leftmost cell.

    Arguments are checked on call, before iteration starts.
    """
    if not isinstance(grid, OccupancyGrid):
        raise TypeError(f"Expected an occupancy grid, got {type(grid).__name__}")
    neighbors = connectivity_to_neighbors(connectivity)
    mode = traversal_mode(mode)
    return _scan(grid, neighbors, mode)


def _scan(
    grid: OccupancyGrid, neighbors: CoordNeighborFunc, mode: TraversalModes
) -> Iterator[Rectangle]:
    visited = visited_tracker_for(grid)
    count = 0

    for row in range(grid.height):
        for col in range(grid.width):
            seed = Coord(col, row)
            if visited.is_visited(seed) or not grid.occupied(col, row):
                continue

            rect = flood_fill(grid, seed, visited, neighbors, mode)
            count += 1
            logger.debug(f"Object {count} seeded at {seed}: {rect}")
            yield rect

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Scanned {grid.width}x{grid.height} grid with {type(visited).__name__}: "
            f"{count} objects, {len(visited)} occupied cells"
        )


def occupancy_grid_to_rectangles(
    grid: OccupancyGrid,
    *,
    connectivity: Connectivity | str = DEFAULT_CONNECTIVITY,
    mode: TraversalModes | str = DEFAULT_TRAVERSAL,
) -> tuple[Rectangle, ...]:
    """Bounding rectangles of all the objects of the grid, in raster order."""
    return tuple(iter_component_rectangles(grid, connectivity, mode))


def grid_to_rectangles(
    grid: Grid,
    *,
    connectivity: Connectivity | str = DEFAULT_CONNECTIVITY,
    mode: TraversalModes | str = DEFAULT_TRAVERSAL,
) -> tuple[Rectangle, ...]:
    """
    Decompose a dense grid, grid[row][col], where zero is empty and anything
    else is occupied. Also accepts a 2D numpy array.

    Example:
        >>> grid_to_rectangles([[1, 1, 0], [0, 0, 0], [0, 0, 1]])
        (Rectangle(col=0, row=0, width=2, height=1), Rectangle(col=2, row=2, width=1, height=1))
    """
    return occupancy_grid_to_rectangles(
        DenseGrid.from_rows(grid), connectivity=connectivity, mode=mode
    )


def predicate_to_rectangles(
    occupied: OccupancyPredicate,
    width: int,
    height: int,
    *,
    connectivity: Connectivity | str = DEFAULT_CONNECTIVITY,
    mode: TraversalModes | str = DEFAULT_TRAVERSAL,
) -> tuple[Rectangle, ...]:
    """
    Decompose a lazily evaluated grid without materializing it.

    occupied(col, row) is only called within [0, width) x [0, height), and
    must return the same answer for a cell for the whole call.
    """
    return occupancy_grid_to_rectangles(
        PredicateGrid(occupied, width, height), connectivity=connectivity, mode=mode
    )


def decompose(
    source: Any,
    width: int | None = None,
    height: int | None = None,
    *,
    connectivity: Connectivity | str = DEFAULT_CONNECTIVITY,
    mode: TraversalModes | str = DEFAULT_TRAVERSAL,
) -> tuple[Rectangle, ...]:
    """
    Decompose any supported occupancy source: dense rows, a numpy array,
    an OccupancyGrid, or a predicate along with its width and height.

    Both representations of the same grid give the same rectangles.
    """
    return occupancy_grid_to_rectangles(
        as_occupancy_grid(source, width, height), connectivity=connectivity, mode=mode
    )
