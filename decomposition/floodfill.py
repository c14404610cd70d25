"""
Flood fill of one connected component, keeping only its bounding rectangle.

The component's cells are not collected: the traversal only maintains the
running minimum and maximum of the columns and rows it discovers, so the
memory kept per component does not depend on its shape. The frontier is
the only transient storage, O(component size).
"""

from collections import deque
from enum import StrEnum

from localtypes import Coord
from rectangles import Rectangle

from .accessor import OccupancyGrid
from .connectivity import CoordNeighborFunc, tower_neighbors
from .visited import VisitedTracker


class TraversalModes(StrEnum):
    """Graph Traversal methods"""

    DFS = "dfs"
    BFS = "bfs"


def traversal_mode(mode: TraversalModes | str) -> TraversalModes:
    """Traversal mode given either as member or by name."""
    try:
        return TraversalModes(mode)
    except ValueError:
        names = ", ".join(m.value for m in TraversalModes)
        raise ValueError(
            f"Unknown traversal mode: {mode!r}, expected one of: {names}"
        ) from None


def flood_fill(
    grid: OccupancyGrid,
    seed: Coord,
    visited: VisitedTracker,
    neighbors: CoordNeighborFunc = tower_neighbors,
    mode: TraversalModes | str = TraversalModes.BFS,
) -> Rectangle:
    """
    Discover the whole component containing seed and return its bounding rectangle.

    Every cell of the component is marked in visited. A cell is marked as soon
    as it is pushed onto the frontier, not when it is popped, so it is pushed
    at most once.

    Breadth-first pops the oldest cell of the frontier, depth-first the newest.
    Both discover the same cells, hence the same rectangle.

    Args:
        grid: Grid to explore.
        seed: An occupied cell no component has claimed yet.
        visited: Cells already claimed during the current decomposition.
        neighbors: Adjacency, 4-connectivity unless told otherwise.
        mode: Order in which the frontier is explored.

    Returns:
        Rectangle(min_col, min_row, max_col - min_col + 1, max_row - min_row + 1)
    """
    seed = Coord(*seed)
    assert grid.occupied(*seed), f"Seed {seed} is not occupied"
    assert not visited.is_visited(seed), f"Seed {seed} already belongs to a component"

    width, height = grid.width, grid.height
    col_min = col_max = seed.col
    row_min = row_max = seed.row

    visited.mark(seed)
    frontier = deque([seed])
    pop = frontier.popleft if traversal_mode(mode) is TraversalModes.BFS else frontier.pop

    while frontier:
        current = pop()
        for neighbor in neighbors(current, width, height):
            # Checking visited first spares a predicate call on lazy grids
            if visited.is_visited(neighbor) or not grid.occupied(*neighbor):
                continue

            visited.mark(neighbor)
            frontier.append(neighbor)

            col, row = neighbor
            if col < col_min:
                col_min = col
            elif col > col_max:
                col_max = col
            if row < row_min:
                row_min = row
            elif row > row_max:
                row_max = row

    return Rectangle(col_min, row_min, col_max - col_min + 1, row_max - row_min + 1)
