"""
Connectivity definitions for decomposition.

A connectivity defines which cells are "neighbors" of each other,
enabling connected component extraction. Different connectivities
produce different decompositions of the same grid.

This module builds on freeman.py's direction definitions:
- TOWER: 4 orthogonal directions → 4-connectivity, the default.
  Cells touching only by a corner belong to different components.
- KING: 8 directions (orthogonal + diagonal) → 8-connectivity
"""

from collections.abc import Iterator, Sequence
from enum import StrEnum
from typing import Callable

from freeman import DIRECTIONS_FREEMAN, KING, TOWER, King
from localtypes import Coord

# A neighbor function takes a coordinate and the grid proportions (width, height),
# and yields the adjacent coordinates lying within the grid
CoordNeighborFunc = Callable[[Coord, int, int], Iterator[Coord]]


class Connectivity(StrEnum):
    """Adjacency relations, named after the chess pieces moving that way"""

    TOWER = "tower"
    KING = "king"


def make_coord_neighbors(directions: Sequence[King]) -> CoordNeighborFunc:
    """
    Create a neighbor function from a set of movement directions.

    The returned function yields the coordinates reachable from a given
    coordinate by moving one step in any of the specified directions,
    skipping those falling outside [0, width) x [0, height).

    Args:
        directions: Movement directions (indices into DIRECTIONS_FREEMAN).
                   Use KING for 8-connectivity, TOWER for 4-connectivity.

    Example:
        >>> neighbors = make_coord_neighbors(TOWER)
        >>> list(neighbors(Coord(0, 0), 2, 2))
        [Coord(col=1, row=0), Coord(col=0, row=1)]
    """
    deltas: tuple[Coord, ...] = tuple(DIRECTIONS_FREEMAN[d] for d in directions)

    def neighbors(coord: Coord, width: int, height: int) -> Iterator[Coord]:
        col, row = coord
        for dcol, drow in deltas:
            ncol, nrow = col + dcol, row + drow
            if 0 <= ncol < width and 0 <= nrow < height:
                yield Coord(ncol, nrow)

    return neighbors


# Standard connectivity functions for 2D grids
tower_neighbors: CoordNeighborFunc = make_coord_neighbors(TOWER)
king_neighbors: CoordNeighborFunc = make_coord_neighbors(KING)

NEIGHBORS_BY_CONNECTIVITY: dict[Connectivity, CoordNeighborFunc] = {
    Connectivity.TOWER: tower_neighbors,
    Connectivity.KING: king_neighbors,
}


def connectivity_to_neighbors(connectivity: Connectivity | str) -> CoordNeighborFunc:
    """Neighbor function of a connectivity, given either as member or by name."""
    try:
        return NEIGHBORS_BY_CONNECTIVITY[Connectivity(connectivity)]
    except ValueError:
        names = ", ".join(c.value for c in Connectivity)
        raise ValueError(
            f"Unknown connectivity: {connectivity!r}, expected one of: {names}"
        ) from None
