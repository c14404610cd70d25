"""
Decomposition of occupancy grids into component bounding rectangles.

This package splits a 2D grid of filled and empty cells into one bounding
rectangle per connected object:

**Accessor** (accessor.py)
    Uniform occupancy queries over two interchangeable grid representations.
    - DenseGrid: materialized rows or numpy array
    - PredicateGrid: lazy (col, row) -> bool predicate with explicit proportions

**Connectivity** (connectivity.py)
    Defines adjacency relations.
    - tower_neighbors: 4-connectivity (orthogonal only), the default
    - king_neighbors: 8-connectivity (orthogonal + diagonal)

**Visited** (visited.py)
    Per-decomposition record of the cells already claimed by an object.

**Flood fill** (floodfill.py)
    Breadth- or depth-first discovery of one object from a seed cell,
    tracking its bounding rectangle.

**Objects** (objects.py)
    Raster scan seeding one flood fill per object.
    - grid_to_rectangles(grid) -> rectangles
    - predicate_to_rectangles(occupied, width, height) -> rectangles
    - decompose(source, width=None, height=None) -> rectangles
"""

from .accessor import (
    DenseGrid,
    OccupancyGrid,
    PredicateGrid,
    as_occupancy_grid,
)
from .connectivity import (
    Connectivity,
    CoordNeighborFunc,
    connectivity_to_neighbors,
    king_neighbors,
    make_coord_neighbors,
    tower_neighbors,
)
from .floodfill import (
    TraversalModes,
    flood_fill,
    traversal_mode,
)
from .objects import (
    decompose,
    grid_to_rectangles,
    iter_component_rectangles,
    occupancy_grid_to_rectangles,
    predicate_to_rectangles,
)
from .visited import (
    BitmapVisited,
    SparseVisited,
    VisitedTracker,
    visited_tracker_for,
)

__all__ = [
    # Accessor
    "OccupancyGrid",
    "DenseGrid",
    "PredicateGrid",
    "as_occupancy_grid",
    # Connectivity
    "Connectivity",
    "CoordNeighborFunc",
    "make_coord_neighbors",
    "tower_neighbors",
    "king_neighbors",
    "connectivity_to_neighbors",
    # Visited
    "VisitedTracker",
    "BitmapVisited",
    "SparseVisited",
    "visited_tracker_for",
    # Flood fill
    "TraversalModes",
    "traversal_mode",
    "flood_fill",
    # Objects
    "iter_component_rectangles",
    "occupancy_grid_to_rectangles",
    "grid_to_rectangles",
    "predicate_to_rectangles",
    "decompose",
]
