"""
Occupancy grids: uniform access to which cells of a 2D grid are filled.

Two realizations share the OccupancyGrid protocol:
- DenseGrid: a materialized 2D array, read directly.
- PredicateGrid: a caller supplied predicate over (col, row) with explicit
  proportions, evaluated lazily. Meant for procedurally generated or very
  large sources where materializing the whole grid is wasteful.

Traversals only ever see the protocol, both are interchangeable.

Precondition on PredicateGrid: the predicate must be total over
[0, width) x [0, height) and must keep answering the same for a given cell
for the whole duration of a decomposition. A predicate closing over data
mutated by someone else while the scan runs breaks this, and cannot be
detected here.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np

from localtypes import Grid, OccupancyPredicate


@runtime_checkable
class OccupancyGrid(Protocol):
    """Logical width x height boolean field."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def occupied(self, col: int, row: int) -> bool:
        """Whether the cell at (col, row) is filled. Only called within bounds."""
        ...


@dataclass(frozen=True, eq=False)
class DenseGrid:
    """Materialized grid, cells[row, col] -> is occupied."""

    cells: np.ndarray

    def __post_init__(self):
        if not isinstance(self.cells, np.ndarray) or self.cells.ndim != 2:
            raise ValueError("DenseGrid cells must be a 2D numpy array")
        if self.cells.dtype != np.bool_:
            raise ValueError(f"DenseGrid cells must be booleans, got {self.cells.dtype}")

    @classmethod
    def from_rows(cls, rows: Grid | np.ndarray) -> "DenseGrid":
        """
        Zero (or any falsy value) is empty, anything else is occupied.

        Raises:
            TypeError: if rows is None
            ValueError: if the rows have different lengths,
                or if the array is not two dimensional
        """
        if rows is None:
            raise TypeError("The occupancy grid is None")

        if isinstance(rows, np.ndarray):
            array = rows
        else:
            rows = list(rows)
            if not rows:
                return cls(np.zeros((0, 0), dtype=bool))
            try:
                widths = {len(row) for row in rows}
            except TypeError:
                raise ValueError("Expected a 2D grid, rows must be sequences") from None
            if len(widths) > 1:
                raise ValueError(f"Grid rows have different lengths: {sorted(widths)}")
            array = np.asarray(rows)

        if array.ndim != 2:
            raise ValueError(f"Expected a 2D grid, got {array.ndim} dimension(s)")
        return cls(array.astype(bool))

    @property
    def width(self) -> int:
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        return self.cells.shape[0]

    def occupied(self, col: int, row: int) -> bool:
        return bool(self.cells[row, col])


@dataclass(frozen=True)
class PredicateGrid:
    """Lazy grid, predicate(col, row) -> is occupied. Nothing is materialized."""

    predicate: OccupancyPredicate
    width: int
    height: int

    def __post_init__(self):
        if not callable(self.predicate):
            raise TypeError(f"The occupancy predicate must be callable, got {self.predicate!r}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Grid {name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"Grid {name} must be non-negative, got {value}")
            object.__setattr__(self, name, int(value))

    def occupied(self, col: int, row: int) -> bool:
        return bool(self.predicate(col, row))


def as_occupancy_grid(
    source: Any, width: int | None = None, height: int | None = None
) -> OccupancyGrid:
    """
    View any supported occupancy source through the OccupancyGrid protocol.

    - an OccupancyGrid is returned as is
    - a callable (col, row) -> bool becomes a PredicateGrid, width and height are required
    - anything else is read as dense rows, see DenseGrid.from_rows

    When given along a grid or dense rows, width and height must match them.
    """
    if source is None:
        raise TypeError("No occupancy source given")

    if isinstance(source, OccupancyGrid):
        grid = source
    elif callable(source):
        if width is None or height is None:
            raise TypeError("An occupancy predicate requires an explicit width and height")
        return PredicateGrid(source, width, height)
    else:
        grid = DenseGrid.from_rows(source)

    if width is not None and width != grid.width:
        raise ValueError(f"Given width: {width} does not match the grid width: {grid.width}")
    if height is not None and height != grid.height:
        raise ValueError(f"Given height: {height} does not match the grid height: {grid.height}")
    return grid
