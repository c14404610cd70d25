"""
Tests for decomposition/objects.py

Scenarios, properties checked against scipy's labelling on random grids,
representation equivalence and preconditions.
"""

import logging

import numpy as np
import pytest
from scipy import ndimage

from decomposition import (
    Connectivity,
    DenseGrid,
    PredicateGrid,
    SparseVisited,
    TraversalModes,
    decompose,
    grid_to_rectangles,
    iter_component_rectangles,
    occupancy_grid_to_rectangles,
    predicate_to_rectangles,
)
from rectangles import Rectangle

GRID_C = [
    [0, 0, 0, 0, 0],
    [1, 1, 0, 0, 0],
    [0, 1, 1, 0, 0],
    [0, 0, 0, 0, 0],
]

GRID_D = [
    [0, 0, 1, 0, 0],
    [1, 1, 1, 1, 1],
    [0, 1, 1, 0, 0],
    [0, 1, 0, 0, 1],
]

STRUCTURES = {
    Connectivity.TOWER: ndimage.generate_binary_structure(2, 1),
    Connectivity.KING: ndimage.generate_binary_structure(2, 2),
}


def as_predicate(grid):
    return lambda col, row: grid[row][col] != 0


def random_grid(seed: int, height: int, width: int, density: float) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return (rng.random((height, width)) < density).astype(int)


def expected_rectangles(grid: np.ndarray, connectivity: Connectivity) -> list[Rectangle]:
    """
    Bounding rectangles of scipy's components, ordered by the (row, col)
    of each component's topmost-leftmost cell.
    """
    labels, count = ndimage.label(grid, structure=STRUCTURES[connectivity])
    slices = ndimage.find_objects(labels)

    first_cells = []
    for label in range(1, count + 1):
        row, col = np.argwhere(labels == label)[0]
        first_cells.append(((int(row), int(col)), label))

    rectangles = []
    for _, label in sorted(first_cells):
        row_slice, col_slice = slices[label - 1]
        rectangles.append(
            Rectangle(
                col_slice.start,
                row_slice.start,
                col_slice.stop - col_slice.start,
                row_slice.stop - row_slice.start,
            )
        )
    return rectangles


class TestScenarios:
    def test_empty_cell(self):
        assert grid_to_rectangles([[0]]) == ()

    def test_single_cell(self):
        assert grid_to_rectangles([[1]]) == (Rectangle(0, 0, 1, 1),)

    def test_bent_line(self):
        assert grid_to_rectangles(GRID_C) == (Rectangle(0, 1, 3, 2),)

    def test_cross_and_isolated_corner(self):
        assert grid_to_rectangles(GRID_D) == (
            Rectangle(0, 0, 5, 4),
            Rectangle(4, 3, 1, 1),
        )

    def test_bent_line_from_predicate(self):
        rects = predicate_to_rectangles(as_predicate(GRID_C), 5, 4)
        assert rects == (Rectangle(0, 1, 3, 2),)

    def test_cross_and_isolated_corner_from_predicate(self):
        rects = predicate_to_rectangles(as_predicate(GRID_D), 5, 4)
        assert rects == (Rectangle(0, 0, 5, 4), Rectangle(4, 3, 1, 1))

    def test_compares_to_plain_tuples(self):
        assert grid_to_rectangles(GRID_D) == ((0, 0, 5, 4), (4, 3, 1, 1))


class TestEdgeCases:
    @pytest.mark.parametrize("grid", [[], [[]], [[0, 0], [0, 0]], np.zeros((3, 7))])
    def test_no_occupied_cell(self, grid):
        assert grid_to_rectangles(grid) == ()

    @pytest.mark.parametrize("width, height", [(0, 0), (0, 4), (4, 0)])
    def test_degenerate_predicate_grid(self, width, height):
        def never_called(col, row):
            raise AssertionError("predicate called on an empty grid")

        assert predicate_to_rectangles(never_called, width, height) == ()

    def test_full_grid(self):
        assert grid_to_rectangles([[1] * 4] * 3) == (Rectangle(0, 0, 4, 3),)

    def test_any_non_zero_is_occupied(self):
        grid = [[2, 0, -1], [0, 0, 0], [True, 0, 0.5]]
        assert grid_to_rectangles(grid) == (
            Rectangle(0, 0, 1, 1),
            Rectangle(2, 0, 1, 1),
            Rectangle(0, 2, 1, 1),
            Rectangle(2, 2, 1, 1),
        )

    def test_diagonal_contact_does_not_connect(self):
        """4-connectivity: cells touching by a corner are separate objects."""
        grid = [[1, 0], [0, 1]]
        assert grid_to_rectangles(grid) == (Rectangle(0, 0, 1, 1), Rectangle(1, 1, 1, 1))

    def test_diagonal_contact_connects_with_king(self):
        grid = [[1, 0], [0, 1]]
        rects = grid_to_rectangles(grid, connectivity=Connectivity.KING)
        assert rects == (Rectangle(0, 0, 2, 2),)

    def test_connectivity_by_name(self):
        grid = [[0, 1], [1, 0]]
        assert grid_to_rectangles(grid, connectivity="king") == (Rectangle(0, 0, 2, 2),)
        assert len(grid_to_rectangles(grid, connectivity="tower")) == 2

    def test_overlapping_boxes_are_kept(self):
        """A ring around an isolated cell: the inner box lies inside the outer one."""
        ring = [
            [1, 1, 1, 1, 1],
            [1, 0, 0, 0, 1],
            [1, 0, 1, 0, 1],
            [1, 0, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ]
        assert grid_to_rectangles(ring) == (Rectangle(0, 0, 5, 5), Rectangle(2, 2, 1, 1))

    def test_u_shape_is_one_object(self):
        """The seed is the top-left arm, the right arm is reached through the bottom."""
        grid = [
            [1, 0, 1],
            [1, 0, 1],
            [1, 1, 1],
        ]
        assert grid_to_rectangles(grid) == (Rectangle(0, 0, 3, 3),)

    def test_object_extending_left_of_its_seed(self):
        grid = [
            [0, 0, 1],
            [1, 1, 1],
        ]
        assert grid_to_rectangles(grid) == (Rectangle(0, 0, 3, 2),)

    def test_emitted_in_order_of_topmost_leftmost_cell(self):
        grid = [
            [0, 0, 0, 1],
            [1, 0, 0, 1],
            [1, 0, 1, 0],
            [0, 0, 1, 0],
        ]
        assert grid_to_rectangles(grid) == (
            Rectangle(3, 0, 1, 2),
            Rectangle(0, 1, 1, 2),
            Rectangle(2, 2, 1, 2),
        )

    def test_numpy_array(self):
        assert grid_to_rectangles(np.array(GRID_D)) == grid_to_rectangles(GRID_D)


class TestAgainstScipy:
    """Count, covering and order properties on random grids."""

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("density", [0.2, 0.45, 0.6, 0.85])
    @pytest.mark.parametrize("connectivity", [Connectivity.TOWER, Connectivity.KING])
    def test_matches_labelling(self, seed, density, connectivity):
        grid = random_grid(seed, 13, 17, density)
        rects = grid_to_rectangles(grid, connectivity=connectivity)
        assert list(rects) == expected_rectangles(grid, connectivity)

    @pytest.mark.parametrize("seed", range(4))
    def test_every_occupied_cell_is_covered_by_its_object(self, seed):
        grid = random_grid(seed, 20, 20, 0.5)
        rects = grid_to_rectangles(grid)
        labels, count = ndimage.label(grid)

        assert len(rects) == count
        for rect in rects:
            assert rect.width > 0 and rect.height > 0
        # Each object's cells all lie within one rectangle, which is minimal
        for label in range(1, count + 1):
            cells = np.argwhere(labels == label)
            rows, cols = cells[:, 0], cells[:, 1]
            bounding = Rectangle(
                int(cols.min()),
                int(rows.min()),
                int(cols.max() - cols.min() + 1),
                int(rows.max() - rows.min() + 1),
            )
            assert bounding in rects


class TestRepresentationEquivalence:
    @pytest.mark.parametrize("seed", range(6))
    @pytest.mark.parametrize("shape", [(1, 30), (30, 1), (9, 11), (16, 16)])
    def test_dense_and_predicate_agree(self, seed, shape):
        grid = random_grid(seed, *shape, 0.55).tolist()
        height, width = shape
        assert grid_to_rectangles(grid) == predicate_to_rectangles(
            as_predicate(grid), width, height
        )

    def test_sparse_visited_agrees(self, monkeypatch):
        grid = random_grid(3, 25, 25, 0.5).tolist()
        dense = grid_to_rectangles(grid)

        monkeypatch.setattr("decomposition.visited.SPARSE_VISITED_MIN_AREA", 0)
        assert predicate_to_rectangles(as_predicate(grid), 25, 25) == dense

    @pytest.mark.parametrize("mode", list(TraversalModes))
    def test_traversal_mode_does_not_matter(self, mode):
        grid = random_grid(11, 15, 15, 0.6)
        assert grid_to_rectangles(grid, mode=mode) == grid_to_rectangles(grid)

    def test_decompose_dispatches(self):
        predicate = as_predicate(GRID_D)
        expected = (Rectangle(0, 0, 5, 4), Rectangle(4, 3, 1, 1))

        assert decompose(GRID_D) == expected
        assert decompose(np.array(GRID_D)) == expected
        assert decompose(predicate, 5, 4) == expected
        assert decompose(PredicateGrid(predicate, 5, 4)) == expected
        assert decompose(DenseGrid.from_rows(GRID_D), 5, 4) == expected

    def test_predicate_only_queried_within_bounds(self):
        queried = []

        def occupied(col, row):
            assert 0 <= col < 6 and 0 <= row < 4
            queried.append((col, row))
            return (col + row) % 3 != 0

        predicate_to_rectangles(occupied, 6, 4)
        assert set(queried) == {(col, row) for col in range(6) for row in range(4)}


class TestDeterminism:
    def test_repeated_calls(self):
        grid = random_grid(5, 12, 12, 0.5)
        first = grid_to_rectangles(grid)
        assert all(grid_to_rectangles(grid) == first for _ in range(3))

    def test_input_is_not_modified(self):
        grid = [row[:] for row in GRID_D]
        grid_to_rectangles(grid)
        assert grid == GRID_D

    def test_result_is_immutable_sequence(self):
        assert isinstance(grid_to_rectangles(GRID_C), tuple)


class TestIterComponentRectangles:
    def test_lazy(self):
        rects = iter_component_rectangles(DenseGrid.from_rows(GRID_D))
        assert next(rects) == Rectangle(0, 0, 5, 4)
        assert next(rects) == Rectangle(4, 3, 1, 1)
        with pytest.raises(StopIteration):
            next(rects)

    def test_arguments_checked_before_iterating(self):
        with pytest.raises(ValueError, match="connectivity"):
            iter_component_rectangles(DenseGrid.from_rows(GRID_D), connectivity="queen")

    def test_rejects_non_grid(self):
        with pytest.raises(TypeError):
            occupancy_grid_to_rectangles(GRID_D)

    def test_debug_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger="decomposition.objects")
        grid_to_rectangles(GRID_D)
        messages = [record.getMessage() for record in caplog.records]
        assert any("seeded at" in message for message in messages)
        assert any("2 objects" in message for message in messages)

    def test_summary_skips_counting_without_debug(self, caplog, monkeypatch):
        class UncountedVisited(SparseVisited):
            def __len__(self):
                raise AssertionError("visited cells counted with debug logging off")

        monkeypatch.setattr(
            "decomposition.objects.visited_tracker_for", lambda grid: UncountedVisited()
        )
        caplog.set_level(logging.INFO, logger="decomposition.objects")
        assert grid_to_rectangles(GRID_D) == (Rectangle(0, 0, 5, 4), Rectangle(4, 3, 1, 1))


class TestPreconditions:
    def test_none_source(self):
        with pytest.raises(TypeError):
            decompose(None)
        with pytest.raises(TypeError):
            grid_to_rectangles(None)

    def test_ragged_rows(self):
        with pytest.raises(ValueError, match="different lengths"):
            grid_to_rectangles([[1, 0], [1]])

    @pytest.mark.parametrize("grid", [[1, 0, 1], np.zeros(4), np.zeros((2, 2, 2))])
    def test_not_two_dimensional(self, grid):
        with pytest.raises(ValueError):
            grid_to_rectangles(grid)

    @pytest.mark.parametrize("width, height", [(-1, 3), (3, -1)])
    def test_negative_dimensions(self, width, height):
        with pytest.raises(ValueError, match="non-negative"):
            predicate_to_rectangles(lambda col, row: True, width, height)

    def test_non_integer_dimensions(self):
        with pytest.raises(TypeError):
            predicate_to_rectangles(lambda col, row: True, 2.5, 3)

    def test_predicate_without_dimensions(self):
        with pytest.raises(TypeError, match="width and height"):
            decompose(lambda col, row: True)

    def test_non_callable_predicate(self):
        with pytest.raises(TypeError):
            predicate_to_rectangles(None, 2, 2)

    def test_inconsistent_dimensions(self):
        with pytest.raises(ValueError, match="width"):
            decompose(GRID_D, width=4)
        with pytest.raises(ValueError, match="height"):
            decompose(GRID_D, height=5)

    def test_unknown_connectivity(self):
        with pytest.raises(ValueError, match="Unknown connectivity"):
            grid_to_rectangles(GRID_D, connectivity="queen")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown traversal mode"):
            grid_to_rectangles(GRID_D, mode="random")
