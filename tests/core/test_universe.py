"""Tests for the Universe class."""

import numpy as np
import pytest
from congol.core.universe import Universe


def seed(universe, cells):
    for row, column in cells:
        universe.set(row, column, True)
    return universe


def live_cells(universe):
    return {(row, column) for row, column, alive in universe if alive}


class TestUniverse:
    """Test cases for the Universe class."""

    def test_initialization(self):
        """Test universe initialization."""
        universe = Universe(10, 20)
        assert universe.width == 10
        assert universe.height == 20
        assert universe.shape == (10, 20)
        assert len(universe) == 200
        assert universe.population == 0

    def test_invalid_dimensions(self):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            Universe(0, 5)

        with pytest.raises(ValueError):
            Universe(5, 0)

        with pytest.raises(ValueError):
            Universe(-1, 3)

        with pytest.raises(ValueError):
            Universe(2.5, 3)

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        universe = Universe(5, 5)

        # Initially all cells should be dead
        assert universe.get(0, 0) is False
        assert universe.get(2, 3) is False

        universe.set(1, 1, True)
        universe.set(2, 3, True)

        assert universe.get(1, 1) is True
        assert universe.get(2, 3) is True
        assert universe.get(3, 2) is False
        assert universe.population == 2

        universe.set(1, 1, False)
        assert universe.get(1, 1) is False
        assert universe.population == 1

    def test_row_major_layout(self):
        """Test that (row, column) maps to row * width + column."""
        universe = Universe(4, 3)
        universe.set(1, 2, True)

        assert universe.cells[1 * 4 + 2]
        assert np.count_nonzero(universe.cells) == 1

    def test_cells_read_only(self):
        """Test that the exposed cell array cannot be written."""
        universe = Universe(3, 3)

        with pytest.raises(ValueError):
            universe.cells[0] = True

        assert universe.population == 0

    def test_out_of_bounds(self):
        """Test that out-of-range coordinates raise instead of wrapping."""
        universe = Universe(4, 3)

        for row, column in [(-1, 0), (0, -1), (3, 0), (0, 4), (10, 10)]:
            with pytest.raises(IndexError):
                universe.get(row, column)

            with pytest.raises(IndexError):
                universe.set(row, column, True)

            with pytest.raises(IndexError):
                universe.count_neighbors(row, column)

        assert universe.population == 0

    def test_clear(self):
        """Test universe clearing."""
        universe = seed(Universe(5, 5), [(1, 1), (2, 2), (3, 3)])
        assert universe.population == 3

        universe.clear()
        assert universe.population == 0

    def test_randomize(self):
        """Test random population."""
        universe = Universe(10, 10)

        universe.randomize(0.0)
        assert universe.population == 0

        universe.randomize(1.0)
        assert universe.population == 100

        universe.randomize(0.5, seed=1)
        assert 30 <= universe.population <= 70

        with pytest.raises(ValueError):
            universe.randomize(1.5)

        with pytest.raises(ValueError):
            universe.randomize(-0.1)

    def test_randomize_seed_reproducible(self):
        """Test that the same seed gives the same fill."""
        first = Universe(12, 8)
        second = Universe(12, 8)

        first.randomize(0.3, seed=42)
        second.randomize(0.3, seed=42)

        assert first == second

    def test_count_neighbors(self):
        """Test neighbor counting for individual cells."""
        universe = Universe(5, 5)
        universe.set(3, 3, True)

        # A cell is not its own neighbor
        assert universe.count_neighbors(3, 3) == 0

        for row in range(2, 5):
            for column in range(2, 5):
                universe.set(row, column, True)

        assert universe.count_neighbors(3, 3) == 8
        assert universe.count_neighbors(4, 4) == 3
        assert universe.count_neighbors(1, 1) == 1
        assert universe.count_neighbors(0, 0) == 0

    def test_count_neighbors_corner(self):
        """Test that off-grid positions count as dead at the corners."""
        universe = seed(Universe(5, 5), [(0, 0), (0, 1), (1, 1)])
        assert universe.count_neighbors(0, 0) == 2

        universe = seed(Universe(5, 5), [(0, 4), (0, 3), (1, 3), (1, 4)])
        assert universe.count_neighbors(0, 4) == 3

        # Opposite corner does not see (0, 4) through the edge
        universe.set(4, 0, True)
        assert universe.count_neighbors(4, 0) == 0

    def test_count_all_neighbors_matches_single(self):
        """Test vectorized counting agrees with per-cell counting."""
        universe = Universe(9, 7)
        universe.randomize(0.4, seed=3)

        counts = universe.count_all_neighbors()
        assert counts.shape == (7, 9)

        for row in range(universe.height):
            for column in range(universe.width):
                assert counts[row, column] == universe.count_neighbors(row, column)

    def test_lone_corner_cell_dies(self):
        """Test a 3x3 universe with only (0, 0) alive dies out."""
        universe = seed(Universe(3, 3), [(0, 0)])

        successor = universe.next()

        assert successor.population == 0

    def test_edge_blinker_is_clipped(self):
        """Test a line along the left edge evolves without wrapping."""
        universe = seed(Universe(3, 3), [(0, 0), (1, 0), (2, 0)])

        successor = universe.next()

        assert live_cells(successor) == {(1, 0), (1, 1)}

    def test_rule_underpopulation(self):
        """Test live cells with fewer than 2 neighbors die."""
        for neighbors in [[], [(1, 1)]]:
            universe = seed(Universe(5, 5), [(2, 2)] + neighbors)
            assert universe.next().get(2, 2) is False

    def test_rule_survival(self):
        """Test live cells with 2 or 3 neighbors survive."""
        for neighbors in [[(1, 1), (3, 3)], [(1, 1), (3, 3), (1, 3)]]:
            universe = seed(Universe(5, 5), [(2, 2)] + neighbors)
            assert universe.count_neighbors(2, 2) == len(neighbors)
            assert universe.next().get(2, 2) is True

    def test_rule_overpopulation(self):
        """Test live cells with more than 3 neighbors die."""
        ring = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]

        for count in range(4, 9):
            universe = seed(Universe(5, 5), [(2, 2)] + ring[:count])
            assert universe.count_neighbors(2, 2) == count
            assert universe.next().get(2, 2) is False

    def test_rule_reproduction(self):
        """Test dead cells come alive with exactly 3 neighbors only."""
        ring = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]

        for count in range(0, 9):
            universe = seed(Universe(5, 5), ring[:count])
            assert universe.next().get(2, 2) is (count == 3)

    def test_next_does_not_mutate(self):
        """Test next() leaves the receiver unchanged."""
        universe = seed(Universe(6, 6), [(1, 2), (2, 2), (3, 2)])
        before = universe.copy()

        successor = universe.next()

        assert universe == before
        assert successor != before
        assert successor is not universe

    def test_next_deterministic(self):
        """Test next() gives identical results for the same state."""
        universe = Universe(16, 12)
        universe.randomize(0.35, seed=7)

        assert universe.next() == universe.next()

    def test_next_keeps_dimensions(self):
        """Test the successor has the same dimensions."""
        universe = Universe(7, 4)
        universe.randomize(0.5, seed=11)

        successor = universe.next()

        assert successor.shape == (7, 4)
        assert len(successor) == 28

    def test_block_is_still_life(self):
        """Test a 2x2 block is its own successor."""
        universe = seed(Universe(6, 6), [(2, 2), (2, 3), (3, 2), (3, 3)])

        current = universe
        for _ in range(10):
            current = current.next()

        assert current == universe

    def test_corner_block_is_still_life(self):
        """Test a block in the corner stays put with clipped edges."""
        universe = seed(Universe(4, 4), [(0, 0), (0, 1), (1, 0), (1, 1)])

        assert universe.next() == universe

    def test_glider_translation(self):
        """Test a glider moves one cell down and right every 4 generations."""
        glider = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]
        universe = seed(Universe(12, 12), [(row + 2, column + 2) for row, column in glider])

        current = universe
        for _ in range(4):
            current = current.next()

        assert live_cells(current) == {(row + 3, column + 3) for row, column in glider}

    def test_copy_is_independent(self):
        """Test copy produces an independent universe."""
        universe = seed(Universe(3, 3), [(1, 1)])
        duplicate = universe.copy()

        duplicate.set(0, 0, True)

        assert universe.get(0, 0) is False
        assert duplicate.get(1, 1) is True

    def test_iteration(self):
        """Test iterating yields (row, column, alive) in index order."""
        universe = seed(Universe(3, 2), [(1, 0)])

        cells = list(universe)

        assert len(cells) == 6
        assert cells[0] == (0, 0, False)
        assert cells[2] == (0, 2, False)
        assert cells[3] == (1, 0, True)

    def test_rows(self):
        """Test row iteration."""
        universe = seed(Universe(3, 2), [(0, 1), (1, 2)])

        assert list(universe.rows()) == [(False, True, False), (False, False, True)]

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        universe = Universe(10, 10)

        assert universe.get_bounding_box() is None

        universe.set(3, 5, True)
        assert universe.get_bounding_box() == (3, 5, 3, 5)

        universe.set(1, 2, True)
        universe.set(8, 7, True)
        assert universe.get_bounding_box() == (1, 2, 8, 7)

    def test_equality(self):
        """Test universe equality comparison."""
        first = Universe(3, 3)
        second = Universe(3, 3)
        assert first == second

        first.set(1, 1, True)
        second.set(1, 1, True)
        assert first == second

        second.set(2, 2, True)
        assert first != second

        assert Universe(3, 3) != Universe(4, 3)
        assert first != "not a universe"

    def test_string_representation(self):
        """Test string representation."""
        universe = Universe(3, 3)
        assert str(universe) == "...\n...\n..."

        seed(universe, [(0, 0), (1, 1), (2, 2)])
        assert str(universe) == "*..\n.*.\n..*"

    def test_repr(self):
        """Test repr shows size and population."""
        universe = seed(Universe(4, 2), [(0, 0)])
        assert repr(universe) == "Universe(width=4, height=2, population=1)"
