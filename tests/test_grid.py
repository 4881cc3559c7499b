"""Tests for the grid buffer primitives."""

import pytest

from tilelayout.layout import (
    GRID_SIZE,
    Cell,
    can_place,
    create_grid,
    grid_rows,
    occupied_cells,
    place,
    render_grid,
)


class TestCreateGrid:
    """Test cases for grid creation."""

    def test_default_size(self):
        """Default grid is 25x25."""
        grid = create_grid()
        assert GRID_SIZE == 25
        assert len(grid) == 25
        assert all(len(row) == 25 for row in grid)

    def test_all_cells_empty(self):
        """A new grid has no letters."""
        grid = create_grid(5)
        assert all(cell == '' for row in grid for cell in row)
        assert occupied_cells(grid) == []

    def test_rows_are_independent(self):
        """Writing one row must not leak into another."""
        grid = create_grid(3)
        grid[0][0] = 'A'
        assert grid[1][0] == ''


class TestCanPlace:
    """Test cases for placement checks."""

    def test_fits_horizontally(self):
        grid = create_grid(5)
        assert can_place(grid, "ABC", 0, 2, 'H') is True

    def test_past_right_edge(self):
        """Horizontal word running off the right edge."""
        grid = create_grid(5)
        assert can_place(grid, "ABC", 0, 3, 'H') is False

    def test_past_bottom_edge(self):
        """Vertical word running off the bottom edge."""
        grid = create_grid(5)
        assert can_place(grid, "ABC", 3, 0, 'V') is False
        assert can_place(grid, "ABC", 2, 0, 'V') is True

    def test_negative_origin(self):
        """Negative row or column never fits."""
        grid = create_grid(5)
        assert can_place(grid, "AB", -1, 0, 'V') is False
        assert can_place(grid, "AB", 0, -1, 'H') is False

    def test_conflicting_letter(self):
        """A different letter in a covered cell blocks placement."""
        grid = create_grid(5)
        place(grid, "CAT", 2, 0, 'H')
        assert can_place(grid, "DOG", 0, 1, 'V') is False

    def test_same_letter_is_not_conflict(self):
        """Sharing a matching letter is how words intersect."""
        grid = create_grid(5)
        place(grid, "CAT", 2, 0, 'H')
        assert can_place(grid, "BAD", 1, 1, 'V') is True

    def test_whole_word_must_fit(self):
        """Word as long as the grid fits exactly."""
        grid = create_grid(5)
        assert can_place(grid, "ABCDE", 4, 0, 'H') is True
        assert can_place(grid, "ABCDEF", 4, 0, 'H') is False


class TestPlace:
    """Test cases for writing words."""

    def test_horizontal(self):
        grid = create_grid(5)
        place(grid, "CAT", 1, 1, 'H')
        assert grid[1][1:4] == ['C', 'A', 'T']

    def test_vertical(self):
        grid = create_grid(5)
        place(grid, "CAT", 1, 1, 'V')
        assert [grid[r][1] for r in range(1, 4)] == ['C', 'A', 'T']


class TestOccupiedCells:
    """Test cases for scanning filled cells."""

    def test_row_major_order(self):
        """Cells come back row by row, left to right."""
        grid = create_grid(5)
        place(grid, "AB", 1, 2, 'H')
        place(grid, "CD", 0, 3, 'H')

        assert occupied_cells(grid) == [
            Cell(0, 3, 'C'),
            Cell(0, 4, 'D'),
            Cell(1, 2, 'A'),
            Cell(1, 3, 'B'),
        ]


class TestRenderGrid:
    """Test cases for text rendering."""

    def test_render(self):
        grid = create_grid(3)
        place(grid, "AB", 1, 0, 'H')
        assert render_grid(grid) == "...\nAB.\n..."

    def test_custom_empty_marker(self):
        grid = create_grid(2)
        place(grid, "A", 0, 0, 'H')
        assert grid_rows(grid, empty=' ') == ["A ", "  "]

    @pytest.mark.parametrize("size", [1, 4, 25])
    def test_empty_grid_render_shape(self, size):
        """Rendering keeps the grid's shape."""
        lines = render_grid(create_grid(size)).split('\n')
        assert len(lines) == size
        assert all(line == '.' * size for line in lines)
