"""Tests for the Grid module."""

import numpy as np
import pytest

from classic_snake.grid import CellType, Grid
from classic_snake.snake import GridPoint


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.rows == 20
        assert grid.cols == 20
        assert grid.size == 400

    def test_array_is_rows_by_cols(self):
        grid = Grid(rows=8, cols=10)
        assert grid.cells.shape == (8, 10)
        assert np.all(grid.cells == CellType.EMPTY)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="rows must be at least 1"):
            Grid(rows=0, cols=10)
        with pytest.raises(ValueError, match="cols must be at least 4"):
            Grid(rows=10, cols=3)

    def test_single_row_allowed(self):
        assert Grid(rows=1, cols=4).size == 4


class TestGridOperations:
    def test_set_and_get_use_x_as_column(self):
        grid = Grid(rows=5, cols=6)
        grid.set(GridPoint(4, 1), CellType.SNAKE)
        assert grid.cells[1, 4] == CellType.SNAKE
        assert grid.get(GridPoint(4, 1)) == CellType.SNAKE
        assert grid.is_snake(GridPoint(4, 1))

    def test_in_bounds(self):
        grid = Grid(rows=5, cols=6)
        assert grid.in_bounds(GridPoint(0, 0))
        assert grid.in_bounds(GridPoint(5, 4))
        assert not grid.in_bounds(GridPoint(-1, 0))
        assert not grid.in_bounds(GridPoint(6, 0))
        assert not grid.in_bounds(GridPoint(0, 5))

    def test_point_at_is_row_major(self):
        grid = Grid(rows=20, cols=20)
        assert grid.point_at(0) == GridPoint(0, 0)
        assert grid.point_at(387) == GridPoint(7, 19)

    def test_count(self):
        grid = Grid(rows=4, cols=4)
        grid.set(GridPoint(0, 0), CellType.SNAKE)
        grid.set(GridPoint(1, 0), CellType.SNAKE)
        grid.set(GridPoint(2, 2), CellType.FOOD)
        assert grid.count(CellType.SNAKE) == 2
        assert grid.count(CellType.FOOD) == 1
        assert grid.count(CellType.EMPTY) == 13
