"""Tests for utils/grid.py and utils/loader.py"""

import json

import numpy as np
import pytest

from utils.grid import (
    copy_grid,
    grid_shape,
    labels_of,
    make_test_grid,
    max_label,
    random_binary_grid,
    to_binary_grid,
    zeros,
)
from utils.loader import path_to_grid


class TestInspection:
    def test_grid_shape(self):
        assert grid_shape([[0, 1, 0], [1]]) == (2, 3)
        assert grid_shape([]) == (0, 0)

    def test_max_label(self):
        assert max_label([[1, 7], [3]]) == 7
        assert max_label([[0, 0]]) == 0
        assert max_label([]) == 0
        assert max_label([[]]) == 0

    def test_labels_of(self):
        assert labels_of([[0, 2, 2], [5, 0, 0]]) == frozenset({2, 5})
        assert labels_of([[0]]) == frozenset()


class TestCopyGrid:
    def test_independent_rows(self):
        grid = [[1, 2], [3, 4]]
        copy = copy_grid(grid)
        copy[0][0] = 9
        assert grid == [[1, 2], [3, 4]]

    def test_zeros(self):
        assert zeros(2, 3) == [[0, 0, 0], [0, 0, 0]]


class TestToBinaryGrid:
    def test_list(self):
        assert to_binary_grid([[0, 1], [1, 0]]) == [[0, 1], [1, 0]]

    def test_numpy_array(self):
        grid = to_binary_grid(np.array([[1, 0, 1]], dtype=np.uint8))
        assert grid == [[1, 0, 1]]
        assert type(grid[0][0]) is int

    def test_booleans(self):
        assert to_binary_grid([[True, False]]) == [[1, 0]]

    def test_not_2d(self):
        with pytest.raises(ValueError, match="2D"):
            to_binary_grid([0, 1, 1])

    def test_ragged(self):
        with pytest.raises(ValueError, match="rectangular"):
            to_binary_grid([[0, 1], [1]])

    def test_empty(self):
        with pytest.raises(ValueError, match="size"):
            to_binary_grid([[]])

    def test_values_out_of_range(self):
        with pytest.raises(ValueError, match=r"\[2\]"):
            to_binary_grid([[0, 2], [1, 1]])

    def test_not_numeric(self):
        with pytest.raises(ValueError, match="numeric"):
            to_binary_grid([["a", "b"]])


class TestRandomBinaryGrid:
    def test_shape_and_values(self):
        grid = random_binary_grid(7, seed=3)
        assert len(grid) == 7
        assert all(len(row) == 7 for row in grid)
        assert {cell for row in grid for cell in row} <= {0, 1}

    def test_reproducible(self):
        assert random_binary_grid(10, seed=42) == random_binary_grid(10, seed=42)

    def test_extreme_probabilities(self):
        assert random_binary_grid(4, 0.0, seed=1) == zeros(4, 4)
        assert random_binary_grid(4, 1.0, seed=1) == [[1] * 4 for _ in range(4)]

    def test_invalid_probability(self):
        with pytest.raises(ValueError, match="Probability"):
            random_binary_grid(4, 1.5)

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="size"):
            random_binary_grid(-1)


class TestMakeTestGrid:
    def test_supplied_grid(self):
        assert make_test_grid([[0, 1], [1, 1]]) == [[0, 1], [1, 1]]

    def test_supplied_array(self):
        assert make_test_grid(np.ones((2, 2), dtype=int)) == [[1, 1], [1, 1]]

    def test_size(self):
        grid = make_test_grid(5, seed=0)
        assert len(grid) == 5 and len(grid[0]) == 5

    def test_default(self):
        grid = make_test_grid(seed=0)
        assert len(grid) == 50 and len(grid[0]) == 50

    def test_float_size(self):
        grid = make_test_grid(10.0, seed=0)
        assert len(grid) == 10 and len(grid[0]) == 10

    def test_fractional_size_rounds_up(self):
        assert len(make_test_grid(2.5, seed=0)) == 3

    @pytest.mark.parametrize("size", [float("nan"), float("inf")])
    def test_non_finite_size(self, size):
        with pytest.raises(ValueError):
            make_test_grid(size)

    def test_invalid_supplied_grid(self):
        with pytest.raises(ValueError):
            make_test_grid([[0, 3]])


class TestLoader:
    def test_path_to_grid(self, tmp_path):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps([[0, 1], [1, 0]]))
        assert path_to_grid(str(path)) == [[0, 1], [1, 0]]

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "grid.json"
        path.write_text(json.dumps([[0, 5]]))
        with pytest.raises(ValueError):
            path_to_grid(str(path))
