"""Tests for labeling/validation.py"""

import pytest

from labeling import (
    ORTHOGONAL_CAUSAL_MASK,
    is_valid_labeling,
    labeling_errors,
    reference_components,
)


class TestReferenceComponents:
    def test_diagonal_pair(self):
        grid = [[1, 0], [0, 1]]
        _, count = reference_components(grid)
        assert count == 1
        _, count = reference_components(grid, ORTHOGONAL_CAUSAL_MASK)
        assert count == 2

    def test_all_zero(self):
        labels, count = reference_components([[0, 0], [0, 0]])
        assert count == 0
        assert not labels.any()

    def test_ragged(self):
        with pytest.raises(ValueError, match="rectangular"):
            reference_components([[1, 0], [1]])


class TestLabelingErrors:
    GRID = [
        [1, 1, 0, 1],
        [0, 0, 0, 1],
    ]

    def test_correct_labeling(self):
        labels = [[4, 4, 0, 9], [0, 0, 0, 9]]
        assert labeling_errors(self.GRID, labels) == []
        assert is_valid_labeling(self.GRID, labels)

    def test_merged_components(self):
        labels = [[4, 4, 0, 4], [0, 0, 0, 4]]
        errors = labeling_errors(self.GRID, labels)
        assert any("spans" in error for error in errors)
        assert not is_valid_labeling(self.GRID, labels)

    def test_split_component(self):
        labels = [[4, 5, 0, 9], [0, 0, 0, 9]]
        errors = labeling_errors(self.GRID, labels)
        assert any("carries" in error for error in errors)

    def test_off_mismatch(self):
        labels = [[4, 4, 3, 9], [0, 0, 0, 9]]
        errors = labeling_errors(self.GRID, labels)
        assert any(error.startswith("Cell (0, 2)") for error in errors)

    def test_on_cell_labeled_zero(self):
        labels = [[4, 0, 0, 9], [0, 0, 0, 9]]
        errors = labeling_errors(self.GRID, labels)
        assert any(error.startswith("Cell (0, 1)") for error in errors)

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="shape"):
            labeling_errors(self.GRID, [[1, 1, 0, 1]])
