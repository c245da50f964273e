r"""
Grid helpers

Construction, validation and inspection of binary and label grids.
Grids are plain lists of lists: every helper returning a grid returns a
new one, so earlier stages keep their data.

    1\ Inspection: grid_shape, max_label, labels_of
    2\ Copies: copy_grid
    3\ Constructors: zeros, to_binary_grid, random_binary_grid, make_test_grid
"""

import math
from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

from constants import DEFAULT_GRID_SIZE, DEFAULT_ON_PROBABILITY, OFF, ON
from localtypes import BinaryGrid, Label, Shape


# Inspection
def grid_shape(grid: Sequence[Sequence[Any]]) -> Shape:
    """Height and width of the widest row; (0, 0) for an empty grid."""
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    return Shape(height, width)


def max_label(grid: Sequence[Sequence[Label]]) -> Label:
    """Largest label of the grid, 0 when no cell is on."""
    return max((max(row, default=0) for row in grid), default=0)


def labels_of(grid: Sequence[Sequence[Label]]) -> frozenset[Label]:
    """Distinct nonzero labels present in the grid."""
    return frozenset(label for row in grid for label in row if label)


# Copies
T = TypeVar("T")


def copy_grid(grid: Sequence[Sequence[T]]) -> list[list[T]]:
    """Independent copy, rows included."""
    return [list(row) for row in grid]


# Constructors
def zeros(height: int, width: int) -> BinaryGrid:
    return [[OFF for _ in range(width)] for _ in range(height)]


def to_binary_grid(data: Any) -> BinaryGrid:
    """
    Validate an externally supplied 2D numeric array.

    Accepts lists of lists and numpy arrays.

    Raises:
        ValueError if the data is not a non-empty rectangular 2D array
        of 0/1 values.
    """
    try:
        array = np.asarray(data)
    except ValueError as error:
        raise ValueError("Grid must be rectangular") from error

    if array.ndim != 2:
        raise ValueError(f"Grid must be 2D, got {array.ndim}D")

    height, width = array.shape
    if height == 0 or width == 0:
        raise ValueError(f"Invalid grid size height={height}, width={width}")

    if not (np.issubdtype(array.dtype, np.number) or array.dtype == np.bool_):
        raise ValueError(f"Grid must be numeric, got dtype {array.dtype}")

    if not np.isin(array, (OFF, ON)).all():
        unexpected = sorted(set(np.unique(array).tolist()) - {OFF, ON})
        raise ValueError(f"Grid values must be {OFF} or {ON}, found {unexpected}")

    return array.astype(int).tolist()


def random_binary_grid(
    size: int = DEFAULT_GRID_SIZE,
    probability: float = DEFAULT_ON_PROBABILITY,
    seed: int | None = None,
) -> BinaryGrid:
    """Square grid where each cell is on with the given probability."""
    if size < 0:
        raise ValueError(f"Grid size must be non-negative, got {size}")
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {probability}")

    rng = np.random.default_rng(seed)
    return (rng.random((size, size)) < probability).astype(int).tolist()


def make_test_grid(data: Any = None, seed: int | None = None) -> BinaryGrid:
    """
    Test grid from loosely typed input.

    - a 2D numeric array is validated and returned
    - a number is the side of a random square grid, rounded up
    - anything else gives a random grid of the default size

    Raises:
        ValueError for a NaN or infinite side.
    """
    if isinstance(data, (int, float, np.integer, np.floating)) and not isinstance(
        data, bool
    ):
        if not math.isfinite(data):
            raise ValueError(f"Grid size must be finite, got {data}")
        return random_binary_grid(math.ceil(data), seed=seed)
    if isinstance(data, np.ndarray) or (
        isinstance(data, Sequence) and not isinstance(data, str)
    ):
        return to_binary_grid(data)
    return random_binary_grid(seed=seed)
