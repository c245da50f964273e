"""
Causal neighborhoods for label scanning.

A causal mask lists the relative offsets of the cells that are already
visited when a grid is scanned in row-major order. Comparing a cell only
against its causal neighbors means a single pass sees every adjacency once.

- CAUSAL_MASK: up-left, up, up-right, left
- ORTHOGONAL_CAUSAL_MASK: up, left
"""

from collections.abc import Iterator, Sequence
from typing import Final

import numpy as np

from localtypes import Col, Label, Mask, Offset, Row

UP_LEFT: Final[Offset] = Offset(-1, -1)
UP: Final[Offset] = Offset(-1, 0)
UP_RIGHT: Final[Offset] = Offset(-1, 1)
LEFT: Final[Offset] = Offset(0, -1)

# Order matters: it decides which edge wins when several compete
CAUSAL_MASK: Final[Mask] = (UP_LEFT, UP, UP_RIGHT, LEFT)
ORTHOGONAL_CAUSAL_MASK: Final[Mask] = (UP, LEFT)


def label_at(grid: Sequence[Sequence[Label]], row: Row, col: Col) -> Label:
    """
    Bounds-checked cell lookup.

    Negative indices, rows past the end and columns past the end of a
    (possibly ragged) row all read as 0, i.e. "no neighbor".
    """
    if row < 0 or row >= len(grid):
        return 0
    line = grid[row]
    if col < 0 or col >= len(line):
        return 0
    return line[col]


def causal_neighbors(
    grid: Sequence[Sequence[Label]], row: Row, col: Col, mask: Mask
) -> Iterator[Label]:
    """Yield the nonzero labels around (row, col), in mask order."""
    for offset in mask:
        label = label_at(grid, row + offset.row, col + offset.col)
        if label:
            yield label


def mask_structure(mask: Mask) -> np.ndarray:
    """
    Symmetric 3x3 adjacency structure implied by a causal mask.

    Each causal offset also stands for its mirror, since the neighbor
    at the mirrored offset sees the current cell through the same offset.
    """
    structure = np.zeros((3, 3), dtype=int)
    structure[1, 1] = 1
    for offset in mask:
        if abs(offset.row) > 1 or abs(offset.col) > 1:
            raise ValueError(f"Offset {offset} does not fit in a 3x3 neighborhood")
        structure[1 + offset.row, 1 + offset.col] = 1
        structure[1 - offset.row, 1 - offset.col] = 1
    return structure
