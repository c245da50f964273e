"""
Type definitions for grid labeling operations.

This module contains the custom types used throughout the labeling library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple, TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from labeling.convergence import LabelingStep

# Cell values
Cell: TypeAlias = int  # 0 = off, 1 = on
Label: TypeAlias = int  # 0 = off, positive = component identifier

# Grid representations
BinaryGrid: TypeAlias = list[list[Cell]]  # Functional: grid[row][col] -> cell
LabelGrid: TypeAlias = list[list[Label]]  # Functional: grid[row][col] -> label

# Equivalences: "this label should be treated as that label"
EquivalenceMap: TypeAlias = dict[Label, Label]


# Neighborhood
class Offset(NamedTuple):
    row: int
    col: int


Mask: TypeAlias = tuple[Offset, ...]  # Ordered causal neighbor offsets


class Shape(NamedTuple):
    height: int
    width: int


# Observer of the convergence loop (renderers, loggers)
StepCallback: TypeAlias = Callable[["LabelingStep"], None]

# Type aliases for improving code readability
Row = int
Col = int
