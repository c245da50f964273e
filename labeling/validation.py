"""
Cross-checking a labeling against an independent reference.

The reference is `scipy.ndimage.label`, run with the adjacency structure
implied by the causal mask. Label values are arbitrary on both sides, so
labelings are compared as partitions: two "on" cells must share a label
exactly when they share a reference component.
"""

from collections.abc import Sequence

import numpy as np
from scipy import ndimage

from labeling.neighbors import CAUSAL_MASK, mask_structure
from localtypes import Cell, Label, Mask


def _to_array(grid: Sequence[Sequence[int]], name: str) -> np.ndarray:
    try:
        array = np.array(grid, dtype=int)
    except ValueError as error:
        raise ValueError(f"{name} must be rectangular") from error
    if array.ndim != 2:
        raise ValueError(f"{name} must be 2D, got {array.ndim}D")
    return array


def reference_components(
    grid: Sequence[Sequence[Cell]], mask: Mask = CAUSAL_MASK
) -> tuple[np.ndarray, int]:
    """
    Label the "on" cells of a binary grid with scipy.

    Returns:
        (labels, count): integer array of the grid's shape, 0 for "off"
        cells, and the number of components.
    """
    array = _to_array(grid, "Grid")
    labels, count = ndimage.label(array != 0, structure=mask_structure(mask))
    return labels, int(count)


def labeling_errors(
    grid: Sequence[Sequence[Cell]],
    labels: Sequence[Sequence[Label]],
    mask: Mask = CAUSAL_MASK,
) -> list[str]:
    """
    Describe every way ``labels`` disagrees with the reference partition.

    Returns:
        List of error messages (empty if the labeling is correct)
    """
    expected, _ = reference_components(grid, mask)
    actual = _to_array(labels, "Labels")
    if actual.shape != expected.shape:
        raise ValueError(
            f"Labels shape {actual.shape} differs from grid shape {expected.shape}"
        )

    errors = []

    for row, col in zip(*np.nonzero((expected == 0) != (actual == 0))):
        errors.append(
            f"Cell ({row}, {col}): "
            f"reference {expected[row, col]}, label {actual[row, col]}"
        )

    # Same component <=> same label, checked in both directions
    label_of: dict[int, int] = {}
    component_of: dict[int, int] = {}
    for row, col in zip(*np.nonzero(expected)):
        component = int(expected[row, col])
        label = int(actual[row, col])
        if label == 0:
            continue
        if label_of.setdefault(component, label) != label:
            errors.append(
                f"Component {component} carries labels "
                f"{label_of[component]} and {label}"
            )
        if component_of.setdefault(label, component) != component:
            errors.append(
                f"Label {label} spans components {component_of[label]} and {component}"
            )

    return errors


def is_valid_labeling(
    grid: Sequence[Sequence[Cell]],
    labels: Sequence[Sequence[Label]],
    mask: Mask = CAUSAL_MASK,
) -> bool:
    return not labeling_errors(grid, labels, mask)


__all__ = [
    "reference_components",
    "labeling_errors",
    "is_valid_labeling",
]
