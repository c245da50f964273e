"""
Connected-component labeling of binary grids by fixed-point iteration.

No disjoint-set structure is involved: labels are merged by repeated
local scans until nothing is left to merge.

**Runs** (runs.py)
    Preliminary labels, one per horizontal run of "on" cells.
    - label_runs(grid) -> label grid

**Neighbors** (neighbors.py)
    Causal neighbor masks and bounds-checked lookups.
    - CAUSAL_MASK: up-left, up, up-right, left
    - ORTHOGONAL_CAUSAL_MASK: up, left

**Equivalence** (equivalence.py)
    - scan_equivalences(grid, mask) -> equivalence map

**Resolution** (resolution.py)
    - resolve_label(equivalences, label) -> canonical label
    - resolve_grid(grid, equivalences) -> label grid

**Convergence** (convergence.py)
    - step(grid, mask) -> LabelingStep (one iteration)
    - iterate(grid, mask) -> steps until the fixed point
    - label_components(grid, mask) -> final labeling

**Validation** (validation.py)
    Comparison against scipy.ndimage.label.
"""

from .convergence import (
    ConvergenceError,
    LabelingStep,
    converge,
    iterate,
    label_components,
    step,
)
from .equivalence import scan_equivalences
from .neighbors import (
    CAUSAL_MASK,
    ORTHOGONAL_CAUSAL_MASK,
    causal_neighbors,
    label_at,
    mask_structure,
)
from .resolution import (
    EquivalenceCycleError,
    resolve_grid,
    resolve_label,
)
from .runs import label_runs
from .validation import (
    is_valid_labeling,
    labeling_errors,
    reference_components,
)

__all__ = [
    # Runs
    "label_runs",
    # Neighbors
    "CAUSAL_MASK",
    "ORTHOGONAL_CAUSAL_MASK",
    "causal_neighbors",
    "label_at",
    "mask_structure",
    # Equivalence
    "scan_equivalences",
    # Resolution
    "EquivalenceCycleError",
    "resolve_label",
    "resolve_grid",
    # Convergence
    "ConvergenceError",
    "LabelingStep",
    "step",
    "iterate",
    "converge",
    "label_components",
    # Validation
    "reference_components",
    "labeling_errors",
    "is_valid_labeling",
]
