"""
Iterate-to-convergence driver.

One iteration scans the label grid for equivalences and rewrites every
cell through the resulting chains. A scan only merges labels that touch
directly, so merges spanning several hops need further iterations. The
grid is at its fixed point as soon as a scan finds no equivalence.

Pacing belongs to the caller: `iterate` yields after every iteration, and
a caller that stops consuming it keeps the last complete grid.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from labeling.equivalence import scan_equivalences
from labeling.neighbors import CAUSAL_MASK
from labeling.resolution import resolve_grid
from labeling.runs import label_runs
from localtypes import (
    Cell,
    EquivalenceMap,
    Label,
    LabelGrid,
    Mask,
    StepCallback,
)
from utils.grid import copy_grid, max_label

logger = logging.getLogger(__name__)


class ConvergenceError(RuntimeError):
    """Raised when an iteration finds equivalences but changes nothing."""


@dataclass(frozen=True)
class LabelingStep:
    """Outcome of a single scan-and-resolve iteration."""

    grid: LabelGrid
    equivalences: EquivalenceMap = field(default_factory=dict)
    iteration: int = 1

    @property
    def merged(self) -> int:
        """Number of equivalences applied during this iteration."""
        return len(self.equivalences)

    @property
    def converged(self) -> bool:
        return not self.equivalences

    @property
    def max_label(self) -> Label:
        return max_label(self.grid)


def step(
    grid: Sequence[Sequence[Label]], mask: Mask = CAUSAL_MASK, iteration: int = 1
) -> LabelingStep:
    """
    Run one iteration: scan for equivalences, then resolve every cell.

    Args:
        grid: Current label grid. Left untouched.
        mask: Causal neighbor offsets used by the scan.
        iteration: Index of this iteration, for reporting.

    Returns:
        The resolved grid together with the equivalences of this iteration.

    Raises:
        ConvergenceError: If equivalences were found but the grid did not
            change, in which case every later iteration would repeat it.
    """
    equivalences = scan_equivalences(grid, mask)
    if not equivalences:
        return LabelingStep(copy_grid(grid), equivalences, iteration)

    resolved = resolve_grid(grid, equivalences)
    if resolved == [list(row) for row in grid]:
        raise ConvergenceError(
            f"Iteration {iteration} found {len(equivalences)} equivalences "
            f"but left the grid unchanged: {equivalences}"
        )

    logger.debug(
        f"Iteration {iteration}: {len(equivalences)} equivalences {equivalences}"
    )
    return LabelingStep(resolved, equivalences, iteration)


def iterate(
    grid: Sequence[Sequence[Label]], mask: Mask = CAUSAL_MASK
) -> Iterator[LabelingStep]:
    """
    Yield one step per iteration until the fixed point.

    The last yielded step is the converged one (no equivalences).
    """
    current = step(grid, mask, iteration=1)
    while not current.converged:
        yield current
        current = step(current.grid, mask, iteration=current.iteration + 1)
    logger.info(f"Fixed point reached after {current.iteration} iterations")
    yield current


def converge(
    grid: Sequence[Sequence[Label]],
    mask: Mask = CAUSAL_MASK,
    on_step: StepCallback | None = None,
) -> LabelGrid:
    """
    Drive a label grid to its fixed point.

    Args:
        grid: Label grid, typically produced by `label_runs`.
        mask: Causal neighbor offsets used by every scan.
        on_step: Called with every step, including the final empty one.

    Returns:
        The final labeling.
    """
    last = None
    for last in iterate(grid, mask):
        if on_step is not None:
            on_step(last)
    assert last is not None
    return last.grid


def label_components(
    grid: Sequence[Sequence[Cell]],
    mask: Mask = CAUSAL_MASK,
    on_step: StepCallback | None = None,
) -> LabelGrid:
    """
    Label the connected regions of "on" cells of a binary grid.

    Pipeline:
    1. label_runs: one preliminary label per horizontal run
    2. converge: merge equivalent labels until the fixed point
    """
    return converge(label_runs(grid), mask, on_step)


__all__ = [
    "ConvergenceError",
    "LabelingStep",
    "step",
    "iterate",
    "converge",
    "label_components",
]
