"""
Discovery of label equivalences.

A scan compares every labeled cell with its causal neighbors and records,
for two adjacent nonzero cells with different labels, the directed edge
``current -> neighbor``. Edge selection keeps every label on a single
outgoing edge per scan, which keeps the resulting map a forest of chains.
"""

import logging
from collections.abc import Sequence

from labeling.neighbors import CAUSAL_MASK, causal_neighbors
from localtypes import EquivalenceMap, Label, Mask

logger = logging.getLogger(__name__)


def scan_equivalences(
    grid: Sequence[Sequence[Label]], mask: Mask = CAUSAL_MASK
) -> EquivalenceMap:
    """
    Collect equivalence edges between adjacent, differently labeled cells.

    Cells are visited row-major, columns left to right, neighbors in mask
    order. A candidate edge ``current -> neighbor`` is committed only when:
      - ``neighbor`` is not already redirected (not a key), and
      - ``current`` has no edge yet (the first committed edge wins).

    Args:
        grid: Label grid, possibly ragged (missing cells read as absent).
        mask: Causal neighbor offsets.

    Returns:
        The equivalence map of this scan; empty when nothing can merge.
    """
    equivalences: EquivalenceMap = {}

    for row, line in enumerate(grid):
        for col, current in enumerate(line):
            if not current:
                continue
            for neighbor in causal_neighbors(grid, row, col, mask):
                if neighbor == current:
                    continue
                if neighbor in equivalences or current in equivalences:
                    continue
                equivalences[current] = neighbor

    logger.debug(f"Scan found {len(equivalences)} equivalences")
    return equivalences
