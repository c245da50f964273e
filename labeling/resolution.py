"""
Resolution of labels through equivalence chains.

Functions:
    resolve_label(equivalences, label) - Follow edges to a terminal label
    resolve_grid(grid, equivalences)   - Resolve every cell of a grid

Chains are walked one edge at a time with a visited set; the map itself
is never modified.
"""

from collections.abc import Mapping, Sequence

from localtypes import Label, LabelGrid


class EquivalenceCycleError(ValueError):
    """Raised when an equivalence chain loops back on itself."""

    def __init__(self, chain: Sequence[Label]) -> None:
        self.chain = tuple(chain)
        path = " -> ".join(str(label) for label in self.chain)
        super().__init__(f"Equivalence map contains a cycle: {path}")


def resolve_label(equivalences: Mapping[Label, Label], label: Label) -> Label:
    """
    Canonical label of ``label``.

    A label without an entry is already canonical and is returned as is.
    Otherwise edges are followed until a label without an entry is reached.

    Raises:
        EquivalenceCycleError: If the walk revisits a label.

    Example:
        >>> resolve_label({3: 2, 2: 1}, 3)
        1
        >>> resolve_label({3: 2}, 5)
        5
    """
    chain = [label]
    visited = {label}
    current = label

    while current in equivalences:
        current = equivalences[current]
        chain.append(current)
        if current in visited:
            raise EquivalenceCycleError(chain)
        visited.add(current)

    return current


def resolve_grid(
    grid: Sequence[Sequence[Label]], equivalences: Mapping[Label, Label]
) -> LabelGrid:
    """Return a new grid where every label is replaced by its canonical label."""
    if not equivalences:
        return [list(row) for row in grid]

    # Each label is resolved once, whatever the number of cells carrying it
    canonical: dict[Label, Label] = {}
    resolved: LabelGrid = []
    for row in grid:
        resolved_row = []
        for label in row:
            if label not in canonical:
                canonical[label] = resolve_label(equivalences, label)
            resolved_row.append(canonical[label])
        resolved.append(resolved_row)
    return resolved


__all__ = [
    "EquivalenceCycleError",
    "resolve_label",
    "resolve_grid",
]
