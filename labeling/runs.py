"""
Preliminary labels from horizontal runs.

Every maximal run of "on" cells in a row gets its own positive label.
Labels are unique across the whole grid: a single counter is bumped at
each row start and at each on-to-off transition, so two runs never share
a counter value.
"""

from collections.abc import Sequence

from localtypes import Cell, LabelGrid


def label_runs(grid: Sequence[Sequence[Cell]]) -> LabelGrid:
    """
    Label each horizontal run of "on" cells with a distinct integer.

    The output cell is ``level * counter`` where ``level`` flips whenever
    the input differs from it. "Off" cells get 0.

    Example:
        >>> label_runs([[0, 1, 1, 0, 1, 1, 0]])
        [[0, 1, 1, 0, 2, 2, 0]]
    """
    counter = 0
    labels: LabelGrid = []

    for row in grid:
        # Row buffer: runs of different rows never collide
        counter += 1
        level = 0
        labeled_row = []
        for cell in row:
            if cell != level:
                level = (level + 1) % 2
                if level == 0:
                    # Falling edge
                    counter += 1
            labeled_row.append(level * counter)
        labels.append(labeled_row)

    return labels
