from collections.abc import Sequence

from constants import CELL_WIDTH, OFF_RGB
from labeling.convergence import LabelingStep
from localtypes import Label
from utils.grid import max_label
from utils.io.tui import RESET, bg_color_24b, fg_color_24b, label_color


def format_label_grid(
    grid: Sequence[Sequence[Label]], cell_width: int = CELL_WIDTH, colors: bool = True
) -> str:
    """Labels right-aligned, on the chart color of each label."""
    highest = max_label(grid)
    width = max(cell_width, len(str(highest)) + 1)

    lines = []
    for row in grid:
        line = []
        for label in row:
            text = f"{label:>{width}}"
            if colors:
                rgb = label_color(label, highest) or OFF_RGB
                text = f"{bg_color_24b(*rgb)}{fg_color_24b(0, 0, 0)}{text}{RESET}"
            line.append(text)
        lines.append("".join(line))
    return "\n".join(lines)


def display_label_grid(grid: Sequence[Sequence[Label]], colors: bool = True):
    print(format_label_grid(grid, colors=colors))


def display_step(step: LabelingStep, colors: bool = True):
    print(f"Iteration n°{step.iteration}")
    display_label_grid(step.grid, colors=colors)
    if step.converged:
        print("END")
    else:
        print(f"Merged {step.merged} equivalences: {step.equivalences}")
    print()
