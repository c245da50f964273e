"""
Label the connected regions of a binary grid.

The grid is labeled run by run, then equivalence scans are repeated until
no label is left to merge. Each iteration is logged and, unless disabled,
printed with a pause in between so the convergence can be followed.

Usage:
    python main.py --size 20 --seed 1
    python main.py --grid grid.json --delay 0 --no-visuals
    python main.py --tui
"""

import argparse
import logging
import sys
import time

from constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_ON_PROBABILITY,
    LOG_FORMAT,
    STEP_DELAY,
)
from labeling import (
    CAUSAL_MASK,
    ORTHOGONAL_CAUSAL_MASK,
    LabelingStep,
    converge,
    labeling_errors,
    label_runs,
)
from localtypes import BinaryGrid, LabelGrid, Mask
from utils.display import display_label_grid, display_step
from utils.grid import labels_of, random_binary_grid
from utils.loader import path_to_grid

logger = logging.getLogger(__name__)


def run_labeling(
    grid: BinaryGrid,
    mask: Mask = CAUSAL_MASK,
    delay: float = 0.0,
    show_visuals: bool = True,
) -> LabelGrid:
    """
    Label a grid, reporting every iteration.

    Args:
        grid: Binary grid to label.
        mask: Causal neighbor offsets.
        delay: Seconds to wait after each non-final iteration.
        show_visuals: Print the grid after each iteration.

    Returns:
        The final labeling.
    """
    preliminary = label_runs(grid)
    logger.info(f"Preliminary labels: {len(labels_of(preliminary))} runs")
    if show_visuals:
        print("Preliminary labels")
        display_label_grid(preliminary)
        print()

    def report(step: LabelingStep) -> None:
        if show_visuals:
            display_step(step)
        if step.converged:
            logger.info("END")
            return
        logger.info(f"keys length : {step.merged}")
        if delay > 0:
            time.sleep(delay)

    labels = converge(preliminary, mask, on_step=report)
    logger.info(f"Components: {len(labels_of(labels))}")
    return labels


def main():
    parser = argparse.ArgumentParser(
        description="Connected-component labeling by fixed-point iteration"
    )
    parser.add_argument(
        "--size", type=int, default=DEFAULT_GRID_SIZE, help="Side of the random grid"
    )
    parser.add_argument(
        "--probability",
        type=float,
        default=DEFAULT_ON_PROBABILITY,
        help="Probability of a cell being on in the random grid",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--grid", default=None, help="JSON file holding a 0/1 grid")
    parser.add_argument(
        "--delay",
        type=float,
        default=STEP_DELAY,
        help="Seconds between two iterations",
    )
    parser.add_argument(
        "--orthogonal",
        action="store_true",
        help="Scan only the up and left neighbors",
    )
    parser.add_argument("--tui", action="store_true", help="Animate in a TUI")
    parser.add_argument(
        "--no-visuals", action="store_true", help="Disable visual output"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.grid is not None:
        grid = path_to_grid(args.grid)
    else:
        grid = random_binary_grid(args.size, args.probability, args.seed)

    mask = ORTHOGONAL_CAUSAL_MASK if args.orthogonal else CAUSAL_MASK

    if args.tui:
        from utils.io.convergence_explorer import ConvergenceExplorerApp

        ConvergenceExplorerApp(grid, mask, args.delay).run()
        return

    labels = run_labeling(
        grid, mask, delay=args.delay, show_visuals=not args.no_visuals
    )

    errors = labeling_errors(grid, labels, mask)
    if errors:
        for error in errors:
            logger.error(error)
        sys.exit(1)
    logger.info("Labeling matches the reference components")


if __name__ == "__main__":
    main()
