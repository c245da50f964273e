"""
TUI animating the convergence of a labeling.

Every tick runs a single iteration and repaints the grid; the timer stops
at the fixed point.

Usage:
    python main.py --tui
    python -m utils.io.convergence_explorer
"""

from collections.abc import Iterator, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.timer import Timer
from textual.widgets import Footer, Header, Label, Static

from constants import CELL_WIDTH, DEFAULT_GRID_SIZE, OFF_RGB, STEP_DELAY
from labeling import CAUSAL_MASK, LabelingStep, iterate, label_runs
from localtypes import BinaryGrid, LabelGrid, Mask
from utils.grid import max_label, random_binary_grid
from utils.io.tui import label_color


def grid_to_rich_text(
    grid: Sequence[Sequence[int]], cell_width: int = CELL_WIDTH
) -> Text:
    """Convert a LabelGrid to a Rich Text object with colored labels."""
    highest = max_label(grid)
    width = max(cell_width, len(str(highest)) + 1)
    text = Text()
    for row in grid:
        for label in row:
            r, g, b = label_color(label, highest) or OFF_RGB
            text.append(f"{label:>{width}}", style=f"black on rgb({r},{g},{b})")
        text.append("\n")
    return text


class ConvergenceExplorerApp(App):
    """TUI application stepping through the convergence of a labeling."""

    TITLE = "Labeling Explorer"
    SUB_TITLE = "Equivalence scans until the fixed point"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("space", "toggle_pause", "Pause/Resume"),
        Binding("n", "next_step", "Step"),
        Binding("r", "regenerate", "New Grid"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }

    #status {
        text-style: bold;
        padding: 1 2;
        color: $secondary;
    }

    #grid {
        padding: 0 2;
        height: auto;
        width: auto;
    }
    """

    def __init__(
        self,
        grid: BinaryGrid | None = None,
        mask: Mask = CAUSAL_MASK,
        delay: float = STEP_DELAY,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.binary_grid = grid if grid is not None else random_binary_grid()
        self.causal_mask = mask
        self.delay = delay
        self.step_timer: Timer | None = None
        self.labels: LabelGrid = []
        self.status = ""
        self.finished = False
        self.paused = False
        self._steps: Iterator[LabelingStep] = iter(())

    def compose(self) -> ComposeResult:
        yield Header()
        yield Label("", id="status")
        yield ScrollableContainer(Static(id="grid"))
        yield Footer()

    def on_mount(self) -> None:
        self.restart(self.binary_grid)
        self.step_timer = self.set_interval(self.delay, self.advance)

    def restart(self, grid: BinaryGrid) -> None:
        """Start over from the preliminary labels of ``grid``."""
        self.binary_grid = grid
        self.labels = label_runs(grid)
        self.finished = False
        self._steps = iterate(self.labels, self.causal_mask)
        self.show(self.labels, "Preliminary labels")

    def show(self, grid: LabelGrid, status: str) -> None:
        self.status = status
        self.query_one("#grid", Static).update(grid_to_rich_text(grid))
        self.query_one("#status", Label).update(status)

    def advance(self) -> None:
        """Run one iteration, if any is left."""
        if self.finished:
            return
        step = next(self._steps)
        self.labels = step.grid
        if step.converged:
            self.finished = True
            if self.step_timer is not None:
                self.step_timer.pause()
            self.show(step.grid, f"Iteration {step.iteration}: END")
        else:
            self.show(
                step.grid,
                f"Iteration {step.iteration}: keys length : {step.merged}",
            )

    def action_toggle_pause(self) -> None:
        if self.step_timer is None or self.finished:
            return
        if self.paused:
            self.step_timer.resume()
        else:
            self.step_timer.pause()
        self.paused = not self.paused

    def action_next_step(self) -> None:
        self.advance()

    def action_regenerate(self) -> None:
        self.restart(random_binary_grid(len(self.binary_grid) or DEFAULT_GRID_SIZE))
        if self.step_timer is not None and not self.paused:
            self.step_timer.resume()


def main():
    """Run the convergence explorer on a random grid."""
    app = ConvergenceExplorerApp()
    app.run()


if __name__ == "__main__":
    main()
