"""
Terminal input/output.

Modules:
    tui                  - ANSI escape codes and the label color chart
    convergence_explorer - Textual app animating the convergence
"""
