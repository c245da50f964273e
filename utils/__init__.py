"""
Helpers around the labeling core.

Modules:
    grid     - Grid construction, validation and inspection
    display  - Terminal rendering of label grids
    loader   - Grids from JSON files
    io       - Color chart and TUI
"""
