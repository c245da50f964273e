"""
Global constants used throughout the project
"""

OFF = 0
ON = 1

# Test grids: square, each cell on with the given probability
DEFAULT_GRID_SIZE = 50
DEFAULT_ON_PROBABILITY = 0.5

# Seconds between two displayed convergence iterations
STEP_DELAY = 1.0

# Width of a rendered cell, in characters
CELL_WIDTH = 3

LOG_FORMAT = "%(levelname)s | %(message)s"

# Grey used for "off" cells when rendering
OFF_RGB = (85, 85, 85)
