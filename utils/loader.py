"""
Module used to import grids from JSON files
"""

import json

from localtypes import BinaryGrid
from utils.grid import to_binary_grid


def path_to_grid(path: str) -> BinaryGrid:
    """Load a JSON 2D array of 0/1 values."""
    with open(path, "r") as file:
        data = json.load(file)
    return to_binary_grid(data)
