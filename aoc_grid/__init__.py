"""Grid puzzle toolkit.

Modules:
- grid: Point and the bounds-checked 2-D Grid
- basin: low points and monotone flood fill
- cellular: chain-reaction cellular stepper
- search: monotone and least-cost path search, tiling
- caves, folding, syntax: the non-grid puzzles
- io, render, days, cli: input loading, images, day runners, entrypoint
"""

from .basin import find_basin, find_basins, low_points
from .cellular import CellularStepper
from .config import RunConfig
from .errors import AocGridError, MalformedInput, NoPathFound, OutOfBounds
from .grid import Grid, Point
from .io import InputLoader
from .search import Path, least_cost_path, monotone_path, tile

__all__ = [
    "Grid",
    "Point",
    "Path",
    "CellularStepper",
    "find_basin",
    "find_basins",
    "low_points",
    "monotone_path",
    "least_cost_path",
    "tile",
    "InputLoader",
    "RunConfig",
    "AocGridError",
    "MalformedInput",
    "NoPathFound",
    "OutOfBounds",
]
