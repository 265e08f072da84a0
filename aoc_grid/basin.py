from __future__ import annotations

import logging
import random
from collections import deque
from typing import FrozenSet, List, Optional, Sequence

from .grid import Grid, Point


logger = logging.getLogger(__name__)

Basin = FrozenSet[Point]


def is_low_point(grid: Grid[int], p: Point) -> bool:
    """True when ``p`` is strictly lower than every neighbour it has.

    Edge cells simply have fewer neighbours to compare against.
    """
    height = grid.get(p)
    return all(grid.get(q) > height for q in grid.neighbors4(p))


def low_points(grid: Grid[int]) -> List[Point]:
    return [p for p in grid.points() if is_low_point(grid, p)]


def find_basin(
    grid: Grid[int],
    seed: Point,
    ridge: int = 9,
    frontier: str = "stack",
    rng: Optional[random.Random] = None,
) -> Basin:
    """Flood fill from ``seed`` uphill, stopping at ``ridge``.

    A step from ``p`` to an orthogonal neighbour ``q`` is allowed when
    ``grid[p] <= grid[q] < ridge``. ``frontier`` chooses depth-first
    ("stack") or breadth-first ("queue") expansion and ``rng`` shuffles the
    neighbour order; the resulting set is the same either way.
    """
    if frontier not in ("stack", "queue"):
        raise ValueError(f"unknown frontier {frontier!r}")
    grid.get(seed)  # bounds check

    pending = deque([seed])
    visited = {seed}
    while pending:
        current = pending.pop() if frontier == "stack" else pending.popleft()
        height = grid.get(current)
        neighbours = grid.neighbors4(current)
        if rng is not None:
            rng.shuffle(neighbours)
        for q in neighbours:
            if q in visited:
                continue
            if height <= grid.get(q) < ridge:
                visited.add(q)
                pending.append(q)
    return frozenset(visited)


def find_basins(grid: Grid[int], ridge: int = 9) -> List[Basin]:
    basins = [find_basin(grid, p, ridge) for p in low_points(grid)]
    logger.debug("found %d basins", len(basins))
    return basins


def risk_level(grid: Grid[int]) -> int:
    return sum(grid.get(p) + 1 for p in low_points(grid))


def largest_basins_product(basins: Sequence[Basin], count: int = 3) -> int:
    sizes = sorted((len(b) for b in basins), reverse=True)
    product = 1
    for size in sizes[:count]:
        product *= size
    return product
