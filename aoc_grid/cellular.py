from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

import numpy as np

from .grid import Grid, Point


logger = logging.getLogger(__name__)

StepCallback = Callable[[int, Grid[int], int], None]


@dataclass(frozen=True)
class CellularStepper:
    """Synchronous energy update with chain-reaction discharges.

    Every step adds ``delta`` to all cells. A cell whose value goes above
    ``threshold`` discharges once, adding ``delta`` to its eight neighbours,
    which may push them over in turn. When nothing is left to discharge,
    every discharged cell is set to ``reset``.
    """

    threshold: int = 9
    delta: int = 1
    reset: int = 0

    def _next_candidate(self, cells: np.ndarray, discharged: np.ndarray) -> Optional[Point]:
        # argwhere yields (y, x) pairs in row-major order
        hits = np.argwhere((cells > self.threshold) & ~discharged)
        if len(hits) == 0:
            return None
        y, x = hits[0]
        return Point(int(x), int(y))

    def step(self, grid: Grid[int]) -> int:
        cells = grid.cells
        discharged = np.zeros(cells.shape, dtype=bool)
        cells += self.delta

        while True:
            p = self._next_candidate(cells, discharged)
            if p is None:
                break
            discharged[p.y, p.x] = True
            for q in grid.neighbors8(p):
                cells[q.y, q.x] += self.delta

        cells[discharged] = self.reset
        return int(discharged.sum())

    def run(self, grid: Grid[int], steps: int, on_step: Optional[StepCallback] = None) -> List[int]:
        counts: List[int] = []
        for i in range(1, steps + 1):
            n = self.step(grid)
            counts.append(n)
            if on_step is not None:
                on_step(i, grid, n)
        logger.debug("ran %d steps, %d discharges", steps, sum(counts))
        return counts

    def first_synchronized(
        self,
        grid: Grid[int],
        limit: Optional[int] = None,
        on_step: Optional[StepCallback] = None,
        wrap: Optional[Callable[[Iterable[int]], Iterable[int]]] = None,
    ) -> Optional[int]:
        """Step until every cell discharges together; return that 1-based step.

        Returns None if ``limit`` steps pass without a synchronized step.
        ``wrap`` may decorate the step counter, e.g. with a progress bar.
        """
        counter: Iterable[int] = itertools.count(1) if limit is None else range(1, limit + 1)
        if wrap is not None:
            counter = wrap(counter)
        for i in counter:
            n = self.step(grid)
            if on_step is not None:
                on_step(i, grid, n)
            if n == grid.size:
                logger.debug("all %d cells discharged at step %d", n, i)
                return i
        return None
