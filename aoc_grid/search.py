from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from .grid import Grid, Point


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Path:
    points: Tuple[Point, ...]
    cost: int

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def __len__(self) -> int:
        return len(self.points)


def _walk(links: Dict[Point, Optional[Point]], first: Point) -> List[Point]:
    points = [first]
    nxt = links[first]
    while nxt is not None:
        points.append(nxt)
        nxt = links[nxt]
    return points


def monotone_path(grid: Grid[int], start: Point, end: Point) -> Optional[Path]:
    """Cheapest path from ``start`` to ``end`` using only +x and +y steps.

    The cost of a path is the sum of the cells it enters; the start cell is
    free. Sub-results are memoized per point and filled in reverse monotone
    order, so the answer for every point is final before anything reads it.

    This only sees paths that never step away from the target. Use
    :func:`least_cost_path` when a detour may be cheaper.
    """
    grid.get(start)
    grid.get(end)
    if end.x < start.x or end.y < start.y:
        return None

    # best[p] = (cost from p to end excluding p, next point on the way)
    best: Dict[Point, Tuple[int, Optional[Point]]] = {end: (0, None)}
    for y in range(end.y, start.y - 1, -1):
        for x in range(end.x, start.x - 1, -1):
            p = Point(x, y)
            if p == end:
                continue
            options: List[Tuple[int, Point]] = []
            for q in (Point(x + 1, y), Point(x, y + 1)):
                if q in best:
                    options.append((best[q][0] + grid.get(q), q))
            # min keeps the first of equal costs, so +x wins ties
            cost, q = min(options, key=lambda o: o[0])
            best[p] = (cost, q)

    links = {p: nxt for p, (_, nxt) in best.items()}
    return Path(tuple(_walk(links, start)), best[start][0])


@dataclass
class _Frontier:
    cost: int
    idx: int
    point: Point

    def __lt__(self, other: "_Frontier") -> bool:
        # heap ordered by cost, then insertion order
        if self.cost != other.cost:
            return self.cost < other.cost
        return self.idx < other.idx


def least_cost_path(grid: Grid[int], start: Point, end: Point) -> Optional[Path]:
    """Dijkstra over orthogonal moves; same cost model as :func:`monotone_path`."""
    grid.get(start)
    grid.get(end)

    dist: Dict[Point, int] = {start: 0}
    prev: Dict[Point, Optional[Point]] = {start: None}
    heap: List[_Frontier] = [_Frontier(0, 0, start)]
    next_idx = 1
    done = set()

    while heap:
        item = heapq.heappop(heap)
        p = item.point
        if p in done:
            continue
        done.add(p)
        if p == end:
            break
        for q in grid.neighbors4(p):
            if q in done:
                continue
            cost = item.cost + grid.get(q)
            if q not in dist or cost < dist[q]:
                dist[q] = cost
                prev[q] = p
                heapq.heappush(heap, _Frontier(cost, next_idx, q))
                next_idx += 1

    if end not in done:
        return None
    logger.debug("settled %d of %d cells", len(done), grid.size)
    backwards = _walk(prev, end)
    return Path(tuple(reversed(backwards)), dist[end])


def tile(grid: Grid[int], times: int = 5, wrap: int = 9) -> Grid[int]:
    """Repeat ``grid`` ``times`` x ``times``, raising tile (i, j) by i + j.

    Values above ``wrap`` start again from 1.
    """
    out = Grid.from_size(grid.width * times, grid.height * times, default=0)
    for j in range(times):
        for i in range(times):
            shard = grid.copy()
            raised = shard.cells + i + j
            shard.cells[...] = np.where(raised > wrap, (raised - 1) % wrap + 1, raised)
            out.blit(shard, Point(i * grid.width, j * grid.height))
    return out
