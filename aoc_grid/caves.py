from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from .errors import MalformedInput


CavePath = Tuple[str, ...]


def is_big(cave: str) -> bool:
    return cave[:1].isupper()


def parse_edges(text: str) -> List[Tuple[str, str]]:
    edges: List[Tuple[str, str]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        a, sep, b = line.partition("-")
        a, b = a.strip(), b.strip()
        if not sep or not a or not b:
            raise MalformedInput(f"expected 'a-b', got {line!r}", line=lineno)
        edges.append((a, b))
    return edges


class CaveGraph:
    """Undirected cave map; each edge is kept as two directed entries."""

    def __init__(self) -> None:
        self.adjacency: Dict[str, List[str]] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[str, str]]) -> "CaveGraph":
        graph = cls()
        for a, b in edges:
            graph.add_edge(a, b)
            graph.add_edge(b, a)
        return graph

    def add_edge(self, src: str, dst: str) -> None:
        self.adjacency.setdefault(src, []).append(dst)

    def destinations(self, cave: str) -> List[str]:
        return list(self.adjacency.get(cave, []))

    def __contains__(self, cave: str) -> bool:
        return cave in self.adjacency


def enumerate_paths(
    graph: CaveGraph,
    start: str = "start",
    end: str = "end",
    allow_revisit: bool = False,
) -> List[CavePath]:
    """All routes from ``start`` to ``end``.

    Big caves may be passed any number of times, small caves once. With
    ``allow_revisit`` one small cave per route may be entered twice. The
    start cave is never re-entered and reaching ``end`` finishes a route.
    """
    paths: List[CavePath] = []
    visits: Counter = Counter({start: 1})
    route: List[str] = [start]

    def extend(cave: str, revisited: bool) -> None:
        if cave == end:
            paths.append(tuple(route))
            return
        for nxt in graph.destinations(cave):
            if nxt == start:
                continue
            again = revisited
            if not is_big(nxt) and visits[nxt] > 0:
                if not allow_revisit or revisited:
                    continue
                again = True
            visits[nxt] += 1
            route.append(nxt)
            extend(nxt, again)
            route.pop()
            visits[nxt] -= 1

    extend(start, False)
    return paths
