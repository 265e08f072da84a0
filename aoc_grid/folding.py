from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import MalformedInput
from .grid import Grid, Point


FOLD_RE = re.compile(r"^fold along ([xyXY])=(\d+)$")


@dataclass(frozen=True)
class Fold:
    axis: str  # "x" folds left, "y" folds up
    line: int


def _parse_point(line: str, lineno: int) -> Point:
    parts = line.split(",")
    if len(parts) != 2:
        raise MalformedInput(f"expected 'x,y', got {line!r}", line=lineno)
    try:
        return Point(int(parts[0].strip()), int(parts[1].strip()))
    except ValueError as e:
        raise MalformedInput(f"bad coordinate in {line!r}", line=lineno) from e


def _parse_fold(line: str, lineno: int) -> Fold:
    m = FOLD_RE.match(line)
    if m is None:
        raise MalformedInput(f"expected 'fold along x=N' or 'fold along y=N', got {line!r}", line=lineno)
    return Fold(m.group(1).lower(), int(m.group(2)))


def parse_manual(text: str) -> Tuple[List[Point], List[Fold]]:
    """Split the dot list from the fold instructions at the first blank line."""
    lines = [line.strip() for line in text.strip().splitlines()]
    try:
        gap = lines.index("")
    except ValueError:
        raise MalformedInput("missing blank line between dots and folds") from None

    points = [_parse_point(line, i + 1) for i, line in enumerate(lines[:gap]) if line]
    folds = [_parse_fold(line, gap + i + 2) for i, line in enumerate(lines[gap + 1 :]) if line]
    if not points:
        raise MalformedInput("no dots")
    return points, folds


def sheet_from_points(points: Sequence[Point]) -> Grid[bool]:
    width = max(p.x for p in points) + 1
    height = max(p.y for p in points) + 1
    sheet = Grid.from_size(width, height, default=False)
    for p in points:
        sheet.set(p, True)
    return sheet


def fold(sheet: Grid[bool], f: Fold) -> Grid[bool]:
    """Fold the part past ``f.line`` back over the part before it.

    The result keeps the ``f.line`` rows (or columns) before the fold; dots
    that land on each other merge. Dots mirrored past the far edge are lost,
    and dots on the fold line itself are dropped.
    """
    cells = sheet.cells if f.axis == "y" else sheet.cells.T
    if f.line < 0:
        raise MalformedInput(f"fold along {f.axis}={f.line} outside sheet")

    # a trailing row or column without dots is not part of the parsed sheet
    kept = np.zeros((f.line, cells.shape[1]), dtype=bool)
    head = min(f.line, cells.shape[0])
    kept[:head] = cells[:head]
    for src in range(f.line + 1, cells.shape[0]):
        dst = 2 * f.line - src
        if dst < 0:
            break
        kept[dst] |= cells[src]

    return Grid(kept if f.axis == "y" else kept.T)


def fold_all(sheet: Grid[bool], folds: Iterable[Fold]) -> Grid[bool]:
    for f in folds:
        sheet = fold(sheet, f)
    return sheet


def count_dots(sheet: Grid[bool]) -> int:
    return sheet.count()
