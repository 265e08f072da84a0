from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .errors import MalformedInput, OutOfBounds


T = TypeVar("T")


class Point(NamedTuple):
    x: int
    y: int


# Neighbour offsets as (dx, dy); orthogonal order is up, left, down, right
OFFSETS4: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))
OFFSETS8: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
)


def _scalar(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


class Grid(Generic[T]):
    """Dense 2-D table of cells addressed by ``Point(x, y)``.

    Storage is a row-major numpy array of shape ``(height, width)``. Every
    accessor checks bounds explicitly, so negative coordinates never wrap
    around the way plain numpy indexing would.
    """

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise MalformedInput(f"grid storage must be 2-D, got shape {cells.shape}")
        self._cells = np.ascontiguousarray(cells)

    # ------------------------------
    # Construction
    # ------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], dtype: Any = None) -> "Grid[T]":
        rows = [list(row) for row in rows]
        if not rows:
            return cls(np.empty((0, 0), dtype=dtype or np.int64))
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInput(f"row has {len(row)} cells, expected {width}", line=i + 1)
        if width == 0:
            return cls(np.empty((len(rows), 0), dtype=dtype or np.int64))
        return cls(np.array(rows, dtype=dtype))

    @classmethod
    def from_size(cls, width: int, height: int, default: T = 0) -> "Grid[T]":
        if width < 0 or height < 0:
            raise ValueError(f"negative grid size {width}x{height}")
        return cls(np.full((height, width), default))

    @classmethod
    def parse(cls, text: str, cell: Callable[[str], T] = int) -> "Grid[T]":
        """Parse one row per line, one character per cell."""
        rows: List[List[T]] = []
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            row: List[T] = []
            for col, ch in enumerate(line):
                try:
                    row.append(cell(ch))
                except (TypeError, ValueError) as e:
                    raise MalformedInput(f"bad cell {ch!r} at column {col + 1}", line=lineno) from e
            rows.append(row)
        return cls.from_rows(rows)

    @classmethod
    def parse_markers(cls, text: str, on: str = "#", off: str = ".") -> "Grid[bool]":
        def marker(ch: str) -> bool:
            if ch == on:
                return True
            if ch == off:
                return False
            raise ValueError(ch)

        return cls.parse(text, cell=marker)

    def copy(self) -> "Grid[T]":
        return Grid(self._cells.copy())

    # ------------------------------
    # Shape and access
    # ------------------------------

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def size(self) -> int:
        return int(self._cells.size)

    @property
    def cells(self) -> np.ndarray:
        # Live view, indexed [y, x]
        return self._cells

    def in_bounds(self, p: Tuple[int, int]) -> bool:
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, p: Tuple[int, int]) -> None:
        if not self.in_bounds(p):
            raise OutOfBounds(p, (self.width, self.height))

    def get(self, p: Tuple[int, int]) -> T:
        self._check(p)
        x, y = p
        return _scalar(self._cells[y, x])

    def set(self, p: Tuple[int, int], value: T) -> None:
        self._check(p)
        x, y = p
        self._cells[y, x] = value

    def __getitem__(self, p: Tuple[int, int]) -> T:
        return self.get(p)

    def __setitem__(self, p: Tuple[int, int], value: T) -> None:
        self.set(p, value)

    # ------------------------------
    # Iteration
    # ------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells.ravel().tolist())

    def points(self) -> Iterator[Point]:
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def items(self) -> Iterator[Tuple[Point, T]]:
        for y, row in enumerate(self._cells.tolist()):
            for x, value in enumerate(row):
                yield Point(x, y), value

    def update(self, fn: Callable[[T], T]) -> None:
        """Rewrite every cell in place with ``fn(value)``."""
        values = [fn(v) for v in self]
        self._cells[...] = np.array(values, dtype=self._cells.dtype).reshape(self._cells.shape)

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        if predicate is None:
            return int(np.count_nonzero(self._cells))
        return sum(1 for v in self if predicate(v))

    # ------------------------------
    # Neighbourhoods
    # ------------------------------

    def _around(self, p: Tuple[int, int], offsets: Iterable[Tuple[int, int]]) -> List[Point]:
        x, y = p
        out: List[Point] = []
        for dx, dy in offsets:
            q = Point(x + dx, y + dy)
            if self.in_bounds(q):
                out.append(q)
        return out

    def neighbors4(self, p: Tuple[int, int]) -> List[Point]:
        return self._around(p, OFFSETS4)

    def neighbors8(self, p: Tuple[int, int]) -> List[Point]:
        return self._around(p, OFFSETS8)

    # ------------------------------
    # Bulk operations
    # ------------------------------

    def blit(self, source: "Grid[T]", offset: Tuple[int, int]) -> None:
        """Copy every cell of ``source`` into this grid with its origin at ``offset``."""
        ox, oy = offset
        if source.size == 0:
            return
        far = (ox + source.width - 1, oy + source.height - 1)
        self._check((ox, oy))
        self._check(far)
        self._cells[oy : oy + source.height, ox : ox + source.width] = source.cells

    def to_text(self, fmt: Optional[Callable[[T], str]] = None) -> str:
        if fmt is None:
            if self._cells.dtype == np.bool_:
                fmt = lambda v: "#" if v else "."
            else:
                fmt = str
        return "\n".join("".join(fmt(v) for v in row) for row in self._cells.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other.cells.shape and bool(np.array_equal(self._cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, dtype={self._cells.dtype})"
