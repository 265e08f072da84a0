from __future__ import annotations

from typing import Optional, Tuple


class AocGridError(Exception):
    """Base class for errors raised by aoc_grid."""


class OutOfBounds(AocGridError, IndexError):
    def __init__(self, point: Tuple[int, int], shape: Tuple[int, int]):
        self.point = point
        self.shape = shape
        width, height = shape
        super().__init__(f"point {tuple(point)} outside {width}x{height} grid")


class MalformedInput(AocGridError, ValueError):
    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class NoPathFound(AocGridError):
    pass
