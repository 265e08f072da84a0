from __future__ import annotations

import os
from typing import Callable, List, TypeVar

from .grid import Grid


T = TypeVar("T")


class InputLoader:
    """Reads puzzle input for a day from ``input_dir``.

    In test mode the example input ``dayN-test.txt`` is read instead of the
    real ``dayN.txt``.
    """

    def __init__(self, input_dir: str = "input", test_mode: bool = False):
        self.input_dir = input_dir
        self.test_mode = test_mode

    def path_for(self, day: int) -> str:
        suffix = "-test" if self.test_mode else ""
        return os.path.join(self.input_dir, f"day{day}{suffix}.txt")

    def read(self, day: int) -> str:
        with open(self.path_for(day), "r") as f:
            return f.read()


def parse_lines(text: str, parse: Callable[[str], T] = str) -> List[T]:
    return [parse(line.strip()) for line in text.splitlines() if line.strip()]


def load_grid(text: str) -> Grid[int]:
    return Grid.parse(text)
