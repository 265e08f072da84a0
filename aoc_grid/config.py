from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    input_dir: str = "input"
    output_dir: str = "output"
    # read dayN-test.txt instead of dayN.txt
    test_mode: bool = False
    render: bool = False
    progress: bool = False
