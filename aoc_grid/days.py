from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict

from tqdm import tqdm

from . import basin, caves, folding, render, search, syntax
from .cellular import CellularStepper
from .config import RunConfig
from .errors import MalformedInput, NoPathFound
from .grid import Grid, Point
from .io import InputLoader, load_grid, parse_lines


logger = logging.getLogger(__name__)

Answers = Dict[str, Any]
DayRunner = Callable[[InputLoader, RunConfig], Answers]


def _output(config: RunConfig, name: str) -> str:
    return os.path.join(config.output_dir, name)


def day9(loader: InputLoader, config: RunConfig) -> Answers:
    grid = load_grid(loader.read(9))
    basins = basin.find_basins(grid)
    if config.render:
        render.save_image(render.heightmap_image(grid, basins), _output(config, "day9.png"))
    return {
        "part1": basin.risk_level(grid),
        "part2": basin.largest_basins_product(basins, 3),
    }


def day10(loader: InputLoader, config: RunConfig) -> Answers:
    lines = parse_lines(loader.read(10))
    corrupted = sum(syntax.syntax_error_score(line) for line in lines)
    completions = []
    for line in lines:
        try:
            completions.append(syntax.autocomplete_score(line))
        except MalformedInput:
            logger.debug("skipping corrupted line %r", line)
    return {"part1": corrupted, "part2": syntax.middle_score(completions)}


def day11(loader: InputLoader, config: RunConfig) -> Answers:
    start = load_grid(loader.read(11))
    stepper = CellularStepper()

    total = sum(stepper.run(start.copy(), 100))

    recorder = render.GifRecorder(render.FLASH_PALETTE) if config.render else None

    def record(_i: int, grid: Grid[int], _n: int) -> None:
        if recorder is not None:
            recorder.add(grid)

    wrap = (lambda it: tqdm(it, desc="day 11", unit="step")) if config.progress else None
    synced = stepper.first_synchronized(start.copy(), limit=100_000, on_step=record, wrap=wrap)
    if recorder is not None:
        recorder.save(_output(config, "day11.gif"))
    return {"part1": total, "part2": synced}


def day12(loader: InputLoader, config: RunConfig) -> Answers:
    graph = caves.CaveGraph.from_edges(caves.parse_edges(loader.read(12)))
    return {
        "part1": len(caves.enumerate_paths(graph)),
        "part2": len(caves.enumerate_paths(graph, allow_revisit=True)),
    }


def day13(loader: InputLoader, config: RunConfig) -> Answers:
    points, folds = folding.parse_manual(loader.read(13))
    if not folds:
        raise MalformedInput("no fold instructions")
    sheet = folding.sheet_from_points(points)

    first = folding.fold(sheet, folds[0])
    final = folding.fold_all(sheet, folds)
    if config.render:
        recorder = render.GifRecorder(render.DOT_PALETTE)
        recorder.add(final)
        recorder.save(_output(config, "day13.gif"))
    return {"part1": folding.count_dots(first), "part2": final.to_text()}


def _risk(grid: Grid[int]) -> int:
    end = Point(grid.width - 1, grid.height - 1)
    path = search.least_cost_path(grid, Point(0, 0), end)
    if path is None:
        raise NoPathFound(f"no path to {tuple(end)}")
    return path.cost


def day15(loader: InputLoader, config: RunConfig) -> Answers:
    grid = load_grid(loader.read(15))
    return {"part1": _risk(grid), "part2": _risk(search.tile(grid, 5))}


DAYS: Dict[int, DayRunner] = {
    9: day9,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    15: day15,
}


def run_day(day: int, config: RunConfig) -> Answers:
    if day not in DAYS:
        raise KeyError(f"no solver for day {day}")
    loader = InputLoader(config.input_dir, test_mode=config.test_mode)
    logger.info("running day %d from %s", day, loader.path_for(day))
    return DAYS[day](loader, config)
