from __future__ import annotations

import logging
import os
from typing import Iterable, List, Sequence

import numpy as np
from PIL import Image

from .grid import Grid, Point


logger = logging.getLogger(__name__)


def _flash_palette() -> List[int]:
    # index 0 is a fresh discharge, 1..9 a ramp of charging blue
    palette = [255, 255, 0]
    for i in range(1, 10):
        palette.extend([0, 0, int(i / 9 * 255)])
    return palette


FLASH_PALETTE: List[int] = _flash_palette()
DOT_PALETTE: List[int] = [0, 0, 0, 255, 255, 255]


def heightmap_image(grid: Grid[int], basins: Iterable[Iterable[Point]] = ()) -> Image.Image:
    """Grey height map (0..9) with basin cells tinted red."""
    luma = (grid.cells.astype(np.int64) * 255 // 10).clip(0, 255).astype(np.uint8)
    rgb = np.stack([luma, luma, luma], axis=-1)
    for basin in basins:
        for p in basin:
            rgb[p.y, p.x, 1:] = 0
    return Image.fromarray(rgb)


def indexed_image(grid: Grid, palette: Sequence[int]) -> Image.Image:
    """Cell values used directly as palette indices, clipped to the palette."""
    colors = len(palette) // 3
    indices = grid.cells.astype(np.int64).clip(0, colors - 1).astype(np.uint8)
    img = Image.new("P", (grid.width, grid.height))
    img.putdata(indices.ravel().tolist())
    img.putpalette(list(palette))
    return img


class GifRecorder:
    """Collects one indexed frame per grid snapshot and writes an animated GIF."""

    def __init__(self, palette: Sequence[int], duration_ms: int = 100):
        self.palette = list(palette)
        self.duration_ms = duration_ms
        self.frames: List[Image.Image] = []

    def add(self, grid: Grid) -> None:
        self.frames.append(indexed_image(grid, self.palette))

    def __len__(self) -> int:
        return len(self.frames)

    def save(self, path: str) -> None:
        if not self.frames:
            raise ValueError("no frames recorded")
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        first, rest = self.frames[0], self.frames[1:]
        first.save(path, save_all=True, append_images=rest, duration=self.duration_ms, loop=0)
        logger.info("wrote %d frames to %s", len(self.frames), path)


def save_image(img: Image.Image, path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    img.save(path)
    logger.info("wrote %s", path)
