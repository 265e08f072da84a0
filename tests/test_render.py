import os
import tempfile
import unittest

from PIL import Image

from aoc_grid.grid import Grid, Point
from aoc_grid.render import DOT_PALETTE, FLASH_PALETTE, GifRecorder, heightmap_image, indexed_image


class TestRender(unittest.TestCase):
    def test_heightmap_marks_basins(self):
        grid = Grid.from_rows([[0, 5], [9, 2]])
        img = heightmap_image(grid, [{Point(1, 0)}])
        self.assertEqual(img.size, (2, 2))
        self.assertEqual(img.getpixel((0, 0)), (0, 0, 0))
        self.assertEqual(img.getpixel((1, 0)), (127, 0, 0))
        self.assertEqual(img.getpixel((0, 1)), (229, 229, 229))

    def test_indexed_image_clips(self):
        grid = Grid.from_rows([[0, 3, 12]])
        img = indexed_image(grid, FLASH_PALETTE)
        self.assertEqual(img.mode, "P")
        self.assertEqual([img.getpixel((x, 0)) for x in range(3)], [0, 3, 9])

    def test_gif_frames(self):
        recorder = GifRecorder(DOT_PALETTE)
        for _ in range(3):
            recorder.add(Grid.parse_markers("#.\n.#"))
        self.assertEqual(len(recorder), 3)
        with tempfile.TemporaryDirectory() as td:
            path = os.path.join(td, "out", "dots.gif")
            recorder.save(path)
            with Image.open(path) as img:
                self.assertEqual(img.size, (2, 2))

    def test_empty_recorder(self):
        with self.assertRaises(ValueError):
            GifRecorder(DOT_PALETTE).save("unused.gif")


if __name__ == "__main__":
    unittest.main()
