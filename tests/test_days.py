import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from aoc_grid.cli import main
from aoc_grid.config import RunConfig
from aoc_grid.days import DAYS, run_day
from aoc_grid.io import InputLoader


INPUT_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "input")

EXPECTED = {
    9: {"part1": 15, "part2": 1134},
    10: {"part1": 26397, "part2": 288957},
    11: {"part1": 1656, "part2": 195},
    12: {"part1": 10, "part2": 36},
    13: {"part1": 17, "part2": "#####\n#...#\n#...#\n#...#\n#####\n.....\n....."},
    15: {"part1": 40, "part2": 315},
}


class TestDays(unittest.TestCase):
    def test_loader_paths(self):
        self.assertEqual(InputLoader("in").path_for(9), os.path.join("in", "day9.txt"))
        self.assertEqual(InputLoader("in", test_mode=True).path_for(9), os.path.join("in", "day9-test.txt"))

    def test_examples(self):
        config = RunConfig(input_dir=INPUT_DIR, test_mode=True)
        self.assertEqual(sorted(DAYS), sorted(EXPECTED))
        for day, expected in EXPECTED.items():
            with self.subTest(day=day):
                self.assertEqual(run_day(day, config), expected)

    def test_render_outputs(self):
        with tempfile.TemporaryDirectory() as td:
            config = RunConfig(input_dir=INPUT_DIR, output_dir=td, test_mode=True, render=True)
            for day in (9, 11, 13):
                run_day(day, config)
            self.assertEqual(sorted(os.listdir(td)), ["day11.gif", "day13.gif", "day9.png"])

    def test_missing_input(self):
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                run_day(9, RunConfig(input_dir=td))


class TestCli(unittest.TestCase):
    def test_single_day(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(["12", "--test", "--input-dir", INPUT_DIR])
        self.assertEqual(status, 0)
        self.assertEqual(json.loads(out.getvalue()), {"day12": {"part1": 10, "part2": 36}})

    def _run_with_input(self, day, text):
        out, err = io.StringIO(), io.StringIO()
        with tempfile.TemporaryDirectory() as td:
            with open(os.path.join(td, f"day{day}.txt"), "w") as f:
                f.write(text)
            with redirect_stdout(out), redirect_stderr(err):
                status = main([str(day), "--input-dir", td])
        return status, out.getvalue(), err.getvalue()

    def test_failure_reported(self):
        status, out, err = self._run_with_input(12, "start end\n")
        self.assertEqual(status, 1)
        self.assertIn("error:", err)
        # stdout stays a valid JSON document
        self.assertEqual(json.loads(out), {})

    def test_all_lines_corrupted(self):
        status, out, err = self._run_with_input(10, "(]\n")
        self.assertEqual(status, 1)
        self.assertIn("error:", err)
        self.assertEqual(json.loads(out), {})

    def test_unknown_day(self):
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            main(["14"])


if __name__ == "__main__":
    unittest.main()
