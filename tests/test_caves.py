import unittest

from aoc_grid.caves import CaveGraph, enumerate_paths, is_big, parse_edges
from aoc_grid.errors import MalformedInput


SMALL = """\
start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""

MEDIUM = """\
dc-end
HN-start
start-kj
dc-start
dc-HN
LN-dc
HN-end
kj-sj
kj-HN
kj-dc
"""


class TestCaves(unittest.TestCase):
    def test_graph_is_undirected(self):
        graph = CaveGraph.from_edges(parse_edges(SMALL))
        self.assertIn("A", graph.destinations("start"))
        self.assertIn("start", graph.destinations("A"))
        self.assertEqual(graph.destinations("nowhere"), [])

    def test_big_caves(self):
        self.assertTrue(is_big("A"))
        self.assertTrue(is_big("HN"))
        self.assertFalse(is_big("start"))

    def test_single_visit_paths(self):
        graph = CaveGraph.from_edges(parse_edges(SMALL))
        paths = enumerate_paths(graph)
        self.assertEqual(len(paths), 10)
        self.assertIn(("start", "A", "b", "A", "c", "A", "end"), paths)
        self.assertIn(("start", "b", "end"), paths)
        for path in paths:
            small = [c for c in path if not is_big(c)]
            self.assertEqual(len(small), len(set(small)))

    def test_one_revisit_paths(self):
        graph = CaveGraph.from_edges(parse_edges(SMALL))
        paths = enumerate_paths(graph, allow_revisit=True)
        self.assertEqual(len(paths), 36)
        self.assertIn(("start", "A", "b", "A", "b", "A", "c", "A", "end"), paths)
        for path in paths:
            self.assertEqual(path.count("start"), 1)
            self.assertEqual(path.count("end"), 1)

    def test_medium_example(self):
        graph = CaveGraph.from_edges(parse_edges(MEDIUM))
        self.assertEqual(len(enumerate_paths(graph)), 19)
        self.assertEqual(len(enumerate_paths(graph, allow_revisit=True)), 103)

    def test_bad_edge(self):
        with self.assertRaises(MalformedInput):
            parse_edges("start-A\nA end\n")


if __name__ == "__main__":
    unittest.main()
