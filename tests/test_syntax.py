import unittest

from aoc_grid.errors import MalformedInput
from aoc_grid.syntax import (
    autocomplete_score,
    completion,
    first_illegal,
    middle_score,
    syntax_error_score,
)


LINES = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]


class TestSyntax(unittest.TestCase):
    def test_first_illegal(self):
        self.assertEqual(first_illegal("{([(<{}[<>[]}>{[]{[(<()>"), "}")
        self.assertEqual(first_illegal("[[<[([]))<([[{}[[()]]]"), ")")
        self.assertIsNone(first_illegal("[({(<(())[]>[[{[]{<()<>>"))
        self.assertEqual(first_illegal(")"), ")")

    def test_error_score(self):
        self.assertEqual(sum(syntax_error_score(line) for line in LINES), 26397)

    def test_completion(self):
        self.assertEqual(completion("[({(<(())[]>[[{[]{<()<>>"), "}}]])})]")
        self.assertEqual(autocomplete_score("[({(<(())[]>[[{[]{<()<>>"), 288957)
        self.assertEqual(completion("()"), "")

    def test_completion_rejects_corrupted_line(self):
        with self.assertRaises(MalformedInput):
            completion("{([(<{}[<>[]}>{[]{[(<()>")

    def test_middle_score(self):
        scores = [autocomplete_score(line) for line in LINES if syntax_error_score(line) == 0]
        self.assertEqual(len(scores), 5)
        self.assertEqual(middle_score(scores), 288957)

    def test_middle_score_needs_scores(self):
        with self.assertRaises(MalformedInput):
            middle_score([])


if __name__ == "__main__":
    unittest.main()
