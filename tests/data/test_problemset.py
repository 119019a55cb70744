"""Tests for ProblemSet."""

import tempfile
import unittest
from pathlib import Path

from resprover.data import ProblemSet


class TestProblemSet(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        (self.tmp / "sub").mkdir()
        (self.tmp / "a.cnf").write_text("p cnf 1 2\n1 0\n-1 0\n")
        (self.tmp / "b.cnf").write_text("p cnf 2 1\n1 2 0\n")
        (self.tmp / "sub" / "c.cnf").write_text("p cnf 1 1\n-1 0\n")
        (self.tmp / "broken.cnf").write_text("not a cnf file\n")

    def tearDown(self):
        self._tmp.cleanup()

    def test_files_and_patterns(self):
        problems = ProblemSet(files=["b.cnf"], patterns=["*.cnf", "sub/*.cnf"],
                              base_path=self.tmp)
        names = [p.name for p in problems.problem_files]
        self.assertEqual(names, ["b.cnf", "a.cnf", "broken.cnf", "c.cnf"])

    def test_iteration_parses(self):
        problems = ProblemSet(files=["a.cnf", "b.cnf"], base_path=self.tmp)
        parsed = list(problems)
        self.assertEqual(len(parsed), 2)
        self.assertEqual(parsed[0][1].name, "a")
        self.assertEqual(len(parsed[0][1]), 2)

    def test_cache(self):
        problems = ProblemSet(files=["a.cnf"], base_path=self.tmp)
        self.assertIs(problems.get_problem(0), problems.get_problem(0))
        first = problems.get_problem(0)
        problems.clear_cache()
        self.assertIsNot(problems.get_problem(0), first)

    def test_errors(self):
        problems = ProblemSet(files=["broken.cnf", "missing.cnf"], base_path=self.tmp)
        with self.assertRaises(ValueError):
            problems.get_problem(0)
        with self.assertRaises(FileNotFoundError):
            problems.get_problem(1)

    def test_from_lines(self):
        problems = ProblemSet.from_lines(["a.cnf\n", "\n", "# skipped\n", "b.cnf"],
                                         base_path=self.tmp)
        self.assertEqual(len(problems), 2)

    def test_from_list_file(self):
        list_file = self.tmp / "problems.txt"
        list_file.write_text("a.cnf\nsub/c.cnf\n")
        problems = ProblemSet.from_list_file(list_file, base_path=self.tmp)
        self.assertEqual([p.name for p in problems.problem_files], ["a.cnf", "c.cnf"])


if __name__ == '__main__':
    unittest.main()
