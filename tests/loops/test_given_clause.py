"""Tests for the given clause loop."""

import unittest

from resprover.core.logic import Clause, Problem
from resprover.loops import GivenClauseLoop, Status, Verdict
from resprover.rules.resolution import ResolutionMode
from resprover.selectors import (
    FirstClauseSelector, RandomSelector, ShortestSelector, LearnedSelector
)


def clauses(*int_clauses):
    return [Clause.from_ints(c) for c in int_clauses]


class TestGivenClauseLoop(unittest.TestCase):
    """Test GivenClauseLoop with different selectors."""

    def setUp(self):
        LearnedSelector.reset_shared_state()
        # P=1, Q=2, R=3
        self.unsat = clauses([-1, 3], [1], [-2, 3], [-3])
        self.sat = clauses([1, 2], [-2], [-3])

    def tearDown(self):
        LearnedSelector.reset_shared_state()

    def all_selectors(self, steps_limit=50):
        return [
            FirstClauseSelector(),
            RandomSelector(steps_limit=steps_limit, seed=1),
            ShortestSelector(steps_limit=steps_limit, seed=1),
            LearnedSelector(steps_limit=steps_limit, seed=1),
        ]

    def test_first_selector_proves_chain(self):
        """R follows from the first two clauses and clashes with the last."""
        loop = GivenClauseLoop(self.unsat, FirstClauseSelector())
        self.assertEqual(loop.prove(), Verdict.PROVED)
        self.assertEqual(loop.status, Status.PROVED)
        self.assertTrue(loop.given_clause.is_empty)

    def test_satisfiable_problem_is_rejected(self):
        """No selector refutes a satisfiable clause set."""
        for selector in self.all_selectors():
            with self.subTest(selector=selector.name):
                loop = GivenClauseLoop(self.sat, selector)
                self.assertEqual(loop.prove(), Verdict.REJECTED)
                self.assertFalse(loop.prove())

    def test_satisfiable_problem_derives_p(self):
        loop = GivenClauseLoop(self.sat, FirstClauseSelector())
        loop.prove()
        self.assertIn(Clause.from_ints([1]), loop.state.processed)
        self.assertFalse(loop.state.unprocessed)

    def test_unsat_problem_proved_by_every_selector(self):
        for selector in self.all_selectors(steps_limit=1000):
            with self.subTest(selector=selector.name):
                loop = GivenClauseLoop(self.unsat, selector)
                self.assertEqual(loop.prove(), Verdict.PROVED)

    def test_accepts_problem(self):
        problem = Problem(*self.unsat)
        self.assertTrue(GivenClauseLoop(problem, FirstClauseSelector()).prove())

    def test_empty_input_is_rejected(self):
        loop = GivenClauseLoop([], FirstClauseSelector())
        self.assertEqual(loop.prove(), Verdict.REJECTED)
        self.assertEqual(loop.stats.steps, 0)

    def test_empty_clause_in_input(self):
        loop = GivenClauseLoop(clauses([1], []), ShortestSelector(steps_limit=5))
        self.assertEqual(loop.prove(), Verdict.PROVED)
        self.assertEqual(loop.stats.steps, 1)

    def test_partition_invariant(self):
        """Processed and unprocessed stay disjoint at every step."""
        problem = clauses([1, 2], [-1, 2], [1, -2], [-1, -2, 3], [-3, 4])
        loop = GivenClauseLoop(problem, RandomSelector(steps_limit=40, seed=3))
        seen = set(problem)
        while not loop.status.is_terminal:
            loop.step()
            self.assertFalse(loop.state.processed & loop.state.unprocessed)
            current = loop.state.processed | loop.state.unprocessed
            if loop.status is Status.PROVED:
                current.add(loop.given_clause)
            # clauses never disappear except the final given clause
            self.assertTrue(seen <= current)
            seen = current

    def test_budget_bounds_steps(self):
        problem = clauses([1, 2, 3], [-1, 4], [-2, 5], [-3, 6], [-4, -5, 7])
        for limit in (0, 1, 3, 7):
            with self.subTest(limit=limit):
                loop = GivenClauseLoop(problem, RandomSelector(steps_limit=limit, seed=0))
                loop.prove()
                self.assertLessEqual(loop.stats.steps, limit)

    def test_duplicate_resolvents_added_once(self):
        loop = GivenClauseLoop(clauses([1, 2], [-1, 2]), FirstClauseSelector())
        loop.step()
        loop.step()
        self.assertEqual(loop.state.unprocessed, {Clause.from_ints([2])})
        self.assertEqual(loop.stats.new_clauses, 1)

    def test_step_after_terminal_is_noop(self):
        loop = GivenClauseLoop(self.unsat, FirstClauseSelector())
        loop.prove()
        steps = loop.stats.steps
        self.assertEqual(loop.step(), Status.PROVED)
        self.assertEqual(loop.stats.steps, steps)

    def test_cancel_mode_refutes_satisfiable_pairs(self):
        problem = clauses([1, 2], [-1, -2])
        self.assertEqual(GivenClauseLoop(problem, FirstClauseSelector()).prove(),
                         Verdict.REJECTED)
        loop = GivenClauseLoop(problem, FirstClauseSelector(), ResolutionMode.CANCEL)
        self.assertEqual(loop.prove(), Verdict.PROVED)

    def test_first_selector_is_deterministic(self):
        problem = clauses([1, 2], [-1, 3], [-2, 3], [-3, 4], [-4])
        runs = []
        for _ in range(2):
            loop = GivenClauseLoop(problem, FirstClauseSelector())
            loop.prove()
            runs.append((loop.stats.steps, frozenset(loop.state.processed)))
        self.assertEqual(runs[0], runs[1])


if __name__ == '__main__':
    unittest.main()
