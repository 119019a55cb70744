"""Tests for FirstClauseSelector and the selector registry."""

import unittest

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState
from resprover.selectors import (
    FirstClauseSelector, RandomSelector, LearnedSelector, get_selector, list_selectors
)


class TestFirstClauseSelector(unittest.TestCase):
    """Test FirstClauseSelector."""

    def test_selects_in_canonical_order(self):
        state = ProofState.initial(Clause.from_ints(c) for c in ([2], [1, 3], [-1]))
        selector = FirstClauseSelector()
        order = [selector.select(state) for _ in range(3)]
        self.assertEqual(order, [Clause.from_ints([-1]), Clause.from_ints([1, 3]),
                                 Clause.from_ints([2])])
        self.assertFalse(state.unprocessed)

    def test_rejects_only_when_exhausted(self):
        state = ProofState.initial([Clause.from_ints([1])])
        selector = FirstClauseSelector()
        self.assertFalse(selector.should_reject(state))
        selector.select(state)
        self.assertTrue(selector.should_reject(state))

    def test_select_from_empty_raises(self):
        with self.assertRaises(ValueError):
            FirstClauseSelector().select(ProofState.initial([]))

    def test_name(self):
        self.assertEqual(FirstClauseSelector().name, "first")


class TestSelectorRegistry(unittest.TestCase):
    """Test get_selector."""

    def tearDown(self):
        LearnedSelector.reset_shared_state()

    def test_list_selectors(self):
        self.assertEqual(set(list_selectors()), {"first", "random", "shortest", "learned"})

    def test_get_selector(self):
        selector = get_selector("Random", steps_limit=7, seed=1)
        self.assertIsInstance(selector, RandomSelector)
        self.assertEqual(selector.steps_limit, 7)
        self.assertIsInstance(get_selector("learned"), LearnedSelector)

    def test_unknown_selector(self):
        with self.assertRaises(ValueError):
            get_selector("clever")


if __name__ == '__main__':
    unittest.main()
