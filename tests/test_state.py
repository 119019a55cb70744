"""Tests for proofs.state module."""

import unittest

from resprover.core.logic import Literal, Clause
from resprover.proofs.state import ProofState


class TestProofState(unittest.TestCase):
    """Test ProofState class."""

    def setUp(self):
        self.clause1 = Clause.from_ints([1])
        self.clause2 = Clause.from_ints([-1, 2])
        self.clause3 = Clause.from_ints([-2])

    def test_initial_state(self):
        state = ProofState.initial([self.clause1, self.clause2, self.clause1])
        self.assertEqual(state.processed, set())
        self.assertEqual(state.unprocessed, {self.clause1, self.clause2})

    def test_post_init_keeps_sets_disjoint(self):
        state = ProofState(processed={self.clause1}, unprocessed={self.clause1, self.clause2})
        self.assertEqual(state.unprocessed, {self.clause2})
        self.assertFalse(state.processed & state.unprocessed)

    def test_post_init_copies(self):
        original = {self.clause1}
        state = ProofState(processed=set(), unprocessed=original)
        state.unprocessed.add(self.clause2)
        self.assertEqual(len(original), 1)

    def test_add_unprocessed_dedup(self):
        state = ProofState.initial([self.clause1])
        self.assertFalse(state.add_unprocessed(Clause.from_ints([1])))
        self.assertTrue(state.add_unprocessed(self.clause2))
        state.add_processed(state.take(self.clause2))
        self.assertFalse(state.add_unprocessed(self.clause2))
        self.assertEqual(len(state.unprocessed), 1)

    def test_take(self):
        state = ProofState.initial([self.clause1, self.clause2])
        taken = state.take(Clause.from_ints([2, -1]))
        self.assertEqual(taken, self.clause2)
        self.assertNotIn(self.clause2, state.unprocessed)
        with self.assertRaises(ValueError):
            state.take(self.clause2)

    def test_add_processed_moves_clause(self):
        state = ProofState.initial([self.clause1, self.clause2])
        state.add_processed(self.clause1)
        self.assertIn(self.clause1, state.processed)
        self.assertNotIn(self.clause1, state.unprocessed)
        self.assertTrue(state.has_seen(self.clause1))
        self.assertEqual(state.all_clauses, {self.clause1, self.clause2})

    def test_literal_index(self):
        state = ProofState.initial([])
        state.add_processed(self.clause2)
        state.add_processed(self.clause3)
        self.assertEqual(state.clauses_containing(Literal(2, True)), {self.clause2})
        self.assertEqual(state.clauses_containing(Literal(2, False)), {self.clause3})
        self.assertEqual(state.clauses_containing(Literal(9, True)), set())

    def test_literal_index_cannot_be_modified(self):
        state = ProofState.initial([])
        state.add_processed(self.clause2)
        partners = state.clauses_containing(Literal(2, True))
        self.assertIsInstance(partners, frozenset)
        with self.assertRaises(AttributeError):
            partners.add(self.clause3)
        state.add_processed(Clause.from_ints([2]))
        self.assertEqual(len(partners), 1)
        self.assertEqual(len(state.clauses_containing(Literal(2, True))), 2)

    def test_ordered_unprocessed(self):
        state = ProofState.initial([self.clause3, self.clause2, self.clause1])
        self.assertEqual(state.ordered_unprocessed(),
                         [self.clause2, self.clause1, self.clause3])


if __name__ == '__main__':
    unittest.main()
