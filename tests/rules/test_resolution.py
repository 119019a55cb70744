"""Tests for binary resolution."""

import unittest

from resprover.core.logic import Literal, Clause, EMPTY_CLAUSE
from resprover.rules.resolution import ResolutionMode, DEFAULT_RESOLUTION_MODE, resolve


P, Q, R = Literal(1), Literal(2), Literal(3)


class TestResolve(unittest.TestCase):
    """Test resolve in both modes."""

    def test_default_mode(self):
        self.assertIs(DEFAULT_RESOLUTION_MODE, ResolutionMode.UNION)

    def test_basic_resolvent(self):
        a = Clause(P.complement(), R)
        b = Clause(P)
        self.assertEqual(resolve(b, a, P), Clause(R))
        self.assertEqual(resolve(a, b, P.complement()), Clause(R))

    def test_complementary_units_give_empty_clause(self):
        for mode in ResolutionMode:
            self.assertEqual(resolve(Clause(R), Clause(R.complement()), R, mode),
                             EMPTY_CLAUSE)

    def test_shared_literals_merge(self):
        a = Clause(P, Q)
        b = Clause(P.complement(), Q)
        self.assertEqual(resolve(a, b, P), Clause(Q))

    def test_literal_missing_from_first_clause(self):
        with self.assertRaises(ValueError):
            resolve(Clause(Q), Clause(P.complement()), P)

    def test_complement_missing_from_second_clause(self):
        with self.assertRaises(ValueError):
            resolve(Clause(P), Clause(Q), P)

    def test_union_keeps_tautologies(self):
        a = Clause(P, Q)
        b = Clause(P.complement(), Q.complement())
        resolvent = resolve(a, b, P, ResolutionMode.UNION)
        self.assertEqual(resolvent, Clause(Q, Q.complement()))
        self.assertTrue(resolvent.is_tautology())

    def test_cancel_is_unsound_on_two_pairs(self):
        # {p, q} and {~p, ~q} are satisfiable together, yet CANCEL refutes them
        a = Clause(P, Q)
        b = Clause(P.complement(), Q.complement())
        self.assertEqual(resolve(a, b, P, ResolutionMode.CANCEL), EMPTY_CLAUSE)

    def test_cancel_single_pair_matches_union(self):
        a = Clause(P, Q)
        b = Clause(P.complement(), R)
        self.assertEqual(resolve(a, b, P, ResolutionMode.CANCEL),
                         resolve(a, b, P, ResolutionMode.UNION))

    def test_cancel_drops_resolved_literal_from_second_parent(self):
        # b is a tautology on p; CANCEL drops its copy of p, UNION keeps it
        a = Clause(P)
        b = Clause(P, P.complement(), R)
        self.assertEqual(resolve(a, b, P, ResolutionMode.CANCEL), Clause(R))
        self.assertEqual(resolve(a, b, P, ResolutionMode.UNION), Clause(P, R))


if __name__ == '__main__':
    unittest.main()
