"""Shortest-clause selector."""

import random
from typing import Optional

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState
from .base import BudgetedSelector


class ShortestSelector(BudgetedSelector):
    """Select a clause with the fewest literals.

    Ties between clauses of minimal size are broken uniformly at random.
    """

    def __init__(self, steps_limit: int = 100, seed: Optional[int] = None):
        super().__init__(steps_limit)
        self.seed = seed
        self._random = random.Random(seed)

    def select(self, proof_state: ProofState) -> Clause:
        self._require_unprocessed(proof_state)
        min_size = min(len(clause) for clause in proof_state.unprocessed)
        shortest = [clause for clause in proof_state.ordered_unprocessed()
                    if len(clause) == min_size]
        chosen = shortest[self._random.randrange(len(shortest))]
        self.steps_taken += 1
        return proof_state.take(chosen)

    @property
    def name(self) -> str:
        return "shortest"
