"""Random clause selector."""

import random
from typing import Optional

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState
from .base import BudgetedSelector


class RandomSelector(BudgetedSelector):
    """Select clauses uniformly at random.

    This selector randomly chooses from the available unprocessed clauses
    with equal probability and rejects once its step budget is spent. It's
    useful as a baseline.
    """

    def __init__(self, steps_limit: int = 100, seed: Optional[int] = None):
        """Initialize the random selector.

        Args:
            steps_limit: Maximum number of selections
            seed: Random seed for reproducibility. If None, uses system time.
        """
        super().__init__(steps_limit)
        self.seed = seed
        # Per-instance Random object to avoid global state issues
        self._random = random.Random(seed)

    def select(self, proof_state: ProofState) -> Clause:
        self._require_unprocessed(proof_state)
        candidates = proof_state.ordered_unprocessed()
        chosen = candidates[self._random.randrange(len(candidates))]
        self.steps_taken += 1
        return proof_state.take(chosen)

    @property
    def name(self) -> str:
        """Return name of the selector."""
        return "random"
