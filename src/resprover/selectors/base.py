"""Base class for clause selectors."""

from abc import ABC, abstractmethod

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState


class Selector(ABC):
    """Abstract base class for clause selection strategies.

    A selector decides which unprocessed clause the given clause loop works
    on next and whether the search should be abandoned. The loop only ever
    talks to these two operations.
    """

    @abstractmethod
    def select(self, proof_state: ProofState) -> Clause:
        """Remove one clause from the unprocessed set and return it.

        Args:
            proof_state: Current search state

        Returns:
            The chosen clause, already removed from ``proof_state.unprocessed``

        Raises:
            ValueError: If there is no unprocessed clause
        """
        pass

    @abstractmethod
    def should_reject(self, proof_state: ProofState) -> bool:
        """Return True to abandon the search without a verdict."""
        pass

    def reset(self):
        """Prepare the selector for a new problem."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return name of the selector."""
        pass

    @staticmethod
    def _require_unprocessed(proof_state: ProofState):
        if not proof_state.unprocessed:
            raise ValueError("Cannot select from an empty unprocessed set")


class BudgetedSelector(Selector):
    """Selector that gives up after a fixed number of selections."""

    def __init__(self, steps_limit: int):
        """
        Args:
            steps_limit: Number of selections after which the search is
                rejected. 0 rejects before the first selection.
        """
        if isinstance(steps_limit, bool) or not isinstance(steps_limit, int):
            raise TypeError(f"Expected int step limit, got {steps_limit!r}")
        if steps_limit < 0:
            raise ValueError(f"Step limit must not be negative, got {steps_limit}")
        self.steps_limit = steps_limit
        self.steps_taken = 0

    def should_reject(self, proof_state: ProofState) -> bool:
        # budget first: a spent budget rejects without looking at the state
        if self.steps_taken >= self.steps_limit:
            return True
        return not proof_state.unprocessed

    def reset(self):
        self.steps_taken = 0

    @property
    def steps_left(self) -> int:
        return self.steps_limit - self.steps_taken
