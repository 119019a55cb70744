"""Base class for given clause loops."""

from abc import ABC, abstractmethod
from enum import Enum

from resprover.core.logic import Clause


class Status(Enum):
    """States of a proof search."""
    RUNNING = "running"
    PROVED = "proved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not Status.RUNNING


class Verdict(Enum):
    """Outcome of a finished proof search."""
    PROVED = "proved"
    REJECTED = "rejected"

    def __bool__(self):
        return self is Verdict.PROVED


class Loop(ABC):
    """Abstract base class for given clause loops."""

    status: Status = Status.RUNNING

    @abstractmethod
    def step(self) -> Status:
        """
        Execute one transition of the given clause loop.

        Returns:
            The status after the transition
        """
        pass

    def prove(self) -> Verdict:
        """Run the loop until it reaches a terminal state."""
        while not self.status.is_terminal:
            self.step()
        return Verdict.PROVED if self.status is Status.PROVED else Verdict.REJECTED

    def is_contradiction(self, clause: Clause) -> bool:
        """Check if a clause is a contradiction (empty clause)."""
        return clause.is_empty
