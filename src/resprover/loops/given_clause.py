"""Given clause loop for propositional resolution.

Each step asks the selector whether to give up, lets it pick a given clause
from the unprocessed set, stops if that clause is empty, and otherwise moves
it to the processed set and resolves it against every processed clause that
contains a complementary literal. Resolvents that were never seen before are
added to the unprocessed set.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from resprover.core.logic import Clause, Problem
from resprover.proofs.state import ProofState
from resprover.rules.resolution import (
    ResolutionMode, DEFAULT_RESOLUTION_MODE, resolve
)
from resprover.selectors.base import Selector
from .base import Loop, Status


logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected during one search."""
    steps: int = 0
    resolvents: int = 0
    new_clauses: int = 0


class GivenClauseLoop(Loop):
    """Given clause algorithm over a processed / unprocessed partition.

    The loop owns its :class:`ProofState` for the whole search and delegates
    clause choice and rejection to the selector. Running out of budget or
    clauses is a ``REJECTED`` verdict, never an exception.
    """

    def __init__(self,
                 clauses: Union[Problem, Iterable[Clause]],
                 selector: Selector,
                 mode: ResolutionMode = DEFAULT_RESOLUTION_MODE):
        """
        Args:
            clauses: Initial clause collection (or a parsed problem)
            selector: Clause selection strategy
            mode: How resolvents with extra complementary pairs are built
        """
        if isinstance(clauses, Problem):
            clauses = clauses.clauses
        self.state = ProofState.initial(clauses)
        self.selector = selector
        self.mode = ResolutionMode(mode)
        self.status = Status.RUNNING
        self.stats = SearchStats()
        self.given_clause: Optional[Clause] = None
        logger.debug("Created loop with %d clauses, selector %s",
                     len(self.state.unprocessed), selector.name)

    def step(self) -> Status:
        if self.status.is_terminal:
            return self.status

        if self.selector.should_reject(self.state):
            self.status = Status.REJECTED
            logger.debug("Rejected after %d steps", self.stats.steps)
            return self.status

        clause = self.selector.select(self.state)
        self.given_clause = clause
        self.stats.steps += 1

        if self.is_contradiction(clause):
            self.status = Status.PROVED
            logger.debug("Proved after %d steps", self.stats.steps)
            return self.status

        logger.debug("Step %d: given clause %s", self.stats.steps, clause)
        self.state.add_processed(clause)
        self.generate(clause)
        return self.status

    def generate(self, clause: Clause) -> List[Clause]:
        """Resolve ``clause`` against all processed clauses.

        ``clause`` must already be processed, so it is also resolved with
        itself when it is a tautology.

        Returns:
            Resolvents that were added to the unprocessed set
        """
        added = []
        for literal in clause:
            complement = literal.complement()
            for partner in self.state.clauses_containing(complement):
                resolvent = resolve(clause, partner, literal, self.mode)
                self.stats.resolvents += 1
                if self.state.add_unprocessed(resolvent):
                    added.append(resolvent)
        self.stats.new_clauses += len(added)
        return added
