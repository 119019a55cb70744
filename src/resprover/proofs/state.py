"""Search state with processed and unprocessed clause sets."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Set

from resprover.core.logic import Clause, Literal


@dataclass
class ProofState:
    """Represents a search state with processed and unprocessed clauses.

    The two sets are kept disjoint. Processed clauses are additionally
    indexed by literal so that inference can find resolution partners
    without scanning the whole processed set.
    """
    processed: Set[Clause] = field(default_factory=set)
    unprocessed: Set[Clause] = field(default_factory=set)

    def __post_init__(self):
        self.processed = set(self.processed)
        self.unprocessed = set(self.unprocessed) - self.processed
        self._index: Dict[Literal, Set[Clause]] = {}
        for clause in self.processed:
            self._index_clause(clause)

    @classmethod
    def initial(cls, clauses: Iterable[Clause]) -> 'ProofState':
        """Initial state: nothing processed, every input clause unprocessed."""
        return cls(processed=set(), unprocessed=set(clauses))

    @property
    def all_clauses(self) -> Set[Clause]:
        """Return all clauses (processed | unprocessed)."""
        return self.processed | self.unprocessed

    def has_seen(self, clause: Clause) -> bool:
        return clause in self.processed or clause in self.unprocessed

    def add_unprocessed(self, clause: Clause) -> bool:
        """Add a clause to the unprocessed set unless it was seen before."""
        if self.has_seen(clause):
            return False
        self.unprocessed.add(clause)
        return True

    def add_processed(self, clause: Clause):
        """Add a clause to the processed set, dropping it from unprocessed."""
        self.unprocessed.discard(clause)
        if clause not in self.processed:
            self.processed.add(clause)
            self._index_clause(clause)

    def take(self, clause: Clause) -> Clause:
        """Remove a clause from the unprocessed set by structural key."""
        try:
            self.unprocessed.remove(clause)
        except KeyError:
            raise ValueError(f"Clause {clause} is not unprocessed") from None
        return clause

    def ordered_unprocessed(self) -> List[Clause]:
        """Unprocessed clauses in canonical clause order."""
        return sorted(self.unprocessed, key=Clause.sort_key)

    def clauses_containing(self, literal: Literal) -> FrozenSet[Clause]:
        """Processed clauses that contain the given literal (a snapshot)."""
        return frozenset(self._index.get(literal, ()))

    def _index_clause(self, clause: Clause):
        for literal in clause:
            self._index.setdefault(literal, set()).add(clause)
