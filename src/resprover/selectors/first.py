"""First-clause selector."""

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState
from .base import Selector


class FirstClauseSelector(Selector):
    """Select the first unprocessed clause in canonical clause order.

    Deterministic and unbudgeted: the search only stops when a proof is
    found or the unprocessed set runs dry.
    """

    def select(self, proof_state: ProofState) -> Clause:
        self._require_unprocessed(proof_state)
        chosen = min(proof_state.unprocessed, key=Clause.sort_key)
        return proof_state.take(chosen)

    def should_reject(self, proof_state: ProofState) -> bool:
        return not proof_state.unprocessed

    @property
    def name(self) -> str:
        return "first"
