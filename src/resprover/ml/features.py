"""Feature extraction for the learned clause selector.

State features describe the processed clause set, the action feature
describes one candidate clause:

    [0] mean length of processed clauses
    [1] proportion of processed unit clauses
    [2] candidate clause length

Both state features are 0.0 while nothing has been processed.
"""

from typing import List, Sequence

import numpy as np

from resprover.core.logic import Clause
from resprover.proofs.state import ProofState


STATE_FEATURES = 2
ACTION_FEATURES = 1
NUM_FEATURES = STATE_FEATURES + ACTION_FEATURES


def state_features(proof_state: ProofState) -> np.ndarray:
    processed = proof_state.processed
    if not processed:
        return np.zeros(STATE_FEATURES)
    lengths = np.fromiter((len(clause) for clause in processed),
                          dtype=float, count=len(processed))
    return np.array([lengths.mean(), np.mean(lengths == 1)])


def action_features(clause: Clause) -> np.ndarray:
    return np.array([float(len(clause))])


def candidate_features(proof_state: ProofState,
                       candidates: Sequence[Clause]) -> np.ndarray:
    """Feature matrix [len(candidates), NUM_FEATURES] for a list of candidates."""
    features = np.empty((len(candidates), NUM_FEATURES))
    features[:, :STATE_FEATURES] = state_features(proof_state)
    for i, clause in enumerate(candidates):
        features[i, STATE_FEATURES:] = action_features(clause)
    return features


def feature_names() -> List[str]:
    return ['mean_processed_length', 'processed_unit_ratio', 'clause_length']
