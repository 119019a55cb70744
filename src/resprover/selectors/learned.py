"""Learned-value clause selector.

Candidates are sampled with probability proportional to ``lambda ** Q``
where ``Q`` is the value network's estimate for the candidate's feature
vector. While searching, the selector records (features, target) samples
and periodically trains the network on them, so the estimates improve over
a sequence of problems.
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import ClassVar, List, Optional

import numpy as np

from resprover.core.logic import Clause
from resprover.ml.config import LearnedSelectorConfig, NetworkConfig
from resprover.ml.experience import ExperienceBatch
from resprover.ml.features import NUM_FEATURES, candidate_features
from resprover.ml.network import FeedForwardNetwork
from resprover.proofs.state import ProofState
from .base import BudgetedSelector


logger = logging.getLogger(__name__)


@dataclass
class LearningState:
    """Value network plus the samples recorded since its last update."""
    network: FeedForwardNetwork
    experience: ExperienceBatch = field(default_factory=ExperienceBatch)
    losses: List[float] = field(default_factory=list)

    @classmethod
    def create(cls, config: Optional[NetworkConfig] = None) -> 'LearningState':
        config = config or NetworkConfig()
        network = FeedForwardNetwork(
            input_size=NUM_FEATURES,
            hidden_size=config.hidden_size,
            output_size=1,
            learn_rate=config.learn_rate,
            descent_steps=config.descent_steps,
            seed=config.seed,
        )
        return cls(network=network)

    @property
    def updates(self) -> int:
        return len(self.losses)

    def train(self) -> Optional[float]:
        """Train on the recorded samples and clear them."""
        if not len(self.experience):
            return None
        inputs, targets = self.experience.as_arrays()
        loss = self.network.train(inputs, targets)
        self.experience.clear()
        self.losses.append(loss)
        logger.debug("Trained value network on %d samples, mse %.6g",
                     len(targets), loss)
        return loss

    def copy(self) -> 'LearningState':
        """Independent state, e.g. for a concurrent search."""
        experience = ExperienceBatch(list(self.experience.inputs),
                                     list(self.experience.targets))
        return LearningState(self.network.copy(), experience, list(self.losses))


class LearnedSelector(BudgetedSelector):
    """Select clauses by sampling from learned value estimates.

    Unless an explicit ``learning_state`` is passed, every instance works on
    one process-wide :class:`LearningState`. It is created by the first
    instance, shared by all later ones and never reset, so what is learned
    on one problem carries over to the next. The shared state assumes
    sequential use; concurrent searches need their own copies.
    """

    _shared_state: ClassVar[Optional[LearningState]] = None

    def __init__(self,
                 config: Optional[LearnedSelectorConfig] = None,
                 learning_state: Optional[LearningState] = None,
                 **overrides):
        """
        Args:
            config: Selector hyperparameters
            learning_state: Private learning state; defaults to the shared one
            **overrides: Individual ``LearnedSelectorConfig`` fields
        """
        config = config or LearnedSelectorConfig()
        if overrides:
            config = replace(config, **overrides)
        super().__init__(config.steps_limit)
        self.config = config
        self.learning_state = learning_state or self.shared_state(config.network)
        self._rng = np.random.default_rng(config.seed)
        self._log_temperature = math.log(config.temperature)
        self._previously_took = False
        self.stats = {
            'selections': 0,
            'samples': 0,
            'trainings': 0,
        }

    @classmethod
    def shared_state(cls, config: Optional[NetworkConfig] = None) -> LearningState:
        """The process-wide learning state, created on first use."""
        if cls._shared_state is None:
            cls._shared_state = LearningState.create(config)
            logger.debug("Created shared value network %s",
                         cls._shared_state.network)
        return cls._shared_state

    @classmethod
    def reset_shared_state(cls):
        """Forget the shared learning state. Meant for test isolation."""
        cls._shared_state = None

    @property
    def network(self) -> FeedForwardNetwork:
        return self.learning_state.network

    @property
    def experience(self) -> ExperienceBatch:
        return self.learning_state.experience

    def reset(self):
        super().reset()
        self._previously_took = False

    def estimate_values(self, proof_state: ProofState, candidates) -> np.ndarray:
        """Q estimates for the given candidate clauses."""
        features = candidate_features(proof_state, candidates)
        return self.network.forward_batch(features)[:, 0]

    def _sample(self, values: np.ndarray) -> int:
        # lambda ** Q, rescaled by a constant so large Q cannot overflow
        log_weights = values * self._log_temperature
        weights = np.exp(log_weights - np.max(log_weights))
        if not np.all(np.isfinite(weights)):
            logger.warning("Non-finite value estimates, sampling uniformly")
            weights = np.ones_like(values)
        cumulative = np.cumsum(weights)
        r = self._rng.random() * cumulative[-1]
        idx = int(np.searchsorted(cumulative, r, side='left'))
        return min(idx, len(values) - 1)

    def select(self, proof_state: ProofState) -> Clause:
        self._require_unprocessed(proof_state)
        alpha = self.config.learn_rate
        candidates = proof_state.ordered_unprocessed()
        features = candidate_features(proof_state, candidates)
        values = self.network.forward_batch(features)[:, 0]

        # the successor value of the previous sample is only known now
        if self._previously_took:
            self.experience.bump_last(alpha * self.config.discount * float(np.max(values)))
            self._previously_took = False
        if len(self.experience) >= self.config.batch_size:
            self.learning_state.train()
            self.stats['trainings'] += 1

        idx = self._sample(values)
        chosen = candidates[idx]
        self.steps_taken += 1
        self.stats['selections'] += 1

        if self._rng.random() < self.config.prob_take:
            target = (1.0 - alpha) * float(values[idx])
            if chosen.is_empty:
                target += alpha * self.config.reward
            self.experience.record(features[idx], target)
            self._previously_took = True
            self.stats['samples'] += 1

        return proof_state.take(chosen)

    def flush(self) -> Optional[float]:
        """Train on any pending samples now."""
        self._previously_took = False
        loss = self.learning_state.train()
        if loss is not None:
            self.stats['trainings'] += 1
        return loss

    @property
    def name(self) -> str:
        return "learned"
