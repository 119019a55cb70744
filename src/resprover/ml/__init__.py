"""Value estimation for the learned clause selector

This module provides:
- FeedForwardNetwork: one-hidden-layer network trained by gradient descent
- Features: state and action features of candidate clauses
- Experience: recorded (features, target) samples
- Weights: saving and loading network parameters
- Config: selector and search configuration
- JSONLogger: run metrics
"""

from .network import FeedForwardNetwork, ShapeError, sigmoid
from .features import (
    STATE_FEATURES,
    ACTION_FEATURES,
    NUM_FEATURES,
    state_features,
    action_features,
    candidate_features,
    feature_names,
)
from .experience import ExperienceBatch
from .weights import save_network, load_network, load_into, find_weights
from .config import (
    NetworkConfig,
    LearnedSelectorConfig,
    SearchConfig,
    get_config_dir,
    list_presets,
)
from .logger import JSONLogger

__all__ = [
    # Network
    "FeedForwardNetwork",
    "ShapeError",
    "sigmoid",
    # Features
    "STATE_FEATURES",
    "ACTION_FEATURES",
    "NUM_FEATURES",
    "state_features",
    "action_features",
    "candidate_features",
    "feature_names",
    # Experience
    "ExperienceBatch",
    # Weights
    "save_network",
    "load_network",
    "load_into",
    "find_weights",
    # Config
    "NetworkConfig",
    "LearnedSelectorConfig",
    "SearchConfig",
    "get_config_dir",
    "list_presets",
    # Logging
    "JSONLogger",
]
