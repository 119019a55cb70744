"""
Configuration dataclasses for the learned selector and the search driver.

Presets are stored in configs/selectors/ as YAML files.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


def get_config_dir() -> Path:
    """Get the configs directory."""
    # Try relative to this file first
    config_dir = Path(__file__).parent.parent.parent.parent / "configs"
    if config_dir.exists():
        return config_dir
    # Fall back to current working directory
    config_dir = Path.cwd() / "configs"
    if config_dir.exists():
        return config_dir
    raise FileNotFoundError("configs directory not found")


@dataclass
class NetworkConfig:
    """Value network architecture and training parameters."""
    hidden_size: int = 5
    learn_rate: float = 0.001
    descent_steps: int = 100
    seed: Optional[int] = None


@dataclass
class LearnedSelectorConfig:
    """Hyperparameters of the learned-value selector."""
    steps_limit: int = 100
    temperature: float = 1.0  # lambda, candidates are weighted by lambda ** Q
    reward: float = 1000.0  # reward for choosing the empty clause
    learn_rate: float = 0.1  # alpha of the value update, not the network's rate
    discount: float = 0.9
    prob_take: float = 0.1
    batch_size: int = 32
    seed: Optional[int] = None
    network: NetworkConfig = field(default_factory=NetworkConfig)

    def __post_init__(self):
        if isinstance(self.network, dict):
            self.network = NetworkConfig(**self.network)
        if self.temperature <= 0:
            raise ValueError(f"temperature must be positive, got {self.temperature}")
        if not 0.0 <= self.prob_take <= 1.0:
            raise ValueError(f"prob_take must be within [0, 1], got {self.prob_take}")
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LearnedSelectorConfig":
        d = dict(d)
        network = NetworkConfig(**d.pop("network", {}))
        return cls(network=network, **d)


@dataclass
class SearchConfig:
    """Complete configuration of a prover run."""
    name: str = "default"
    description: str = ""
    selector: str = "learned"
    steps_limit: int = 100
    resolution_mode: str = "union"
    seed: Optional[int] = None
    repeat: int = 1
    lambda_step: float = 0.0
    learned: LearnedSelectorConfig = field(default_factory=LearnedSelectorConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SearchConfig":
        d = dict(d)
        learned = LearnedSelectorConfig.from_dict(d.pop("learned", {}))
        return cls(learned=learned, **d)

    def selector_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``get_selector(self.selector, ...)``."""
        if self.selector == "first":
            return {}
        if self.selector == "learned":
            learned = asdict(self.learned)
            learned["network"] = NetworkConfig(**learned["network"])
            learned["steps_limit"] = self.steps_limit
            if self.seed is not None and learned["seed"] is None:
                learned["seed"] = self.seed
            return {"config": LearnedSelectorConfig(**learned)}
        return {"steps_limit": self.steps_limit, "seed": self.seed}

    def save(self, path: Union[str, Path]):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SearchConfig":
        with open(path) as f:
            return cls.from_dict(yaml.safe_load(f) or {})

    @classmethod
    def load_preset(cls, name: str) -> "SearchConfig":
        """Load a preset search config by name."""
        config_dir = get_config_dir() / "selectors"
        path = config_dir / f"{name}.yaml"
        if not path.exists():
            available = [p.stem for p in config_dir.glob("*.yaml")]
            raise FileNotFoundError(
                f"Search config '{name}' not found. Available: {available}"
            )
        return cls.load(path)


def list_presets() -> List[str]:
    """List available search config presets."""
    config_dir = get_config_dir() / "selectors"
    if not config_dir.exists():
        return []
    return sorted(p.stem for p in config_dir.glob("*.yaml"))

