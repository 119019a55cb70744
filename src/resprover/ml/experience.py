"""Experience batch for the learned selector."""

from dataclasses import dataclass, field
from typing import List

import numpy as np


@dataclass
class ExperienceBatch:
    """Recorded (features, target) pairs waiting for the next training step."""
    inputs: List[np.ndarray] = field(default_factory=list)
    targets: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.targets)

    def record(self, features: np.ndarray, target: float):
        self.inputs.append(np.asarray(features, dtype=float).copy())
        self.targets.append(float(target))

    def bump_last(self, amount: float) -> bool:
        """Add ``amount`` to the newest target; False if the batch is empty."""
        if not self.targets:
            return False
        self.targets[-1] += amount
        return True

    def as_arrays(self):
        if not self.targets:
            return np.zeros((0, 0)), np.zeros(0)
        return np.vstack(self.inputs), np.asarray(self.targets)

    def clear(self):
        self.inputs.clear()
        self.targets.clear()
