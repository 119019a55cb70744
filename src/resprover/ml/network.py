"""Feedforward network with one hidden layer.

A small value estimator used by the learned clause selector. The hidden
layer uses the sigmoid activation, the output layer is linear, and training
is plain full-batch gradient descent on the squared error.
"""

from typing import Dict, Optional, Sequence, Union

import numpy as np


ArrayLike = Union[Sequence[float], np.ndarray]


class ShapeError(ValueError):
    """A feature vector or batch does not match the network's layer sizes."""


def sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


class FeedForwardNetwork:
    """Completely connected feedforward network with one hidden layer.

    Weights and biases start as independent uniform draws from [0, 1).
    Gradients are summed over the batch (not averaged) and applied with a
    fixed learning rate ``descent_steps`` times per call to :meth:`train`.
    """

    PARAM_NAMES = ('hidden_weights', 'hidden_bias',
                   'output_weights', 'output_bias')

    def __init__(self,
                 input_size: int,
                 hidden_size: int,
                 output_size: int = 1,
                 learn_rate: float = 0.001,
                 descent_steps: int = 100,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        """
        Args:
            input_size: Width of the feature vector
            hidden_size: Number of hidden neurons
            output_size: Number of outputs
            learn_rate: Gradient descent step size
            descent_steps: Gradient descent iterations per training call
            rng: Random generator for initialization
            seed: Seed used when no generator is given
        """
        for label, size in (('input', input_size), ('hidden', hidden_size),
                            ('output', output_size)):
            if size <= 0:
                raise ValueError(f"{label} layer size must be positive, got {size}")
        if descent_steps < 0:
            raise ValueError(f"descent_steps must not be negative, got {descent_steps}")

        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size
        self.learn_rate = learn_rate
        self.descent_steps = descent_steps

        rng = rng if rng is not None else np.random.default_rng(seed)
        self.hidden_weights = rng.random((hidden_size, input_size))
        self.hidden_bias = rng.random(hidden_size)
        self.output_weights = rng.random((output_size, hidden_size))
        self.output_bias = rng.random(output_size)

        self.hidden_weights_grad = np.zeros_like(self.hidden_weights)
        self.hidden_bias_grad = np.zeros_like(self.hidden_bias)
        self.output_weights_grad = np.zeros_like(self.output_weights)
        self.output_bias_grad = np.zeros_like(self.output_bias)

    def _check_inputs(self, inputs: np.ndarray):
        if inputs.shape[-1] != self.input_size:
            raise ShapeError(
                f"Expected {self.input_size} features, got {inputs.shape[-1]}")

    def _hidden(self, inputs: np.ndarray) -> np.ndarray:
        return sigmoid(inputs @ self.hidden_weights.T + self.hidden_bias)

    def _output(self, hidden: np.ndarray) -> np.ndarray:
        return hidden @ self.output_weights.T + self.output_bias

    def forward(self, features: ArrayLike) -> np.ndarray:
        """Compute the network outputs for one feature vector."""
        x = np.asarray(features, dtype=float)
        if x.ndim != 1:
            raise ShapeError(f"Expected a flat feature vector, got shape {x.shape}")
        self._check_inputs(x)
        return self._output(self._hidden(x))

    def forward_batch(self, inputs: ArrayLike) -> np.ndarray:
        """Compute outputs for a [samples, input_size] batch."""
        x = np.atleast_2d(np.asarray(inputs, dtype=float))
        self._check_inputs(x)
        return self._output(self._hidden(x))

    def estimate(self, features: ArrayLike) -> float:
        """Scalar estimate: the first network output."""
        return float(self.forward(features)[0])

    def _as_batch(self, inputs: ArrayLike, targets: ArrayLike):
        if len(inputs) != len(targets):
            raise ValueError(
                f"Batch size mismatch: {len(inputs)} inputs, {len(targets)} targets")
        if not len(inputs):
            return (np.zeros((0, self.input_size)),
                    np.zeros((0, self.output_size)))
        x = np.asarray(inputs, dtype=float).reshape(len(inputs), -1)
        t = np.asarray(targets, dtype=float).reshape(len(targets), -1)
        if x.shape[1] != self.input_size:
            raise ShapeError(f"Expected {self.input_size} features, got {x.shape[1]}")
        if t.shape[1] != self.output_size:
            raise ShapeError(f"Expected {self.output_size} targets, got {t.shape[1]}")
        return x, t

    def _backpropagate(self, x: np.ndarray, t: np.ndarray) -> float:
        hidden = self._hidden(x)
        error = self._output(hidden) - t

        self.output_bias_grad = error.sum(axis=0)
        self.output_weights_grad = error.T @ hidden
        delta = (error @ self.output_weights) * hidden * (1.0 - hidden)
        self.hidden_bias_grad = delta.sum(axis=0)
        self.hidden_weights_grad = delta.T @ x
        return float(np.mean(error ** 2)) if error.size else 0.0

    def gradients(self, inputs: ArrayLike, targets: ArrayLike) -> Dict[str, np.ndarray]:
        """Squared-error gradients summed over the batch.

        The loss is ``0.5 * sum((estimate - target) ** 2)``.
        """
        x, t = self._as_batch(inputs, targets)
        self._backpropagate(x, t)
        return {
            'hidden_weights': self.hidden_weights_grad,
            'hidden_bias': self.hidden_bias_grad,
            'output_weights': self.output_weights_grad,
            'output_bias': self.output_bias_grad,
        }

    def loss(self, inputs: ArrayLike, targets: ArrayLike) -> float:
        """Mean squared error of the current parameters on a batch."""
        x, t = self._as_batch(inputs, targets)
        if not len(x):
            return 0.0
        return float(np.mean((self._output(self._hidden(x)) - t) ** 2))

    def train(self, inputs: ArrayLike, targets: ArrayLike) -> float:
        """Run ``descent_steps`` full-batch gradient descent iterations.

        Args:
            inputs: [samples, input_size] feature vectors
            targets: [samples] or [samples, output_size] target values

        Returns:
            Mean squared error after the last update
        """
        x, t = self._as_batch(inputs, targets)
        if not len(x):
            return 0.0
        for _ in range(self.descent_steps):
            self._backpropagate(x, t)
            self.hidden_bias -= self.learn_rate * self.hidden_bias_grad
            self.hidden_weights -= self.learn_rate * self.hidden_weights_grad
            self.output_bias -= self.learn_rate * self.output_bias_grad
            self.output_weights -= self.learn_rate * self.output_weights_grad
        return float(np.mean((self._output(self._hidden(x)) - t) ** 2))

    def get_params(self) -> Dict[str, np.ndarray]:
        return {name: getattr(self, name).copy() for name in self.PARAM_NAMES}

    def set_params(self, params: Dict[str, np.ndarray]):
        for name in self.PARAM_NAMES:
            value = np.asarray(params[name], dtype=float)
            if value.shape != getattr(self, name).shape:
                raise ShapeError(
                    f"{name}: expected shape {getattr(self, name).shape}, got {value.shape}")
            setattr(self, name, value.copy())

    def copy(self) -> 'FeedForwardNetwork':
        """Independent network with the same configuration and parameters."""
        clone = FeedForwardNetwork(self.input_size, self.hidden_size,
                                   self.output_size, self.learn_rate,
                                   self.descent_steps, seed=0)
        clone.set_params(self.get_params())
        return clone

    def __repr__(self):
        return (f"FeedForwardNetwork({self.input_size}-{self.hidden_size}-"
                f"{self.output_size}, learn_rate={self.learn_rate}, "
                f"descent_steps={self.descent_steps})")
