"""Value network weight management.

Networks are stored as ``.npz`` archives holding the four parameter arrays
and the layer configuration.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np

from .network import FeedForwardNetwork


WEIGHTS_SUFFIX = ".npz"


def save_network(network: FeedForwardNetwork, path: Union[str, Path]) -> Path:
    """Write network parameters and configuration to ``path``."""
    path = Path(path)
    if path.suffix != WEIGHTS_SUFFIX:
        path = path.with_suffix(WEIGHTS_SUFFIX)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez(
        path,
        layers=np.array([network.input_size, network.hidden_size, network.output_size]),
        learn_rate=np.array(network.learn_rate),
        descent_steps=np.array(network.descent_steps),
        **network.get_params(),
    )
    return path


def load_network(path: Union[str, Path]) -> FeedForwardNetwork:
    """Create a network from a file written by :func:`save_network`."""
    with np.load(Path(path)) as data:
        input_size, hidden_size, output_size = (int(v) for v in data["layers"])
        network = FeedForwardNetwork(
            input_size, hidden_size, output_size,
            learn_rate=float(data["learn_rate"]),
            descent_steps=int(data["descent_steps"]),
            seed=0,
        )
        network.set_params({name: data[name] for name in FeedForwardNetwork.PARAM_NAMES})
    return network


def load_into(network: FeedForwardNetwork, path: Union[str, Path]) -> FeedForwardNetwork:
    """Overwrite the parameters of an existing network in place."""
    stored = load_network(path)
    network.set_params(stored.get_params())
    return network


def find_weights(weights_dir: Path, name: str = "value") -> Optional[Path]:
    """Find the weights file for ``name``, preferring the latest iteration.

    Looks for ``{name}.npz`` first, then ``{name}_iter_{n}.npz`` with the
    largest ``n``.
    """
    weights_dir = Path(weights_dir)
    if not weights_dir.exists():
        return None

    exact = weights_dir / f"{name}{WEIGHTS_SUFFIX}"
    if exact.exists():
        return exact

    prefix = f"{name}_iter_"
    latest_iter = None
    latest_path = None

    for f in weights_dir.glob(f"{prefix}*{WEIGHTS_SUFFIX}"):
        try:
            iter_num = int(f.stem[len(prefix):])
            if latest_iter is None or iter_num > latest_iter:
                latest_iter = iter_num
                latest_path = f
        except ValueError:
            continue

    return latest_path
