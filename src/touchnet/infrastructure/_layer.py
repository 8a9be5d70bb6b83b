"""
Infrastructure layer base class.

This module provides a concrete `Layer` implementation that satisfies the
domain-level `ILayer` protocol. It implements the conveniences shared by all
built-in layers:

- a `training` flag with `train()` / `eval()` switches
- `__call__` forwarding to `forward` for ergonomic invocation
- `info()` built from the class name and `get_config()`
- a default `copy()` that rebuilds the layer from its configuration

Concrete layers (Dense, activations, Dropout) subclass it and implement
`forward` and `backward`.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ..domain._optimizers import IOptimizer
from ..domain._scheduler import IScheduler


class Layer:
    """
    Infrastructure base class for layers.

    Attributes
    ----------
    training : bool
        Whether the layer is in training mode. Only layers whose behavior
        differs between training and inference (e.g. Dropout) read it.

    Notes
    -----
    - `forward` must not modify its input.
    - `backward` receives the same array that was passed to `forward` and
      returns the gradient with respect to it.
    """

    def __init__(self) -> None:
        self.training = True

    def forward(self, x: np.ndarray) -> np.ndarray:
        """
        Execute the forward computation of the layer.

        Subclasses must implement this.
        """
        raise NotImplementedError

    def backward(
        self,
        x: np.ndarray,
        upstream: np.ndarray,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        """
        Propagate `upstream` to the layer input, updating parameters if any.

        Subclasses must implement this.
        """
        raise NotImplementedError

    def __call__(self, x: Any) -> np.ndarray:
        """
        Call the layer as a function, delegating to `forward`.
        """
        return self.forward(x)

    def train(self, mode: bool = True) -> "Layer":
        """
        Set training mode and return the layer.
        """
        self.training = bool(mode)
        return self

    def eval(self) -> "Layer":
        """
        Set evaluation mode and return the layer.
        """
        return self.train(False)

    def get_config(self) -> Dict[str, Any]:
        """
        Return the constructor hyperparameters of this layer.
        """
        return {}

    def copy(self) -> "Layer":
        """
        Return a new layer with the same configuration.

        Layers with trainable state override this to deep-copy it.
        """
        clone = type(self)(**self.get_config())
        clone.training = self.training
        return clone

    def info(self) -> str:
        """
        Return a one-line description such as ``LeakyRelu(alpha=0.01)``.
        """
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_config().items())
        return f"{type(self).__name__}({args})"

    def __repr__(self) -> str:
        return self.info()
