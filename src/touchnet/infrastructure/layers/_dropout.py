"""
Dropout regularization layer for touchnet.

This module implements an inverted Dropout layer. During training,
activations are dropped with probability `p` and the survivors are scaled
by `1 / (1 - p)` to preserve the expected value of activations. During
evaluation, the layer behaves as an identity function.

Design notes
------------
- This implementation follows *inverted dropout*, so no scaling is
  required at inference time.
- Each training-mode forward draws a fresh mask and replaces the stored one;
  `backward` propagates through the most recent mask.
- `p == 1` is accepted at construction but every training-mode forward then
  raises, since no activation could survive.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from ...domain._errors import UnsupportedConfigurationError, UsageOrderError
from ...domain._optimizers import IOptimizer
from ...domain._scheduler import IScheduler
from .._layer import Layer
from .._tensor_ops import DTYPE, RandomSource, as_generator, require_same_shape


class Dropout(Layer):
    """
    Dropout regularization layer (inverted dropout).

    Behavior
    --------
    - Training mode:
        y = x * mask / (1 - p), where mask = (U(0, 1) > p)
    - Evaluation mode:
        y = x (identity)

    Parameters
    ----------
    p : float, optional
        Probability of dropping an element. Must satisfy 0.0 <= p <= 1.0.
        Default is 0.5.
    rng : None | int | numpy.random.Generator, optional
        Random source for the masks.
    """

    def __init__(self, p: float = 0.5, *, rng: RandomSource = None) -> None:
        """
        Initialize the Dropout layer.

        Raises
        ------
        ValueError
            If `p` is outside [0, 1].
        """
        super().__init__()
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Dropout probability p must be in [0, 1], got {p}")
        self.p = float(p)
        self._rng = as_generator(rng)
        self._mask: Optional[np.ndarray] = None

    @property
    def mask(self) -> Optional[np.ndarray]:
        """
        The keep-mask of the last training-mode forward, or None.
        """
        return self._mask

    def forward(self, x: Any) -> np.ndarray:
        """
        Apply dropout to `x`.

        Raises
        ------
        UnsupportedConfigurationError
            If called in training mode with ``p == 1``.
        """
        x = np.asarray(x, dtype=DTYPE)
        if not self.training:
            return x

        if self.p >= 1.0:
            raise UnsupportedConfigurationError(
                "p", "Dropout with p=1 drops every activation; use p < 1 for training."
            )

        if self.p == 0.0:
            self._mask = np.ones_like(x)
            return x.copy()

        self._mask = (self._rng.random(x.shape) > self.p).astype(DTYPE)
        return x * self._mask / (1.0 - self.p)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        """
        Route `upstream` through the stored mask with the same scaling.

        Raises
        ------
        UsageOrderError
            If no training-mode forward has produced a mask yet.
        ShapeMismatchError
            If `upstream` does not match the stored mask.
        """
        if self._mask is None:
            raise UsageOrderError(
                "Dropout", "backward called before any training-mode forward"
            )
        up = np.asarray(upstream, dtype=DTYPE)
        require_same_shape("Dropout.backward", self._mask, up)
        return up * self._mask / (1.0 - self.p)

    def get_config(self) -> Dict[str, Any]:
        return {"p": self.p}

    def copy(self) -> "Dropout":
        """
        Return a Dropout layer with the same `p` and a child random stream
        spawned from this layer's generator.
        """
        clone = Dropout(self.p, rng=self._rng.spawn(1)[0])
        clone.training = self.training
        return clone
