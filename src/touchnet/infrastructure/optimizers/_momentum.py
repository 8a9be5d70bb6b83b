"""
Momentum optimizer implementation.

The velocity is an exponential moving average of past gradients, kept per
parameter group and allocated as zeros on the group's first update.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ._base import Optimizer


class Momentum(Optimizer):
    """
    Gradient descent with momentum (EMA form).

    Update rule
    -----------
        v <- beta * v + (1 - beta) * g
        p <- p - lr * v

    Parameters
    ----------
    beta : float, optional
        Velocity decay. Must be in [0, 1). Defaults to 0.9.
    """

    def __init__(self, beta: float = 0.9) -> None:
        super().__init__()
        self.beta = float(beta)
        if not (0.0 <= self.beta < 1.0):
            raise ValueError(f"beta must be in [0,1), got {self.beta}")

    def _update(
        self,
        state: Dict[str, Any],
        parameters: np.ndarray,
        grads: np.ndarray,
        lr: float,
    ) -> np.ndarray:
        v = state.get("v")
        if v is None:
            v = np.zeros_like(parameters)

        v = self.beta * v + (1.0 - self.beta) * grads
        state["v"] = v
        return parameters - lr * v

    def get_config(self) -> Dict[str, Any]:
        return {"beta": self.beta}
