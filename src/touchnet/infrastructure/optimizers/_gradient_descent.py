"""
Plain gradient descent optimizer.

This module contains only GradientDescent. Other optimizers (Momentum, Adam)
live in separate modules under the optimizers package.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ._base import Optimizer


class GradientDescent(Optimizer):
    """
    Gradient descent with a scheduled learning rate.

    Update rule
    -----------
    For each parameter ``p`` with gradient ``g``:

        p <- p - lr * g

    where ``lr = scheduler.get_learning_rate(epoch)``.

    Notes
    -----
    - The rule keeps no accumulators; only the per-group step counter is
      recorded.
    """

    def _update(
        self,
        state: Dict[str, Any],
        parameters: np.ndarray,
        grads: np.ndarray,
        lr: float,
    ) -> np.ndarray:
        return parameters - lr * grads

    def get_config(self) -> Dict[str, Any]:
        return {}
