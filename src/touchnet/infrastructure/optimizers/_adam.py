"""
Adam optimizer implementation.

This module provides a minimal implementation of the Adam optimization
algorithm for the hand-written backward engine. The optimizer keeps
per-group state for the first and second moments and a per-group step
counter used for bias correction.

Design notes
------------
- Gradients are clipped elementwise to ``[-max_grad_bound, max_grad_bound]``
  before they enter the moment estimates.
- The weight and bias groups of a layer have independent counters, so the
  bias correction of each group only depends on how often that group was
  updated.
- Moment tensors are allocated as zeros, shaped like the parameter, on the
  first update of a group.

This module contains only Adam. Other optimizers (e.g., GradientDescent)
live in separate modules under the optimizers package.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ._base import Optimizer


class Adam(Optimizer):
    """
    Adam optimizer.

    Adam maintains exponentially decaying averages of past gradients (first
    moment) and past squared gradients (second moment), and applies bias
    correction to both estimates.

    Update rule
    -----------
    Let ``g_t`` be the clipped gradient at step ``t`` of a group:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1^t)
        v_hat = v_t / (1 - beta2^t)

        p <- p - lr * m_hat / (sqrt(v_hat) + eps)

    Parameters
    ----------
    beta1 : float, optional
        First-moment decay, in (0, 1). Defaults to 0.9.
    beta2 : float, optional
        Second-moment decay, in (0, 1). Defaults to 0.999.
    epsilon : float, optional
        Numerical stability epsilon added to the denominator. Must be
        positive. Defaults to 1e-5.
    max_grad_bound : float, optional
        Elementwise gradient clip bound. Must be positive. Defaults to 100.0.

    Notes
    -----
    - After exactly one update with gradient ``g`` the bias-corrected moments
      are ``m_hat == g`` and ``v_hat == g ** 2`` for any betas.
    """

    def __init__(
        self,
        beta1: float = 0.9,
        beta2: float = 0.999,
        epsilon: float = 1e-5,
        max_grad_bound: float = 100.0,
    ) -> None:
        """
        Construct an Adam optimizer.

        Raises
        ------
        ValueError
            If any hyperparameter is outside its valid range.
        """
        super().__init__()
        self.beta1 = float(beta1)
        self.beta2 = float(beta2)
        self.epsilon = float(epsilon)
        self.max_grad_bound = float(max_grad_bound)

        if not (0.0 < self.beta1 < 1.0) or not (0.0 < self.beta2 < 1.0):
            raise ValueError(
                f"betas must be in (0,1), got ({self.beta1}, {self.beta2})"
            )
        if self.epsilon <= 0.0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")
        if self.max_grad_bound <= 0.0:
            raise ValueError(f"max_grad_bound must be > 0, got {self.max_grad_bound}")

    def _update(
        self,
        state: Dict[str, Any],
        parameters: np.ndarray,
        grads: np.ndarray,
        lr: float,
    ) -> np.ndarray:
        t = int(state["t"])
        m = state.get("m")
        v = state.get("v")
        if m is None or v is None:
            m = np.zeros_like(parameters)
            v = np.zeros_like(parameters)

        g = np.clip(grads, -self.max_grad_bound, self.max_grad_bound)

        m = self.beta1 * m + (1.0 - self.beta1) * g
        v = self.beta2 * v + (1.0 - self.beta2) * (g * g)
        state["m"] = m
        state["v"] = v

        # bias correction
        m_hat = m / (1.0 - self.beta1**t)
        v_hat = v / (1.0 - self.beta2**t)

        denom = np.sqrt(v_hat) + self.epsilon
        return parameters - lr * (m_hat / denom)

    def get_config(self) -> Dict[str, Any]:
        return {
            "beta1": self.beta1,
            "beta2": self.beta2,
            "epsilon": self.epsilon,
            "max_grad_bound": self.max_grad_bound,
        }
