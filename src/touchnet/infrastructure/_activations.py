"""
Activation layers.

This module provides the parameter-free (or hyperparameter-only) layers of
touchnet. Each layer implements its forward map and a hand-written backward
pass that multiplies the upstream gradient by the local derivative; none of
them update parameters, so the `optimizer`, `scheduler` and `epoch`
arguments of `backward` are accepted for interface uniformity and ignored.

Gradient conventions
--------------------
- `Relu` and `LeakyRelu` gate on the sign of the layer input.
- `Sigmoid` and `SoftPlus` compute their local derivative from the layer
  *input* `x` that was fed into `forward`, not from the cached output. For
  `Sigmoid` the multiplier is ``x * (1 - x) / zoom``; callers that want the
  textbook derivative should place the sigmoid so that this holds for the
  activations they pass in.
- `Softmax` contracts the upstream gradient with the full per-row Jacobian.

Notes
-----
- `Relu` and `Softmax` carry no hyperparameters and use
  `StatelessConfigMixin` for their configuration hooks.
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np

from ..domain.model._stateless_mixin import StatelessConfigMixin
from ..domain._optimizers import IOptimizer
from ..domain._scheduler import IScheduler
from ._layer import Layer
from ._tensor_ops import DTYPE, require_same_shape


def _check_upstream(op: str, x: np.ndarray, upstream: Any) -> np.ndarray:
    up = np.asarray(upstream, dtype=DTYPE)
    require_same_shape(op, x, up)
    return up


class Relu(StatelessConfigMixin, Layer):
    """
    Rectified linear unit.

        relu(x) = max(0, x)

    The backward pass lets the upstream gradient through where ``x > 0``.
    """

    def forward(self, x: Any) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        return np.maximum(x, 0.0)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        up = _check_upstream("Relu.backward", x, upstream)
        return up * (x > 0.0)


class LeakyRelu(Layer):
    """
    Leaky rectified linear unit.

        leaky_relu(x) = x          if x > 0
                        alpha * x  otherwise

    Parameters
    ----------
    alpha : float, optional
        Slope for non-positive inputs. Must be non-negative. Defaults to 0.01.
    """

    def __init__(self, alpha: float = 0.01) -> None:
        super().__init__()
        self.alpha = float(alpha)
        if self.alpha < 0.0:
            raise ValueError(f"alpha must be >= 0, got {self.alpha}")

    def forward(self, x: Any) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        return np.where(x > 0.0, x, self.alpha * x)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        up = _check_upstream("LeakyRelu.backward", x, upstream)
        return up * np.where(x > 0.0, 1.0, self.alpha)

    def get_config(self) -> Dict[str, Any]:
        return {"alpha": self.alpha}


class Sigmoid(Layer):
    """
    Logistic sigmoid with a temperature ("zoom").

        sigmoid(x) = 1 / (1 + exp(-x / zoom))

    Parameters
    ----------
    zoom : float, optional
        Input scale. Larger values flatten the curve. Must be positive.
        Defaults to 1.0.

    Notes
    -----
    The backward multiplier is ``x * (1 - x) / zoom`` evaluated on the array
    passed as `x` to `backward`.
    """

    def __init__(self, zoom: float = 1.0) -> None:
        super().__init__()
        self.zoom = float(zoom)
        if self.zoom <= 0.0:
            raise ValueError(f"zoom must be > 0, got {self.zoom}")

    def forward(self, x: Any) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        # exp overflows to inf for very negative inputs; 1 / inf is the
        # correct limit 0.
        with np.errstate(over="ignore"):
            return 1.0 / (1.0 + np.exp(-x / self.zoom))

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        up = _check_upstream("Sigmoid.backward", x, upstream)
        return up * (x * (1.0 - x) / self.zoom)

    def get_config(self) -> Dict[str, Any]:
        return {"zoom": self.zoom}


class SoftPlus(Layer):
    """
    Softplus with a configurable logarithm base.

        softplus(x) = log_base(1 + 1e-8 + base ** clip(x))

    where ``clip`` limits ``x`` to ``[-max_clip, max_clip]`` so the power
    cannot overflow.

    Parameters
    ----------
    base : float, optional
        Base of the exponent and logarithm. Must be > 1. Defaults to 2.0.
    max_clip : float, optional
        Symmetric clipping bound for the input. Must be positive.
        Defaults to 700.0.

    Notes
    -----
    The backward multiplier is the sigmoid-shaped gate
    ``base ** -c / (1 + base ** -c)`` with ``c = clip(x)``.
    """

    _OFFSET = 1e-8

    def __init__(self, base: float = 2.0, max_clip: float = 700.0) -> None:
        super().__init__()
        self.base = float(base)
        self.max_clip = float(max_clip)
        if self.base <= 1.0:
            raise ValueError(f"base must be > 1, got {self.base}")
        if self.max_clip <= 0.0:
            raise ValueError(f"max_clip must be > 0, got {self.max_clip}")

    def _clip(self, x: np.ndarray) -> np.ndarray:
        return np.clip(x, -self.max_clip, self.max_clip)

    def forward(self, x: Any) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        powered = np.power(self.base, self._clip(x))
        return np.log(1.0 + self._OFFSET + powered) / np.log(self.base)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        up = _check_upstream("SoftPlus.backward", x, upstream)
        neg = np.power(self.base, -self._clip(x))
        return up * (neg / (1.0 + neg))

    def get_config(self) -> Dict[str, Any]:
        return {"base": self.base, "max_clip": self.max_clip}


class Softmax(StatelessConfigMixin, Layer):
    """
    Row-wise softmax.

    The forward pass subtracts each row's maximum before exponentiating, so
    rows sum to 1 for arbitrarily large or small finite inputs.

    The backward pass recomputes ``s = softmax(x)`` and applies the exact
    Jacobian of every row:

        grad_j = sum_k upstream_k * s_j * (delta_jk - s_k)
    """

    def forward(self, x: Any) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        shifted = x - np.max(x, axis=-1, keepdims=True)
        e = np.exp(shifted)
        return e / np.sum(e, axis=-1, keepdims=True)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        x = np.asarray(x, dtype=DTYPE)
        up = _check_upstream("Softmax.backward", x, upstream)
        s = self.forward(x)

        # jac[..., j, k] = s_j * (delta_jk - s_k)
        eye = np.eye(s.shape[-1], dtype=DTYPE)
        jac = s[..., :, np.newaxis] * (eye - s[..., np.newaxis, :])
        return np.einsum("...k,...jk->...j", up, jac)
