"""
Loss functions for touchnet.

Every loss scores a batch of predictions against targets of the same shape
and produces the gradient that seeds the backward pass of `Model.fit`.

Currently implemented losses:
- MSE          : Mean Squared Error
- MAE          : Mean Absolute Error
- HuberLoss    : quadratic near zero, linear beyond `delta`
- CrossEntropy : categorical cross entropy on probability inputs

Design notes
------------
- Both `loss` and `backward` take the target first and the prediction second.
- Shapes must match exactly; no broadcasting between target and prediction.
- Elementwise losses average over every element, `n = batch * output_size`.
  CrossEntropy averages per-row sums over the batch.
- Losses carry no state and may be shared between models.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import numpy as np

from ..domain.model import StatelessConfigMixin
from ._tensor_ops import DTYPE, require_same_shape


def _pair(op: str, y: Any, y_hat: Any) -> Tuple[np.ndarray, np.ndarray]:
    """
    Coerce `(y, y_hat)` to float64 arrays and check that their shapes agree.
    """
    y_arr = np.asarray(y, dtype=DTYPE)
    y_hat_arr = np.asarray(y_hat, dtype=DTYPE)
    require_same_shape(op, y_arr, y_hat_arr)
    return y_arr, y_hat_arr


class _Loss:
    """
    Shared plumbing for the built-in losses.
    """

    def get_config(self) -> Dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_config().items())
        return f"{type(self).__name__}({args})"


class MSE(StatelessConfigMixin, _Loss):
    """
    Mean Squared Error.

        MSE(y, y_hat) = mean((y - y_hat)^2)

    Gradient with respect to `y_hat`:

        -2 * (y - y_hat) / n
    """

    def loss(self, y: Any, y_hat: Any) -> float:
        y, y_hat = _pair("MSE.loss", y, y_hat)
        diff = y - y_hat
        return float(np.mean(diff * diff))

    def backward(self, y: Any, y_hat: Any) -> np.ndarray:
        y, y_hat = _pair("MSE.backward", y, y_hat)
        return -2.0 * (y - y_hat) / y.size


class MAE(StatelessConfigMixin, _Loss):
    """
    Mean Absolute Error.

        MAE(y, y_hat) = mean(|y - y_hat|)

    The gradient is `sign(y_hat - y) / n`, which is 0 where the prediction
    equals the target.
    """

    def loss(self, y: Any, y_hat: Any) -> float:
        y, y_hat = _pair("MAE.loss", y, y_hat)
        return float(np.mean(np.abs(y - y_hat)))

    def backward(self, y: Any, y_hat: Any) -> np.ndarray:
        y, y_hat = _pair("MAE.backward", y, y_hat)
        return np.sign(y_hat - y) / y.size


class HuberLoss(_Loss):
    """
    Huber loss.

    With ``d = y - y_hat``, each element contributes

        0.5 * d^2                      if |d| <= delta
        delta * (|d| - 0.5 * delta)    otherwise

    and the contributions are averaged over all elements.

    Parameters
    ----------
    delta : float, optional
        Transition point between the quadratic and linear regimes. Must be
        positive. Defaults to 1.0.
    """

    def __init__(self, delta: float = 1.0) -> None:
        self.delta = float(delta)
        if self.delta <= 0.0:
            raise ValueError(f"delta must be > 0, got {self.delta}")

    def loss(self, y: Any, y_hat: Any) -> float:
        y, y_hat = _pair("HuberLoss.loss", y, y_hat)
        d = y - y_hat
        abs_d = np.abs(d)
        per_elem = np.where(
            abs_d <= self.delta,
            0.5 * d * d,
            self.delta * (abs_d - 0.5 * self.delta),
        )
        return float(np.mean(per_elem))

    def backward(self, y: Any, y_hat: Any) -> np.ndarray:
        """
        Return ``-d / n`` inside the quadratic region and ``-delta * sign(d) / n``
        outside it.
        """
        y, y_hat = _pair("HuberLoss.backward", y, y_hat)
        d = y - y_hat
        n = y.size
        inside = np.abs(d) <= self.delta
        return np.where(inside, -d, -self.delta * np.sign(d)) / n

    def get_config(self) -> Dict[str, Any]:
        return {"delta": self.delta}

    def copy(self) -> "HuberLoss":
        return HuberLoss(**self.get_config())


class CrossEntropy(_Loss):
    """
    Categorical cross entropy on probabilities.

        CE(y, y_hat) = -mean_over_rows( sum_over_cols( y * log(clip(y_hat)) ) )

    Predictions are clipped to ``[epsilon, 1 - epsilon]`` before the log and
    before the division in the gradient:

        dCE/dy_hat = -y / clip(y_hat) / batch

    Parameters
    ----------
    epsilon : float, optional
        Clipping margin. Must be in (0, 0.5). Defaults to 1e-12.

    Notes
    -----
    Targets are expected to be one-hot (or a probability distribution per
    row); this is not validated.
    """

    def __init__(self, epsilon: float = 1e-12) -> None:
        self.epsilon = float(epsilon)
        if not (0.0 < self.epsilon < 0.5):
            raise ValueError(f"epsilon must be in (0, 0.5), got {self.epsilon}")

    def _clip(self, y_hat: np.ndarray) -> np.ndarray:
        return np.clip(y_hat, self.epsilon, 1.0 - self.epsilon)

    def loss(self, y: Any, y_hat: Any) -> float:
        y, y_hat = _pair("CrossEntropy.loss", y, y_hat)
        row_sums = np.sum(y * np.log(self._clip(y_hat)), axis=-1)
        return float(-np.mean(row_sums))

    def backward(self, y: Any, y_hat: Any) -> np.ndarray:
        y, y_hat = _pair("CrossEntropy.backward", y, y_hat)
        batch = y.shape[0] if y.ndim > 1 else 1
        return -y / self._clip(y_hat) / batch

    def get_config(self) -> Dict[str, Any]:
        return {"epsilon": self.epsilon}

    def copy(self) -> "CrossEntropy":
        return CrossEntropy(**self.get_config())
