"""
Shared optimizer machinery.

This module provides `Optimizer`, the base class of the built-in update
rules. It implements the parts every rule shares:

- coercion of parameters and gradients to `float64` arrays and the
  parameter/gradient shape check,
- the learning-rate lookup through the scheduler,
- per-group state storage (``"weight"`` and ``"bias"``), so one optimizer
  instance can serve both parameter groups of a Dense layer while keeping
  their accumulators and step counters apart,
- `copy()`, which rebuilds the optimizer from its hyperparameters and
  therefore never carries state over.

Subclasses implement `_update(state, parameters, grads, lr)`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np

from ...domain._scheduler import IScheduler
from .._tensor_ops import DTYPE, require_same_shape

WEIGHT = "weight"
BIAS = "bias"


class Optimizer(ABC):
    """
    Base class for stateful, per-layer optimizers.

    Notes
    -----
    - State is created lazily on the first update of each group and persists
      for the lifetime of the instance.
    - `optimize_w` / `optimize_b` return new arrays; the inputs are not
      modified.
    """

    def __init__(self) -> None:
        # group name -> {"t": int, <accumulator name>: np.ndarray, ...}
        self._state: Dict[str, Dict[str, Any]] = {}

    @abstractmethod
    def _update(
        self,
        state: Dict[str, Any],
        parameters: np.ndarray,
        grads: np.ndarray,
        lr: float,
    ) -> np.ndarray:
        """
        Return the updated parameters of one group.

        `state` is the group's mutable state dict; it already holds ``"t"``,
        the number of updates applied to this group including this one.
        """
        raise NotImplementedError

    @abstractmethod
    def get_config(self) -> Dict[str, Any]:
        """Return the hyperparameters of this optimizer."""
        raise NotImplementedError

    def _step(
        self,
        group: str,
        parameters: Any,
        grads: Any,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        p = np.asarray(parameters, dtype=DTYPE)
        g = np.asarray(grads, dtype=DTYPE)
        require_same_shape(f"{type(self).__name__}.{group}", p, g)

        # state is only touched once the step is known to proceed
        lr = float(scheduler.get_learning_rate(epoch))

        st = self._state.get(group)
        if st is None:
            st = {"t": 0}
            self._state[group] = st
        st["t"] = int(st["t"]) + 1
        return self._update(st, p, g, lr)

    def optimize_w(
        self, parameters: Any, grads: Any, scheduler: IScheduler, epoch: int
    ) -> np.ndarray:
        """
        Apply one update to a weight matrix and return the result.

        Raises
        ------
        ShapeMismatchError
            If `parameters` and `grads` differ in shape.
        """
        return self._step(WEIGHT, parameters, grads, scheduler, epoch)

    def optimize_b(
        self, parameters: Any, grads: Any, scheduler: IScheduler, epoch: int
    ) -> np.ndarray:
        """
        Apply one update to a bias vector and return the result.

        Raises
        ------
        ShapeMismatchError
            If `parameters` and `grads` differ in shape.
        """
        return self._step(BIAS, parameters, grads, scheduler, epoch)

    def copy(self) -> "Optimizer":
        """
        Return a new optimizer with the same hyperparameters and empty state.
        """
        return type(self)(**self.get_config())

    def state(self, group: str) -> Dict[str, Any]:
        """
        Return a snapshot of the state of `group` (``"weight"`` or ``"bias"``).

        Arrays are copied so the snapshot cannot be used to alter the
        optimizer. An empty dict means the group has not been updated yet.
        """
        if group not in (WEIGHT, BIAS):
            raise ValueError(f"group must be {WEIGHT!r} or {BIAS!r}, got {group!r}")
        st = self._state.get(group, {})
        return {
            k: (v.copy() if isinstance(v, np.ndarray) else v) for k, v in st.items()
        }

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_config().items())
        return f"{type(self).__name__}({args})"
