"""
Domain-level optimizer contracts for touchnet.

This module defines the `IOptimizer` protocol, which specifies the minimal
interface required for optimizer implementations (e.g., GradientDescent,
Momentum, Adam).

Notes
-----
- Domain contracts are backend-agnostic and must not depend on NumPy or
  infrastructure implementations.
- An optimizer object plays two roles. The instance handed to a `Model` is a
  *configuration*: hyperparameters only, shareable. Each trainable layer asks
  it for a private `copy()` on its first backward pass; that copy is the
  stateful *instance* that owns the accumulators of the layer's weight and
  bias groups.
- Optimizers are pure in their parameters: they return the updated array and
  never write into the one they were given.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._scheduler import IScheduler


@runtime_checkable
class IOptimizer(Protocol):
    """
    Optimizer interface contract.

    Required methods
    ----------------
    - `optimize_w()` returns the updated weight matrix.
    - `optimize_b()` returns the updated bias vector.
    - `copy()` returns a fresh optimizer with the same hyperparameters and no
      accumulated state.
    """

    def optimize_w(
        self, parameters: Any, grads: Any, scheduler: IScheduler, epoch: int
    ) -> Any:
        """
        Apply one update to a weight matrix.

        Parameters
        ----------
        parameters : Any
            Current weight matrix.
        grads : Any
            Gradient of the loss with respect to `parameters`; same shape.
        scheduler : IScheduler
            Source of the learning rate.
        epoch : int
            Epoch forwarded to `scheduler`.
        """
        ...

    def optimize_b(
        self, parameters: Any, grads: Any, scheduler: IScheduler, epoch: int
    ) -> Any:
        """
        Apply one update to a bias vector.
        """
        ...

    def copy(self) -> "IOptimizer":
        """
        Return a state-free optimizer with identical hyperparameters.
        """
        ...
