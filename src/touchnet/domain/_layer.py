"""
Layer interface definitions.

This module defines the domain-level interface for network layers using
structural subtyping via `typing.Protocol`.

Any object that implements the required methods is considered a valid layer,
independent of inheritance, so callers can plug their own layer kinds into a
`Model` without touching the infrastructure classes.

Backward convention
-------------------
`backward(input, upstream, optimizer, scheduler, epoch)` receives the exact
array that was fed into the layer on the matching forward pass and the
gradient of the loss with respect to the layer's *output*. It returns the
gradient with respect to the layer's *input*. Trainable layers update their
parameters as a side effect of this call.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ._optimizers import IOptimizer
from ._scheduler import IScheduler


@runtime_checkable
class ILayer(Protocol):
    """
    Domain-level layer interface.

    Notes
    -----
    - Any object implementing `forward`, `backward`, `copy` and `info` is
      considered a valid layer.
    - This interface is safe to use with `isinstance` checks due to the
      `@runtime_checkable` decorator.
    """

    def forward(self, input: Any) -> Any:
        """
        Compute the layer output for a batch-major input.
        """
        ...

    def backward(
        self,
        input: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> Any:
        """
        Propagate `upstream` through the layer and update its parameters.

        Parameters
        ----------
        input : Any
            The array fed into this layer on the matching forward pass.
        upstream : Any
            Gradient of the loss with respect to this layer's output.
        optimizer : IOptimizer
            Optimizer configuration; trainable layers bind a private copy.
        scheduler : IScheduler
            Learning-rate source forwarded to the optimizer.
        epoch : int
            Current training epoch.

        Returns
        -------
        Any
            Gradient of the loss with respect to `input`.
        """
        ...

    def copy(self) -> "ILayer":
        """
        Return an independent layer; trainable state is deep-copied.
        """
        ...

    def info(self) -> str:
        """
        Return a one-line, human-readable description of the layer.
        """
        ...
