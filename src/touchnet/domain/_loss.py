"""
Domain-level loss contract.

Losses are stateless objects that score a prediction against a target and
produce the gradient that seeds the backward pass.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ILoss(Protocol):
    """
    Loss interface contract.

    Both methods take the target first and the prediction second, and both
    require the two arrays to share the shape `(batch, output_size)`.
    """

    def loss(self, y: Any, y_hat: Any) -> float:
        """
        Return the scalar loss of `y_hat` against `y`.
        """
        ...

    def backward(self, y: Any, y_hat: Any) -> Any:
        """
        Return the elementwise gradient of the loss with respect to `y_hat`.
        """
        ...
