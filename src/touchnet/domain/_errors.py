"""
Training-engine exceptions for touchnet.

This module defines the explicit error types raised by layers, losses,
optimizers and the model when a call cannot proceed. Every error is fatal:
the engine never retries or recovers, it surfaces the failing state to the
caller of `fit` / `forward` / `backward` so the configuration can be fixed.

Taxonomy
--------
- `ShapeMismatchError`:
    Two operands that must agree in shape do not (parameter vs. gradient,
    target vs. prediction, layer width vs. input width).
- `NumericalDivergenceError`:
    The training loss became NaN.
- `UsageOrderError`:
    A stateful layer was driven out of order (e.g. Dropout backward before
    any forward).
- `UnsupportedConfigurationError`:
    A requested variant does not exist or cannot run with the given
    hyperparameters.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class ShapeMismatchError(ValueError):
    """
    Raised when operands that must share a shape do not.

    Attributes
    ----------
    expected : tuple[int, ...]
        Shape required by the operation.
    actual : tuple[int, ...]
        Shape that was supplied.
    op : str
        Name of the operation that performed the check.
    """

    def __init__(
        self,
        op: str,
        expected: Tuple[int, ...],
        actual: Tuple[int, ...],
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            Name of the operation that detected the mismatch (e.g. "MSE.loss").
        expected : tuple[int, ...]
            Shape required by the operation.
        actual : tuple[int, ...]
            Shape actually received.
        """
        super().__init__(
            f"{op}: shape mismatch, expected {tuple(expected)} but got {tuple(actual)}."
        )
        self.op = op
        self.expected = tuple(expected)
        self.actual = tuple(actual)


class NumericalDivergenceError(RuntimeError):
    """
    Raised when the training loss becomes NaN.

    The check lives inside `Model.fit` and exists to stop numerically unstable
    hyperparameter or initialization choices at the first bad step.

    Attributes
    ----------
    loss : float
        The offending loss value.
    activations : tuple
        The cached forward activations (input first, prediction last) of the
        failing step, kept for post-mortem inspection.
    """

    def __init__(
        self, loss: float, activations: Optional[Sequence[Any]] = None
    ) -> None:
        super().__init__(f"Loss diverged to {loss!r}; check learning rate and initialization.")
        self.loss = loss
        self.activations = tuple(activations) if activations is not None else ()


class UsageOrderError(RuntimeError):
    """
    Raised when a stateful layer is used out of order.
    """

    def __init__(self, layer: str, message: str) -> None:
        super().__init__(f"{layer}: {message}")
        self.layer = layer


class UnsupportedConfigurationError(ValueError):
    """
    Raised when a requested variant is unknown or cannot operate.

    Attributes
    ----------
    name : str
        The variant or setting that was requested.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
