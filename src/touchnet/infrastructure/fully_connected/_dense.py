"""
Fully connected (affine) layer.

`Dense` computes ``y = x @ W + b`` for batch-major inputs and owns the only
trainable parameters of the engine.

Design Notes
------------
- Inputs must be 2D arrays of shape `(batch, input_size)`.
- Parameters are created eagerly at construction time by an initializer
  (an `IInitializer` instance or a registered initializer name), or taken
  from explicit `weight` / `bias` arrays.
- The layer binds its optimizer lazily: the first `backward` call stores a
  private `optimizer.copy()`, which is then reused for the lifetime of the
  layer. The optimizer passed to later calls only matters for that first
  binding.
- The gradient returned to the previous layer is computed with the weight
  *after* this step's update.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import numpy as np

from ...domain._errors import ShapeMismatchError
from ...domain._initializer import IInitializer
from ...domain._optimizers import IOptimizer
from ...domain._scheduler import IScheduler
from .._layer import Layer
from .._tensor_ops import (
    DTYPE,
    add_bias,
    as_matrix,
    as_vector,
    column_sum,
    require_same_shape,
)
from ..utils.weight_initializer import UniformInitialize, WeightInitializer

logger = logging.getLogger(__name__)


class Dense(Layer):
    """
    Affine layer ``y = x @ W + b``.

    Parameters
    ----------
    input_size : int
        Number of input features per example.
    output_size : int
        Number of output features per example.
    initialize : IInitializer | str | None, optional
        Strategy for the initial weight and bias. A string is looked up in
        the `WeightInitializer` registry. Defaults to ``UniformInitialize()``.
    weight : array-like, optional
        Explicit initial weight of shape `(input_size, output_size)`.
    bias : array-like, optional
        Explicit initial bias of shape `(output_size,)`.

    Attributes
    ----------
    weight : np.ndarray
        Current weight matrix.
    bias : np.ndarray
        Current bias vector.
    """

    def __init__(
        self,
        input_size: int,
        output_size: int,
        initialize: Union[IInitializer, str, None] = None,
        *,
        weight: Optional[Any] = None,
        bias: Optional[Any] = None,
    ) -> None:
        """
        Initialize a Dense layer.

        Raises
        ------
        ValueError
            If a size is not a positive integer.
        ShapeMismatchError
            If an explicit `weight` or `bias` has the wrong shape.
        UnsupportedConfigurationError
            If `initialize` names an unregistered initializer.
        """
        super().__init__()
        if int(input_size) <= 0 or int(output_size) <= 0:
            raise ValueError(
                "input_size and output_size must be positive integers, got "
                f"input_size={input_size}, output_size={output_size}"
            )
        self.input_size = int(input_size)
        self.output_size = int(output_size)

        if weight is None or bias is None:
            init = self._resolve_initializer(initialize)
            if weight is None:
                weight = init.get_weight(self.input_size, self.output_size)
            if bias is None:
                bias = init.get_bias(self.input_size, self.output_size)

        self._weight = self._checked_weight(weight)
        self._bias = self._checked_bias(bias)

        # bound on first backward
        self._optimizer: Optional[IOptimizer] = None

    @staticmethod
    def _resolve_initializer(initialize: Union[IInitializer, str, None]) -> IInitializer:
        if initialize is None:
            return UniformInitialize()
        if isinstance(initialize, str):
            return WeightInitializer.create(initialize)
        return initialize

    def _checked_weight(self, weight: Any) -> np.ndarray:
        w = as_matrix(weight, name="weight")
        require_same_shape(
            "Dense.weight", np.empty((self.input_size, self.output_size)), w
        )
        return w.copy()

    def _checked_bias(self, bias: Any) -> np.ndarray:
        b = as_vector(bias, name="bias")
        require_same_shape("Dense.bias", np.empty((self.output_size,)), b)
        return b.copy()

    @property
    def weight(self) -> np.ndarray:
        return self._weight

    @weight.setter
    def weight(self, value: Any) -> None:
        self._weight = self._checked_weight(value)

    @property
    def bias(self) -> np.ndarray:
        return self._bias

    @bias.setter
    def bias(self, value: Any) -> None:
        self._bias = self._checked_bias(value)

    @property
    def optimizer(self) -> Optional[IOptimizer]:
        """
        The optimizer bound to this layer, or None before the first backward.
        """
        return self._optimizer

    def _check_input(self, op: str, x: Any) -> np.ndarray:
        x = as_matrix(x, name=op)
        if x.shape[1] != self.input_size:
            raise ShapeMismatchError(op, (x.shape[0], self.input_size), x.shape)
        return x

    def forward(self, x: Any) -> np.ndarray:
        """
        Compute ``x @ W + b``.

        Parameters
        ----------
        x : array-like
            Input of shape `(batch, input_size)`.

        Returns
        -------
        np.ndarray
            Output of shape `(batch, output_size)`.

        Raises
        ------
        ShapeMismatchError
            If the input width differs from `input_size`.
        """
        x = self._check_input("Dense.forward", x)
        return add_bias(x @ self._weight, self._bias)

    def backward(
        self,
        x: Any,
        upstream: Any,
        optimizer: IOptimizer,
        scheduler: IScheduler,
        epoch: int,
    ) -> np.ndarray:
        """
        Update the parameters from `upstream` and return the input gradient.

        With batch size ``m`` and ``G = upstream``:

            dW = x.T @ G / m
            db = sum(G, axis=0) / m

        The parameters are replaced by the bound optimizer's output, and the
        returned gradient is ``G @ W.T`` using the updated ``W``.

        Raises
        ------
        ShapeMismatchError
            If `x` or `upstream` do not match the layer's sizes.
        """
        x = self._check_input("Dense.backward", x)
        g = as_matrix(upstream, name="upstream")
        require_same_shape(
            "Dense.backward", np.empty((x.shape[0], self.output_size)), g
        )

        if self._optimizer is None:
            self._optimizer = optimizer.copy()
            logger.debug(
                "Dense(%d, %d) bound optimizer %r",
                self.input_size,
                self.output_size,
                self._optimizer,
            )

        m = x.shape[0]
        grad_w = (x.T @ g) / m
        grad_b = column_sum(g) / m

        self._weight = np.asarray(
            self._optimizer.optimize_w(self._weight, grad_w, scheduler, epoch),
            dtype=DTYPE,
        )
        self._bias = np.asarray(
            self._optimizer.optimize_b(self._bias, grad_b, scheduler, epoch),
            dtype=DTYPE,
        )

        return g @ self._weight.T

    def copy(self) -> "Dense":
        """
        Return a Dense layer with copied parameters and no bound optimizer.
        """
        clone = Dense(
            self.input_size,
            self.output_size,
            weight=self._weight.copy(),
            bias=self._bias.copy(),
        )
        clone.training = self.training
        return clone

    def get_config(self) -> Dict[str, Any]:
        return {"input_size": self.input_size, "output_size": self.output_size}

    def info(self) -> str:
        return f"Dense(input={self.input_size}, output={self.output_size})"
