"""
Constant weight initializers.

This module defines simple constant-valued initializers and registers them
with the global `WeightInitializer` registry.

Provided initializers
---------------------
- ``zero``:
    Every weight and bias element is 0.
- ``one``:
    Every weight and bias element is 1.
- ``constant``:
    Every weight and bias element is a user-supplied value.

These initializers are typically used for testing or deterministic model
setups. Note that a network whose layers all start from the same constant is
symmetric: every unit of a layer receives the same update.
"""

from typing import Any, Dict, Tuple

import numpy as np

from ._base import Initialize, WeightInitializer
from ..._tensor_ops import DTYPE, RandomSource


@WeightInitializer.register_initializer("constant")
class ConstantInitialize(Initialize):
    """
    Initialize every element with `value`.

    Parameters
    ----------
    value : float, optional
        Fill value. Defaults to 0.0.
    """

    def __init__(self, value: float = 0.0, rng: RandomSource = None) -> None:
        super().__init__(rng)
        self.value = float(value)

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        return np.full(shape, self.value, dtype=DTYPE)

    def get_config(self) -> Dict[str, Any]:
        return {"value": self.value}


@WeightInitializer.register_initializer("zero")
class ZeroInitialize(ConstantInitialize):
    """
    Initialize every element with zero.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        super().__init__(0.0, rng)

    def get_config(self) -> Dict[str, Any]:
        return {}


@WeightInitializer.register_initializer("one")
class OneInitialize(ConstantInitialize):
    """
    Initialize every element with one.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        super().__init__(1.0, rng)

    def get_config(self) -> Dict[str, Any]:
        return {}
