"""
Xavier/Glorot weight initializers.

This module provides Xavier (Glorot) initialization strategies and registers
them into the global `WeightInitializer` registry.

Implemented variants
--------------------
- ``xavier_uniform``:
    ``U(-sqrt(6/(fan_in+fan_out)), +sqrt(6/(fan_in+fan_out)))``.
- ``xavier_normal``:
    Normal initialization using ``std = sqrt(2 / (fan_in + fan_out))``.

Notes
-----
- Fan-in and fan-out come straight from the layer sizes: a Dense weight has
  shape ``(fan_in, fan_out)``.
- These initializers suit layers followed by sigmoid-shaped activations.
"""

import math
from typing import Tuple

import numpy as np

from ._base import Initialize, WeightInitializer


@WeightInitializer.register_initializer("xavier_uniform")
class XavierUniformInitialize(Initialize):
    """
    Apply Xavier (Glorot) uniform initialization.

    This initializes weights from a uniform distribution:

        U(-bound, +bound), where bound = sqrt(6 / (fan_in + fan_out))
    """

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        bound = math.sqrt(6.0 / float(fan_in + fan_out))
        return self._rng.uniform(-bound, bound, size=shape)


@WeightInitializer.register_initializer("xavier_normal")
class XavierNormalInitialize(Initialize):
    """
    Apply Xavier (Glorot) normal initialization.

    This initializes weights from a zero-mean normal distribution with
    standard deviation:

        std = sqrt(2 / (fan_in + fan_out))
    """

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        std = math.sqrt(2.0 / float(fan_in + fan_out))
        return self._rng.standard_normal(size=shape) * std
