"""
He (Kaiming) weight initializers.

This module provides He initialization strategies and registers them into the
global `WeightInitializer` registry.

Implemented variants
--------------------
- ``he_uniform``:
    ``U(-sqrt(6/fan_in), +sqrt(6/fan_in))``.
- ``he_normal``:
    Normal initialization using ``std = sqrt(2 / fan_in)``.

Notes
-----
- Only the fan-in enters the scale; these initializers are intended for
  layers followed by ReLU-family activations.
"""

import math
from typing import Tuple

import numpy as np

from ._base import Initialize, WeightInitializer


@WeightInitializer.register_initializer("he_uniform")
class HeUniformInitialize(Initialize):
    """
    Apply He uniform initialization.

        U(-bound, +bound), where bound = sqrt(6 / fan_in)
    """

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        bound = math.sqrt(6.0 / float(fan_in))
        return self._rng.uniform(-bound, bound, size=shape)


@WeightInitializer.register_initializer("he_normal")
class HeNormalInitialize(Initialize):
    """
    Apply He normal initialization.

    This is the canonical He initialization derived for ReLU:

        std = sqrt(2 / fan_in)
    """

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        std = math.sqrt(2.0 / float(fan_in))
        return self._rng.standard_normal(size=shape) * std
