"""
Fixed-parameter random initializers.

- ``uniform``: ``U(low, high)``, default ``U(0, 1)``.
- ``normal``: ``N(mean, std^2)``, default ``N(0, 1)``.

Unlike the Xavier and He families, the distribution parameters here do not
depend on the layer's fan-in / fan-out.
"""

from typing import Any, Dict, Tuple

import numpy as np

from ._base import Initialize, WeightInitializer
from ..._tensor_ops import RandomSource


@WeightInitializer.register_initializer("uniform")
class UniformInitialize(Initialize):
    """
    Draw every element from ``U(low, high)``.
    """

    def __init__(
        self, low: float = 0.0, high: float = 1.0, rng: RandomSource = None
    ) -> None:
        super().__init__(rng)
        self.low = float(low)
        self.high = float(high)
        if self.high < self.low:
            raise ValueError(f"high must be >= low, got low={self.low}, high={self.high}")

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        return self._rng.uniform(self.low, self.high, size=shape)

    def get_config(self) -> Dict[str, Any]:
        return {"low": self.low, "high": self.high}


@WeightInitializer.register_initializer("normal")
class NormalInitialize(Initialize):
    """
    Draw every element from ``N(mean, std^2)``.
    """

    def __init__(
        self, mean: float = 0.0, std: float = 1.0, rng: RandomSource = None
    ) -> None:
        super().__init__(rng)
        self.mean = float(mean)
        self.std = float(std)
        if self.std < 0.0:
            raise ValueError(f"std must be >= 0, got {self.std}")

    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        return self._rng.normal(self.mean, self.std, size=shape)

    def get_config(self) -> Dict[str, Any]:
        return {"mean": self.mean, "std": self.std}
