"""
Built-in optimizers.
"""

from ._base import BIAS, WEIGHT, Optimizer
from ._adam import Adam
from ._gradient_descent import GradientDescent
from ._momentum import Momentum

__all__ = [
    Optimizer.__name__,
    GradientDescent.__name__,
    Momentum.__name__,
    Adam.__name__,
    "WEIGHT",
    "BIAS",
]
