"""
Backend-agnostic contracts and errors of the touchnet training engine.
"""

from ._errors import (
    NumericalDivergenceError,
    ShapeMismatchError,
    UnsupportedConfigurationError,
    UsageOrderError,
)
from ._initializer import IInitializer
from ._layer import ILayer
from ._loss import ILoss
from ._optimizers import IOptimizer
from ._scheduler import IScheduler

__all__ = [
    IInitializer.__name__,
    ILayer.__name__,
    ILoss.__name__,
    IOptimizer.__name__,
    IScheduler.__name__,
    NumericalDivergenceError.__name__,
    ShapeMismatchError.__name__,
    UnsupportedConfigurationError.__name__,
    UsageOrderError.__name__,
]
