"""
touchnet: a small feed-forward neural-network training engine.

Layers are trained by hand-written forward and backward passes over NumPy
arrays, with pluggable losses, optimizers, learning-rate schedulers and
weight initializers.

Example
-------
    from touchnet import Adam, Dense, Model, Relu, StepDecayScheduler

    model = Model(
        Dense(2, 8, "he_uniform"),
        Relu(),
        Dense(8, 1, "xavier_uniform"),
        optimizer=Adam(),
        scheduler=StepDecayScheduler(0.01),
    )
    loss = model.fit(x, y, epoch=0)
"""

from .domain import (
    IInitializer,
    ILayer,
    ILoss,
    IOptimizer,
    IScheduler,
    NumericalDivergenceError,
    ShapeMismatchError,
    UnsupportedConfigurationError,
    UsageOrderError,
)
from .infrastructure import *  # noqa: F401,F403
from .infrastructure import __all__ as _infrastructure_all

__version__ = "1.0.0"

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
    *_infrastructure_all,
]
