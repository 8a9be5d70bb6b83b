"""
Weight initialization public API.

This module aggregates and exposes all supported weight initialization
strategies (constant, uniform/normal, Xavier and He) and registers them into
the global `WeightInitializer` registry via import side effects.

Importing this module ensures that all built-in initializers are available
for lookup and dispatch through `WeightInitializer`.
"""

from ._base import Initialize, WeightInitializer
from ._constants import ConstantInitialize, OneInitialize, ZeroInitialize
from ._distributions import NormalInitialize, UniformInitialize
from ._kaiming import HeNormalInitialize, HeUniformInitialize
from ._xavier import XavierNormalInitialize, XavierUniformInitialize

__all__ = [
    Initialize.__name__,
    WeightInitializer.__name__,
    ZeroInitialize.__name__,
    OneInitialize.__name__,
    ConstantInitialize.__name__,
    UniformInitialize.__name__,
    NormalInitialize.__name__,
    XavierUniformInitialize.__name__,
    XavierNormalInitialize.__name__,
    HeUniformInitialize.__name__,
    HeNormalInitialize.__name__,
]
