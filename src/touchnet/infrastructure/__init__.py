"""
NumPy-backed implementations of the touchnet contracts.
"""

from ._activations import LeakyRelu, Relu, Sigmoid, Softmax, SoftPlus
from ._layer import Layer
from ._losses import CrossEntropy, HuberLoss, MAE, MSE
from ._schedulers import ExponentialScheduler, StepDecayScheduler
from .fully_connected import Dense
from .layers import Dropout
from .models import History, Model, categorical_accuracy
from .optimizers import Adam, GradientDescent, Momentum, Optimizer
from .utils.weight_initializer import (
    ConstantInitialize,
    HeNormalInitialize,
    HeUniformInitialize,
    Initialize,
    NormalInitialize,
    OneInitialize,
    UniformInitialize,
    WeightInitializer,
    XavierNormalInitialize,
    XavierUniformInitialize,
    ZeroInitialize,
)

__all__ = [
    Layer.__name__,
    Dense.__name__,
    Relu.__name__,
    LeakyRelu.__name__,
    Sigmoid.__name__,
    SoftPlus.__name__,
    Softmax.__name__,
    Dropout.__name__,
    MSE.__name__,
    MAE.__name__,
    HuberLoss.__name__,
    CrossEntropy.__name__,
    Optimizer.__name__,
    GradientDescent.__name__,
    Momentum.__name__,
    Adam.__name__,
    StepDecayScheduler.__name__,
    ExponentialScheduler.__name__,
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
    Model.__name__,
    History.__name__,
    categorical_accuracy.__name__,
]
