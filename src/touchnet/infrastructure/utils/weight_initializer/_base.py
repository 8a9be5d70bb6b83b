"""
Weight initializer base class, registry and dispatch utilities.

This module defines the `Initialize` base class shared by every concrete
initialization strategy, and the `WeightInitializer` registry used to look
strategies up by name (e.g. when a `Dense` layer is configured with
``initialize="he_uniform"``).

Design
------
- Concrete strategies subclass `Initialize` and implement `_sample`, which
  draws an array of a requested shape given the layer's fan-in / fan-out.
- The weight matrix and the bias vector are drawn from the *same*
  distribution with the same parameters; only the shape differs.
- Each initializer owns a `numpy.random.Generator`. Passing the same
  generator to several initializers makes them share one stream; passing an
  int seed makes a layer's initial values reproducible.
- Strategies are registered by string name via a decorator-based registry.

Usage example
-------------
Registering an initializer:

    @WeightInitializer.register_initializer("he_uniform")
    class HeUniformInitialize(Initialize):
        ...

Creating one by name:

    init = WeightInitializer.create("he_uniform", rng=0)
    w = init.get_weight(784, 40)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Tuple, Type, TypeVar

import numpy as np

from ....domain._errors import UnsupportedConfigurationError
from ..._tensor_ops import DTYPE, RandomSource, as_generator

T = TypeVar("T", bound=Type["Initialize"])


def _check_fans(fan_in: int, fan_out: int) -> Tuple[int, int]:
    fan_in, fan_out = int(fan_in), int(fan_out)
    if fan_in <= 0 or fan_out <= 0:
        raise ValueError(
            f"fan_in and fan_out must be positive, got fan_in={fan_in}, fan_out={fan_out}"
        )
    return fan_in, fan_out


class Initialize(ABC):
    """
    Base class for weight initializers.

    Parameters
    ----------
    rng : None | int | numpy.random.Generator, optional
        Random source for the draws. Ignored by the constant initializers.
    """

    def __init__(self, rng: RandomSource = None) -> None:
        self._rng = as_generator(rng)

    @abstractmethod
    def _sample(self, shape: Tuple[int, ...], fan_in: int, fan_out: int) -> np.ndarray:
        """
        Draw an array of `shape` for a layer with the given fans.
        """
        raise NotImplementedError

    def get_weight(self, fan_in: int, fan_out: int) -> np.ndarray:
        """
        Return an initial weight matrix of shape `(fan_in, fan_out)`.
        """
        fan_in, fan_out = _check_fans(fan_in, fan_out)
        return np.asarray(self._sample((fan_in, fan_out), fan_in, fan_out), dtype=DTYPE)

    def get_bias(self, fan_in: int, fan_out: int) -> np.ndarray:
        """
        Return an initial bias vector of shape `(fan_out,)`.
        """
        fan_in, fan_out = _check_fans(fan_in, fan_out)
        return np.asarray(self._sample((fan_out,), fan_in, fan_out), dtype=DTYPE)

    def get_config(self) -> Dict[str, Any]:
        """Return the distribution parameters of this initializer."""
        return {}

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.get_config().items())
        return f"{type(self).__name__}({args})"


class WeightInitializer:
    """
    Registry-backed initializer dispatcher.

    Usage
    -----
    Register:
        @WeightInitializer.register_initializer("xavier_uniform")
        class XavierUniformInitialize(Initialize): ...

    Dispatch:
        init = WeightInitializer("xavier_uniform", rng=7)
        init.get_weight(3, 4)

    Notes
    -----
    - Initializer classes are stored by string name in a class-level registry.
    - Keyword arguments given at dispatch time are forwarded to the
      registered class constructor.
    """

    INITIALIZERS: ClassVar[Dict[str, Type[Initialize]]] = {}

    def __init__(self, initializer_name: str, **kwargs: Any) -> None:
        self.name = initializer_name
        self._initializer: Initialize = self.create(initializer_name, **kwargs)

    @classmethod
    def register_initializer(
        cls, name: str, *, overwrite: bool = False
    ) -> Callable[[T], T]:
        """
        Decorator to register an initializer class under `name`.

        Parameters
        ----------
        name:
            Registry key used to retrieve the initializer later.
        overwrite:
            If False (default), raises if `name` is already registered.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Initializer name must be a non-empty string")

        def decorator(klass: T) -> T:
            if not overwrite and name in cls.INITIALIZERS:
                raise ValueError(f"Initializer already registered: {name!r}")
            cls.INITIALIZERS[name] = klass
            return klass

        return decorator

    @classmethod
    def available(cls) -> tuple[str, ...]:
        """Return registered initializer names (sorted)."""
        return tuple(sorted(cls.INITIALIZERS))

    @classmethod
    def get(cls, name: str) -> Type[Initialize]:
        """
        Get a registered initializer class by name.

        Raises
        ------
        UnsupportedConfigurationError
            If no initializer is registered under `name`.
        """
        try:
            return cls.INITIALIZERS[name]
        except KeyError as e:
            available = ", ".join(sorted(cls.INITIALIZERS)) or "<none>"
            raise UnsupportedConfigurationError(
                name,
                f"Unsupported initializer name: {name!r}. Available: {available}",
            ) from e

    @classmethod
    def create(cls, name: str, **kwargs: Any) -> Initialize:
        """Instantiate the initializer registered under `name`."""
        return cls.get(name)(**kwargs)

    def get_weight(self, fan_in: int, fan_out: int) -> np.ndarray:
        return self._initializer.get_weight(fan_in, fan_out)

    def get_bias(self, fan_in: int, fan_out: int) -> np.ndarray:
        return self._initializer.get_bias(fan_in, fan_out)

    def get_config(self) -> Dict[str, Any]:
        return {"name": self.name, **self._initializer.get_config()}
