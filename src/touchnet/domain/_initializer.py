"""
Domain-level weight initializer contract.

Initializers produce the starting weight matrix and bias vector of a fully
connected layer from its fan-in and fan-out. They are pure functions of shape
apart from the draws they take from their random source.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IInitializer(Protocol):
    """
    Weight initializer interface contract.

    Required methods
    ----------------
    - `get_weight(fan_in, fan_out)` returns an array of shape `(fan_in, fan_out)`.
    - `get_bias(fan_in, fan_out)` returns an array of shape `(fan_out,)`.
    """

    def get_weight(self, fan_in: int, fan_out: int) -> Any:
        """
        Return an initial weight matrix of shape `(fan_in, fan_out)`.
        """
        ...

    def get_bias(self, fan_in: int, fan_out: int) -> Any:
        """
        Return an initial bias vector of shape `(fan_out,)`.
        """
        ...
