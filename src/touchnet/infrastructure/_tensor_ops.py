"""
NumPy-backed tensor helpers used by the training engine.

NumPy plays the role of the tensor backend. This module gathers the handful
of operations the engine relies on beyond plain `ndarray` arithmetic, so the
shape rules of the engine are enforced in one place:

- `as_matrix` / `as_vector`: coerce inputs to 2-D / 1-D `float64` arrays.
- `add_bias`: add a `(features,)` bias to every row of a `(batch, features)`
  matrix.
- `column_sum`: reduce a matrix over its batch axis.
- `require_same_shape`: fail fast on operand disagreement.
- `as_generator`: random-source normalization.
- `first_rows`: short diagnostics for failing steps.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

import numpy as np

from ..domain._errors import ShapeMismatchError

DTYPE = np.float64

RandomSource = Union[None, int, np.random.Generator]


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    """
    Normalize a random source into a `numpy.random.Generator`.

    Parameters
    ----------
    rng : None | int | numpy.random.Generator
        An existing generator is returned as-is (shared stream); an int seeds
        a new generator; `None` creates an unseeded one.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def as_matrix(x: Any, *, name: str = "input") -> np.ndarray:
    """
    Return `x` as a 2-D `float64` array.

    Raises
    ------
    ValueError
        If `x` is not two-dimensional.
    """
    arr = np.asarray(x, dtype=DTYPE)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be 2D (batch, features), got shape {arr.shape}")
    return arr


def as_vector(x: Any, *, name: str = "input") -> np.ndarray:
    """
    Return `x` as a 1-D `float64` array.
    """
    arr = np.asarray(x, dtype=DTYPE)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D (features,), got shape {arr.shape}")
    return arr


def require_same_shape(op: str, expected: np.ndarray, actual: np.ndarray) -> None:
    """
    Raise `ShapeMismatchError` unless both arrays have the same shape.
    """
    if expected.shape != actual.shape:
        raise ShapeMismatchError(op, expected.shape, actual.shape)


def add_bias(x: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Add bias vector `b` to each row of `x`.

    Parameters
    ----------
    x : np.ndarray
        Matrix of shape `(batch, features)`.
    b : np.ndarray
        Vector of shape `(features,)`.

    Returns
    -------
    np.ndarray
        New matrix `x + b` broadcast over the batch axis.
    """
    if b.ndim != 1 or x.shape[1] != b.shape[0]:
        raise ShapeMismatchError("add_bias", (x.shape[1],), b.shape)
    return x + b[np.newaxis, :]


def column_sum(x: np.ndarray) -> np.ndarray:
    """
    Sum a `(batch, features)` matrix over the batch axis.
    """
    return x.sum(axis=0)


def first_rows(arrays: List[np.ndarray], count: Optional[int] = 1) -> List[Any]:
    """
    Return the first `count` rows of every array as nested lists.

    Used to keep diagnostics for failing steps short and printable.
    """
    return [np.asarray(a)[:count].tolist() for a in arrays]
