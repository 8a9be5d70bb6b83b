"""
Evaluation metrics for `Model.train`.

A metric is any callable ``metric(y_true, y_pred) -> float``. Its
``__name__`` is used as the key under which `Model.train` records it.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .._tensor_ops import as_matrix, require_same_shape


def categorical_accuracy(y_true: Any, y_pred: Any) -> float:
    """
    Fraction of rows whose predicted class matches the target class.

    The class of a row is the index of its largest entry, so targets may be
    one-hot vectors and predictions scores or probabilities.

    Raises
    ------
    ShapeMismatchError
        If `y_true` and `y_pred` differ in shape.
    """
    y_true = as_matrix(y_true, name="y_true")
    y_pred = as_matrix(y_pred, name="y_pred")
    require_same_shape("categorical_accuracy", y_true, y_pred)
    hits = np.argmax(y_true, axis=1) == np.argmax(y_pred, axis=1)
    return float(np.mean(hits))
