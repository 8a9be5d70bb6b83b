"""
Domain-level learning-rate scheduler contract.

A scheduler maps a non-negative epoch index to a learning rate. It must be a
pure function of the epoch so a single instance can be shared by every layer
of a model and by copies of that model.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IScheduler(Protocol):
    """
    Learning-rate scheduler interface contract.
    """

    def get_learning_rate(self, epoch: int) -> float:
        """
        Return the learning rate to use at `epoch`.

        Parameters
        ----------
        epoch : int
            Zero-based training epoch. Must be non-negative.

        Returns
        -------
        float
            A positive learning rate.
        """
        ...
