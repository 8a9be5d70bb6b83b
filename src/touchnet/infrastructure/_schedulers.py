"""
Learning-rate schedulers.

Both schedulers are pure functions of the epoch index and carry only their
two hyperparameters, so one instance may be shared by every layer of a model
and by its copies.

- `StepDecayScheduler`:   ``lr = lr0 / (1 + epoch * drop_rate)``
- `ExponentialScheduler`: ``lr = lr0 * drop_rate ** epoch``

Besides learning rates, callers also use these schedules for other decaying
quantities such as an epsilon-greedy exploration rate.
"""

from __future__ import annotations

from typing import Any, Dict


def _check_epoch(epoch: int) -> int:
    epoch = int(epoch)
    if epoch < 0:
        raise ValueError(f"epoch must be >= 0, got {epoch}")
    return epoch


class _Scheduler:
    """
    Shared hyperparameter handling for the built-in schedulers.
    """

    def __init__(self, base_learning_rate: float, drop_rate: float = 0.99) -> None:
        self.base_learning_rate = float(base_learning_rate)
        self.drop_rate = float(drop_rate)

        if self.base_learning_rate <= 0.0:
            raise ValueError(
                f"base_learning_rate must be > 0, got {self.base_learning_rate}"
            )
        if self.drop_rate <= 0.0:
            raise ValueError(f"drop_rate must be > 0, got {self.drop_rate}")

    def get_learning_rate(self, epoch: int) -> float:
        raise NotImplementedError

    def get_config(self) -> Dict[str, Any]:
        return {
            "base_learning_rate": self.base_learning_rate,
            "drop_rate": self.drop_rate,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_learning_rate={self.base_learning_rate}, "
            f"drop_rate={self.drop_rate})"
        )


class StepDecayScheduler(_Scheduler):
    """
    Inverse-time decay.

        lr(epoch) = base_learning_rate / (1 + epoch * drop_rate)

    Parameters
    ----------
    base_learning_rate : float
        Learning rate at epoch 0. Must be > 0.
    drop_rate : float, optional
        Decay speed. Must be > 0. Defaults to 0.99.
    """

    def get_learning_rate(self, epoch: int) -> float:
        epoch = _check_epoch(epoch)
        return self.base_learning_rate / (1.0 + epoch * self.drop_rate)


class ExponentialScheduler(_Scheduler):
    """
    Exponential decay.

        lr(epoch) = base_learning_rate * drop_rate ** epoch

    A `drop_rate` in (0, 1) decays toward zero; values just below 1 give a
    slow decay (e.g. ``1 - 1e-2``).

    Parameters
    ----------
    base_learning_rate : float
        Learning rate at epoch 0. Must be > 0.
    drop_rate : float, optional
        Per-epoch factor in (0, 1]. Defaults to 0.99.
    """

    def __init__(self, base_learning_rate: float, drop_rate: float = 0.99) -> None:
        super().__init__(base_learning_rate, drop_rate)
        if self.drop_rate > 1.0:
            raise ValueError(
                f"drop_rate must be <= 1 for exponential decay, got {self.drop_rate}"
            )

    def get_learning_rate(self, epoch: int) -> float:
        epoch = _check_epoch(epoch)
        return self.base_learning_rate * (self.drop_rate**epoch)
