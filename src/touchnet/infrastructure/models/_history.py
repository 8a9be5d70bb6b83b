"""
Training history record.

`History` is what `Model.train` returns: one value per epoch for every
tracked quantity (training loss, validation loss, metrics), in epoch order.
It holds plain Python floats only and performs no aggregation of its own.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Union


Number = Union[int, float]


@dataclass
class History:
    """
    Per-epoch record of training quantities.

    Attributes
    ----------
    history : Dict[str, List[float]]
        Mapping from quantity name (e.g. ``"loss"``, ``"val_loss"``,
        ``"categorical_accuracy"``) to its per-epoch values.
    epoch : List[int]
        Epoch indices matching the entries of every list in `history`.
    """

    history: Dict[str, List[float]] = field(default_factory=dict)
    epoch: List[int] = field(default_factory=list)

    def append_epoch(self, epoch_idx: int, logs: Mapping[str, Number]) -> None:
        """
        Record the values logged for one finished epoch.

        Values are coerced to `float`. A name seen for the first time starts
        a new list.
        """
        self.epoch.append(int(epoch_idx))
        for name, value in logs.items():
            self.history.setdefault(name, []).append(float(value))

    def last(self) -> Dict[str, float]:
        """
        Return the most recent value of every recorded quantity.
        """
        return {name: values[-1] for name, values in self.history.items() if values}

    def __len__(self) -> int:
        return len(self.epoch)
