from ._history import History
from ._metrics import categorical_accuracy
from ._model import Model

__all__ = [
    Model.__name__,
    History.__name__,
    categorical_accuracy.__name__,
]
