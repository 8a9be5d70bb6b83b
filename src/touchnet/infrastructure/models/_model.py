"""
High-level model orchestration.

This module defines `Model`, an ordered stack of layers trained with one
loss, one scheduler and one optimizer configuration. It drives the
hand-written forward/backward passes of the layers:

- `fit` runs one forward pass over a batch, scores it, and propagates the
  loss gradient back through the layers in reverse order, letting every
  trainable layer update its parameters on the way.
- `fit_with_batch_size` shuffles a dataset, fits it chunk by chunk and
  reports the loss of the updated model on the whole dataset.
- `predict`, `predict_one` and `evaluate` are side-effect free inference
  helpers.
- `train` is a small epoch driver on top of `fit_with_batch_size` that
  records a `History`.

Sharing rules
-------------
The loss and scheduler are stateless and may be shared between models. The
optimizer given to a model is only a configuration: each Dense layer binds
its own copy on its first backward pass, so optimizer state never leaks
between layers or between a model and its copies.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ...domain._errors import NumericalDivergenceError, ShapeMismatchError
from ...domain._layer import ILayer
from ...domain._loss import ILoss
from ...domain._optimizers import IOptimizer
from ...domain._scheduler import IScheduler
from .._losses import MSE
from .._schedulers import StepDecayScheduler
from .._tensor_ops import RandomSource, as_generator, as_matrix, as_vector, first_rows
from ..optimizers import GradientDescent
from ._history import History

logger = logging.getLogger(__name__)

Metric = Callable[[Any, Any], float]


def _metric_name(metric: Metric) -> str:
    return getattr(metric, "__name__", type(metric).__name__)


class Model:
    """
    Feed-forward network made of an ordered sequence of layers.

    Parameters
    ----------
    *layers : ILayer
        Layers applied in order during the forward pass. At least one is
        required.
    loss : ILoss, optional
        Training objective. Defaults to ``MSE()``.
    optimizer : IOptimizer, optional
        Optimizer configuration handed to every layer's `backward`.
        Defaults to ``GradientDescent()``.
    scheduler : IScheduler, optional
        Learning-rate schedule. Defaults to ``StepDecayScheduler(0.01)``.
    rng : None | int | numpy.random.Generator, optional
        Random source for shuffling in `fit_with_batch_size`.

    Notes
    -----
    - Every method accepts batch-major 2D inputs `(batch, features)`.
    - Training methods switch the layers to training mode; inference methods
      run in evaluation mode and restore the previous mode afterwards.
    """

    def __init__(
        self,
        *layers: ILayer,
        loss: Optional[ILoss] = None,
        optimizer: Optional[IOptimizer] = None,
        scheduler: Optional[IScheduler] = None,
        rng: RandomSource = None,
    ) -> None:
        if not layers:
            raise ValueError("Model requires at least one layer")
        self._layers: Tuple[ILayer, ...] = tuple(layers)
        self.loss: ILoss = loss if loss is not None else MSE()
        self.optimizer: IOptimizer = (
            optimizer if optimizer is not None else GradientDescent()
        )
        self.scheduler: IScheduler = (
            scheduler if scheduler is not None else StepDecayScheduler(0.01)
        )
        self._rng = as_generator(rng)

    @property
    def layers(self) -> Tuple[ILayer, ...]:
        return self._layers

    # ------------------------------------------------------------------
    # Mode handling
    # ------------------------------------------------------------------
    def _modes(self) -> List[Optional[bool]]:
        return [getattr(layer, "training", None) for layer in self._layers]

    def _set_training(self, mode: bool) -> None:
        for layer in self._layers:
            switch = getattr(layer, "train", None)
            if callable(switch):
                switch(mode)

    def _restore_modes(self, modes: List[Optional[bool]]) -> None:
        for layer, mode in zip(self._layers, modes):
            switch = getattr(layer, "train", None)
            if mode is not None and callable(switch):
                switch(mode)

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def _forward_all(self, x: np.ndarray) -> List[np.ndarray]:
        activations = [x]
        for layer in self._layers:
            activations.append(layer.forward(activations[-1]))
        return activations

    def fit(self, x: Any, y: Any, epoch: int) -> float:
        """
        Run one training step on a batch and return its loss.

        The returned loss is measured on the forward pass of this call,
        before any parameter is updated.

        Parameters
        ----------
        x : array-like
            Inputs of shape `(batch, input_features)`.
        y : array-like
            Targets of shape `(batch, output_features)`.
        epoch : int
            Epoch index handed to the scheduler through every layer.

        Raises
        ------
        ShapeMismatchError
            If shapes do not line up through the layers or with `y`.
        NumericalDivergenceError
            If the loss is NaN. No parameter is updated in that case.
        """
        x = as_matrix(x, name="x")
        y = as_matrix(y, name="y")
        self._set_training(True)

        activations = self._forward_all(x)
        y_hat = activations[-1]
        loss = float(self.loss.loss(y, y_hat))

        if np.isnan(loss):
            logger.error(
                "loss is NaN at epoch %d; first rows of activations: %s",
                epoch,
                first_rows(activations),
            )
            raise NumericalDivergenceError(loss, activations)

        grad = self.loss.backward(y, y_hat)
        for i in range(len(self._layers) - 1, -1, -1):
            grad = self._layers[i].backward(
                activations[i], grad, self.optimizer, self.scheduler, epoch
            )
        return loss

    def fit_with_batch_size(
        self, x: Any, y: Any, epoch: int, batch_size: int = 100
    ) -> float:
        """
        Fit a shuffled dataset in mini-batches and return the resulting loss.

        Rows of `x` and `y` are shuffled together with the model's random
        generator and split into consecutive chunks of `batch_size` rows (the
        last chunk may be smaller); `fit` is called on each chunk.

        Returns
        -------
        float
            ``evaluate(x, y)`` on the full, unshuffled data after all
            updates.

        Raises
        ------
        ValueError
            If `batch_size` < 1 or the dataset has no rows.
        ShapeMismatchError
            If `x` and `y` have different numbers of rows.
        """
        if int(batch_size) < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        batch_size = int(batch_size)

        x = as_matrix(x, name="x")
        y = as_matrix(y, name="y")
        if x.shape[0] != y.shape[0]:
            raise ShapeMismatchError(
                "Model.fit_with_batch_size", (x.shape[0],), (y.shape[0],)
            )
        if x.shape[0] == 0:
            raise ValueError("fit_with_batch_size requires at least one row")

        order = self._rng.permutation(x.shape[0])
        x_shuffled = x[order]
        y_shuffled = y[order]

        n_batches = 0
        for start in range(0, x.shape[0], batch_size):
            batch_loss = self.fit(
                x_shuffled[start : start + batch_size],
                y_shuffled[start : start + batch_size],
                epoch,
            )
            n_batches += 1
            logger.debug("epoch %d batch %d loss %.6f", epoch, n_batches, batch_loss)

        return self.evaluate(x, y)

    def train(
        self,
        x: Any,
        y: Any,
        epochs: int,
        batch_size: int = 100,
        validation_data: Optional[Tuple[Any, Any]] = None,
        metrics: Optional[Sequence[Metric]] = None,
        verbose: int = 1,
    ) -> History:
        """
        Train for a number of epochs and record the results.

        Each epoch calls `fit_with_batch_size` with the epoch index, so the
        scheduler sees epochs ``0 .. epochs - 1``. Recorded per epoch:

        - ``loss``: the value returned by `fit_with_batch_size`
        - ``<metric>``: every metric evaluated on ``(y, predict(x))``
        - ``val_loss`` and ``val_<metric>`` when `validation_data` is given

        Parameters
        ----------
        verbose : int, optional
            If non-zero, each epoch summary is logged at INFO level.

        Returns
        -------
        History
            The per-epoch record.

        Raises
        ------
        ValueError
            If `epochs` < 1 or `batch_size` < 1.
        """
        if int(epochs) < 1:
            raise ValueError(f"epochs must be >= 1, got {epochs}")
        metrics = list(metrics or [])
        hist = History()

        for epoch_idx in range(int(epochs)):
            logs: Dict[str, float] = {
                "loss": self.fit_with_batch_size(x, y, epoch_idx, batch_size)
            }
            if metrics:
                y_pred = self.predict(x)
                for metric in metrics:
                    logs[_metric_name(metric)] = float(metric(y, y_pred))

            if validation_data is not None:
                x_val, y_val = validation_data
                y_val_pred = self.predict(x_val)
                logs["val_loss"] = float(self.loss.loss(as_matrix(y_val), y_val_pred))
                for metric in metrics:
                    logs[f"val_{_metric_name(metric)}"] = float(
                        metric(y_val, y_val_pred)
                    )

            hist.append_epoch(epoch_idx, logs)

            if verbose:
                parts = [f"Epoch {epoch_idx + 1}/{epochs}"]
                for k, v in logs.items():
                    parts.append(f"{k}: {v:.6f}")
                logger.info(" - ".join(parts))

        return hist

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def predict(self, x: Any) -> np.ndarray:
        """
        Run a forward pass in evaluation mode.

        Layer modes are restored afterwards, and no parameter or optimizer
        state is touched.
        """
        x = as_matrix(x, name="x")
        modes = self._modes()
        self._set_training(False)
        try:
            out = x
            for layer in self._layers:
                out = layer.forward(out)
            return out
        finally:
            self._restore_modes(modes)

    def predict_one(self, v: Any) -> np.ndarray:
        """
        Predict a single example given as a 1D feature vector.

        Returns
        -------
        np.ndarray
            1D output vector.
        """
        v = as_vector(v, name="v")
        return self.predict(v[np.newaxis, :])[0]

    def evaluate(self, x: Any, y: Any) -> float:
        """
        Return ``loss(y, predict(x))``.
        """
        y = as_matrix(y, name="y")
        return float(self.loss.loss(y, self.predict(x)))

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------
    def copy(self) -> "Model":
        """
        Return an independent model with identical predictions.

        Layer parameters are deep-copied with no bound optimizer; the loss
        and scheduler are shared, and the optimizer configuration is copied.
        The copy gets a random stream derived from this model's generator.
        """
        return Model(
            *(layer.copy() for layer in self._layers),
            loss=self.loss,
            optimizer=self.optimizer.copy(),
            scheduler=self.scheduler,
            rng=self._rng.spawn(1)[0],
        )

    def log(self) -> str:
        """
        Log and return a description of the layers, one per line.
        """
        text = "model info:\n" + "\n".join(layer.info() for layer in self._layers)
        logger.info("%s", text)
        return text

    def __repr__(self) -> str:
        inner = ", ".join(layer.info() for layer in self._layers)
        return f"Model({inner})"
