"""Prediction and correction steps of Gaussian filters and the filter joining them."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from bayesfilters.filtering_algorithm import FilteringAlgorithm
from bayesfilters.gaussian_mixture import GaussianMixture
from bayesfilters.interfaces import Skippable


class GaussianPrediction(Skippable):
    """Prediction step turning a Gaussian belief into a predicted one.

    The state model returned by :meth:`state_model` must provide
    ``skip(what_step, status)``, ``is_skipping()`` and ``exogenous_model()``.
    """

    _skip = False

    def predict(self, prev_state: GaussianMixture) -> GaussianMixture:
        """Return the predicted belief, or a copy of ``prev_state`` when skipping."""
        if self._skip:
            return prev_state.copy()
        return self.predict_step(prev_state)

    def skip(self, what_step, status):
        """Skip ``"prediction"`` as a whole, or only its ``"state"`` or ``"exogenous"`` part."""
        model = self.state_model()
        if what_step == "prediction":
            self._skip = bool(status)
            model.skip("state", status)
            model.skip("exogenous", status)
        elif what_step in ("state", "exogenous"):
            model.skip(what_step, status)
            self._skip = bool(model.is_skipping() and model.exogenous_model().is_skipping())
        else:
            raise ValueError(f"unknown prediction step {what_step!r}")

    def is_skipping(self) -> bool:
        return self._skip

    @abstractmethod
    def state_model(self):
        """The state model used by this prediction."""

    @abstractmethod
    def predict_step(self, prev_state: GaussianMixture) -> GaussianMixture:
        """Compute the predicted belief from ``prev_state``."""


class GaussianCorrection(ABC):
    """Correction step updating a predicted Gaussian belief with measurements.

    The measurement model returned by :meth:`measurement_model` must provide
    ``freeze(data)``.
    """

    _skip = False

    def correct(self, pred_state: GaussianMixture) -> GaussianMixture:
        """Return the corrected belief, or a copy of ``pred_state`` when skipping."""
        if self._skip:
            return pred_state.copy()
        return self.correct_step(pred_state)

    def skip(self, status):
        """Enable or disable the correction."""
        self._skip = bool(status)

    @property
    def skipping(self) -> bool:
        """Whether the correction is currently skipped."""
        return self._skip

    def freeze_measurements(self, data=None):
        """Ask the measurement model to freeze the measurements to be used next."""
        return self.measurement_model().freeze(data)

    def likelihood(self) -> np.ndarray:
        """Likelihood of the last correction; only some corrections provide it."""
        raise RuntimeError(f"{type(self).__name__} does not provide a likelihood")

    @abstractmethod
    def measurement_model(self):
        """The measurement model used by this correction."""

    @abstractmethod
    def correct_step(self, pred_state: GaussianMixture) -> GaussianMixture:
        """Compute the corrected belief from ``pred_state``."""


class GaussianFilter(FilteringAlgorithm):
    """A filtering algorithm made of a Gaussian prediction and a Gaussian correction."""

    def __init__(self, prediction: GaussianPrediction, correction: GaussianCorrection):
        super().__init__()
        self._prediction = prediction
        self._correction = correction

    @property
    def prediction(self) -> GaussianPrediction:
        return self._prediction

    @property
    def correction(self) -> GaussianCorrection:
        return self._correction

    def skip(self, what_step, status):
        """Skip ``"prediction"``, ``"state"``, ``"exogenous"``, ``"correction"`` or ``"all"``."""
        if what_step in ("prediction", "state", "exogenous"):
            self._prediction.skip(what_step, status)
        elif what_step == "correction":
            self._correction.skip(status)
        elif what_step == "all":
            self._prediction.skip("prediction", status)
            self._correction.skip(status)
        else:
            raise ValueError(f"unknown filtering step {what_step!r}")