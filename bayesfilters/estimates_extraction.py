"""Point estimates extracted from a weighted particle set."""

from __future__ import annotations

import enum
import sys

import numpy as np

from bayesfilters.directional_statistics import directional_mean
from bayesfilters.history_buffer import HistoryBuffer

_EPS = sys.float_info.min


class ExtractionMethod(enum.Enum):
    """How a single state estimate is obtained from particles and weights.

    The plain methods (``mean``, ``mode``, ``map``) use the current particle
    set only. The ``s``, ``w`` and ``e`` prefixed variants average the current
    estimate with past ones using simple, linearly weighted or exponentially
    weighted moving averages.
    """

    MEAN = "mean"
    SMEAN = "smean"
    WMEAN = "wmean"
    EMEAN = "emean"
    MODE = "mode"
    SMODE = "smode"
    WMODE = "wmode"
    EMODE = "emode"
    MAP = "map"
    SMAP = "smap"
    WMAP = "wmap"
    EMAP = "emap"


class _Statistic(enum.Enum):
    MEAN = "mean"
    MODE = "mode"
    MAP = "map"


class _Averaging(enum.Enum):
    NONE = "none"
    SIMPLE = "simple"
    WEIGHTED = "weighted"
    EXPONENTIAL = "exponential"


_BREAKDOWN = {
    ExtractionMethod.MEAN: (_Statistic.MEAN, _Averaging.NONE),
    ExtractionMethod.SMEAN: (_Statistic.MEAN, _Averaging.SIMPLE),
    ExtractionMethod.WMEAN: (_Statistic.MEAN, _Averaging.WEIGHTED),
    ExtractionMethod.EMEAN: (_Statistic.MEAN, _Averaging.EXPONENTIAL),
    ExtractionMethod.MODE: (_Statistic.MODE, _Averaging.NONE),
    ExtractionMethod.SMODE: (_Statistic.MODE, _Averaging.SIMPLE),
    ExtractionMethod.WMODE: (_Statistic.MODE, _Averaging.WEIGHTED),
    ExtractionMethod.EMODE: (_Statistic.MODE, _Averaging.EXPONENTIAL),
    ExtractionMethod.MAP: (_Statistic.MAP, _Averaging.NONE),
    ExtractionMethod.SMAP: (_Statistic.MAP, _Averaging.SIMPLE),
    ExtractionMethod.WMAP: (_Statistic.MAP, _Averaging.WEIGHTED),
    ExtractionMethod.EMAP: (_Statistic.MAP, _Averaging.EXPONENTIAL),
}


def _log_sum_exp(values: np.ndarray, axis=None) -> np.ndarray:
    """Numerically stable ``log(sum(exp(values)))``."""
    peak = np.max(values, axis=axis, keepdims=True)
    peak = np.where(np.isfinite(peak), peak, 0.0)
    total = np.log(np.sum(np.exp(values - peak), axis=axis, keepdims=True)) + peak
    return np.squeeze(total, axis=axis) if axis is not None else total.reshape(())


def _history_log_weights(averaging: _Averaging, count: int) -> np.ndarray:
    """Normalised log weights for ``count`` past estimates, newest first."""
    if averaging is _Averaging.SIMPLE:
        return np.full(count, -np.log(count))
    steps = np.arange(count, dtype=float)
    if averaging is _Averaging.WEIGHTED:
        raw = np.log(count - steps)
    else:
        raw = -(steps / count)
    return raw - _log_sum_exp(raw)


class EstimatesExtraction:
    """Extracts state estimates from particles with log-space weights.

    The state is made of ``linear_size`` real components followed by
    ``circular_size`` angles. Weights are given as logarithms.
    """

    def __init__(self, linear_size, circular_size=0):
        if linear_size < 0 or circular_size < 0:
            raise ValueError("sizes must be non-negative")
        self.linear_size = linear_size
        self.circular_size = circular_size
        self.state_size = linear_size + circular_size
        self._method = ExtractionMethod.EMODE
        self._history = HistoryBuffer(self.state_size)

    @property
    def method(self) -> ExtractionMethod:
        """The extraction method in use."""
        return self._method

    @property
    def window_size(self) -> int:
        """Number of past estimates used by the moving averages."""
        return self._history.window

    def set_method(self, method):
        """Select the extraction method, given as a member or its name."""
        self._method = ExtractionMethod(method)

    def set_mobile_average_window_size(self, window):
        """Set the moving average window; it must be positive."""
        if window <= 0:
            raise ValueError("window size must be positive")
        self._history.set_history_size(window)

    def extract(
        self,
        particles,
        weights,
        previous_weights=None,
        likelihoods=None,
        transition_probabilities=None,
    ) -> np.ndarray:
        """Return the state estimate according to the selected method.

        ``particles`` holds one particle per column and ``weights`` their log
        weights. MAP-based methods also need the previous log weights, the
        current likelihoods and the matrix of transition probabilities whose
        entry (i, j) links particle i now to particle j at the previous step;
        without them a ``ValueError`` is raised.
        """
        particles = np.asarray(particles, dtype=float)
        if particles.ndim != 2 or particles.shape[0] != self.state_size:
            raise ValueError(f"particles must be a {self.state_size} x N matrix")
        weights = np.asarray(weights, dtype=float).reshape(-1)
        if weights.shape[0] != particles.shape[1]:
            raise ValueError("number of weights must match the number of particles")

        statistic, averaging = _BREAKDOWN[self._method]

        if statistic is _Statistic.MEAN:
            current = self._mean(particles, weights)
        elif statistic is _Statistic.MODE:
            current = self._mode(particles, weights)
        else:
            if previous_weights is None or likelihoods is None or transition_probabilities is None:
                raise ValueError(
                    f"method '{self._method.value}' needs previous weights, "
                    "likelihoods and transition probabilities"
                )
            current = self._map(particles, previous_weights, likelihoods, transition_probabilities)

        if averaging is _Averaging.NONE:
            return current

        self._history.add_element(current)
        history = self._history.history()
        return self._mean(history, _history_log_weights(averaging, history.shape[1]))

    def clear(self):
        """Forget every past estimate."""
        self._history.clear()

    def info(self) -> list[str]:
        """Human-readable description of the window and the available methods."""
        labels = []
        for number, method in enumerate(ExtractionMethod, start=1):
            if method is self._method:
                labels.append(f"{number}) {method.value} <-- In use; ")
            elif method is ExtractionMethod.EMODE:
                labels.append(f"{number}) {method.value}")
            else:
                labels.append(f"{number}) {method.value}; ")
        return [
            f"<| Current window size: {self._history.window} |>",
            "<| Available estimate extraction methods: " + "".join(labels) + " |>",
        ]

    def _mean(self, particles: np.ndarray, weights: np.ndarray) -> np.ndarray:
        linear_weights = np.exp(weights)
        out = np.zeros(self.state_size)
        if self.linear_size > 0:
            out[:self.linear_size] = particles[:self.linear_size] @ linear_weights
        if self.circular_size > 0:
            out[self.linear_size:] = directional_mean(particles[self.linear_size:], linear_weights)
        return out

    @staticmethod
    def _mode(particles: np.ndarray, weights: np.ndarray) -> np.ndarray:
        return particles[:, int(np.argmax(weights))].copy()

    @staticmethod
    def _map(particles, previous_weights, likelihoods, transition_probabilities) -> np.ndarray:
        # Particle-based MAP approximation, evaluated in log space.
        previous_weights = np.asarray(previous_weights, dtype=float).reshape(-1)
        likelihoods = np.asarray(likelihoods, dtype=float).reshape(-1)
        transitions = np.asarray(transition_probabilities, dtype=float)
        count = particles.shape[1]
        if likelihoods.shape[0] != count or transitions.shape[0] != count:
            raise ValueError("likelihoods and transition probabilities must match the particles")
        if transitions.ndim != 2 or transitions.shape[1] != previous_weights.shape[0]:
            raise ValueError("transition probabilities must have one column per previous weight")

        values = np.log(likelihoods + _EPS) + _log_sum_exp(
            np.log(transitions + _EPS) + previous_weights[np.newaxis, :], axis=1
        )
        return particles[:, int(np.argmax(values))].copy()