"""Likelihood of predicted states under Gaussian measurement noise."""

from __future__ import annotations

import math

import numpy as np


def _zero_mean_gaussian_density(samples: np.ndarray, covariance: np.ndarray) -> np.ndarray:
    """Density of each column of ``samples`` under N(0, covariance)."""
    size = samples.shape[0]
    sign, log_det = np.linalg.slogdet(covariance)
    if sign <= 0:
        raise ValueError("noise covariance matrix must be positive definite")
    solved = np.linalg.solve(covariance, samples)
    mahalanobis = np.sum(samples * solved, axis=0)
    return np.exp(-0.5 * (mahalanobis + size * math.log(2.0 * math.pi) + log_det))


class GaussianLikelihood:
    """Scaled Gaussian likelihood of the measurement innovations.

    The measurement model must provide ``measure()``,
    ``predicted_measure(states)``, ``innovation(predicted, measurements)`` and
    ``noise_covariance_matrix()``; any of them may return ``None`` when its
    data is not available.
    """

    def __init__(self, scale_factor=1.0):
        self.scale_factor = scale_factor

    def likelihood(self, measurement_model, pred_states):
        """Likelihood of each predicted state (one per column), or ``None`` if unavailable."""
        measurements = measurement_model.measure()
        if measurements is None:
            return None

        predicted = measurement_model.predicted_measure(pred_states)
        if predicted is None:
            return None

        innovations = measurement_model.innovation(predicted, measurements)
        if innovations is None:
            return None

        covariance = measurement_model.noise_covariance_matrix()
        if covariance is None:
            return None

        innovations = np.asarray(innovations, dtype=float)
        if innovations.ndim == 1:
            innovations = innovations.reshape(-1, 1)
        covariance = np.atleast_2d(np.asarray(covariance, dtype=float))

        return self.scale_factor * _zero_mean_gaussian_density(innovations, covariance)