import math

import numpy as np
import pytest

from bayesfilters.gaussian_likelihood import GaussianLikelihood


class FakeMeasurementModel:
    def __init__(self, measurement, matrix, noise, predict_ok=True, innovate_ok=True):
        self.measurement = measurement
        self.matrix = np.asarray(matrix, dtype=float)
        self.noise = noise
        self.predict_ok = predict_ok
        self.innovate_ok = innovate_ok

    def measure(self):
        return self.measurement

    def predicted_measure(self, states):
        return self.matrix @ np.asarray(states, dtype=float) if self.predict_ok else None

    def innovation(self, predicted, measurements):
        return measurements - predicted if self.innovate_ok else None

    def noise_covariance_matrix(self):
        return self.noise


def scalar_model(measurement=0.0, noise=None):
    noise = np.eye(1) if noise is None else noise
    return FakeMeasurementModel(np.array([[measurement]]), [[1.0]], noise)


def test_standard_normal_peak():
    values = GaussianLikelihood().likelihood(scalar_model(), np.array([[0.0]]))
    np.testing.assert_allclose(values, [1.0 / math.sqrt(2.0 * math.pi)])


def test_one_value_per_particle():
    states = np.array([[0.0, 1.0, -2.0, 3.0]])
    values = GaussianLikelihood().likelihood(scalar_model(), states)
    assert values.shape == (4,)


def test_symmetric_in_innovation():
    values = GaussianLikelihood().likelihood(scalar_model(), np.array([[1.5, -1.5]]))
    assert values[0] == pytest.approx(values[1])


def test_decreases_away_from_measurement():
    values = GaussianLikelihood().likelihood(scalar_model(1.0), np.array([[1.0, 2.0, 4.0]]))
    assert values[0] > values[1] > values[2]


def test_scale_factor_multiplies():
    states = np.array([[0.3, -0.7]])
    base = GaussianLikelihood().likelihood(scalar_model(), states)
    scaled = GaussianLikelihood(3.0).likelihood(scalar_model(), states)
    np.testing.assert_allclose(scaled, 3.0 * base)


def test_independent_dimensions_factorise():
    states = np.array([[0.5], [-1.0]])
    model_2d = FakeMeasurementModel(np.zeros((2, 1)), np.eye(2), np.eye(2))
    joint = GaussianLikelihood().likelihood(model_2d, states)
    first = GaussianLikelihood().likelihood(scalar_model(), states[:1])
    second = GaussianLikelihood().likelihood(scalar_model(), states[1:])
    np.testing.assert_allclose(joint, first * second)


def test_missing_measurement_gives_none():
    model = FakeMeasurementModel(None, [[1.0]], np.eye(1))
    assert GaussianLikelihood().likelihood(model, np.array([[0.0]])) is None


def test_missing_prediction_gives_none():
    model = FakeMeasurementModel(np.zeros((1, 1)), [[1.0]], np.eye(1), predict_ok=False)
    assert GaussianLikelihood().likelihood(model, np.array([[0.0]])) is None


def test_missing_innovation_gives_none():
    model = FakeMeasurementModel(np.zeros((1, 1)), [[1.0]], np.eye(1), innovate_ok=False)
    assert GaussianLikelihood().likelihood(model, np.array([[0.0]])) is None


def test_missing_covariance_gives_none():
    model = FakeMeasurementModel(np.zeros((1, 1)), [[1.0]], None)
    assert GaussianLikelihood().likelihood(model, np.array([[0.0]])) is None


def test_non_positive_covariance_rejected():
    model = scalar_model(noise=np.array([[-1.0]]))
    with pytest.raises(ValueError):
        GaussianLikelihood().likelihood(model, np.array([[0.0]]))