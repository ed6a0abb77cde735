"""Gaussian mixtures and single Gaussians stored as dense numpy arrays."""

from __future__ import annotations

import copy as _copy

import numpy as np


def _fitted(array: np.ndarray, shape: tuple[int, ...]) -> np.ndarray:
    """Return a zero array of ``shape`` holding the overlapping part of ``array``."""
    out = np.zeros(shape)
    overlap = tuple(slice(0, min(old, new)) for old, new in zip(array.shape, shape))
    out[overlap] = array[overlap]
    return out


class GaussianMixture:
    """A mixture of Gaussian components sharing the same state layout.

    Means are stored column-wise in a ``dim x components`` array. Covariances
    are stored side by side in a ``dim_covariance x (dim_covariance * components)``
    array. Circular states are either plain angles (treated as real numbers) or,
    with ``use_quaternion``, unit quaternions whose covariance lives in the
    3-dimensional tangent space.
    """

    def __init__(self, components=1, dim_linear=1, dim_circular=0, use_quaternion=False):
        if components < 0 or dim_linear < 0 or dim_circular < 0:
            raise ValueError("components and dimensions must be non-negative")

        self.components = components
        self.use_quaternion = use_quaternion
        self.dim_circular_component = 4 if use_quaternion else 1
        self.dim_linear = dim_linear
        self.dim_circular = dim_circular
        self.dim = self._state_size(dim_linear, dim_circular)
        self.dim_noise = 0
        self.dim_covariance = self._covariance_size(dim_linear, dim_circular)

        self._mean = np.zeros((self.dim, components))
        self._covariance = np.zeros((self.dim_covariance, self.dim_covariance * components))
        self._weight = np.full(components, 1.0 / components) if components else np.zeros(0)

    def _state_size(self, dim_linear: int, dim_circular: int) -> int:
        return dim_linear + dim_circular * self.dim_circular_component

    def _covariance_size(self, dim_linear: int, dim_circular: int) -> int:
        if self.use_quaternion:
            return dim_linear + dim_circular * (self.dim_circular_component - 1)
        return self._state_size(dim_linear, dim_circular)

    @property
    def mean(self) -> np.ndarray:
        """Means of all components, one per column."""
        return self._mean

    @mean.setter
    def mean(self, value) -> None:
        self._mean[...] = value

    @property
    def covariance(self) -> np.ndarray:
        """Covariances of all components, placed side by side."""
        return self._covariance

    @covariance.setter
    def covariance(self, value) -> None:
        self._covariance[...] = value

    @property
    def weight(self) -> np.ndarray:
        """Weights of all components."""
        return self._weight

    @weight.setter
    def weight(self, value) -> None:
        self._weight[...] = value

    def component_mean(self, i) -> np.ndarray:
        """Writable view of the mean of component ``i``."""
        if not 0 <= i < self.components:
            raise IndexError(f"component index {i} out of range")
        return self._mean[:, i]

    def component_covariance(self, i) -> np.ndarray:
        """Writable view of the covariance matrix of component ``i``."""
        if not 0 <= i < self.components:
            raise IndexError(f"component index {i} out of range")
        start = self.dim_covariance * i
        return self._covariance[:, start:start + self.dim_covariance]

    def resize(self, components, dim_linear, dim_circular=0):
        """Change the number of components and/or the state dimensions.

        When only the number of components changes, existing components are
        kept and new ones start at zero. Any other change discards the content.
        """
        if components < 0 or dim_linear < 0 or dim_circular < 0:
            raise ValueError("components and dimensions must be non-negative")

        new_dim = self._state_size(dim_linear, dim_circular)
        new_dim_covariance = self._covariance_size(dim_linear, dim_circular)

        if (self.dim_linear, self.dim_circular, self.components) == (dim_linear, dim_circular, components):
            return

        if self.dim == new_dim and self.components != components:
            self._mean = _fitted(self._mean, (self.dim, components))
            self._covariance = _fitted(
                self._covariance, (self.dim_covariance, self.dim_covariance * components)
            )
            self._weight = _fitted(self._weight, (components,))
        else:
            mean_shape = (new_dim, components)
            covariance_shape = (new_dim_covariance, new_dim_covariance * components)
            if self._mean.shape != mean_shape:
                self._mean = np.zeros(mean_shape)
            if self._covariance.shape != covariance_shape:
                self._covariance = np.zeros(covariance_shape)
            if self._weight.shape != (components,):
                self._weight = np.zeros(components)

        self.components = components
        self.dim = new_dim
        self.dim_covariance = new_dim_covariance
        self.dim_linear = dim_linear
        self.dim_circular = dim_circular

    def augment_with_noise(self, noise_covariance_matrix):
        """Append a zero-mean noise block with the given covariance to every component."""
        noise = np.atleast_2d(np.asarray(noise_covariance_matrix, dtype=float))
        if noise.ndim != 2 or noise.shape[0] != noise.shape[1]:
            raise ValueError("noise covariance matrix must be square")

        dim_old = self.dim_covariance
        dim_noise = noise.shape[0]

        self.dim_noise = dim_noise
        self.dim += dim_noise
        self.dim_covariance += dim_noise
        size = self.dim_covariance

        self._mean = np.vstack([self._mean, np.zeros((dim_noise, self.components))])

        covariance = np.zeros((size, size * self.components))
        for i in range(self.components):
            covariance[:dim_old, i * size:i * size + dim_old] = \
                self._covariance[:, i * dim_old:(i + 1) * dim_old]
            covariance[dim_old:, i * size + dim_old:(i + 1) * size] = noise
        self._covariance = covariance

    def copy(self):
        """Return an independent deep copy."""
        return _copy.deepcopy(self)


class Gaussian(GaussianMixture):
    """A single Gaussian: a one-component mixture with vector-shaped accessors."""

    def __init__(self, dim_linear=1, dim_circular=0, use_quaternion=False):
        super().__init__(1, dim_linear, dim_circular, use_quaternion)

    def resize(self, dim_linear, dim_circular=0):
        """Change the state dimensions, keeping a single component."""
        super().resize(1, dim_linear, dim_circular)

    @property
    def mean(self) -> np.ndarray:
        """Writable view of the mean vector."""
        return self._mean[:, 0]

    @mean.setter
    def mean(self, value) -> None:
        self._mean[:, 0] = value

    @property
    def covariance(self) -> np.ndarray:
        """The covariance matrix."""
        return self._covariance

    @covariance.setter
    def covariance(self, value) -> None:
        self._covariance[...] = value

    @property
    def weight(self) -> float:
        """The weight of the single component."""
        return float(self._weight[0])

    @weight.setter
    def weight(self, value) -> None:
        self._weight[0] = value