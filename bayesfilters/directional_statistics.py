"""Arithmetic and averaging of angles on the circle."""

from __future__ import annotations

import numpy as np


def _wrap(angles: np.ndarray) -> np.ndarray:
    """Map angles onto the interval (-pi, pi]."""
    return np.arctan2(np.sin(angles), np.cos(angles))


def _as_columns(a) -> np.ndarray:
    a = np.asarray(a, dtype=float)
    return a.reshape(-1, 1) if a.ndim == 1 else a


def directional_add(a, b):
    """Add the angle vector ``b`` to every column of ``a`` and wrap the result.

    A one-dimensional ``a`` is treated as a single column and the result keeps
    its shape.
    """
    shape = np.shape(a)
    b = np.asarray(b, dtype=float).reshape(-1, 1)
    return _wrap(_as_columns(a) + b).reshape(shape)


def directional_sub(a, b):
    """Subtract the angle vector ``b`` from every column of ``a`` and wrap the result."""
    shape = np.shape(a)
    b = np.asarray(b, dtype=float).reshape(-1, 1)
    return _wrap(_as_columns(a) - b).reshape(shape)


def directional_mean(a, w):
    """Weighted circular mean of the columns of ``a`` with linear weights ``w``."""
    a = _as_columns(a)
    w = np.asarray(w, dtype=float).reshape(-1)
    if a.shape[1] != w.shape[0]:
        raise ValueError("number of weights must match the number of columns")
    return np.arctan2(np.sin(a) @ w, np.cos(a) @ w)