"""Gaussian mixtures, directional statistics, estimate extraction and filter scaffolding for recursive Bayesian filtering."""

__version__ = "0.10.0"

__all__ = [
    "directional_statistics",
    "estimates_extraction",
    "filtering_algorithm",
    "gaussian_filter",
    "gaussian_likelihood",
    "gaussian_mixture",
    "history_buffer",
    "interfaces",
]