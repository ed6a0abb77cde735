"""Small base interfaces shared by models and filtering steps."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class Agent:
    """Something whose behaviour can be tuned through named properties."""

    def set_property(self, property) -> bool:
        """Apply a named property; return whether it was recognised.

        The base agent knows no property, so it always returns ``False``.
        """
        return False


class Skippable(ABC):
    """A step that can be switched off and back on at run time."""

    @abstractmethod
    def skip(self, what_step, status):
        """Enable (``status=True``) or disable skipping of ``what_step``."""

    @abstractmethod
    def is_skipping(self) -> bool:
        """Whether the step is currently skipped."""


class ExogenousModel(Skippable):
    """An exogenous input to a state model; its only step is ``"exogenous"``."""

    def __init__(self):
        self._skip = False

    def skip(self, what_step, status):
        """Skip the ``"exogenous"`` step; any other step name is rejected."""
        if what_step != "exogenous":
            raise ValueError(f"unknown step {what_step!r} for an exogenous model")
        self._skip = bool(status)

    def is_skipping(self) -> bool:
        return self._skip


class StateProcess(ABC):
    """A process that moves states, one per column, forward in time."""

    @abstractmethod
    def propagate(self, cur_states) -> np.ndarray:
        """Return the states moved by the noiseless dynamics."""

    @abstractmethod
    def motion(self, cur_states) -> np.ndarray:
        """Return the states moved by the dynamics including process noise."""

    @abstractmethod
    def set_property(self, property) -> bool:
        """Apply a named property; return whether it was recognised."""