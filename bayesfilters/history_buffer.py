"""A bounded history of state vectors, newest first."""

from __future__ import annotations

from collections import deque

import numpy as np


class HistoryBuffer:
    """Keeps the most recent state vectors within a window of bounded size."""

    MIN_WINDOW = 2
    MAX_WINDOW = 30
    DEFAULT_WINDOW = 5

    def __init__(self, state_size):
        self.state_size = state_size
        self._window = self.DEFAULT_WINDOW
        self._elements: deque[np.ndarray] = deque()

    @property
    def window(self) -> int:
        """The current maximum number of stored elements."""
        return self._window

    def __len__(self) -> int:
        return len(self._elements)

    def add_element(self, element):
        """Store ``element`` as the newest entry, dropping the oldest if full."""
        vector = np.array(element, dtype=float).reshape(-1)
        if vector.shape[0] != self.state_size:
            raise ValueError(f"element must have {self.state_size} entries")
        self._elements.appendleft(vector)
        if len(self._elements) > self._window:
            self._elements.pop()

    def history(self) -> np.ndarray:
        """Stored elements as columns of a matrix, newest first."""
        if not self._elements:
            return np.zeros((self.state_size, 0))
        return np.column_stack(list(self._elements))

    def set_history_size(self, window):
        """Set the window, clamped to [MIN_WINDOW, MAX_WINDOW], dropping the oldest surplus."""
        if window == self._window:
            return
        size = min(max(window, self.MIN_WINDOW), self.MAX_WINDOW)
        while len(self._elements) > size:
            self._elements.pop()
        self._window = size

    def decrease_history_size(self):
        """Shrink the window by one."""
        self.set_history_size(self._window - 1)

    def increase_history_size(self):
        """Grow the window by one."""
        self.set_history_size(self._window + 1)

    def clear(self):
        """Drop every stored element."""
        self._elements.clear()