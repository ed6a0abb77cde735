"""Base class running a filtering recursion on its own thread."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

_log = logging.getLogger(__name__)


class FilteringAlgorithm(ABC):
    """A filter whose recursion runs on a background thread.

    After :meth:`boot` the thread waits until :meth:`run` (or
    :meth:`teardown`) is called, performs :meth:`initialization_step` and then
    repeats :meth:`filtering_step` while :meth:`run_condition` holds.
    """

    def __init__(self):
        self._cv = threading.Condition()
        self._run = False
        self._reset = False
        self._teardown = False
        self._filtering_step = 0
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None

    def boot(self):
        """Start the filtering thread; it waits for :meth:`run`."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("the filtering thread is already running")
        self._error = None
        self._thread = threading.Thread(
            target=self._filtering_recursion, name="filtering-recursion", daemon=True
        )
        self._thread.start()

    def run(self):
        """Let the filtering thread start iterating."""
        with self._cv:
            self._run = True
            self._cv.notify_all()

    def wait(self):
        """Block until the filtering thread ends, re-raising any error it hit."""
        if self._thread is None:
            _log.warning("filtering thread was never booted; nothing to wait for")
            return
        self._thread.join()
        if self._error is not None:
            error, self._error = self._error, None
            raise error

    def reset(self):
        """Restart the recursion from the initialization step."""
        self._reset = True

    def reboot(self):
        """Restart the recursion and wait for :meth:`run` before iterating again."""
        with self._cv:
            self._reset = True
            self._run = False
            self._cv.notify_all()

    def teardown(self):
        """Ask the filtering thread to stop."""
        with self._cv:
            self._teardown = True
            self._cv.notify_all()

    def step_number(self) -> int:
        """Number of filtering steps done since the last (re)initialization."""
        return self._filtering_step

    def is_running(self) -> bool:
        """Whether the recursion has been started and has not ended."""
        return self._run

    @abstractmethod
    def skip(self, what_step, status):
        """Enable or disable skipping of a named filtering step."""

    @abstractmethod
    def run_condition(self) -> bool:
        """Whether the recursion should keep going."""

    @abstractmethod
    def initialization_step(self):
        """Prepare the filter state before iterating."""

    @abstractmethod
    def filtering_step(self):
        """Perform one iteration of the filter."""

    def _filtering_recursion(self):
        try:
            while True:
                self._reset = False
                self._filtering_step = 0

                with self._cv:
                    self._cv.wait_for(lambda: self._run or self._teardown)

                self.initialization_step()

                while self.run_condition() and not self._teardown and not self._reset:
                    self.filtering_step()
                    self._filtering_step += 1

                if not (self.run_condition() and (self._run or self._reset) and not self._teardown):
                    break
        except BaseException as error:  # handed to the thread calling wait()
            self._error = error
        finally:
            self._run = False