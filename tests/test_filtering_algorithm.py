import threading

import pytest

from bayesfilters.filtering_algorithm import FilteringAlgorithm


class CountingFilter(FilteringAlgorithm):
    def __init__(self, steps):
        super().__init__()
        self.steps = steps
        self.initializations = 0
        self.visited = []

    def skip(self, what_step, status):
        raise ValueError(what_step)

    def run_condition(self):
        return self.step_number() < self.steps

    def initialization_step(self):
        self.initializations += 1

    def filtering_step(self):
        self.visited.append(self.step_number())


class RebootingFilter(CountingFilter):
    def __init__(self, steps, reboot_at):
        super().__init__(steps)
        self.reboot_at = reboot_at
        self.rebooted = threading.Event()

    def filtering_step(self):
        super().filtering_step()
        if not self.rebooted.is_set() and self.step_number() == self.reboot_at:
            self.reboot()
            self.rebooted.set()


class FailingFilter(CountingFilter):
    def filtering_step(self):
        raise ValueError("broken step")


def test_filtering_algorithm_is_abstract():
    with pytest.raises(TypeError):
        FilteringAlgorithm()


def test_runs_the_requested_number_of_steps():
    steps = 7
    algorithm = CountingFilter(steps)
    FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.run(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert FilteringAlgorithm.step_number(algorithm) == steps
    assert algorithm.visited == list(range(steps))
    assert algorithm.initializations == 1


def test_not_running_after_completion():
    algorithm = CountingFilter(3)
    FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.run(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert FilteringAlgorithm.is_running(algorithm) is False


def test_not_running_before_run():
    algorithm = CountingFilter(3)
    FilteringAlgorithm.boot(algorithm)
    assert FilteringAlgorithm.is_running(algorithm) is False
    FilteringAlgorithm.teardown(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert algorithm.visited == []


def test_teardown_before_run_stops_without_steps():
    algorithm = CountingFilter(5)
    FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.teardown(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert FilteringAlgorithm.step_number(algorithm) == 0
    assert algorithm.visited == []


def test_wait_without_boot_returns_quietly():
    algorithm = CountingFilter(5)
    FilteringAlgorithm.wait(algorithm)
    assert FilteringAlgorithm.step_number(algorithm) == 0
    assert algorithm.visited == []


def test_reboot_restarts_from_initialization():
    steps = 6
    algorithm = RebootingFilter(steps, reboot_at=2)
    FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.run(algorithm)
    assert algorithm.rebooted.wait(timeout=5)
    FilteringAlgorithm.run(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert algorithm.initializations == 2
    assert FilteringAlgorithm.step_number(algorithm) == steps
    assert algorithm.visited == [0, 1, 2] + list(range(steps))


def test_error_in_step_is_raised_by_wait():
    algorithm = FailingFilter(3)
    FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.run(algorithm)
    with pytest.raises(ValueError, match="broken step"):
        FilteringAlgorithm.wait(algorithm)


def test_boot_twice_while_alive_fails():
    algorithm = CountingFilter(3)
    FilteringAlgorithm.boot(algorithm)
    with pytest.raises(RuntimeError):
        FilteringAlgorithm.boot(algorithm)
    FilteringAlgorithm.teardown(algorithm)
    FilteringAlgorithm.wait(algorithm)
    assert algorithm.visited == []