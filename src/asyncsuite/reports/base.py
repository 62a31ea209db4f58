"""Reporting sinks that receive resolved test outcomes."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from asyncsuite.testing.outcomes import Outcome
    from asyncsuite.testing.result import SuiteResult


class Reporter(ABC):
    """Receives test outcomes as they resolve.

    `report` is called exactly once per test, possibly concurrently from
    several threads and in any order.
    """

    def on_suite_start(self, suite_name: str, test_count: int) -> None:
        """Called once when the suite starts dispatching tests."""

    @abstractmethod
    def report(self, name: str, outcome: Outcome) -> None:
        """Called once per test with its resolved outcome."""

    def on_suite_complete(self, result: SuiteResult) -> None:
        """Called once after every test outcome has been reported."""


class CollectingReporter(Reporter):
    """Keeps reported outcomes in memory, in arrival order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.reports: list[tuple[str, Outcome]] = []
        self.started: list[tuple[str, int]] = []
        self.completed: list[SuiteResult] = []

    def on_suite_start(self, suite_name: str, test_count: int) -> None:
        with self._lock:
            self.started.append((suite_name, test_count))

    def report(self, name: str, outcome: Outcome) -> None:
        with self._lock:
            self.reports.append((name, outcome))

    def on_suite_complete(self, result: SuiteResult) -> None:
        with self._lock:
            self.completed.append(result)

    @property
    def outcomes(self) -> dict[str, Outcome]:
        """Reported outcomes keyed by test name."""
        with self._lock:
            return dict(self.reports)
