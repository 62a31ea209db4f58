"""asyncsuite - Asynchronous test suites with non-blocking result resolution."""

from .config import SuiteSettings
from .testing import (
    AsyncSuite,
    Canceled,
    DeferredResult,
    DuplicateTestName,
    Failed,
    Outcome,
    Pending,
    Promise,
    Succeeded,
    TestRegistrationClosed,
    cancel,
    fail,
    pending,
    run_suite,
    succeed,
)
from .reports import CollectingReporter, ConsoleReporter, Reporter
from .tracing import init_tracing, trace_step
from .version import __version__


__all__ = [
    # Suites
    "AsyncSuite",
    "run_suite",
    "SuiteSettings",
    # Outcomes
    "Outcome",
    "Succeeded",
    "Failed",
    "Pending",
    "Canceled",
    "succeed",
    "fail",
    "pending",
    "cancel",
    # Deferred results
    "DeferredResult",
    "Promise",
    # Errors
    "DuplicateTestName",
    "TestRegistrationClosed",
    # Reporting
    "Reporter",
    "ConsoleReporter",
    "CollectingReporter",
    # Tracing
    "init_tracing",
    "trace_step",
]
