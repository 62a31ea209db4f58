"""Asynchronous test suites.

Register named tests whose outcomes resolve now or later, run them once,
and collect every outcome without blocking.
"""

from .context import TestContext, get_test_context
from .deferred import DeferredResult, Promise
from .errors import (
    AsyncSuiteError,
    DuplicateTestName,
    InvalidStateError,
    RegistrationError,
    RegistryNotSealed,
    RegistrySealed,
    TestRegistrationClosed,
)
from .outcomes import (
    Canceled,
    Failed,
    Outcome,
    OutcomeStatus,
    Pending,
    Succeeded,
    cancel,
    fail,
    pending,
    succeed,
)
from .phase import PhaseGate, SuitePhase
from .registry import TestEntry, TestRegistry
from .result import SuiteResult, TestResult
from .runner import TestRunner
from .suite import AsyncSuite, run_suite


__all__ = [
    "AsyncSuite",
    "AsyncSuiteError",
    "Canceled",
    "DeferredResult",
    "DuplicateTestName",
    "Failed",
    "InvalidStateError",
    "Outcome",
    "OutcomeStatus",
    "Pending",
    "PhaseGate",
    "Promise",
    "RegistrationError",
    "RegistryNotSealed",
    "RegistrySealed",
    "Succeeded",
    "SuitePhase",
    "SuiteResult",
    "TestContext",
    "TestEntry",
    "TestRegistrationClosed",
    "TestRegistry",
    "TestResult",
    "TestRunner",
    "cancel",
    "fail",
    "get_test_context",
    "pending",
    "run_suite",
    "succeed",
]
