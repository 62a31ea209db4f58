"""Execution contexts and tracing for test dispatch."""

from asyncsuite.testing.execution.contexts import (
    EventLoopContext,
    ExecutionContext,
    InlineContext,
    ThreadPoolContext,
)
from asyncsuite.testing.execution.tracer import TestTracer


__all__ = [
    "EventLoopContext",
    "ExecutionContext",
    "InlineContext",
    "TestTracer",
    "ThreadPoolContext",
]
