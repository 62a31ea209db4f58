"""Reporting sinks for resolved test outcomes."""

from asyncsuite.reports.base import CollectingReporter, Reporter
from asyncsuite.reports.console import ConsoleReporter


__all__ = [
    "CollectingReporter",
    "ConsoleReporter",
    "Reporter",
]
