"""Console reporter for suite output using Rich."""

from __future__ import annotations

import sys
import threading
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.traceback import Traceback

import asyncsuite
from asyncsuite.reports.base import Reporter
from asyncsuite.testing.outcomes import Canceled, Failed, OutcomeStatus


if TYPE_CHECKING:
    from asyncsuite.testing.outcomes import Outcome
    from asyncsuite.testing.result import SuiteResult


_STATUS_CONFIG: dict[OutcomeStatus, tuple[str, str, str]] = {
    OutcomeStatus.SUCCEEDED: ("✓", "green", "SUCCEEDED"),
    OutcomeStatus.FAILED: ("✗", "red", "FAILED"),
    OutcomeStatus.PENDING: ("?", "yellow", "PENDING"),
    OutcomeStatus.CANCELED: ("-", "blue", "CANCELED"),
}


class ConsoleReporter(Reporter):
    """Reporter that prints test outcomes as they arrive, then a summary."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity
        self._lock = threading.Lock()
        self._failures: list[tuple[str, Failed]] = []

    def _status_symbol(self, status: OutcomeStatus) -> str:
        return _STATUS_CONFIG[status][0]

    def _status_color(self, status: OutcomeStatus) -> str:
        return _STATUS_CONFIG[status][1]

    def _status_label(self, status: OutcomeStatus) -> str:
        return _STATUS_CONFIG[status][2]

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def on_suite_start(self, suite_name: str, test_count: int) -> None:
        self._print_section_header(f"{suite_name} STARTS")
        if self.verbosity >= 0:
            self.console.print(f"[bold]Running {test_count} tests[/bold]\n")

    def report(self, name: str, outcome: Outcome) -> None:
        with self._lock:
            if isinstance(outcome, Failed):
                self._failures.append((name, outcome))
            if self.verbosity < 0 and not outcome.is_failure:
                return
            self.console.print(self._format_line(name, outcome))

    def _format_line(self, name: str, outcome: Outcome) -> str:
        status = outcome.status
        color = self._status_color(status)
        symbol = f"[{color}]{self._status_symbol(status)}[/{color}]"
        line = f"  {symbol} {escape(name)} [{color}]{self._status_label(status)}[/{color}]"
        if isinstance(outcome, Canceled) and outcome.reason:
            line += f" [dim]({escape(outcome.reason)})[/dim]"
        if isinstance(outcome, Failed) and self.verbosity <= 0:
            line += f"\n    [{color}]{escape(self._describe(outcome.cause))}[/{color}]"
        return line

    def _describe(self, error: BaseException) -> str:
        message = str(error)
        return f"{type(error).__name__}: {message}" if message else type(error).__name__

    def on_suite_complete(self, result: SuiteResult) -> None:
        with self._lock:
            failures = list(self._failures)
        if self.verbosity > 0 and failures:
            self._print_failures(failures)
        self._print_summary(result)

    def _print_failures(self, failures: list[tuple[str, Failed]]) -> None:
        self.console.print()
        self._print_section_header("FAILURES")
        for index, (name, outcome) in enumerate(failures):
            if index:
                self.console.print()
            self.console.print(
                Panel(
                    self._format_error(outcome.cause),
                    title=escape(name),
                    title_align="left",
                    border_style=self._status_color(outcome.status),
                    expand=True,
                    padding=(1, 1),
                )
            )

    def _format_error(self, error: BaseException) -> Traceback | str:
        if error.__traceback__:
            return Traceback.from_exception(
                type(error),
                error,
                error.__traceback__,
                suppress=[asyncsuite],
                show_locals=self.verbosity >= 2,
            )
        return escape(self._describe(error))

    def _print_summary(self, result: SuiteResult) -> None:
        parts = []
        if result.succeeded:
            parts.append(f"[green]{result.succeeded} succeeded[/green]")
        if result.failed:
            parts.append(f"[red]{result.failed} failed[/red]")
        if result.pending:
            parts.append(f"[yellow]{result.pending} pending[/yellow]")
        if result.canceled:
            parts.append(f"[blue]{result.canceled} canceled[/blue]")

        summary = ", ".join(parts) if parts else "[dim]0 tests[/dim]"
        self.console.print()
        self._print_section_header("SUMMARY")
        self.console.print(f"[bold]{summary} in {result.total_duration_ms:.0f}ms[/bold]", justify="center")
        self.console.print("=" * self.console.width)
