"""Tests for asyncsuite.config module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from asyncsuite.config import SuiteSettings
from asyncsuite.reports import ConsoleReporter
from asyncsuite.testing import AsyncSuite


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "ASYNCSUITE_EXECUTION",
        "ASYNCSUITE_MAX_WORKERS",
        "ASYNCSUITE_VERBOSITY",
        "ASYNCSUITE_ENABLE_TRACING",
        "ASYNCSUITE_TRACE_OUTPUT",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSuiteSettings:
    def test_defaults(self):
        settings = SuiteSettings()
        assert settings.execution == "inline"
        assert settings.max_workers is None
        assert settings.verbosity == 0
        assert settings.enable_tracing is False
        assert settings.trace_output == Path("traces.jsonl")

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ASYNCSUITE_EXECUTION", "threads")
        monkeypatch.setenv("ASYNCSUITE_MAX_WORKERS", "3")
        monkeypatch.setenv("ASYNCSUITE_VERBOSITY", "-1")
        monkeypatch.setenv("ASYNCSUITE_ENABLE_TRACING", "true")
        monkeypatch.setenv("ASYNCSUITE_TRACE_OUTPUT", "out/spans.jsonl")

        settings = SuiteSettings()
        assert settings.execution == "threads"
        assert settings.max_workers == 3
        assert settings.verbosity == -1
        assert settings.enable_tracing is True
        assert settings.trace_output == Path("out/spans.jsonl")

    def test_rejects_unknown_execution(self):
        with pytest.raises(ValidationError):
            SuiteSettings(execution="cluster")

    def test_rejects_non_positive_workers(self):
        with pytest.raises(ValidationError):
            SuiteSettings(max_workers=0)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            SuiteSettings(retries=3)


class TestSuiteDefaults:
    def test_default_reporter_uses_settings_verbosity(self, monkeypatch):
        monkeypatch.setenv("ASYNCSUITE_VERBOSITY", "2")
        suite = AsyncSuite()
        assert len(suite.reporters) == 1
        assert isinstance(suite.reporters[0], ConsoleReporter)
        assert suite.reporters[0].verbosity == 2
