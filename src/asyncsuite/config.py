"""Suite configuration loaded from the environment."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SuiteSettings(BaseSettings):
    """Configuration for `AsyncSuite` execution and reporting.

    Environment variables use the ``ASYNCSUITE_`` prefix.

    Attributes
    ----------
    execution
        Where test bodies run: ``inline`` in the caller, ``threads`` on a
        thread pool, or ``loop`` on the running asyncio event loop.
    max_workers
        Worker cap for the ``threads`` execution context.
    verbosity
        Console verbosity; negative prints failures only, positive adds a
        traceback section for failures.
    enable_tracing
        Export an OpenTelemetry span per test.
    trace_output
        JSONL file receiving exported spans.
    """

    execution: Literal["inline", "threads", "loop"] = "inline"
    max_workers: int | None = Field(default=None, ge=1)
    verbosity: int = 0
    enable_tracing: bool = False
    trace_output: Path = Path("traces.jsonl")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="ASYNCSUITE_",
    )
