"""Streaming JSONL exporter for OpenTelemetry spans.

Test spans end on whichever thread resolves the test, so writes are
serialized with a lock.
"""

import json
import logging
import threading
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult


logger = logging.getLogger(__name__)


class StreamingFileSpanExporter(SpanExporter):
    """Appends each finished span to a JSONL file."""

    def __init__(self, output_path: Path | str) -> None:
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text("")
        self._lock = threading.Lock()

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        """Export a batch of spans to the file."""
        lines = [json.dumps(self._span_to_dict(span), default=str) for span in spans]
        try:
            with self._lock, self.output_path.open("a", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError:
            logger.exception("Failed to export %d span(s) to %s", len(lines), self.output_path)
            return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        """Nothing to release; the file is reopened per batch."""

    def _span_to_dict(self, span: ReadableSpan) -> dict[str, Any]:
        status = span.status
        return {
            "traceId": format(span.context.trace_id, "032x"),
            "spanId": format(span.context.span_id, "016x"),
            "parentSpanId": format(span.parent.span_id, "016x") if span.parent else None,
            "name": span.name,
            "startTimeUnixNano": span.start_time,
            "endTimeUnixNano": span.end_time,
            "attributes": _plain(span.attributes),
            "status": {
                "code": status.status_code.name if status else "UNSET",
                "description": status.description if status else None,
            },
            "events": [
                {"name": e.name, "timeUnixNano": e.timestamp, "attributes": _plain(e.attributes)}
                for e in span.events or ()
            ],
        }


def _plain(attrs: Mapping[str, Any] | None) -> dict[str, Any]:
    if not attrs:
        return {}
    return {k: list(v) if isinstance(v, tuple) else v for k, v in attrs.items()}
