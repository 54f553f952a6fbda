"""Tests for structured logging with trace propagation."""

from __future__ import annotations

import io
import json
from pathlib import Path

from tradebook.core.logging import configure_logging, log_context, logger


def _read_records(stream: io.StringIO) -> list[dict[str, object]]:
    stream.seek(0)
    lines = [line for line in stream.getvalue().splitlines() if line.strip()]
    return [json.loads(line) for line in lines]


def test_structured_log_contains_trace_and_context() -> None:
    buffer = io.StringIO()
    configure_logging("INFO", console_stream=buffer)

    with log_context(trace_id="trace-123", source="sheet:abc#0", error_code="FETCH_ERROR", attempt=2):
        logger.info("fetch failed", status_code=503)

    records = _read_records(buffer)
    assert len(records) == 1
    record = records[0]
    assert record["trace_id"] == "trace-123"
    assert record["source"] == "sheet:abc#0"
    assert record["error_code"] == "FETCH_ERROR"
    assert record["level"] == "INFO"
    assert record["context"]["attempt"] == 2
    assert record["context"]["status_code"] == 503


def test_bound_source_wins_over_context() -> None:
    buffer = io.StringIO()
    configure_logging("INFO", console_stream=buffer)

    with log_context(source="outer"):
        logger.bind(source="inner.csv").warning("candidate failed")

    assert _read_records(buffer)[0]["source"] == "inner.csv"


def test_trace_id_propagates_within_context() -> None:
    buffer = io.StringIO()
    configure_logging("INFO", console_stream=buffer)

    with log_context() as trace_id:
        logger.info("first event")
        logger.info("second event")

    logger.info("outside context")

    records = _read_records(buffer)
    assert len(records) == 3
    assert records[0]["trace_id"] == records[1]["trace_id"] == trace_id
    assert records[2]["trace_id"] != trace_id


def test_level_filters_lower_events() -> None:
    buffer = io.StringIO()
    configure_logging("WARNING", console_stream=buffer)

    logger.info("hidden")
    logger.warning("shown")

    assert [record["message"] for record in _read_records(buffer)] == ["shown"]


def test_file_sink_writes_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "tradebook.log"
    configure_logging("INFO", console_output=False, file_output=True, file_path=str(path))

    logger.error("boom")

    lines = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["message"] == "boom"
    assert json.loads(lines[0])["source"] is None
