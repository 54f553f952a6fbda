from __future__ import annotations

import io
import json

import pytest

from tradebook.cli.formatters import JSONLFormatter, TableFormatter, create_formatter


def test_create_formatter_by_name() -> None:
    assert isinstance(create_formatter(" JSONL "), JSONLFormatter)
    assert isinstance(create_formatter("table", no_color=True), TableFormatter)
    with pytest.raises(ValueError, match="Unsupported format"):
        create_formatter("xml")


def test_jsonl_rewrites_nan_and_tuples() -> None:
    stream = io.StringIO()

    JSONLFormatter().render(
        [{"symbol": "AAPL", "pnl": float("nan"), "issues": ("Missing PnL",), "extra": 1}],
        stream=stream,
        columns=["symbol", "pnl", "issues"],
    )

    assert json.loads(stream.getvalue()) == {"symbol": "AAPL", "pnl": None, "issues": ["Missing PnL"]}


def test_table_formats_numbers_and_placeholders() -> None:
    stream = io.StringIO()

    TableFormatter(no_color=True).render(
        [{"symbol": "AAPL", "pnl": 1000.5, "roi": None, "issues": ["Missing PnL", "Invalid Date"]}],
        stream=stream,
    )

    output = stream.getvalue()
    assert "1000.50" in output
    assert "Missing PnL; Invalid Date" in output


def test_table_reports_empty_scope() -> None:
    stream = io.StringIO()

    TableFormatter(no_color=True).render([], stream=stream, columns=["period_key"])

    assert "No trades in scope." in stream.getvalue()
