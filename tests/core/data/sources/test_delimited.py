from __future__ import annotations

from tradebook.core.data.sources.delimited import parse_delimited


def test_quoted_cells_keep_commas_and_newlines() -> None:
    text = 'Date,Ticker,Notes\n2024-01-05,AAPL,"gap, then fade"\n2024-01-06,MSFT,"line one\nline two"\n'

    rows = parse_delimited(text)

    assert rows[1] == ["2024-01-05", "AAPL", "gap, then fade"]
    assert rows[2][2] == "line one\nline two"


def test_blank_lines_and_bom_are_dropped() -> None:
    rows = parse_delimited("\ufeffDate,Ticker\n\n2024-01-05,AAPL\r\n")

    assert rows == [["Date", "Ticker"], ["2024-01-05", "AAPL"]]


def test_custom_delimiter() -> None:
    assert parse_delimited("a;b\n1;2", delimiter=";") == [["a", "b"], ["1", "2"]]


def test_empty_text_yields_no_rows() -> None:
    assert parse_delimited("") == []
