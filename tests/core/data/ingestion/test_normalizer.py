from __future__ import annotations

import math

from tradebook.core.data.ingestion.headers import HeaderLayout, build_layout
from tradebook.core.data.ingestion.normalizer import field_cell, normalize_row, normalize_rows
from tradebook.core.models.trade import INVALID_DATE, INVALID_RETURN, MISSING_PNL

HEADER = ["Date", "Ticker", "Entry", "Exit", "PnL", "% Return", "Cum PnL (Day)", "Notes"]


def _layout(header: list[str] | None = None) -> HeaderLayout:
    return build_layout(header or HEADER, 0, detected=True)


def test_normalize_row_populates_every_field() -> None:
    record = normalize_row(["5/1/24", " aapl ", "100", "110", "$1,000", "5%", "1000", " breakout "], _layout())

    assert record is not None
    assert record.date == "2024-01-05"
    assert record.symbol == "aapl"
    assert record.ticker == "AAPL"
    assert record.entry == 100.0
    assert record.exit == 110.0
    assert record.pnl == 1000.0
    assert record.roi == 5.0
    assert record.cum_pnl_day == 1000.0
    assert record.notes == "breakout"
    assert record.issues == ()
    assert record.raw_fields["PnL"] == "$1,000"


def test_missing_pnl_keeps_other_fields() -> None:
    record = normalize_row(["2024-01-05", "AAPL", "", "", "", "3%", "", ""], _layout())

    assert record is not None
    assert record.pnl is None
    assert record.roi == 3.0
    assert record.issues == (MISSING_PNL,)
    assert record.pnl_value == 0.0


def test_invalid_pnl_is_nan_and_flagged() -> None:
    record = normalize_row(["2024-01-05", "AAPL", "", "", "n/a", "", "", ""], _layout())

    assert record is not None
    assert math.isnan(record.pnl)
    assert record.issues == (MISSING_PNL,)
    assert record.to_dict()["pnl"] is None


def test_invalid_return_and_date_are_flagged_in_order() -> None:
    record = normalize_row(["someday", "AAPL", "", "", "", "abc", "", ""], _layout())

    assert record is not None
    assert record.date == "someday"
    assert record.issues == (MISSING_PNL, INVALID_RETURN, INVALID_DATE)


def test_row_without_symbol_and_date_is_dropped() -> None:
    assert normalize_row(["", "  ", "10", "12", "50", "", "", "note"], _layout()) is None


def test_row_with_only_symbol_is_kept() -> None:
    record = normalize_row(["", "AAPL", "", "", "10"], _layout())

    assert record is not None
    assert record.date == ""
    assert INVALID_DATE not in record.issues


def test_short_rows_are_padded() -> None:
    record = normalize_row(["2024-01-05", "AAPL"], _layout())

    assert record is not None
    assert record.raw_fields["Notes"] == ""
    assert record.notes == ""


def test_synonym_priority_and_blank_fallback() -> None:
    layout = _layout(["Exit Date", "Date", "Symbol", "P&L"])
    row = ["2024-02-01", "", "MSFT", "5"]

    assert field_cell(row, layout, "date") == "2024-02-01"
    assert field_cell(row, layout, "roi") is None
    assert normalize_row(row, layout).date == "2024-02-01"


def test_normalize_rows_skips_header_and_empty_rows() -> None:
    rows = [
        ["Title"],
        HEADER,
        ["2024-01-05", "AAPL", "", "", "10"],
        ["", "", "", "", ""],
        ["2024-01-06", "MSFT", "", "", "-4"],
    ]
    layout = build_layout(rows[1], 1, detected=True)

    records = normalize_rows(rows, layout)

    assert [record.symbol for record in records] == ["AAPL", "MSFT"]


def test_month_first_slash_date_is_flagged() -> None:
    record = normalize_row(["2/13/24", "AAPL", "", "", "10"], _layout())

    assert record is not None
    assert record.date == "2/13/24"
    assert record.issues == (INVALID_DATE,)
