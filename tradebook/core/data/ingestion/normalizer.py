"""Row normalization shared by every source path."""

from __future__ import annotations

from collections.abc import Sequence

from tradebook.core.data.ingestion.cells import coerce_number, coerce_percent, is_blank
from tradebook.core.data.ingestion.dates import normalize_date, parse_calendar_date
from tradebook.core.data.ingestion.headers import HeaderLayout
from tradebook.core.models.trade import (
    INVALID_DATE,
    INVALID_RETURN,
    MISSING_PNL,
    TradeRecord,
)


def _cell(row: Sequence[object], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def raw_fields(row: Sequence[object], layout: HeaderLayout) -> dict[str, str]:
    """Original column name -> original cell text, short rows padded with ``""``."""

    fields: dict[str, str] = {}
    for index, column in enumerate(layout.columns):
        if column:
            fields[column] = _cell(row, index)
    return fields


def field_cell(row: Sequence[object], layout: HeaderLayout, field_name: str) -> str | None:
    """First non-blank cell among the columns mapped to ``field_name``.

    Returns ``None`` when no column maps to the field and ``""`` when the
    mapped cells are all blank.
    """

    indexes = layout.columns_for(field_name)
    if not indexes:
        return None
    for index in indexes:
        value = _cell(row, index)
        if not is_blank(value):
            return value
    return ""


def normalize_row(row: Sequence[object], layout: HeaderLayout) -> TradeRecord | None:
    """Turn one data row into a :class:`TradeRecord`; ``None`` when the row carries no symbol or date."""

    date_cell = field_cell(row, layout, "date") or ""
    symbol = (field_cell(row, layout, "symbol") or "").strip()
    date_value = normalize_date(date_cell)
    if not symbol and not date_value:
        return None

    pnl = coerce_number(field_cell(row, layout, "pnl"))
    roi = coerce_percent(field_cell(row, layout, "roi"))

    issues: list[str] = []
    if pnl.is_absent or pnl.is_invalid:
        issues.append(MISSING_PNL)
    if roi.is_invalid:
        issues.append(INVALID_RETURN)
    if date_value and parse_calendar_date(date_value) is None:
        issues.append(INVALID_DATE)

    return TradeRecord(
        date=date_value,
        symbol=symbol,
        entry=coerce_number(field_cell(row, layout, "entry")).as_field(),
        exit=coerce_number(field_cell(row, layout, "exit")).as_field(),
        pnl=pnl.as_field(),
        roi=roi.as_field(),
        cum_pnl_day=coerce_number(field_cell(row, layout, "cum_pnl_day")).as_field(),
        notes=(field_cell(row, layout, "notes") or "").strip(),
        issues=tuple(issues),
        raw_fields=raw_fields(row, layout),
    )


def normalize_rows(rows: Sequence[Sequence[object]], layout: HeaderLayout) -> list[TradeRecord]:
    """Normalize every row below the header, dropping rows with neither symbol nor date."""

    records: list[TradeRecord] = []
    for row in rows[layout.index + 1 :]:
        record = normalize_row(row, layout)
        if record is not None:
            records.append(record)
    return records


__all__ = ["field_cell", "normalize_row", "normalize_rows", "raw_fields"]
