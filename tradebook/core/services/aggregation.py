"""Period rollups and cumulative PnL curves."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from tradebook.core.data.ingestion.dates import parse_calendar_date
from tradebook.core.models.aggregates import CumulativePoint, PeriodAggregate
from tradebook.core.models.trade import TradeRecord

PeriodKeyFn = Callable[[TradeRecord], str | None]


def month_key(record: TradeRecord) -> str | None:
    """``YYYY-MM`` from a full parse of the record date; ``None`` when unparseable."""

    parsed = parse_calendar_date(record.date)
    return None if parsed is None else f"{parsed.year:04d}-{parsed.month:02d}"


def year_key(record: TradeRecord) -> str | None:
    parsed = parse_calendar_date(record.date)
    return None if parsed is None else f"{parsed.year:04d}"


def day_key(record: TradeRecord) -> str | None:
    """The raw date string; empty dates are skipped."""

    return record.date or None


def rollup(records: Iterable[TradeRecord], key_fn: PeriodKeyFn) -> list[PeriodAggregate]:
    """Sum PnL and count trades per period key, ascending by key.

    Records whose key is ``None`` are left out. Only periods that have at
    least one trade appear in the result.
    """

    sums: dict[str, float] = {}
    counts: dict[str, int] = {}
    for record in records:
        key = key_fn(record)
        if key is None:
            continue
        sums[key] = sums.get(key, 0.0) + record.pnl_value
        counts[key] = counts.get(key, 0) + 1
    return [PeriodAggregate(period_key=key, pnl_sum=sums[key], trade_count=counts[key]) for key in sorted(sums)]


def cumulative(periods: Sequence[PeriodAggregate]) -> list[CumulativePoint]:
    """Running total of ``pnl_sum`` over periods already sorted by key."""

    running = 0.0
    points: list[CumulativePoint] = []
    for period in periods:
        running += period.pnl_sum
        points.append(CumulativePoint(period_key=period.period_key, cumulative_pnl=running))
    return points


def monthly_rollup(records: Iterable[TradeRecord]) -> list[PeriodAggregate]:
    return rollup(records, month_key)


def daily_rollup(records: Iterable[TradeRecord]) -> list[PeriodAggregate]:
    return rollup(records, day_key)


def yearly_rollup(records: Iterable[TradeRecord]) -> list[PeriodAggregate]:
    return rollup(records, year_key)


def monthly_cumulative(records: Iterable[TradeRecord]) -> list[CumulativePoint]:
    return cumulative(monthly_rollup(records))


def daily_cumulative(records: Iterable[TradeRecord]) -> list[CumulativePoint]:
    return cumulative(daily_rollup(records))


def yearly_cumulative(records: Iterable[TradeRecord]) -> list[CumulativePoint]:
    return cumulative(yearly_rollup(records))


__all__ = [
    "cumulative",
    "daily_cumulative",
    "daily_rollup",
    "day_key",
    "month_key",
    "monthly_cumulative",
    "monthly_rollup",
    "rollup",
    "year_key",
    "yearly_cumulative",
    "yearly_rollup",
]
