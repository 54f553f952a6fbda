"""Date-scope and ticker filtering plus per-ticker leaderboards."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from tradebook.core.models.aggregates import TickerLeaders, TickerPerformance
from tradebook.core.models.trade import TradeRecord


class ScopeKind(str, Enum):
    """Granularity of a date scope."""

    ALL = "all"
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


@dataclass(slots=True, frozen=True)
class TradeScope:
    """Selection applied before aggregation.

    A scope whose selection is missing (``kind=YEAR`` without ``year``) does
    not filter by date.
    """

    kind: ScopeKind = ScopeKind.ALL
    year: str | None = None
    month: str | None = None
    day: str | None = None
    ticker: str | None = None

    def matches_date(self, record: TradeRecord) -> bool:
        if self.kind is ScopeKind.YEAR and self.year:
            return record.date.startswith(self.year)
        if self.kind is ScopeKind.MONTH and self.month:
            return record.date[:7] == self.month
        if self.kind is ScopeKind.DAY and self.day:
            return record.date == self.day
        return True

    def matches_ticker(self, record: TradeRecord) -> bool:
        if not self.ticker:
            return True
        return record.ticker == self.ticker.strip().upper()


def filter_by_scope(records: Iterable[TradeRecord], scope: TradeScope) -> list[TradeRecord]:
    return [record for record in records if scope.matches_date(record) and scope.matches_ticker(record)]


def available_years(records: Iterable[TradeRecord]) -> list[str]:
    return sorted({record.date[:4] for record in records if record.date})


def available_months(records: Iterable[TradeRecord], year: str) -> list[str]:
    """Months of ``year`` that have trades, newest first."""

    months = {record.date[:7] for record in records if record.date and record.date.startswith(year)}
    return sorted(months, reverse=True)


def available_days(records: Iterable[TradeRecord], month: str) -> list[str]:
    return sorted({record.date for record in records if record.date and record.date.startswith(month)})


def available_tickers(records: Iterable[TradeRecord]) -> list[str]:
    return sorted({record.ticker for record in records if record.ticker})


def ticker_performance(records: Iterable[TradeRecord]) -> list[TickerPerformance]:
    """Trade count and PnL per ticker, best total first."""

    totals: dict[str, float] = {}
    counts: dict[str, int] = {}
    for record in records:
        symbol = record.ticker
        if not symbol:
            continue
        totals[symbol] = totals.get(symbol, 0.0) + record.pnl_value
        counts[symbol] = counts.get(symbol, 0) + 1
    performance = [
        TickerPerformance(symbol=symbol, trade_count=counts[symbol], total_pnl=totals[symbol]) for symbol in totals
    ]
    performance.sort(key=lambda item: (-item.total_pnl, item.symbol))
    return performance


def ticker_leaders(records: Iterable[TradeRecord], limit: int = 5) -> TickerLeaders:
    """Top winners and worst losers; break-even tickers appear in neither list."""

    performance = ticker_performance(records)
    winners = [item for item in performance if item.total_pnl > 0]
    losers = sorted((item for item in performance if item.total_pnl < 0), key=lambda item: (item.total_pnl, item.symbol))
    return TickerLeaders(top=tuple(winners[:limit]), bottom=tuple(losers[:limit]))


def records_with_issues(records: Iterable[TradeRecord]) -> list[TradeRecord]:
    return [record for record in records if record.issues]


__all__ = [
    "ScopeKind",
    "TradeScope",
    "available_days",
    "available_months",
    "available_tickers",
    "available_years",
    "filter_by_scope",
    "records_with_issues",
    "ticker_leaders",
    "ticker_performance",
]
