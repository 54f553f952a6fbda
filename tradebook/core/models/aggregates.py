"""Aggregate payloads produced by the aggregation and KPI engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PeriodAggregate:
    """PnL sum and trade count for one period key (``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``)."""

    period_key: str
    pnl_sum: float
    trade_count: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class CumulativePoint:
    """Running PnL total up to and including ``period_key``."""

    period_key: str
    cumulative_pnl: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class KpiSummary:
    """Headline statistics over a record set.

    Percentiles stay ``None`` when no record carries a return value; they are
    never defaulted to zero.
    """

    total_pnl: float
    trade_count: int
    win_rate: float
    roi_p25: float | None = None
    roi_p50: float | None = None
    roi_p75: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class TickerPerformance:
    """Trade count and PnL total for one ticker."""

    symbol: str
    trade_count: int
    total_pnl: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class TickerLeaders:
    """Best and worst tickers by total PnL."""

    top: tuple[TickerPerformance, ...]
    bottom: tuple[TickerPerformance, ...]


@dataclass(slots=True, frozen=True)
class AggregateReport:
    """Everything a dashboard needs for one scoped record set."""

    monthly: tuple[PeriodAggregate, ...]
    monthly_cumulative: tuple[CumulativePoint, ...]
    daily_cumulative: tuple[CumulativePoint, ...]
    kpis: KpiSummary

    def to_dict(self) -> dict[str, Any]:
        return {
            "monthly": [item.to_dict() for item in self.monthly],
            "monthly_cumulative": [item.to_dict() for item in self.monthly_cumulative],
            "daily_cumulative": [item.to_dict() for item in self.daily_cumulative],
            "kpis": self.kpis.to_dict(),
        }


__all__ = [
    "AggregateReport",
    "CumulativePoint",
    "KpiSummary",
    "PeriodAggregate",
    "TickerLeaders",
    "TickerPerformance",
]
