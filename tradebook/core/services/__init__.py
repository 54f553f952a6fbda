"""Pure aggregation, KPI and scoping services over trade records."""

from tradebook.core.services.aggregation import (
    cumulative,
    daily_cumulative,
    daily_rollup,
    monthly_cumulative,
    monthly_rollup,
    yearly_cumulative,
    yearly_rollup,
)
from tradebook.core.services.kpis import compute_kpis, percentile, summarize
from tradebook.core.services.scope import (
    ScopeKind,
    TradeScope,
    available_days,
    available_months,
    available_tickers,
    available_years,
    filter_by_scope,
    records_with_issues,
    ticker_leaders,
    ticker_performance,
)

__all__ = [
    "ScopeKind",
    "TradeScope",
    "available_days",
    "available_months",
    "available_tickers",
    "available_years",
    "compute_kpis",
    "cumulative",
    "daily_cumulative",
    "daily_rollup",
    "filter_by_scope",
    "monthly_cumulative",
    "monthly_rollup",
    "percentile",
    "records_with_issues",
    "summarize",
    "ticker_leaders",
    "ticker_performance",
    "yearly_cumulative",
    "yearly_rollup",
]
