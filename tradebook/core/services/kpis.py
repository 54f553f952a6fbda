"""KPI summary: totals, win rate and return percentiles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from tradebook.core.models.aggregates import AggregateReport, KpiSummary
from tradebook.core.models.trade import TradeRecord, is_number
from tradebook.core.services.aggregation import daily_cumulative, monthly_cumulative, monthly_rollup


def percentile(sorted_values: Sequence[float], fraction: float) -> float | None:
    """Rank-interpolated percentile of ascending ``sorted_values``.

    ``index = fraction * (n - 1)``; an integral index returns that order
    statistic, otherwise the two neighbours are blended linearly.
    """

    if not sorted_values:
        return None
    if not 0.0 <= fraction <= 1.0:
        raise ValueError("fraction must be within [0, 1]")
    index = fraction * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return sorted_values[lower]
    weight = index - lower
    return sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight


def compute_kpis(records: Iterable[TradeRecord]) -> KpiSummary:
    """Summarize a scoped record set.

    Absent PnL counts as zero. The win rate is 0.0 for an empty set. Return
    percentiles only consider records with a usable ``roi`` and stay ``None``
    when there are none.
    """

    items = list(records)
    trade_count = len(items)
    total_pnl = math.fsum(record.pnl_value for record in items)
    wins = sum(1 for record in items if is_number(record.pnl) and record.pnl > 0)
    win_rate = wins / trade_count if trade_count else 0.0

    returns = sorted(record.roi for record in items if is_number(record.roi))
    return KpiSummary(
        total_pnl=total_pnl,
        trade_count=trade_count,
        win_rate=win_rate,
        roi_p25=percentile(returns, 0.25),
        roi_p50=percentile(returns, 0.5),
        roi_p75=percentile(returns, 0.75),
    )


def summarize(records: Iterable[TradeRecord]) -> AggregateReport:
    """Compute every dashboard aggregate from scratch for ``records``."""

    items = list(records)
    return AggregateReport(
        monthly=tuple(monthly_rollup(items)),
        monthly_cumulative=tuple(monthly_cumulative(items)),
        daily_cumulative=tuple(daily_cumulative(items)),
        kpis=compute_kpis(items),
    )


__all__ = ["compute_kpis", "percentile", "summarize"]
