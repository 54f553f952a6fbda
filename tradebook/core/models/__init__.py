"""Record and aggregate models."""

from tradebook.core.models.aggregates import (
    AggregateReport,
    CumulativePoint,
    KpiSummary,
    PeriodAggregate,
    TickerLeaders,
    TickerPerformance,
)
from tradebook.core.models.coercion import Coerced, CoercionStatus
from tradebook.core.models.trade import (
    INVALID_DATE,
    INVALID_RETURN,
    MISSING_PNL,
    TradeRecord,
    is_number,
)

__all__ = [
    "AggregateReport",
    "Coerced",
    "CoercionStatus",
    "CumulativePoint",
    "INVALID_DATE",
    "INVALID_RETURN",
    "KpiSummary",
    "MISSING_PNL",
    "PeriodAggregate",
    "TickerLeaders",
    "TickerPerformance",
    "TradeRecord",
    "is_number",
]
