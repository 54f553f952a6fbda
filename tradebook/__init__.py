"""tradebook - trade log ingestion and PnL analytics.

Loads a loosely structured trade log (spreadsheet export or local CSV),
normalizes it into typed records and computes rollups, cumulative curves and
KPIs over any scoped subset.

Examples:
    >>> import asyncio
    >>> import tradebook
    >>> loaded = asyncio.run(tradebook.load_trades())
    >>> report = tradebook.summarize(loaded.records)
    >>> report.kpis.win_rate
"""

from tradebook.core.config import TradebookConfig
from tradebook.core.data.ingestion import IngestionResult, ingest, normalize_date
from tradebook.core.data.sources import (
    LoadResult,
    LocalFileSource,
    RemoteSheetSource,
    TradeLoader,
    load_trades,
    parse_delimited,
)
from tradebook.core.exceptions import (
    AllSourcesFailedError,
    FetchError,
    MalformedSourceError,
    NoLocalSourceError,
    TradebookError,
)
from tradebook.core.models import AggregateReport, KpiSummary, TradeRecord
from tradebook.core.services import (
    TradeScope,
    compute_kpis,
    daily_cumulative,
    filter_by_scope,
    monthly_cumulative,
    monthly_rollup,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "AggregateReport",
    "AllSourcesFailedError",
    "FetchError",
    "IngestionResult",
    "KpiSummary",
    "LoadResult",
    "LocalFileSource",
    "MalformedSourceError",
    "NoLocalSourceError",
    "RemoteSheetSource",
    "TradeLoader",
    "TradeRecord",
    "TradeScope",
    "TradebookConfig",
    "TradebookError",
    "compute_kpis",
    "daily_cumulative",
    "filter_by_scope",
    "ingest",
    "load_trades",
    "monthly_cumulative",
    "monthly_rollup",
    "normalize_date",
    "parse_delimited",
    "summarize",
]
