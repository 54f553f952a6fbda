"""Acquisition of raw tabular trade logs."""

from __future__ import annotations

from tradebook.core.data.sources.delimited import parse_delimited
from tradebook.core.data.sources.loader import LoadResult, TabularSource, TradeLoader, load_trades
from tradebook.core.data.sources.local import LocalFileSource
from tradebook.core.data.sources.sheet import RemoteSheetSource

__all__ = [
    "LoadResult",
    "LocalFileSource",
    "RemoteSheetSource",
    "TabularSource",
    "TradeLoader",
    "load_trades",
    "parse_delimited",
]
