"""Canonical trade record emitted by the ingestion pipeline."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

MISSING_PNL = "Missing PnL"
INVALID_RETURN = "Invalid % Return"
INVALID_DATE = "Invalid Date"


def is_number(value: float | None) -> bool:
    """True when ``value`` is a usable (non-None, non-NaN) number."""

    return value is not None and not math.isnan(value)


def _json_number(value: float | None) -> float | None:
    return value if is_number(value) else None


@dataclass(slots=True, frozen=True)
class TradeRecord:
    """One normalized row of a trade log.

    Numeric fields are ``None`` when the source cell was blank and ``NaN``
    when a cell was present but could not be coerced.
    """

    date: str
    symbol: str
    entry: float | None = None
    exit: float | None = None
    pnl: float | None = None
    roi: float | None = None
    cum_pnl_day: float | None = None
    notes: str = ""
    issues: tuple[str, ...] = ()
    raw_fields: dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    @property
    def ticker(self) -> str:
        """Symbol as used for grouping and filtering."""
        return self.symbol.strip().upper()

    @property
    def pnl_value(self) -> float:
        """PnL with absent or invalid values counted as zero."""
        return self.pnl if is_number(self.pnl) else 0.0

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "symbol": self.symbol,
            "entry": _json_number(self.entry),
            "exit": _json_number(self.exit),
            "pnl": _json_number(self.pnl),
            "roi": _json_number(self.roi),
            "cum_pnl_day": _json_number(self.cum_pnl_day),
            "notes": self.notes,
            "issues": list(self.issues),
            "raw_fields": dict(self.raw_fields),
        }


__all__ = ["INVALID_DATE", "INVALID_RETURN", "MISSING_PNL", "TradeRecord", "is_number"]
