"""Calendar date parsing shared by ingestion and aggregation."""

from __future__ import annotations

import re
import warnings
from datetime import date

import pandas as pd

_DAY_MONTH_YEAR = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2,4})$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_day_month_year(match: re.Match[str]) -> date | None:
    day, month, year = (int(part) for part in match.groups())
    if year < 100:
        year += 2000
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_generic(text: str) -> date | None:
    with warnings.catch_warnings():
        # pandas warns when it has to guess a format per element
        warnings.simplefilter("ignore", UserWarning)
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
    if parsed is None or pd.isna(parsed):
        return None
    # tz-aware values keep their own calendar date
    return date(parsed.year, parsed.month, parsed.day)


def parse_calendar_date(value: object) -> date | None:
    """Parse a cell as a calendar date.

    Slash separated numeric dates are read as day/month/year, two digit
    years landing in the 2000s. An impossible day/month/year is invalid
    rather than re-read in another order. Anything else goes through the generic
    pandas parser.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if _ISO_DATE.match(text):
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None
    match = _DAY_MONTH_YEAR.match(text)
    if match is not None:
        # never reinterpreted month-first
        return _parse_day_month_year(match)
    return _parse_generic(text)


def normalize_date(value: object) -> str:
    """Return ``YYYY-MM-DD``, ``""`` for blank input, or the trimmed text when unparseable."""

    if value is None:
        return ""
    text = str(value).strip()
    if not text:
        return ""
    parsed = parse_calendar_date(text)
    if parsed is None:
        return text
    return parsed.isoformat()


__all__ = ["normalize_date", "parse_calendar_date"]
