"""Header detection, cell coercion and row normalization."""

from __future__ import annotations

from tradebook.core.data.ingestion.cells import coerce_number, coerce_percent
from tradebook.core.data.ingestion.dates import normalize_date, parse_calendar_date
from tradebook.core.data.ingestion.headers import (
    HEADER_SYNONYMS,
    HeaderLayout,
    detect_header,
    find_header_row,
)
from tradebook.core.data.ingestion.normalizer import normalize_row, normalize_rows
from tradebook.core.data.ingestion.service import IngestionResult, IssueSummary, ingest

__all__ = [
    "HEADER_SYNONYMS",
    "HeaderLayout",
    "IngestionResult",
    "IssueSummary",
    "coerce_number",
    "coerce_percent",
    "detect_header",
    "find_header_row",
    "ingest",
    "normalize_date",
    "normalize_row",
    "normalize_rows",
    "parse_calendar_date",
]
