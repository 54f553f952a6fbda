"""Ingestion entry point turning raw rows into trade records."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from tradebook.core.data.ingestion.headers import detect_header
from tradebook.core.data.ingestion.normalizer import normalize_rows
from tradebook.core.models.trade import TradeRecord


@dataclass(slots=True, frozen=True)
class IssueSummary:
    """Number of records carrying one issue string."""

    issue: str
    count: int


@dataclass(slots=True, frozen=True)
class IngestionResult:
    """Records produced from one source plus how they were obtained."""

    source: str
    records: tuple[TradeRecord, ...]
    header_index: int
    header_detected: bool
    rows_read: int
    rows_dropped: int

    @property
    def records_with_issues(self) -> tuple[TradeRecord, ...]:
        return tuple(record for record in self.records if record.issues)

    def issue_counts(self) -> tuple[IssueSummary, ...]:
        counter: Counter[str] = Counter(issue for record in self.records for issue in record.issues)
        summaries = [IssueSummary(issue=issue, count=count) for issue, count in counter.items()]
        summaries.sort(key=lambda item: (-item.count, item.issue))
        return tuple(summaries)


def ingest(rows: Sequence[Sequence[object]], *, source: str) -> IngestionResult:
    """Detect the header and normalize every data row of ``rows``.

    Raises :class:`MalformedSourceError` when the rows are empty or carry no
    usable header. Per-row problems are recorded on the records instead.
    """

    layout = detect_header(rows, source=source)
    records = normalize_rows(rows, layout)
    data_rows = max(len(rows) - layout.index - 1, 0)

    result = IngestionResult(
        source=source,
        records=tuple(records),
        header_index=layout.index,
        header_detected=layout.detected,
        rows_read=data_rows,
        rows_dropped=data_rows - len(records),
    )
    logger.bind(source=source).info(
        "Ingested {records} records ({dropped} dropped, {flagged} with issues)",
        records=len(result.records),
        dropped=result.rows_dropped,
        flagged=len(result.records_with_issues),
    )
    return result


__all__ = ["IngestionResult", "IssueSummary", "ingest"]
