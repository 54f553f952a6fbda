"""Header synonym table and header-row detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from tradebook.core.exceptions.base import MalformedSourceError

# Canonical field -> accepted header labels (lower-cased, trimmed). Order is
# the priority used when several columns map onto the same field.
HEADER_SYNONYMS: dict[str, tuple[str, ...]] = {
    "date": ("date", "date placed", "exit date"),
    "symbol": ("ticker", "symbol"),
    "pnl": ("pnl", "p&l"),
    "roi": ("% return", "roi"),
    "entry": ("entry",),
    "exit": ("exit",),
    "cum_pnl_day": ("cum pnl (day)",),
    "notes": ("notes",),
}

_LABEL_TO_FIELD: dict[str, str] = {
    label: field_name for field_name, labels in HEADER_SYNONYMS.items() for label in labels
}


def normalize_label(cell: object) -> str:
    return "" if cell is None else str(cell).strip().lower()


def canonical_field(label: object) -> str | None:
    """Return the canonical field a header label maps to, if any."""

    return _LABEL_TO_FIELD.get(normalize_label(label))


def _has_any(labels: set[str], field_name: str) -> bool:
    return any(label in labels for label in HEADER_SYNONYMS[field_name])


def is_header_row(row: Sequence[object]) -> bool:
    """A header carries a date label, a symbol label, and a pnl or return label."""

    labels = {normalize_label(cell) for cell in row}
    return (
        _has_any(labels, "date")
        and _has_any(labels, "symbol")
        and (_has_any(labels, "pnl") or _has_any(labels, "roi"))
    )


def find_header_row(rows: Sequence[Sequence[object]]) -> int | None:
    """Index of the first row that qualifies as the header, or ``None``."""

    for index, row in enumerate(rows):
        if is_header_row(row):
            return index
    return None


@dataclass(slots=True, frozen=True)
class HeaderLayout:
    """Column layout resolved from the header row."""

    index: int
    columns: tuple[str, ...]
    mapping: dict[str, tuple[int, ...]]
    detected: bool

    @property
    def is_recognized(self) -> bool:
        return bool(self.mapping)

    def columns_for(self, field_name: str) -> tuple[int, ...]:
        return self.mapping.get(field_name, ())


def build_layout(header_row: Sequence[object], index: int, *, detected: bool) -> HeaderLayout:
    """Map header cells onto canonical fields."""

    columns = tuple("" if cell is None else str(cell).strip() for cell in header_row)
    positions: dict[str, list[tuple[int, int]]] = {}
    for column_index, column in enumerate(columns):
        field_name = canonical_field(column)
        if field_name is None:
            continue
        priority = HEADER_SYNONYMS[field_name].index(normalize_label(column))
        positions.setdefault(field_name, []).append((priority, column_index))

    mapping = {
        field_name: tuple(column_index for _, column_index in sorted(entries))
        for field_name, entries in positions.items()
    }
    return HeaderLayout(index=index, columns=columns, mapping=mapping, detected=detected)


def detect_header(rows: Sequence[Sequence[object]], *, source: str) -> HeaderLayout:
    """Locate the header row, falling back to the first row when none qualifies."""

    if not rows:
        raise MalformedSourceError(f"Source '{source}' is empty", source)

    header_index = find_header_row(rows)
    if header_index is not None:
        layout = build_layout(rows[header_index], header_index, detected=True)
        logger.bind(source=source).debug(
            "Header row detected at index {index}: {columns}",
            index=header_index,
            columns=list(layout.columns),
        )
        return layout

    layout = build_layout(rows[0], 0, detected=False)
    if not layout.is_recognized and len(rows) < 2:
        raise MalformedSourceError(
            f"Could not find a header row in '{source}' (expected columns such as Date, Ticker, PnL)",
            source,
            details={"rows": len(rows)},
        )
    logger.bind(source=source).warning(
        "No header row matched, using first row as header: {columns}",
        columns=list(layout.columns),
    )
    return layout


__all__ = [
    "HEADER_SYNONYMS",
    "HeaderLayout",
    "build_layout",
    "canonical_field",
    "detect_header",
    "find_header_row",
    "is_header_row",
    "normalize_label",
]
