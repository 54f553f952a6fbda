"""Renderers turning report rows into rich tables or JSON lines."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Mapping, Sequence, TextIO

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

Row = Mapping[str, object]


def _is_numeric(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _resolve_columns(rows: Sequence[Row], columns: Sequence[str] | None) -> list[str]:
    if columns:
        return list(columns)
    if rows:
        return list(rows[0].keys())
    return []


class OutputFormatter:
    """Base class for report renderers."""

    name: str

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str] | None = None) -> None:
        """Write ``rows`` to ``stream``, limited to ``columns`` when given."""

        raise NotImplementedError


@dataclass(slots=True)
class TableFormatter(OutputFormatter):
    """Rich table with right-aligned money and ratio columns."""

    name: str = "table"
    no_color: bool = False

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str] | None = None) -> None:
        console = Console(file=stream, color_system=None if self.no_color else "auto", no_color=self.no_color)
        resolved = _resolve_columns(rows, columns)
        if not rows:
            if resolved:
                console.print(self._build_table(resolved, numeric=set()))
            console.print("No trades in scope.")
            return

        numeric = {column for column in resolved if any(_is_numeric(row.get(column)) for row in rows)}
        table = self._build_table(resolved, numeric=numeric)
        for row in rows:
            table.add_row(*(self._cell(row.get(column)) for column in resolved))
        console.print(table)

    def _build_table(self, columns: Sequence[str], *, numeric: set[str]) -> Table:
        table = Table(box=SIMPLE)
        for column in columns:
            table.add_column(
                column,
                header_style="" if self.no_color else "bold",
                justify="right" if column in numeric else "left",
            )
        return table

    @staticmethod
    def _cell(value: object) -> str:
        if value is None:
            return "-"
        if isinstance(value, float):
            return "-" if math.isnan(value) else f"{value:.2f}"
        if isinstance(value, (list, tuple)):
            return "; ".join(str(item) for item in value)
        return str(value)


@dataclass(slots=True)
class JSONLFormatter(OutputFormatter):
    """One JSON object per row; NaN becomes ``null`` so every line is strict JSON."""

    name: str = "jsonl"

    def render(self, rows: Sequence[Row], *, stream: TextIO, columns: Sequence[str] | None = None) -> None:
        for row in rows:
            keys = columns or list(row.keys())
            payload = {key: self._jsonable(row.get(key)) for key in keys}
            stream.write(json.dumps(payload, ensure_ascii=False, allow_nan=False, default=str))
            stream.write("\n")
        stream.flush()

    @staticmethod
    def _jsonable(value: object) -> object:
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if isinstance(value, tuple):
            return list(value)
        return value


FORMATTERS = ("table", "jsonl")


def create_formatter(name: str, *, no_color: bool = False) -> OutputFormatter:
    """Instantiate a formatter by name."""

    normalized = name.strip().lower()
    if normalized == "table":
        return TableFormatter(no_color=no_color)
    if normalized == "jsonl":
        return JSONLFormatter()
    raise ValueError(f"Unsupported format '{name}'. Available formats: {', '.join(FORMATTERS)}.")


__all__ = ["FORMATTERS", "JSONLFormatter", "OutputFormatter", "TableFormatter", "create_formatter"]
