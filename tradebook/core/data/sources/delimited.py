"""Delimited-text parsing shared by every source."""

from __future__ import annotations

import csv
import io


def parse_delimited(text: str, *, delimiter: str = ",") -> list[list[str]]:
    """Split CSV text into rows of text cells.

    Blank lines are skipped and no cell is typed; typing belongs to the
    ingestion pipeline.
    """

    if text.startswith("\ufeff"):
        text = text[1:]
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    return [row for row in reader if row]


__all__ = ["parse_delimited"]
