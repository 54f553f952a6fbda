from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from tradebook.core.data.sources.local import LocalFileSource, is_uri
from tradebook.core.exceptions import NoLocalSourceError


def test_is_uri() -> None:
    assert is_uri("https://example.test/docs/trades.csv")
    assert is_uri("HTTP://example.test/x.csv")
    assert not is_uri("docs/DayTrade Strategy.csv")


@pytest.mark.asyncio
async def test_first_existing_candidate_wins(tmp_path: Path, journal_file: Path) -> None:
    source = LocalFileSource([tmp_path / "missing.csv", journal_file])

    result = await source.load()

    assert result.source == str(journal_file)
    assert len(result.records) == 4
    assert result.records[0].date == "2024-01-05"


@pytest.mark.asyncio
async def test_empty_candidate_is_skipped(tmp_path: Path, journal_file: Path) -> None:
    empty = tmp_path / "empty.csv"
    empty.write_text("\n\n", encoding="utf-8")

    result = await LocalFileSource([empty, journal_file]).load()

    assert result.source == str(journal_file)


@pytest.mark.asyncio
async def test_bom_prefixed_file_is_read(tmp_path: Path) -> None:
    path = tmp_path / "bom.csv"
    path.write_bytes("Date,Ticker,PnL\n2024-01-05,AAPL,5\n".encode("utf-8-sig"))

    result = await LocalFileSource([path]).load()

    assert result.header_detected is True
    assert result.records[0].pnl == 5.0


@pytest.mark.asyncio
async def test_no_candidate_raises_with_attempts(tmp_path: Path) -> None:
    candidates = [tmp_path / "a.csv", tmp_path / "b.csv"]

    with pytest.raises(NoLocalSourceError) as exc_info:
        await LocalFileSource(candidates).load()

    error = exc_info.value
    assert error.message.startswith("No local CSV found")
    assert [attempt["candidate"] for attempt in error.attempts] == [str(path) for path in candidates]
    assert error.error_code == "NO_LOCAL_SOURCE"


@pytest.mark.asyncio
async def test_uri_candidate_is_fetched(journal_csv: str) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url).endswith("/docs/DayTrade%20Strategy.csv"):
            return httpx.Response(200, text=journal_csv)
        return httpx.Response(404)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        source = LocalFileSource(
            [
                "http://dashboard.test/docs/missing.csv",
                "http://dashboard.test/docs/DayTrade%20Strategy.csv",
            ],
            client=client,
        )
        result = await source.load()

    assert len(result.records) == 4
