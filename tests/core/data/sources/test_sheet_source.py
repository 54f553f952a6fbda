from __future__ import annotations

import httpx
import pytest

from tradebook.core.data.sources.sheet import RemoteSheetSource
from tradebook.core.exceptions import FetchError, MalformedSourceError


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_export_url_is_built_from_id_and_gid() -> None:
    source = RemoteSheetSource("abc123", "42")

    assert source.url == "https://docs.google.com/spreadsheets/d/abc123/export?format=csv&gid=42"
    assert source.name == "sheet:abc123#42"


def test_empty_sheet_id_is_rejected() -> None:
    with pytest.raises(ValueError):
        RemoteSheetSource("")


@pytest.mark.asyncio
async def test_load_ingests_exported_csv(journal_csv: str) -> None:
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, text=journal_csv)

    async with _client(handler) as client:
        result = await RemoteSheetSource("abc123", client=client).load()

    assert requested == ["https://docs.google.com/spreadsheets/d/abc123/export?format=csv&gid=0"]
    assert result.source == "sheet:abc123#0"
    assert result.header_index == 1
    assert len(result.records) == 4


@pytest.mark.asyncio
async def test_http_error_status_raises_fetch_error() -> None:
    async with _client(lambda request: httpx.Response(404, text="missing")) as client:
        with pytest.raises(FetchError) as exc_info:
            await RemoteSheetSource("abc123", client=client).load()

    assert exc_info.value.status_code == 404
    assert exc_info.value.error_code == "FETCH_ERROR"
    assert exc_info.value.details["source"] == "sheet:abc123#0"


@pytest.mark.asyncio
async def test_transport_error_raises_fetch_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(FetchError) as exc_info:
            await RemoteSheetSource("abc123", client=client).fetch_text()

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_empty_export_is_malformed() -> None:
    async with _client(lambda request: httpx.Response(200, text="")) as client:
        with pytest.raises(MalformedSourceError, match="Empty sheet"):
            await RemoteSheetSource("abc123", client=client).load()
