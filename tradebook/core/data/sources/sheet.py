"""Remote spreadsheet export source."""

from __future__ import annotations

import httpx
from loguru import logger

from tradebook.core.config import SHEET_EXPORT_URL
from tradebook.core.data.ingestion.service import IngestionResult, ingest
from tradebook.core.data.sources.delimited import parse_delimited
from tradebook.core.exceptions.base import FetchError, MalformedSourceError


class RemoteSheetSource:
    """Fetches a spreadsheet's CSV export over HTTP(S) and ingests it.

    No retries: falling back to another source is the caller's decision.
    """

    def __init__(
        self,
        sheet_id: str,
        gid: str = "0",
        *,
        url_template: str = SHEET_EXPORT_URL,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not sheet_id:
            raise ValueError("sheet_id cannot be empty")
        self.sheet_id = sheet_id
        self.gid = str(gid)
        self.url = url_template.format(sheet_id=sheet_id, gid=self.gid)
        self._client = client
        self._timeout = timeout

    @property
    def name(self) -> str:
        return f"sheet:{self.sheet_id}#{self.gid}"

    async def fetch_text(self) -> str:
        """Download the export, raising :class:`FetchError` on transport or HTTP failure."""

        if self._client is not None:
            return await self._get(self._client)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout), follow_redirects=True) as client:
            return await self._get(client)

    async def _get(self, client: httpx.AsyncClient) -> str:
        try:
            response = await client.get(self.url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch sheet: {exc}", self.name) from exc
        if not response.is_success:
            raise FetchError(
                f"Failed to fetch sheet: HTTP {response.status_code}",
                self.name,
                status_code=response.status_code,
            )
        return response.text

    async def load(self) -> IngestionResult:
        text = await self.fetch_text()
        rows = parse_delimited(text)
        if not rows:
            raise MalformedSourceError("Empty sheet", self.name)
        logger.bind(source=self.name).debug("Fetched {rows} rows", rows=len(rows))
        return ingest(rows, source=self.name)


__all__ = ["RemoteSheetSource"]
