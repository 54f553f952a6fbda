"""Local trade log source tried over an ordered list of candidates."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from tradebook.core.data.ingestion.service import IngestionResult, ingest
from tradebook.core.data.sources.delimited import parse_delimited
from tradebook.core.exceptions.base import (
    FetchError,
    MalformedSourceError,
    NoLocalSourceError,
    SourceError,
)


def is_uri(candidate: str) -> bool:
    return candidate.lower().startswith(("http://", "https://"))


class LocalFileSource:
    """Reads the first candidate that exists and ingests cleanly.

    Candidates are filesystem paths or ``http(s)://`` URIs, such as a file
    served next to a dashboard.
    """

    def __init__(
        self,
        candidates: Sequence[str | Path],
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.candidates = tuple(str(candidate) for candidate in candidates)
        self._client = client
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "local"

    async def read_candidate(self, candidate: str) -> str:
        if is_uri(candidate):
            return await self._fetch(candidate)
        path = Path(candidate).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")

    async def _fetch(self, uri: str) -> str:
        if self._client is not None:
            return await self._get(self._client, uri)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout), follow_redirects=True) as client:
            return await self._get(client, uri)

    async def _get(self, client: httpx.AsyncClient, uri: str) -> str:
        try:
            response = await client.get(uri)
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed to fetch {uri}: {exc}", uri) from exc
        if not response.is_success:
            raise FetchError(f"Failed to fetch {uri}: HTTP {response.status_code}", uri, status_code=response.status_code)
        return response.text

    async def load_candidate(self, candidate: str) -> IngestionResult:
        text = await self.read_candidate(candidate)
        rows = parse_delimited(text)
        if not rows:
            raise MalformedSourceError("Empty CSV", candidate)
        return ingest(rows, source=candidate)

    async def load(self) -> IngestionResult:
        """Return the first candidate that loads; :class:`NoLocalSourceError` when none does."""

        attempts: list[dict[str, Any]] = []
        for candidate in self.candidates:
            try:
                return await self.load_candidate(candidate)
            except (SourceError, OSError, UnicodeDecodeError) as exc:
                logger.bind(source=candidate).debug("Local candidate failed: {error}", error=str(exc))
                attempts.append({"candidate": candidate, "error": str(exc)})

        raise NoLocalSourceError(
            "No local CSV found" + (f" (tried {', '.join(self.candidates)})" if self.candidates else ""),
            attempts=attempts,
        )


__all__ = ["LocalFileSource", "is_uri"]
