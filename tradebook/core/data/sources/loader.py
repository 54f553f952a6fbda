"""Remote-first, local-fallback loading of a trade log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import httpx
from loguru import logger

from tradebook.core.config import TradebookConfig
from tradebook.core.data.ingestion.service import IngestionResult
from tradebook.core.data.sources.local import LocalFileSource
from tradebook.core.data.sources.sheet import RemoteSheetSource
from tradebook.core.exceptions.base import AllSourcesFailedError, TradebookError
from tradebook.core.logging import log_context
from tradebook.core.models.trade import TradeRecord


class TabularSource(Protocol):
    """Anything that can produce an :class:`IngestionResult`."""

    @property
    def name(self) -> str: ...

    async def load(self) -> IngestionResult: ...


@dataclass(slots=True, frozen=True)
class LoadResult:
    """Outcome of a load, including a remote failure that the fallback absorbed."""

    source_kind: str
    result: IngestionResult
    remote_error: TradebookError | None = None

    @property
    def records(self) -> tuple[TradeRecord, ...]:
        return self.result.records


class TradeLoader:
    """Tries the remote source first when one is configured, then the local candidates.

    A remote failure is not fatal when the local fallback succeeds. When both
    fail, a single :class:`AllSourcesFailedError` carries both reasons.
    """

    def __init__(self, local: TabularSource, remote: TabularSource | None = None) -> None:
        self.local = local
        self.remote = remote

    @classmethod
    def from_config(cls, config: TradebookConfig, *, client: httpx.AsyncClient | None = None) -> TradeLoader:
        remote = None
        if config.sheet_id is not None:
            remote = RemoteSheetSource(
                config.sheet_id,
                config.sheet_gid,
                url_template=config.sheet_url_template,
                client=client,
                timeout=config.request_timeout,
            )
        local = LocalFileSource(config.local_candidates, client=client, timeout=config.request_timeout)
        return cls(local=local, remote=remote)

    async def load(self) -> LoadResult:
        failures: list[dict[str, object]] = []
        remote_error: TradebookError | None = None

        with log_context():
            if self.remote is not None:
                try:
                    result = await self.remote.load()
                except TradebookError as exc:
                    remote_error = exc
                    failures.append({"source": self.remote.name, **exc.to_payload()})
                    logger.bind(source=self.remote.name, error_code=exc.error_code).warning(
                        "Remote source failed, falling back to local files: {error}", error=exc.message
                    )
                else:
                    return LoadResult(source_kind="remote", result=result)

            try:
                result = await self.local.load()
            except TradebookError as exc:
                failures.append({"source": self.local.name, **exc.to_payload()})
                logger.bind(source=self.local.name, error_code=exc.error_code).error(
                    "Failed to load trades from any source: {error}", error=exc.message
                )
                raise AllSourcesFailedError(
                    _terminal_message(remote_error, exc),
                    failed_sources=failures,
                ) from exc

        return LoadResult(source_kind="local", result=result, remote_error=remote_error)


def _terminal_message(remote_error: TradebookError | None, local_error: TradebookError) -> str:
    if remote_error is None:
        return f"Failed to load trades: {local_error.message}"
    return f"Failed to load trades from sheet ({remote_error.message}) or local files ({local_error.message})"


async def load_trades(config: TradebookConfig | None = None) -> LoadResult:
    """Load trades using ``config`` (environment settings by default)."""

    return await TradeLoader.from_config(config or TradebookConfig.from_overrides()).load()


__all__ = ["LoadResult", "TabularSource", "TradeLoader", "load_trades"]
