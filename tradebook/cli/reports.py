"""Report commands: KPIs, rollups, cumulative curves, trades and issues."""

from __future__ import annotations

import asyncio
from typing import Mapping, Sequence

import typer

from tradebook.core.config import TradebookConfig
from tradebook.core.data.sources.loader import LoadResult, TradeLoader
from tradebook.core.exceptions.base import AllSourcesFailedError, ConfigurationError, TradebookError
from tradebook.core.models.trade import TradeRecord
from tradebook.core.services.aggregation import (
    daily_cumulative,
    monthly_cumulative,
    monthly_rollup,
    yearly_cumulative,
)
from tradebook.core.services.kpis import compute_kpis
from tradebook.core.services.scope import (
    ScopeKind,
    TradeScope,
    filter_by_scope,
    records_with_issues,
    ticker_leaders,
)

from .constants import SOURCE_EXIT_CODE, SYSTEM_EXIT_CODE, VALIDATION_EXIT_CODE
from .utils import CLIOptions, emit_error, get_cli_options, prepare_output

SUMMARY_COLUMNS = ["source", "trade_count", "total_pnl", "win_rate", "roi_p25", "roi_p50", "roi_p75", "flagged_rows"]
MONTHLY_COLUMNS = ["period_key", "pnl_sum", "trade_count"]
CUMULATIVE_COLUMNS = ["period_key", "cumulative_pnl"]
TRADE_COLUMNS = ["date", "symbol", "entry", "exit", "pnl", "roi", "issues"]
LEADER_COLUMNS = ["side", "symbol", "trade_count", "total_pnl"]

_CUMULATIVE_BY = {
    "month": monthly_cumulative,
    "day": daily_cumulative,
    "year": yearly_cumulative,
}

_SCOPE_OPTION = typer.Option("all", "--scope", help="Date scope: all, year, month or day.")
_YEAR_OPTION = typer.Option(None, "--year", help="Year for --scope year (YYYY).")
_MONTH_OPTION = typer.Option(None, "--month", help="Month for --scope month (YYYY-MM).")
_DAY_OPTION = typer.Option(None, "--day", help="Day for --scope day (YYYY-MM-DD).")
_TICKER_OPTION = typer.Option(None, "--ticker", help="Restrict to one ticker (case-insensitive).")


def register(app: typer.Typer) -> None:
    """Register the report commands on the provided application."""

    app.command("summary")(summary_command)
    app.command("monthly")(monthly_command)
    app.command("cumulative")(cumulative_command)
    app.command("trades")(trades_command)
    app.command("issues")(issues_command)
    app.command("leaders")(leaders_command)


def get_loader(config: TradebookConfig) -> TradeLoader:
    """Factory hook for obtaining a :class:`TradeLoader` instance."""

    return TradeLoader.from_config(config)


def summary_command(
    ctx: typer.Context,
    scope: str = _SCOPE_OPTION,
    year: str | None = _YEAR_OPTION,
    month: str | None = _MONTH_OPTION,
    day: str | None = _DAY_OPTION,
    ticker: str | None = _TICKER_OPTION,
) -> None:
    """Show headline KPIs for the selected scope."""

    trade_scope = _build_scope(scope, year, month, day, ticker)
    formatter, stream, stack, options = prepare_output(ctx)
    try:
        loaded = _load(options)
        records = filter_by_scope(loaded.records, trade_scope)
        row: dict[str, object] = {"source": loaded.source_kind, **compute_kpis(records).to_dict()}
        row["flagged_rows"] = len(records_with_issues(loaded.records))
        formatter.render([row], stream=stream, columns=SUMMARY_COLUMNS)
    finally:
        stack.close()


def monthly_command(
    ctx: typer.Context,
    scope: str = _SCOPE_OPTION,
    year: str | None = _YEAR_OPTION,
    month: str | None = _MONTH_OPTION,
    day: str | None = _DAY_OPTION,
    ticker: str | None = _TICKER_OPTION,
) -> None:
    """Show PnL and trade count per month."""

    trade_scope = _build_scope(scope, year, month, day, ticker)
    formatter, stream, stack, options = prepare_output(ctx)
    try:
        records = filter_by_scope(_load(options).records, trade_scope)
        rows = [item.to_dict() for item in monthly_rollup(records)]
        formatter.render(rows, stream=stream, columns=MONTHLY_COLUMNS)
    finally:
        stack.close()


def cumulative_command(
    ctx: typer.Context,
    by: str = typer.Option("month", "--by", help="Period granularity: month, day or year."),
    scope: str = _SCOPE_OPTION,
    year: str | None = _YEAR_OPTION,
    month: str | None = _MONTH_OPTION,
    day: str | None = _DAY_OPTION,
    ticker: str | None = _TICKER_OPTION,
) -> None:
    """Show the running PnL total per period."""

    builder = _CUMULATIVE_BY.get(by.strip().lower())
    if builder is None:
        allowed = ", ".join(_CUMULATIVE_BY)
        raise typer.BadParameter(f"Unsupported period '{by}'. Allowed values: {allowed}", param_hint="--by")

    trade_scope = _build_scope(scope, year, month, day, ticker)
    formatter, stream, stack, options = prepare_output(ctx)
    try:
        records = filter_by_scope(_load(options).records, trade_scope)
        rows = [point.to_dict() for point in builder(records)]
        formatter.render(rows, stream=stream, columns=CUMULATIVE_COLUMNS)
    finally:
        stack.close()


def trades_command(
    ctx: typer.Context,
    scope: str = _SCOPE_OPTION,
    year: str | None = _YEAR_OPTION,
    month: str | None = _MONTH_OPTION,
    day: str | None = _DAY_OPTION,
    ticker: str | None = _TICKER_OPTION,
) -> None:
    """List normalized trades in the selected scope."""

    trade_scope = _build_scope(scope, year, month, day, ticker)
    formatter, stream, stack, options = prepare_output(ctx)
    try:
        records = filter_by_scope(_load(options).records, trade_scope)
        formatter.render(_record_rows(records), stream=stream, columns=TRADE_COLUMNS)
    finally:
        stack.close()


def issues_command(ctx: typer.Context) -> None:
    """List every record that carries a data-quality issue, regardless of scope."""

    formatter, stream, stack, options = prepare_output(ctx)
    try:
        records = records_with_issues(_load(options).records)
        formatter.render(_record_rows(records), stream=stream, columns=TRADE_COLUMNS)
    finally:
        stack.close()


def leaders_command(
    ctx: typer.Context,
    limit: int = typer.Option(5, "--limit", min=1, help="Tickers per side."),
    scope: str = _SCOPE_OPTION,
    year: str | None = _YEAR_OPTION,
    month: str | None = _MONTH_OPTION,
    day: str | None = _DAY_OPTION,
) -> None:
    """Show the best and worst tickers by total PnL."""

    trade_scope = _build_scope(scope, year, month, day, None)
    formatter, stream, stack, options = prepare_output(ctx)
    try:
        records = filter_by_scope(_load(options).records, trade_scope)
        leaders = ticker_leaders(records, limit=limit)
        rows: list[Mapping[str, object]] = [{"side": "top", **item.to_dict()} for item in leaders.top]
        rows.extend({"side": "bottom", **item.to_dict()} for item in leaders.bottom)
        formatter.render(rows, stream=stream, columns=LEADER_COLUMNS)
    finally:
        stack.close()


def _build_scope(
    scope: str,
    year: str | None,
    month: str | None,
    day: str | None,
    ticker: str | None,
) -> TradeScope:
    try:
        kind = ScopeKind(scope.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in ScopeKind)
        raise typer.BadParameter(f"Unsupported scope '{scope}'. Allowed values: {allowed}", param_hint="--scope") from exc
    return TradeScope(kind=kind, year=year, month=month, day=day, ticker=ticker)


def _load(options: CLIOptions) -> LoadResult:
    overrides: dict[str, object] = {}
    if options.sheet_id is not None:
        overrides["sheet_id"] = options.sheet_id
    if options.sheet_gid is not None:
        overrides["sheet_gid"] = options.sheet_gid
    if options.csv_candidates:
        overrides["local_candidates"] = options.csv_candidates

    try:
        config = TradebookConfig.from_overrides(**overrides)
    except ConfigurationError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error

    loader = get_loader(config)
    try:
        return asyncio.run(loader.load())
    except AllSourcesFailedError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=SOURCE_EXIT_CODE) from error
    except TradebookError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=SYSTEM_EXIT_CODE) from error


def _record_rows(records: Sequence[TradeRecord]) -> list[Mapping[str, object]]:
    rows: list[Mapping[str, object]] = []
    for record in records:
        payload = record.to_dict()
        rows.append({column: payload.get(column) for column in TRADE_COLUMNS})
    return rows


__all__ = [
    "cumulative_command",
    "get_loader",
    "issues_command",
    "leaders_command",
    "monthly_command",
    "register",
    "summary_command",
    "trades_command",
]
