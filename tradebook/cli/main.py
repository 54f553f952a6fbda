"""Main entry point for the tradebook command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from tradebook.core.logging import configure_logging

from .formatters import create_formatter
from .reports import register as register_report_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for tradebook."""

    app = typer.Typer(add_completion=False, help="Trade log analytics")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            help="Log level for the JSON log stream on stderr.",
            show_default=True,
        ),
        log_file: Path | None = typer.Option(
            None,
            "--log-file",
            help="Also append JSON log lines to this file.",
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
        sheet_id: str | None = typer.Option(
            None,
            "--sheet-id",
            help="Spreadsheet id to load first (overrides TRADEBOOK_SHEET_ID).",
        ),
        gid: str | None = typer.Option(
            None,
            "--gid",
            help="Sub-sheet id inside the spreadsheet.",
        ),
        csv: list[str] | None = typer.Option(
            None,
            "--csv",
            help="Local CSV path or URI to fall back to. Repeat to try several in order.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        try:
            create_formatter(normalized_format, no_color=no_color)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "log_level": log_level.upper(),
                "log_file": log_file,
                "no_color": no_color,
                "sheet_id": sheet_id,
                "sheet_gid": gid,
                "csv_candidates": list(csv or []),
            }
        )
        _configure_logging(log_level, log_file)

    register_report_commands(app)
    return app


def _configure_logging(level_name: str, log_file: Path | None = None) -> None:
    options: dict[str, object] = {}
    if log_file is not None:
        options = {"file_output": True, "file_path": str(log_file)}
    try:
        configure_logging(level_name.upper(), **options)
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown log level '{level_name}'", param_hint="--log-level") from exc


app = create_app()
