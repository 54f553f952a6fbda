"""
Configuration management for tradebook.

Settings are read from ``TRADEBOOK_``-prefixed environment variables and an
optional ``.env`` file. Command line flags override them per invocation.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tradebook.core.exceptions.base import ConfigurationError

DEFAULT_LOCAL_CANDIDATES = [
    "docs/DayTrade Strategy.csv",
    "docs/DayTrade%20Strategy.csv",
]

SHEET_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv&gid={gid}"


class TradebookConfig(BaseSettings):
    """Main tradebook configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TRADEBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    sheet_id: str | None = Field(None, description="Spreadsheet id of the remote trade log")
    sheet_gid: str = Field("0", description="Sub-sheet id inside the spreadsheet")
    sheet_url_template: str = Field(SHEET_EXPORT_URL, description="CSV export URL template")
    local_candidates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LOCAL_CANDIDATES),
        description="Local files or URIs tried in order when the remote source fails",
    )
    request_timeout: float = Field(30.0, description="HTTP timeout in seconds")
    log_level: str = Field("INFO", description="Log level")

    @field_validator("sheet_id", mode="before")
    @classmethod
    def _blank_sheet_id_is_unset(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    @classmethod
    def from_overrides(cls, **overrides: Any) -> TradebookConfig:
        """Build settings with ``overrides`` on top of the environment.

        Invalid values raise :class:`ConfigurationError` listing each rejected field.
        """

        try:
            return cls(**overrides)
        except ValidationError as exc:
            errors = [
                {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                for error in exc.errors()
            ]
            fields = ", ".join(error["field"] for error in errors)
            raise ConfigurationError(f"Invalid configuration: {fields}", details={"errors": errors}) from exc

    @property
    def has_remote_source(self) -> bool:
        """Whether a remote spreadsheet is configured."""
        return self.sheet_id is not None

    def sheet_url(self) -> str | None:
        if self.sheet_id is None:
            return None
        return self.sheet_url_template.format(sheet_id=self.sheet_id, gid=self.sheet_gid)


__all__ = ["DEFAULT_LOCAL_CANDIDATES", "SHEET_EXPORT_URL", "TradebookConfig"]
