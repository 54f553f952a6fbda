"""Core exception hierarchy for tradebook."""

from __future__ import annotations

from typing import Any

from tradebook.core.exceptions.codes import ErrorCode


class TradebookError(Exception):
    """Base class for every error raised by tradebook."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | str = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: human readable message
            error_code: machine readable code
            details: extra context for logs and CLI payloads
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code.value if isinstance(error_code, ErrorCode) else error_code
        self.details = details or {}

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        payload: dict[str, Any] = {"code": self.error_code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload


class ConfigurationError(TradebookError):
    """Raised when runtime configuration cannot be used."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR, details)


class SourceError(TradebookError):
    """Failure of a single tabular source attempt."""

    def __init__(
        self,
        message: str,
        source: str,
        error_code: ErrorCode | str = ErrorCode.SOURCE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details.setdefault("source", source)
        super().__init__(message, error_code, super_details)
        self.source = source


class FetchError(SourceError):
    """Transport failure or non-success response while retrieving a source."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, source, ErrorCode.FETCH_ERROR, super_details)
        self.status_code = status_code


class MalformedSourceError(SourceError):
    """Source is empty or carries no recognizable column layout."""

    def __init__(self, message: str, source: str, details: dict[str, Any] | None = None):
        super().__init__(message, source, ErrorCode.MALFORMED_SOURCE, details)


class NoLocalSourceError(TradebookError):
    """Every local candidate was missing or failed to ingest."""

    def __init__(
        self,
        message: str,
        attempts: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if attempts:
            super_details["attempts"] = attempts
        super().__init__(message, ErrorCode.NO_LOCAL_SOURCE, super_details)
        self.attempts = attempts or []


class AllSourcesFailedError(TradebookError):
    """Remote and local sources are exhausted."""

    def __init__(
        self,
        message: str,
        failed_sources: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if failed_sources:
            super_details["failed_sources"] = failed_sources
        super().__init__(message, ErrorCode.ALL_SOURCES_FAILED, super_details)
        self.failed_sources = failed_sources or []


__all__ = [
    "AllSourcesFailedError",
    "ConfigurationError",
    "FetchError",
    "MalformedSourceError",
    "NoLocalSourceError",
    "SourceError",
    "TradebookError",
]
