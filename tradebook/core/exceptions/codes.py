"""Standardized error codes for tradebook exceptions."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every :class:`TradebookError`."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Source acquisition
    SOURCE_ERROR = "SOURCE_ERROR"
    FETCH_ERROR = "FETCH_ERROR"
    MALFORMED_SOURCE = "MALFORMED_SOURCE"
    NO_LOCAL_SOURCE = "NO_LOCAL_SOURCE"
    ALL_SOURCES_FAILED = "ALL_SOURCES_FAILED"


__all__ = ["ErrorCode"]
