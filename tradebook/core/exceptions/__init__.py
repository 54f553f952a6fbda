"""Exception handling module."""

from tradebook.core.exceptions.base import (
    AllSourcesFailedError,
    ConfigurationError,
    FetchError,
    MalformedSourceError,
    NoLocalSourceError,
    SourceError,
    TradebookError,
)
from tradebook.core.exceptions.codes import ErrorCode

__all__ = [
    "TradebookError",
    "ConfigurationError",
    "SourceError",
    "FetchError",
    "MalformedSourceError",
    "NoLocalSourceError",
    "AllSourcesFailedError",
    "ErrorCode",
]
