"""Logging utilities for tradebook pipelines."""

from tradebook.core.logging.config import LogConfig
from tradebook.core.logging.logger import configure_logging, log_context, logger

__all__ = ["LogConfig", "configure_logging", "log_context", "logger"]
