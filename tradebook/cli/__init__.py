"""Command line interface entry points for tradebook."""

from .main import app, create_app

__all__ = ["app", "create_app"]
