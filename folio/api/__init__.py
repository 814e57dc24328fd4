"""HTTP API for the portfolio backend."""

from .app import app

__all__ = ["app"]
